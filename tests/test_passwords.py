"""Tests for seckit.auth.passwords."""

import pytest

from seckit.auth.passwords import PasswordHasher
from seckit.core.result import ErrorKind


@pytest.fixture()
def hasher() -> PasswordHasher:
    # Minimum bcrypt cost keeps the suite fast.
    return PasswordHasher(rounds=4)


def test_hash_and_verify(hasher: PasswordHasher) -> None:
    hashed = hasher.hash("MySecurePass123!").value
    assert hashed.startswith("$2")
    assert hasher.verify("MySecurePass123!", hashed).value is True
    assert hasher.verify("WrongPass", hashed).value is False


def test_hashes_are_salted(hasher: PasswordHasher) -> None:
    assert hasher.hash("same").value != hasher.hash("same").value


def test_unicode_password(hasher: PasswordHasher) -> None:
    hashed = hasher.hash("пароль-🔑").value
    assert hasher.verify("пароль-🔑", hashed).value is True


def test_empty_password_rejected(hasher: PasswordHasher) -> None:
    assert hasher.hash("").kind is ErrorKind.INVALID_ARGUMENT
    assert hasher.verify("", "$2b$04$abc").kind is ErrorKind.INVALID_ARGUMENT


def test_empty_hash_rejected(hasher: PasswordHasher) -> None:
    assert hasher.verify("password", "").kind is ErrorKind.INVALID_ARGUMENT


def test_malformed_hash_is_internal(hasher: PasswordHasher) -> None:
    result = hasher.verify("password", "not-a-bcrypt-hash")
    assert result.kind is ErrorKind.INTERNAL
    assert result.error.message == "Verification failed"


# ── 72-byte limit ─────────────────────────────────────────────────────────────

LONG_PASSPHRASE = "correct horse battery staple " * 3  # 87 bytes


def test_long_passphrase_hashes_and_verifies(hasher: PasswordHasher) -> None:
    assert len(LONG_PASSPHRASE.encode("utf-8")) == 87
    hashed = hasher.hash(LONG_PASSPHRASE)
    assert hashed.is_ok
    assert hasher.verify(LONG_PASSPHRASE, hashed.value).value is True
    assert hasher.verify("wrong horse battery staple", hashed.value).value is False


def test_bytes_past_72_are_ignored(hasher: PasswordHasher) -> None:
    hashed = hasher.hash(LONG_PASSPHRASE).value
    same_prefix = LONG_PASSPHRASE[:72] + "something else entirely"
    assert hasher.verify(same_prefix, hashed).value is True


def test_long_multibyte_passphrase(hasher: PasswordHasher) -> None:
    passphrase = "пароль " * 20  # 260 bytes, truncated mid-character
    hashed = hasher.hash(passphrase).value
    assert hasher.verify(passphrase, hashed).value is True
