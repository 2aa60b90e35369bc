"""Tests for seckit.core.utils, seckit.core.config and seckit.core.result."""

import pytest

from seckit.core.config import SecKitConfig
from seckit.core.result import ErrorKind, Result, SecKitError
from seckit.core.utils import mask_email


# ── Email masking ─────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "email,expected",
    [
        ("john@example.com", "jo***@example.com"),
        ("a@test.com", "a***@test.com"),
        ("ab@test.com", "a***@test.com"),
        ("abc@test.com", "ab***@test.com"),
        ("long.email.address@company.co.uk", "lo***@company.co.uk"),
        ("not-an-email", "not-an-email"),
        ("two@at@signs.com", "two@at@signs.com"),
        ("@domain.com", "@domain.com"),
    ],
)
def test_mask_email(email: str, expected: str) -> None:
    assert mask_email(email) == expected


# ── Config ────────────────────────────────────────────────────────────────────

def test_config_from_env() -> None:
    env = {
        "SECKIT_SECRET_KEY": "s" * 32,
        "SECKIT_DB_SECRET_KEY": "ZGI=",
        "SECKIT_DEV_AUTH_TOKEN": "dev",
        "SECKIT_ENV": "development",
    }
    config = SecKitConfig.from_env(env)
    assert config.secret_key == "s" * 32
    assert config.db_secret_key == "ZGI="
    assert config.dev_auth_token == "dev"
    assert config.is_prod is False


@pytest.mark.parametrize("env_name,is_prod", [("production", True), ("PROD", True), ("staging", False)])
def test_config_env_flag(env_name: str, is_prod: bool) -> None:
    env = {"SECKIT_SECRET_KEY": "s", "SECKIT_DB_SECRET_KEY": "d", "SECKIT_ENV": env_name}
    assert SecKitConfig.from_env(env).is_prod is is_prod


def test_config_defaults_to_prod() -> None:
    config = SecKitConfig.from_env({"SECKIT_SECRET_KEY": "s", "SECKIT_DB_SECRET_KEY": "d"})
    assert config.is_prod is True
    assert config.dev_auth_token == ""


def test_config_missing_variable() -> None:
    with pytest.raises(ValueError, match="SECKIT_DB_SECRET_KEY"):
        SecKitConfig.from_env({"SECKIT_SECRET_KEY": "s"})


def test_config_is_immutable_and_hides_secrets() -> None:
    config = SecKitConfig(secret_key="super-secret", db_secret_key="db-secret")
    assert "super-secret" not in repr(config)
    with pytest.raises(AttributeError):
        config.secret_key = "other"  # type: ignore[misc]


# ── Result ────────────────────────────────────────────────────────────────────

def test_result_ok() -> None:
    result = Result.ok("v")
    assert result.is_ok and not result.is_error
    assert result.kind is None
    assert result.unwrap() == "v"


def test_result_fail() -> None:
    result = Result.fail(ErrorKind.DATA_LOSS, "tampered")
    assert result.is_error
    assert str(result.error) == "[DataLoss] tampered"
    with pytest.raises(SecKitError) as exc_info:
        result.unwrap()
    assert exc_info.value.kind is ErrorKind.DATA_LOSS
