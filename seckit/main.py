"""
seckit – demo entry point.

Usage
-----
    python -m seckit.main

Or, if installed as a package:
    seckit-demo

Reads SECKIT_* variables (see :mod:`seckit.core.config`) when they are set,
otherwise runs against a throwaway demo configuration.
"""

import logging
import sys

from seckit.auth.passwords import PasswordHasher
from seckit.auth.tokens import JwtHandler
from seckit.core.config import SecKitConfig
from seckit.core.crypto import generate_db_secret_key
from seckit.core.utils import mask_email
from seckit.storage.encryption import FieldEncryptor
from seckit.storage.hashing import DeterministicHasher

# ── Logging setup ─────────────────────────────────────────────────────────────

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("seckit")

# Keep crypto diagnostics quiet below WARNING
logging.getLogger("seckit.core.crypto").setLevel(logging.WARNING)
logging.getLogger("seckit.storage.encryption").setLevel(logging.WARNING)
logging.getLogger("seckit.storage.hashing").setLevel(logging.WARNING)


# ── Bootstrap ─────────────────────────────────────────────────────────────────

def _load_config() -> SecKitConfig:
    """Use the environment if configured, else a demo-only config."""
    try:
        return SecKitConfig.from_env()
    except ValueError as exc:
        logger.warning("%s Using a throwaway demo configuration.", exc)
        return SecKitConfig(
            secret_key="demo-secret-key-for-jwt-32-chars!",
            db_secret_key=generate_db_secret_key(),
            dev_auth_token="dev-token-for-testing-only-123",
            is_prod=False,
        )


# ── Demos ─────────────────────────────────────────────────────────────────────

def _demo_jwt(config: SecKitConfig) -> bool:
    handler = JwtHandler.from_config(config, user_id_key="user_id")
    token = handler.generate_token(claims={"user_id": 123, "role": "admin"})
    valid = handler.validate_token(token)
    user_id = handler.get_user_id_from_token(token)
    logger.info("JWT valid=%s user_id=%s", valid.is_ok, user_id.value)
    return valid.is_ok and user_id.value == 123


def _demo_field_encryption(config: SecKitConfig) -> bool:
    encryptor = FieldEncryptor.from_config(config, salt="demo-salt-16chars")
    email = "user@example.com"
    encrypted = encryptor.encrypt(email)
    if encrypted.is_error:
        logger.error("Field encryption failed: %s", encrypted.error)
        return False
    decrypted = encryptor.decrypt(encrypted.value)
    repeat = encryptor.encrypt(email)
    logger.info(
        "Field encryption round trip=%s deterministic=%s",
        decrypted.value == email,
        repeat.value == encrypted.value,
    )
    return decrypted.value == email


def _demo_password_hashing() -> bool:
    hasher = PasswordHasher()
    hashed = hasher.hash("MySecurePass123!").unwrap()
    good = hasher.verify("MySecurePass123!", hashed).unwrap()
    bad = hasher.verify("WrongPass", hashed).unwrap()
    logger.info("Password correct=%s wrong=%s", good, bad)
    return good and not bad


def _demo_lookup_hashing(config: SecKitConfig) -> bool:
    hasher = DeterministicHasher.from_config(config, salt="search-salt-16ch")
    email = "john.doe@company.com"
    first = hasher.hash(email).unwrap()
    second = hasher.hash(email).unwrap()
    match = hasher.verify(email, first).unwrap()
    logger.info("Lookup hash deterministic=%s verified=%s", first == second, match)
    return first == second and match


def _demo_email_masking() -> bool:
    for email in ("john@example.com", "a@test.com", "long.email.address@company.co.uk"):
        logger.info("%s -> %s", email, mask_email(email))
    return True


# ── Main ──────────────────────────────────────────────────────────────────────

def main() -> None:
    config = _load_config()
    results = [
        _demo_jwt(config),
        _demo_field_encryption(config),
        _demo_password_hashing(),
        _demo_lookup_hashing(config),
        _demo_email_masking(),
    ]
    if not all(results):
        logger.error("One or more demos failed.")
        sys.exit(1)
    logger.info("All demos completed.")


if __name__ == "__main__":
    main()
