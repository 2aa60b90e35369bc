"""
Key material checks run before any cryptographic operation.

Two flavours:

* ``require_*`` raise :class:`ValueError` at construction time; a bad salt or
  secret shape is a deployment mistake and should stop the process early.
* ``decode_key_material`` / ``validate_secret`` return a :class:`Result` and
  run on every call, since the key may come from mutable external config.
"""

import base64
import binascii

from seckit.core.crypto import KEY_SIZE
from seckit.core.result import ErrorKind, Result

MIN_SALT_LENGTH = 16
MIN_SECRET_KEY_LENGTH = 32


def require_salt(salt: str) -> None:
    if len(salt) < MIN_SALT_LENGTH:
        raise ValueError(
            f"salt must be at least {MIN_SALT_LENGTH} characters for security. "
            f"Current length: {len(salt)}"
        )


def require_secret_key(secret_key: str) -> None:
    if len(secret_key) < MIN_SECRET_KEY_LENGTH:
        raise ValueError(
            f"secret_key must be at least {MIN_SECRET_KEY_LENGTH} characters for security. "
            f"Current length: {len(secret_key)}"
        )


def _check_salt(salt: str) -> Result[None]:
    if not salt:
        return Result.fail(ErrorKind.INVALID_ARGUMENT, "Salt is empty")
    if len(salt) < MIN_SALT_LENGTH:
        return Result.fail(
            ErrorKind.INVALID_ARGUMENT,
            f"Salt must be at least {MIN_SALT_LENGTH} characters",
        )
    return Result.ok(None)


def decode_key_material(db_secret_key: str, salt: str) -> Result[bytes]:
    """
    Decode and length-check the base64 field-encryption key.

    Args:
        db_secret_key: Base64 string that must decode to exactly 32 bytes.
        salt:          Deployment salt (at least 16 characters).

    Returns:
        Result holding the raw 32-byte key, or an ``InvalidArgument`` failure.
    """
    if not db_secret_key:
        return Result.fail(ErrorKind.INVALID_ARGUMENT, "DB secret key is empty")
    salt_check = _check_salt(salt)
    if salt_check.is_error:
        return Result(error=salt_check.error)

    try:
        key = base64.b64decode(db_secret_key, validate=True)
    except (binascii.Error, ValueError):
        return Result.fail(ErrorKind.INVALID_ARGUMENT, "DB secret key is not valid base64")

    if len(key) != KEY_SIZE:
        return Result.fail(
            ErrorKind.INVALID_ARGUMENT,
            f"Invalid key length: {len(key)} bytes. Expected {KEY_SIZE} bytes",
        )
    return Result.ok(key)


def validate_secret(secret_key: str, salt: str) -> Result[bytes]:
    """Check the hasher's raw string key and salt; return the key as UTF-8 bytes."""
    if not secret_key:
        return Result.fail(ErrorKind.INVALID_ARGUMENT, "Secret key is empty")
    salt_check = _check_salt(salt)
    if salt_check.is_error:
        return Result(error=salt_check.error)
    return Result.ok(secret_key.encode("utf-8"))
