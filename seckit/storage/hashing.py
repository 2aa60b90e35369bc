"""
Deterministic one-way hashing for searchable fields.

Unlike bcrypt, the same input always yields the same digest, so a hashed
email or phone number can be stored and looked up without ever keeping the
original. Use :class:`seckit.storage.encryption.FieldEncryptor` instead when
the value has to be read back.
"""

import base64
import logging

from seckit.core import crypto
from seckit.core.config import SecKitConfig
from seckit.core.keys import require_salt, require_secret_key, validate_secret
from seckit.core.result import ErrorKind, Result

logger = logging.getLogger(__name__)

MAX_VALUE_LENGTH = 10_000


class DeterministicHasher:
    """HMAC-SHA256 lookup hashes over ``value|salt``."""

    def __init__(self, secret_key: str, salt: str) -> None:
        """
        Args:
            secret_key: HMAC key, at least 32 characters.
            salt:       Deployment salt, at least 16 characters.

        Raises:
            ValueError: If either argument is too short.
        """
        require_secret_key(secret_key)
        require_salt(salt)
        self._secret_key = secret_key
        self._salt = salt

    @classmethod
    def from_config(cls, config: SecKitConfig, salt: str) -> "DeterministicHasher":
        return cls(config.secret_key, salt)

    def hash(self, value: str) -> Result[str]:
        """Return the base64 digest of *value*."""
        key_result = validate_secret(self._secret_key, self._salt)
        if key_result.is_error:
            return Result(error=key_result.error)
        if not value:
            return Result.fail(ErrorKind.INVALID_ARGUMENT, "Value is empty")
        if len(value) > MAX_VALUE_LENGTH:
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT,
                f"Value exceeds maximum length of {MAX_VALUE_LENGTH} characters",
            )

        try:
            message = crypto.salted_message(value, self._salt)
        except UnicodeEncodeError:
            logger.debug("Hashing failed", exc_info=True)
            return Result.fail(ErrorKind.INTERNAL, "Hashing failed")

        digest = crypto.hmac_sha256(key_result.value, message)
        return Result.ok(base64.b64encode(digest).decode("ascii"))

    def verify(self, value: str, digest: str) -> Result[bool]:
        """
        Check *value* against a digest from :meth:`hash` in constant time.

        A failure from :meth:`hash` is returned as-is, so "no match" (``False``)
        stays distinguishable from "could not compute".
        """
        computed = self.hash(value)
        if computed.is_error:
            return Result(error=computed.error)
        return Result.ok(crypto.constant_time_compare(computed.value, digest))
