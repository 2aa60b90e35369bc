"""
Searchable field-level encryption.

Wraps seckit.core.crypto to encrypt individual database values with
AES-256-CBC and authenticate them with HMAC-SHA256 (encrypt-then-MAC). The IV
is derived from the plaintext, so equal values encrypt to equal records and an
encrypted column can still be used for equality lookups.

Record layout, base64-encoded (standard alphabet, padded)::

    [ IV (16) | ciphertext (N, multiple of 16) | HMAC-SHA256(IV | ciphertext) (32) ]
"""

import base64
import binascii
import logging

from seckit.core import crypto
from seckit.core.config import SecKitConfig
from seckit.core.keys import decode_key_material, require_salt
from seckit.core.result import ErrorKind, Result

logger = logging.getLogger(__name__)

MAX_VALUE_LENGTH = 10_000
# Stands in for "" so empty values go through the cipher like any other.
EMPTY_MARKER = "\x01EMPTY\x01"


class FieldEncryptor:
    """Deterministically encrypt / decrypt individual string fields."""

    def __init__(self, db_secret_key: str, salt: str) -> None:
        """
        Args:
            db_secret_key: Base64-encoded 32-byte key. Checked on every call,
                           so a bad key surfaces as ``InvalidArgument`` results.
            salt:          Deployment salt, at least 16 characters. Changing it
                           invalidates every record encrypted so far.

        Raises:
            ValueError: If *salt* is shorter than 16 characters.
        """
        require_salt(salt)
        self._db_secret_key = db_secret_key
        self._salt = salt

    @classmethod
    def from_config(cls, config: SecKitConfig, salt: str) -> "FieldEncryptor":
        return cls(config.db_secret_key, salt)

    # ── Public API ───────────────────────────────────────────────────────

    def encrypt(self, plaintext: str) -> Result[str]:
        """
        Encrypt *plaintext* into a base64 record.

        Args:
            plaintext: Value of at most 10000 characters. ``""`` is allowed.

        Returns:
            Result holding the record, or an ``InvalidArgument`` failure.
        """
        key_result = decode_key_material(self._db_secret_key, self._salt)
        if key_result.is_error:
            return Result(error=key_result.error)
        key = key_result.value

        if len(plaintext) > MAX_VALUE_LENGTH:
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT,
                f"Value exceeds maximum length of {MAX_VALUE_LENGTH} characters",
            )
        if plaintext == EMPTY_MARKER:
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT,
                "Value cannot be the reserved empty string marker",
            )

        value = plaintext or EMPTY_MARKER
        try:
            iv = crypto.derive_iv(value, self._salt, key)
            ciphertext = crypto.aes_cbc_encrypt(value.encode("utf-8"), key, iv)
        except ValueError:
            logger.debug("Field encryption failed", exc_info=True)
            return Result.fail(ErrorKind.INTERNAL, "Encryption failed")

        data = iv + ciphertext
        mac = crypto.hmac_sha256(key, data)
        return Result.ok(base64.b64encode(data + mac).decode("ascii"))

    def decrypt(self, record: str) -> Result[str]:
        """
        Verify and decrypt a record produced by :meth:`encrypt`.

        The MAC is checked before anything is decrypted; a mismatch (tampered
        record or wrong key) yields ``DataLoss`` and the ciphertext is never
        touched.

        Args:
            record: Base64 record.

        Returns:
            Result holding the original plaintext, or a failure classified as
            ``InvalidArgument``, ``DataLoss`` or ``Internal``.
        """
        key_result = decode_key_material(self._db_secret_key, self._salt)
        if key_result.is_error:
            return Result(error=key_result.error)
        key = key_result.value

        try:
            raw = base64.b64decode(record, validate=True)
        except (binascii.Error, ValueError):
            logger.debug("Encrypted record is not valid base64", exc_info=True)
            return Result.fail(ErrorKind.INTERNAL, "Invalid encrypted value")

        if len(raw) < crypto.MIN_RECORD_SIZE:
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT,
                "Invalid encrypted data length: too small to contain IV, block and MAC",
            )

        data, received_mac = raw[: -crypto.MAC_SIZE], raw[-crypto.MAC_SIZE :]
        if not crypto.constant_time_compare(received_mac, crypto.hmac_sha256(key, data)):
            logger.warning("Encrypted record failed authentication")
            return Result.fail(
                ErrorKind.DATA_LOSS,
                "Authentication failed - data may have been tampered with",
            )

        iv, ciphertext = data[: crypto.BLOCK_SIZE], data[crypto.BLOCK_SIZE :]
        try:
            plaintext = crypto.aes_cbc_decrypt(ciphertext, key, iv).decode("utf-8")
        except ValueError:
            # UnicodeDecodeError is a ValueError too.
            logger.debug("Field decryption failed", exc_info=True)
            return Result.fail(ErrorKind.INTERNAL, "Invalid encrypted value")

        if plaintext == EMPTY_MARKER:
            return Result.ok("")
        return Result.ok(plaintext)

    def wipe_key(self) -> None:
        """Drop the in-memory key reference (best-effort)."""
        self._db_secret_key = ""
