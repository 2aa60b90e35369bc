"""
Password hashing with bcrypt.

Every hash embeds its own random salt, so hashing the same password twice
gives different strings; use :meth:`PasswordHasher.verify` to compare.
Passwords longer than 72 UTF-8 bytes are truncated to 72 before hashing and
verifying, as bcrypt has always done.
"""

import logging

import bcrypt

from seckit.core.result import ErrorKind, Result

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes; newer releases raise instead.
MAX_PASSWORD_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


class PasswordHasher:
    """Adaptive password hashing returning :class:`Result` values."""

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    def hash(self, password: str) -> Result[str]:
        if not password:
            return Result.fail(ErrorKind.INVALID_ARGUMENT, "Password is empty")
        try:
            hashed = bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(self.rounds))
        except ValueError:
            logger.debug("Password hashing failed", exc_info=True)
            return Result.fail(ErrorKind.INTERNAL, "Hashing failed")
        return Result.ok(hashed.decode("ascii"))

    def verify(self, password: str, hashed: str) -> Result[bool]:
        """Return ``True`` if *password* matches the bcrypt *hashed* string."""
        if not password:
            return Result.fail(ErrorKind.INVALID_ARGUMENT, "Password is empty")
        if not hashed:
            return Result.fail(ErrorKind.INVALID_ARGUMENT, "Hash is empty")
        try:
            matches = bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))
        except ValueError:
            logger.debug("Password verification failed", exc_info=True)
            return Result.fail(ErrorKind.INTERNAL, "Verification failed")
        return Result.ok(matches)
