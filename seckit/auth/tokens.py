"""
JWT issuance and validation (HS256 via python-jose).

Outside production a fixed development token is also accepted by
:meth:`JwtHandler.validate_token`, compared in constant time.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from seckit.core.config import SecKitConfig
from seckit.core.crypto import constant_time_compare
from seckit.core.keys import require_secret_key
from seckit.core.result import ErrorKind, Result

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
DEFAULT_MAX_AGE = timedelta(hours=1)


class JwtHandler:
    """Issue and check signed auth tokens."""

    def __init__(
        self,
        secret_key: str,
        dev_auth_token: str,
        is_prod: bool,
        user_id_key: str = "user_id",
    ) -> None:
        """
        Args:
            secret_key:     HMAC signing key, at least 32 characters.
            dev_auth_token: Token accepted as valid when ``is_prod`` is False.
            is_prod:        Disables the development token when True.
            user_id_key:    Claim holding the numeric user id.

        Raises:
            ValueError: If *secret_key* is shorter than 32 characters.
        """
        require_secret_key(secret_key)
        self._secret_key = secret_key
        self._dev_auth_token = dev_auth_token
        self._is_prod = is_prod
        self.user_id_key = user_id_key

    @classmethod
    def from_config(cls, config: SecKitConfig, user_id_key: str = "user_id") -> "JwtHandler":
        return cls(config.secret_key, config.dev_auth_token, config.is_prod, user_id_key)

    # ── Issue ────────────────────────────────────────────────────────────

    def generate_token(
        self,
        claims: Optional[Dict[str, Any]] = None,
        max_age: timedelta = DEFAULT_MAX_AGE,
    ) -> str:
        """
        Sign a token carrying *claims* plus ``iat`` and ``exp``.

        Args:
            claims:  Extra claims (e.g. ``{"user_id": 123, "role": "admin"}``).
            max_age: Lifetime of the token (default one hour).

        Returns:
            Compact JWT string.
        """
        now = datetime.now(timezone.utc)
        payload = dict(claims or {})
        payload["iat"] = int(now.timestamp())
        payload["exp"] = int((now + max_age).timestamp())
        return jwt.encode(payload, self._secret_key, algorithm=ALGORITHM)

    # ── Validate ─────────────────────────────────────────────────────────

    def _decode(self, token: str) -> Dict[str, Any]:
        return jwt.decode(token, self._secret_key, algorithms=[ALGORITHM])

    def validate_token(self, token: str) -> Result[None]:
        """Return an ok result if *token* is a valid, unexpired JWT (or the dev token)."""
        if not token:
            return Result.fail(ErrorKind.DATA_LOSS, "Invalid auth token")

        if not self._is_prod and constant_time_compare(token, self._dev_auth_token):
            return Result.ok(None)

        try:
            self._decode(token)
        except JWTError as exc:
            logger.info("Rejected auth token: %s", type(exc).__name__)
            return Result.fail(ErrorKind.DATA_LOSS, "Invalid auth token")
        return Result.ok(None)

    def get_user_id_from_token(self, token: Optional[str]) -> Result[int]:
        """
        Extract the numeric user id from a verified token.

        The claim may be an int or a numeric string.
        """
        if token is None:
            return Result.fail(ErrorKind.DATA_LOSS, "Token not found")
        try:
            claims = self._decode(token)
        except JWTError as exc:
            logger.info("Rejected auth token: %s", type(exc).__name__)
            return Result.fail(ErrorKind.DATA_LOSS, "Invalid token")

        raw_id = claims.get(self.user_id_key)
        if isinstance(raw_id, bool) or raw_id is None:
            return Result.fail(ErrorKind.DATA_LOSS, "User id not found")
        if isinstance(raw_id, int):
            return Result.ok(raw_id)
        text = str(raw_id)
        digits = text[1:] if text[:1] in ("+", "-") else text
        if not (digits.isascii() and digits.isdigit()):
            return Result.fail(ErrorKind.DATA_LOSS, "User id not found")
        return Result.ok(int(text))
