"""
Immutable configuration for seckit components.

Secrets belong in the process environment, never in source::

    SECKIT_SECRET_KEY       JWT / lookup-hash secret (>= 32 characters)
    SECKIT_DB_SECRET_KEY    base64 of a 32-byte field-encryption key
    SECKIT_DEV_AUTH_TOKEN   token accepted outside production
    SECKIT_ENV              "production" (or "prod") enables production mode
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_PROD_NAMES = ("prod", "production")


@dataclass(frozen=True)
class SecKitConfig:
    """Settings shared by the encryptor, hasher and token handler."""

    secret_key: str
    db_secret_key: str
    dev_auth_token: str = ""
    is_prod: bool = True

    def __repr__(self) -> str:
        # Never echo secrets into logs or tracebacks.
        return f"SecKitConfig(is_prod={self.is_prod})"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SecKitConfig":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ`` (for tests).

        Raises:
            ValueError: If a required variable is missing or empty.
        """
        env = os.environ if environ is None else environ

        def required(name: str) -> str:
            value = env.get(name, "")
            if not value:
                raise ValueError(f"Environment variable {name} is not set.")
            return value

        return cls(
            secret_key=required("SECKIT_SECRET_KEY"),
            db_secret_key=required("SECKIT_DB_SECRET_KEY"),
            dev_auth_token=env.get("SECKIT_DEV_AUTH_TOKEN", ""),
            is_prod=env.get("SECKIT_ENV", "production").strip().lower() in _PROD_NAMES,
        )
