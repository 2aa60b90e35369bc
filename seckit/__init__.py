"""
seckit - searchable field encryption, lookup hashing and auth helpers.

Example:
    >>> from seckit import FieldEncryptor
    >>> from seckit.core.crypto import generate_db_secret_key
    >>> db_secret_key = generate_db_secret_key()
    >>> encryptor = FieldEncryptor(db_secret_key, salt="prod-salt-16chars")
    >>> record = encryptor.encrypt("user@example.com").unwrap()
    >>> encryptor.decrypt(record).unwrap()
    'user@example.com'
"""

__version__ = "1.0.0"

from seckit.auth.passwords import PasswordHasher
from seckit.auth.tokens import JwtHandler
from seckit.core.config import SecKitConfig
from seckit.core.crypto import constant_time_compare
from seckit.core.result import ErrorKind, Failure, Result, SecKitError
from seckit.core.utils import mask_email
from seckit.storage.encryption import FieldEncryptor
from seckit.storage.hashing import DeterministicHasher

__all__ = [
    "DeterministicHasher",
    "ErrorKind",
    "Failure",
    "FieldEncryptor",
    "JwtHandler",
    "PasswordHasher",
    "Result",
    "SecKitConfig",
    "SecKitError",
    "constant_time_compare",
    "mask_email",
]
