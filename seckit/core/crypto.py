"""
Cryptographic primitives for seckit.

Keyed hashing : HMAC-SHA256
Encryption    : AES-256-CBC with PKCS#7 padding (authenticated by the caller)
Comparison    : constant-time equality over bytes or text
"""

import base64
import hashlib
import hmac
import secrets
from typing import Union

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

# ── Constants ────────────────────────────────────────────────────────────────

KEY_SIZE = 32           # 256-bit AES / HMAC key
BLOCK_SIZE = 16         # AES block, also the IV length
MAC_SIZE = 32           # HMAC-SHA256 output
MIN_RECORD_SIZE = BLOCK_SIZE + BLOCK_SIZE + MAC_SIZE  # IV + one block + MAC
FIELD_SEPARATOR = b"|"


# ── Comparison ───────────────────────────────────────────────────────────────

def constant_time_compare(a: Union[str, bytes], b: Union[str, bytes]) -> bool:
    """
    Return True if *a* == *b* without exiting early on the first difference.

    The length difference is folded into the result, and the loop only runs
    over the shorter input, so the running time reveals ``min(len(a), len(b))``
    but not where the inputs diverge.

    Args:
        a: First value (``str`` or ``bytes``).
        b: Second value, same type as *a*.

    Returns:
        True if both values are identical.
    """
    result = len(a) ^ len(b)
    units_a = [ord(ch) for ch in a] if isinstance(a, str) else a
    units_b = [ord(ch) for ch in b] if isinstance(b, str) else b
    for i in range(min(len(a), len(b))):
        result |= units_a[i] ^ units_b[i]
    return result == 0


# ── Keyed hashing ─────────────────────────────────────────────────────────────

def hmac_sha256(key: bytes, data: bytes) -> bytes:
    """Return the 32-byte HMAC-SHA256 of *data* under *key*."""
    return hmac.new(key, data, hashlib.sha256).digest()


def salted_message(value: str, salt: str) -> bytes:
    """Encode ``value|salt`` as UTF-8; the separator keeps the two fields apart."""
    return value.encode("utf-8") + FIELD_SEPARATOR + salt.encode("utf-8")


def derive_iv(value: str, salt: str, key: bytes) -> bytes:
    """
    Derive a deterministic 16-byte IV for *value*.

    ``IV = HMAC-SHA256(key, value | salt)[:16]``

    The IV is keyed with the *encryption* key itself, so identical plaintexts
    always encrypt to identical records. This deliberately gives up ciphertext
    indistinguishability (rows sharing a plaintext are visible as such) in
    exchange for equality lookups on encrypted columns. Records already stored
    depend on this derivation, so it must not change.

    Args:
        value: Plaintext that will be encrypted.
        salt:  Deployment salt.
        key:   32-byte encryption key.

    Returns:
        16-byte IV.
    """
    return hmac_sha256(key, salted_message(value, salt))[:BLOCK_SIZE]


# ── AES-256-CBC ──────────────────────────────────────────────────────────────

def aes_cbc_encrypt(plaintext: bytes, key: bytes, iv: bytes) -> bytes:
    """
    Pad *plaintext* with PKCS#7 and encrypt it with AES-256-CBC.

    Returns:
        Ciphertext whose length is a positive multiple of :data:`BLOCK_SIZE`.
    """
    padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
    padded = padder.update(plaintext) + padder.finalize()
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def aes_cbc_decrypt(ciphertext: bytes, key: bytes, iv: bytes) -> bytes:
    """
    Decrypt AES-256-CBC *ciphertext* and strip its PKCS#7 padding.

    Raises:
        ValueError: If the ciphertext is not block-aligned or the padding is
            invalid.
    """
    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()
    unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
    return unpadder.update(padded) + unpadder.finalize()


# ── Key generation ────────────────────────────────────────────────────────────

def generate_db_secret_key() -> str:
    """Return a random 32-byte key, base64-encoded for configuration."""
    return base64.b64encode(secrets.token_bytes(KEY_SIZE)).decode("ascii")
