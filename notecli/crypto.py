"""Password-based AES-256-GCM encryption."""

from __future__ import annotations

import hashlib
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

SALT_SIZE = 32
NONCE_SIZE = 12
KEY_SIZE = 32
ITERATIONS = 100_000


class CryptoManager:
    """Derives keys from passwords with PBKDF2-SHA256 and seals data with AES-GCM."""

    def __init__(self, salt: bytes = b"") -> None:
        self.salt = bytes(salt)

    def generate_salt(self) -> bytes:
        """Replace the salt with fresh random bytes and return it."""
        self.salt = os.urandom(SALT_SIZE)
        return self.salt

    def derive_key(self, password: str) -> bytes:
        """Derive a 256-bit key from ``password`` and the current salt."""
        return hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), self.salt, ITERATIONS, KEY_SIZE
        )

    def encrypt(self, plaintext: bytes, password: str) -> bytes:
        """Encrypt ``plaintext``; the result is the nonce followed by the sealed data."""
        aead = AESGCM(self.derive_key(password))
        nonce = os.urandom(NONCE_SIZE)
        return nonce + aead.encrypt(nonce, bytes(plaintext), None)

    def decrypt(self, ciphertext: bytes, password: str) -> bytes:
        """Decrypt data produced by :meth:`encrypt`.

        Raises ValueError if the data is too short or fails authentication.
        """
        if len(ciphertext) < NONCE_SIZE:
            raise ValueError("ciphertext too short")
        aead = AESGCM(self.derive_key(password))
        nonce, sealed = ciphertext[:NONCE_SIZE], ciphertext[NONCE_SIZE:]
        try:
            return aead.decrypt(bytes(nonce), bytes(sealed), None)
        except InvalidTag as exc:
            raise ValueError("message authentication failed") from exc