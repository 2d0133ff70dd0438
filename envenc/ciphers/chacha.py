"""
ChaCha20-Poly1305
=================
ChaCha20 stream cipher + Poly1305 authentication tag (RFC 8439).

Key:   256-bit (32 bytes)
Nonce:  96-bit (12 bytes), supplied by the caller
Tag:   128-bit (16 bytes), appended to the ciphertext

Unlike a per-message random nonce, envenc lets the key provider own the
nonce, so encrypting the same value twice under the same key material
yields the same ciphertext. Never reuse a (key, nonce) pair for values
you do not want linked.

Dependencies: cryptography >= 41.0
"""

import os
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from ..errors import LengthMismatchError


class ChaChaCipher:
    """ChaCha20-Poly1305 authenticated encryption with an explicit nonce."""

    KEY_SIZE   = 32
    NONCE_SIZE = 12
    TAG_SIZE   = 16

    def __init__(self, key: bytes):
        if len(key) != self.KEY_SIZE:
            raise LengthMismatchError(
                f"ChaCha20 key must be {self.KEY_SIZE} bytes, got {len(key)}.")
        self._key    = key
        self._cipher = ChaCha20Poly1305(key)

    @property
    def key(self) -> bytes:
        return self._key

    @classmethod
    def generate_key(cls) -> bytes:
        return os.urandom(cls.KEY_SIZE)

    @classmethod
    def generate_nonce(cls) -> bytes:
        return os.urandom(cls.NONCE_SIZE)

    def _check_nonce(self, nonce: bytes):
        if len(nonce) != self.NONCE_SIZE:
            raise LengthMismatchError(
                f"ChaCha20 nonce must be {self.NONCE_SIZE} bytes, got {len(nonce)}.")

    def encrypt(self, nonce: bytes, plaintext: bytes) -> bytes:
        """Returns: ciphertext || tag(16)"""
        self._check_nonce(nonce)
        return self._cipher.encrypt(nonce, plaintext, None)

    def decrypt(self, nonce: bytes, ciphertext: bytes) -> bytes:
        """
        Decrypt and verify.
        Raises cryptography.exceptions.InvalidTag on tamper.
        """
        self._check_nonce(nonce)
        return self._cipher.decrypt(nonce, ciphertext, None)
