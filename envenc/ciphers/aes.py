"""
AES-256-GCM
===========
AES-256 in Galois/Counter Mode.

GCM provides authenticated encryption: besides the ciphertext it
produces a 128-bit tag, and any change to the ciphertext, the nonce or
the key is detected on decryption.

Key size: 256 bits (32 bytes), maximum AES key length.
Nonce:    96 bits (12 bytes), the GCM standard size.
Tag:      128 bits (16 bytes), appended to the ciphertext.

AESGCM itself accepts nonces from 8 to 128 bytes; envenc pins it to
12 so that both suites share one wire layout.

Dependencies: cryptography >= 41.0
"""

import os
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..errors import LengthMismatchError


class AESCipher:
    """AES-256-GCM authenticated encryption with an explicit nonce."""

    KEY_SIZE   = 32   # 256-bit key
    NONCE_SIZE = 12   # 96-bit nonce (GCM standard)
    TAG_SIZE   = 16

    def __init__(self, key: bytes):
        """
        Pass a 32-byte key.
        Store the key securely, loss means permanent data loss.
        """
        if len(key) != self.KEY_SIZE:
            raise LengthMismatchError(
                f"AES-256 key must be {self.KEY_SIZE} bytes, got {len(key)}.")
        self._key    = key
        self._aesgcm = AESGCM(key)

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
                f"AES-GCM nonce must be {self.NONCE_SIZE} bytes, got {len(nonce)}.")

    def encrypt(self, nonce: bytes, plaintext: bytes) -> bytes:
        """
        Encrypt and authenticate.
        Returns: ciphertext+tag
        """
        self._check_nonce(nonce)
        return self._aesgcm.encrypt(nonce, plaintext, None)

    def decrypt(self, nonce: bytes, ciphertext: bytes) -> bytes:
        """
        Decrypt and verify authentication tag.
        Raises cryptography.exceptions.InvalidTag if tampered.
        """
        self._check_nonce(nonce)
        return self._aesgcm.decrypt(nonce, ciphertext, None)
