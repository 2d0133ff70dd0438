"""
AEAD engine
===========
Single-shot authenticated encryption / decryption, dispatched on the
cipher suite. Pure functions: no I/O, no key state.

    encrypt(suite, key, nonce, plaintext)  -> ciphertext || tag
    decrypt(suite, key, nonce, ciphertext) -> plaintext

Encrypting twice with the same key and nonce gives the same output.
Nonce reuse across different plaintexts is the caller's responsibility;
this layer does not track it.
"""

import logging

from cryptography.exceptions import InvalidTag

from .ciphers import AESCipher, ChaChaCipher
from .errors import DecryptionError, EncryptionError, LengthMismatchError
from .suites import CipherSuite

logger = logging.getLogger(__name__)

_CIPHERS = {
    CipherSuite.CHACHA20_POLY1305: ChaChaCipher,
    CipherSuite.AES_256_GCM:       AESCipher,
}


def cipher_for(suite: CipherSuite, key: bytes):
    """Build the wrapper object for `suite` bound to `key`."""
    return _CIPHERS[suite](key)


def encrypt(suite: CipherSuite, key: bytes, nonce: bytes, plaintext: bytes) -> bytes:
    try:
        ct = cipher_for(suite, key).encrypt(nonce, plaintext)
    except LengthMismatchError as exc:
        raise EncryptionError(f"{suite} encryption failed: {exc}") from exc
    logger.debug(f"{suite} encrypt: pt={len(plaintext)}B ct={len(ct)}B")
    return ct


def decrypt(suite: CipherSuite, key: bytes, nonce: bytes, ciphertext: bytes) -> bytes:
    """
    Raises DecryptionError when the tag does not verify (tampered data,
    wrong key or wrong nonce) or when key/nonce lengths are wrong.
    """
    try:
        pt = cipher_for(suite, key).decrypt(nonce, ciphertext)
    except InvalidTag as exc:
        raise DecryptionError(f"{suite} authentication failed.") from exc
    except LengthMismatchError as exc:
        raise DecryptionError(f"{suite} decryption failed: {exc}") from exc
    logger.debug(f"{suite} decrypt: ct={len(ciphertext)}B pt={len(pt)}B")
    return pt
