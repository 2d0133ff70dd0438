"""
envenc: encrypted environment variables
=======================================
Encrypt configuration secrets into a `.env`-style store and decrypt
them back into the process environment.

Ciphers:
    CHACHA20POLY1305  ChaCha20-Poly1305 (RFC 8439), 256-bit key, 96-bit nonce
    AES256GCM         AES-256-GCM,                  256-bit key, 96-bit nonce

Stored form of a value:  NAME=hex(nonce || ciphertext || tag)

    from envenc import CipherSuite, EncryptedStore, decrypt_all, generate, read_one

    suite = CipherSuite.CHACHA20_POLY1305
    key, nonce = generate(suite)
    store = EncryptedStore(".env")
    store.set_encrypted("API_KEY", "abc123", suite, key, nonce)
    decrypt_all(store.load_encrypted(), suite, key, nonce)
    read_one("API_KEY")   # "abc123"

License: Apache 2.0
"""

__version__ = "1.0.0"

from .suites     import CipherSuite
from .errors     import (EnvEncError, InvalidEncodingError, LengthMismatchError,
                         EncryptionError, DecryptionError, PlaintextDecodeError,
                         StoreIOError)
from .aead       import encrypt, decrypt
from .context    import EnvContext
from .keys       import (KeyMaterial, KeyFile, generate, from_env,
                         derive, derive_key, derive_nonce)
from .store      import EncryptedStore
from .bridge     import decrypt_all, read_one
from .secret_env import SecretEnv

__all__ = [
    "CipherSuite",
    "EnvEncError",
    "InvalidEncodingError",
    "LengthMismatchError",
    "EncryptionError",
    "DecryptionError",
    "PlaintextDecodeError",
    "StoreIOError",
    "encrypt",
    "decrypt",
    "EnvContext",
    "KeyMaterial",
    "KeyFile",
    "generate",
    "from_env",
    "derive",
    "derive_key",
    "derive_nonce",
    "EncryptedStore",
    "decrypt_all",
    "read_one",
    "SecretEnv",
]
