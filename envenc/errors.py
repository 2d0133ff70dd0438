"""
Error taxonomy
==============
Every failure the package raises derives from EnvEncError, so callers
can catch the whole family at once. Errors coming from `cryptography`
or the OS are re-raised as one of these with the original chained.

    EnvEncError
    ├── InvalidEncodingError   malformed hex (key, nonce, store value)
    ├── LengthMismatchError    key/nonce length differs from the suite
    ├── EncryptionError        primitive refused to encrypt
    ├── DecryptionError        tag mismatch or bad lengths on decrypt
    ├── PlaintextDecodeError   decrypted bytes are not UTF-8 text
    └── StoreIOError           store or key file unreadable/unwritable
"""


class EnvEncError(Exception):
    """Base class for all envenc errors."""


class InvalidEncodingError(EnvEncError, ValueError):
    pass


class LengthMismatchError(EnvEncError, ValueError):
    pass


class EncryptionError(EnvEncError):
    pass


class DecryptionError(EnvEncError):
    pass


class PlaintextDecodeError(EnvEncError):
    pass


class StoreIOError(EnvEncError, OSError):
    pass
