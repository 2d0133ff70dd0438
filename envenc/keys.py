"""
Key material
============
Three ways to obtain a (key, nonce) pair for a cipher suite:

  1. generate()  random bytes from os.urandom, cached as hex in the
                 environment under {LABEL}_KEY / {LABEL}_NONCE so later
                 calls in the same process reuse them.
  2. derive()    SHA-256 of a password, truncated: key = digest[:32],
                 nonce = digest[:12].
  3. KeyFile     hex key and nonce persisted to a plaintext file.

WARNING: derive() is deterministic and weak. The nonce is a prefix of
the key, both come from one unsalted hash, and every value encrypted
under the same password shares one nonce. KeyFile writes the raw key to
disk unencrypted. Both exist for demonstrations and local development,
not for protecting production secrets.
"""

import binascii
import hashlib
import logging
import os
from typing import NamedTuple, Optional

from .context import EnvContext, default_context
from .errors import InvalidEncodingError, LengthMismatchError, StoreIOError
from .suites import CipherSuite

logger = logging.getLogger(__name__)

DERIVED_KEY_SIZE   = 32
DERIVED_NONCE_SIZE = 12


class KeyMaterial(NamedTuple):
    """A (key, nonce) pair. Unpacks like a tuple: key, nonce = material."""

    key:   bytes
    nonce: bytes

    @property
    def key_hex(self) -> str:
        return self.key.hex()

    @property
    def nonce_hex(self) -> str:
        return self.nonce.hex()

    @classmethod
    def from_hex(cls, suite: CipherSuite, key_hex: str, nonce_hex: str) -> "KeyMaterial":
        return cls(_decode_field(suite, "key", key_hex, suite.key_size),
                   _decode_field(suite, "nonce", nonce_hex, suite.nonce_size))

    def __repr__(self):
        # never print the key itself
        return f"KeyMaterial(key=<{len(self.key)}B>, nonce={self.nonce_hex})"


def _decode_field(suite: CipherSuite, field: str, text: str, size: int) -> bytes:
    try:
        raw = binascii.unhexlify(text.strip())
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncodingError(f"Invalid {suite} {field} hex.") from exc
    if len(raw) != size:
        raise LengthMismatchError(
            f"{suite} {field} must be {size} bytes, got {len(raw)}.")
    return raw


# ── 1. random generation with environment caching ───────────────────────────

def _cached_or_new(suite: CipherSuite, ctx: EnvContext, var: str,
                   field: str, size: int) -> bytes:
    cached = ctx.get(var)
    if cached is not None:
        logger.debug(f"Reusing {var} from environment")
        return _decode_field(suite, field, cached, size)
    raw = os.urandom(size)
    ctx.set(var, raw.hex())
    logger.debug(f"Generated {var} ({size}B)")
    return raw


def generate(suite: CipherSuite, context: Optional[EnvContext] = None) -> KeyMaterial:
    """
    Return the cached key material for `suite`, generating what is missing.

    Key and nonce are handled independently: a present variable is
    decoded and reused, an absent one is filled with fresh random bytes
    and written back to the context.

    Raises InvalidEncodingError for cached values that are not hex and
    LengthMismatchError for cached values of the wrong size.
    """
    ctx = default_context(context)
    key   = _cached_or_new(suite, ctx, suite.key_var, "key", suite.key_size)
    nonce = _cached_or_new(suite, ctx, suite.nonce_var, "nonce", suite.nonce_size)
    return KeyMaterial(key, nonce)


def from_env(suite: CipherSuite, context: Optional[EnvContext] = None) -> Optional[KeyMaterial]:
    """Load the cached pair without generating. None if either is absent."""
    ctx = default_context(context)
    key_hex, nonce_hex = ctx.get(suite.key_var), ctx.get(suite.nonce_var)
    if key_hex is None or nonce_hex is None:
        return None
    return KeyMaterial.from_hex(suite, key_hex, nonce_hex)


# ── 2. deterministic derivation from a password ──────────────────────────────

def _password_digest(password: str) -> bytes:
    return hashlib.sha256(password.encode("utf-8")).digest()


def derive_key(password: str) -> bytes:
    """First 32 bytes of SHA-256(password)."""
    return _password_digest(password)[:DERIVED_KEY_SIZE]


def derive_nonce(password: str) -> bytes:
    """First 12 bytes of SHA-256(password). Overlaps the derived key."""
    return _password_digest(password)[:DERIVED_NONCE_SIZE]


def derive(suite: CipherSuite, password: str) -> KeyMaterial:
    return KeyMaterial(derive_key(password)[:suite.key_size],
                       derive_nonce(password)[:suite.nonce_size])


# ── 3. plaintext key file (demonstration only) ───────────────────────────────

class KeyFile:
    """
    Key material stored as two hex lines (key, then nonce) in a file.

    INSECURE: anyone who can read the file can decrypt the store. Use it
    to keep a local demo working across runs, nothing more.
    """

    def __init__(self, path: str = "key_nonce.txt"):
        self.path = path

    @property
    def exists(self) -> bool:
        return os.path.exists(self.path)

    def load(self, suite: CipherSuite) -> Optional[KeyMaterial]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as exc:
            raise StoreIOError(f"Key file {self.path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise StoreIOError(f"Cannot read key file {self.path}: {exc}") from exc
        if len(lines) < 2:
            raise InvalidEncodingError(
                f"Key file {self.path} must hold a key line and a nonce line.")
        material = KeyMaterial.from_hex(suite, lines[0], lines[1])
        logger.info(f"Loaded {suite} key material from {self.path}")
        return material

    def save(self, material: KeyMaterial):
        try:
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(f"{material.key_hex}\n{material.nonce_hex}")
        except OSError as exc:
            raise StoreIOError(f"Cannot write key file {self.path}: {exc}") from exc
        logger.warning(f"Key material written in plaintext to {self.path}")

    def load_or_generate(self, suite: CipherSuite,
                         context: Optional[EnvContext] = None) -> KeyMaterial:
        material = self.load(suite)
        if material is None:
            material = generate(suite, context)
            self.save(material)
        return material
