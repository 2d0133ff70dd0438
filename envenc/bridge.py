"""
Environment bridge
==================
Decrypts stored entries into the environment and reads them back.

decrypt_value() handles one payload and raises on any failure.
decrypt_all() runs it over a whole store with this policy:
  * per entry, logged and skipped:  invalid hex, payload shorter than the
    nonce, plaintext that is not UTF-8
  * whole batch aborted:            DecryptionError (authentication
    failed), since a wrong key fails every entry alike. A payload that
    holds a full nonce but is too short for the 16-byte tag lands here
    too: the cipher reports it as a failed tag

The nonce used for each entry is the one embedded in its payload. The
caller's nonce argument is accepted so call sites read the same as
set_encrypted(), but it is never used for decryption.
"""

import binascii
import logging
from typing import Dict, Mapping, Optional

from . import aead
from .context import EnvContext, default_context
from .errors import InvalidEncodingError, PlaintextDecodeError
from .suites import CipherSuite

logger = logging.getLogger(__name__)


def decrypt_value(name: str, enc_value: str, suite: CipherSuite, key: bytes) -> str:
    """
    Decrypt one stored hex(nonce || ciphertext) payload to text.
    Raises InvalidEncodingError, DecryptionError or PlaintextDecodeError.
    """
    try:
        combined = binascii.unhexlify(enc_value)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncodingError(f"{name}: invalid hex encoding") from exc
    if len(combined) < suite.nonce_size:
        raise InvalidEncodingError(f"{name}: combined data too short")

    nonce_used = combined[:suite.nonce_size]
    ciphertext = combined[suite.nonce_size:]
    raw = aead.decrypt(suite, key, nonce_used, ciphertext)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PlaintextDecodeError(f"{name}: decrypted value is not valid UTF-8") from exc


def decrypt_all(entries: Mapping[str, str], suite: CipherSuite, key: bytes,
                nonce: Optional[bytes] = None,
                context: Optional[EnvContext] = None) -> Dict[str, str]:
    """
    Decrypt every entry and set NAME=plaintext in the context.
    Returns the names and values that were set.
    Raises DecryptionError if any entry fails authentication.
    """
    ctx     = default_context(context)
    exposed = {}
    for name, enc_value in entries.items():
        try:
            plaintext = decrypt_value(name, enc_value, suite, key)
        except (InvalidEncodingError, PlaintextDecodeError) as exc:
            # isolated: one corrupt line must not hide the rest of the store
            logger.warning(f"Skipping {exc}")
            continue
        ctx.set(name, plaintext)
        exposed[name] = plaintext
    logger.info(f"Decrypted {len(exposed)} of {len(entries)} variable(s) ({suite})")
    return exposed


def read_one(name: str, context: Optional[EnvContext] = None) -> Optional[str]:
    return default_context(context).get(name)
