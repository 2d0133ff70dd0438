"""
Encrypted store
===============
A flat `.env`-style text file of encrypted values:

    NAME=hex(nonce || ciphertext || tag)

One entry per line, split on the first '=', whitespace around name and
value trimmed, lines without '=' ignored. No quoting, no escaping.

Writes are first-write-wins: setting a name that already exists is
reported and leaves the file untouched. Every successful write rewrites
the whole file, and there is no locking, so two processes writing the
same store at once can lose an entry.

Dependencies: python-dotenv (import_dotenv only)
"""

import logging
import os
from typing import Dict, List

from dotenv import dotenv_values

from . import aead
from .errors import InvalidEncodingError, StoreIOError
from .suites import CipherSuite

logger = logging.getLogger(__name__)


def parse_store_text(text: str) -> Dict[str, str]:
    entries = {}
    for line in text.splitlines():
        name, sep, value = line.partition("=")
        if not sep:
            continue
        entries[name.strip()] = value.strip()
    return entries


def check_name(name: str) -> str:
    """Return `name` as it will read back from the file, or raise."""
    clean = name.strip()
    if not clean or any(c in clean for c in "=\n\r"):
        raise InvalidEncodingError(f"Invalid variable name {name!r}.")
    return clean


def combine(nonce: bytes, ciphertext: bytes) -> str:
    """hex(nonce || ciphertext), the stored form of one value."""
    return (nonce + ciphertext).hex()


class EncryptedStore:
    """name -> hex payload mapping persisted as a text file."""

    def __init__(self, path: str = ".env"):
        self.path = path

    def __repr__(self):
        return f"EncryptedStore({self.path!r})"

    def load_encrypted(self) -> Dict[str, str]:
        """Read every entry. A missing file is an empty store."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError:
            return {}
        except UnicodeDecodeError as exc:
            raise StoreIOError(f"Store {self.path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise StoreIOError(f"Cannot read store {self.path}: {exc}") from exc
        return parse_store_text(text)

    def _write(self, entries: Dict[str, str]):
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                for name, value in entries.items():
                    f.write(f"{name}={value}\n")
        except OSError as exc:
            raise StoreIOError(f"Cannot write store {self.path}: {exc}") from exc

    def set_encrypted(self, name: str, value: str, suite: CipherSuite,
                      key: bytes, nonce: bytes) -> bool:
        """
        Encrypt `value` and add it under `name`.

        Returns True when the entry was written, False when `name` was
        already present (the existing value is kept).
        Raises InvalidEncodingError for a name that cannot round-trip
        through the file (empty, or containing "=" or a line break),
        EncryptionError or StoreIOError.
        """
        name    = check_name(name)
        ct      = aead.encrypt(suite, key, nonce, value.encode("utf-8"))
        payload = combine(nonce, ct)

        entries = self.load_encrypted()
        if name in entries:
            logger.info(f"Environment variable '{name}' already exists. No changes made.")
            return False

        entries[name] = payload
        self._write(entries)
        logger.info(f"Stored encrypted '{name}' in {self.path} ({suite})")
        return True

    def import_dotenv(self, source: str, suite: CipherSuite,
                      key: bytes, nonce: bytes) -> List[str]:
        """
        Encrypt every value of a plaintext dotenv file into this store.
        Returns the names actually written; existing names are kept.
        """
        if not os.path.isfile(source):
            raise StoreIOError(f"Cannot read dotenv file {source}: not found")
        written = []
        for name, value in dotenv_values(source).items():
            if value is None:
                logger.warning(f"Skipping {name}: no value in {source}")
                continue
            if self.set_encrypted(name, value, suite, key, nonce):
                written.append(name)
        logger.info(f"Imported {len(written)} variable(s) from {source}")
        return written
