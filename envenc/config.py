"""
Settings
========
Defaults for the command line, read from the environment:

    ENVENC_STORE      store file             (default: .env)
    ENVENC_CIPHER     cipher suite name      (default: CHACHA20POLY1305)
    ENVENC_KEY_FILE   plaintext key file     (default: unset)
    ENVENC_LOG_LEVEL  logging level name     (default: INFO)

load_settings_file() pulls these from a plain dotenv file first,
without overriding variables that are already set.
"""

import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv

from .suites import CipherSuite

DEFAULT_STORE  = ".env"
DEFAULT_CIPHER = CipherSuite.CHACHA20_POLY1305.label


class Settings:

    def __init__(self, store: str = DEFAULT_STORE,
                 cipher: CipherSuite = CipherSuite.CHACHA20_POLY1305,
                 key_file: Optional[str] = None,
                 log_level: str = "INFO"):
        self.store     = store
        self.cipher    = cipher
        self.key_file  = key_file
        self.log_level = log_level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Raises ValueError for an unknown cipher or log level."""
        env = os.environ if environ is None else environ
        level = env.get("ENVENC_LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {level!r}.")
        return cls(
            store     = env.get("ENVENC_STORE", DEFAULT_STORE),
            cipher    = CipherSuite.from_name(env.get("ENVENC_CIPHER", DEFAULT_CIPHER)),
            key_file  = env.get("ENVENC_KEY_FILE") or None,
            log_level = level,
        )

    def __repr__(self):
        return (f"Settings(store={self.store!r}, cipher={self.cipher}, "
                f"key_file={self.key_file!r}, log_level={self.log_level})")


def load_settings_file(path: str) -> bool:
    """Load ENVENC_* variables from a dotenv file. False if nothing was loaded."""
    return load_dotenv(path, override=False)
