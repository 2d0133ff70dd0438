"""
Cipher suites
=============
The closed set of AEAD algorithms envenc can use.

    Suite               Key      Nonce    Label
    ChaCha20-Poly1305   256-bit  96-bit   CHACHA20POLY1305
    AES-256-GCM         256-bit  96-bit   AES256GCM

The label is stable: it names the cached key variables
({LABEL}_KEY / {LABEL}_NONCE) and must never change for a member.
"""

from enum import Enum


class CipherSuite(Enum):
    """Supported AEAD algorithms: value is (label, key_size, nonce_size)."""

    CHACHA20_POLY1305 = ("CHACHA20POLY1305", 32, 12)
    AES_256_GCM       = ("AES256GCM",        32, 12)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def key_size(self) -> int:
        return self.value[1]

    @property
    def nonce_size(self) -> int:
        return self.value[2]

    @property
    def key_var(self) -> str:
        return f"{self.label}_KEY"

    @property
    def nonce_var(self) -> str:
        return f"{self.label}_NONCE"

    @classmethod
    def from_name(cls, name: str) -> "CipherSuite":
        """
        Resolve a label or member name, ignoring case, '-' and '_'.
        "chacha20-poly1305", "AES256GCM" and "aes_256_gcm" all work.
        """
        wanted = name.replace("-", "").replace("_", "").upper()
        for suite in cls:
            if wanted in (suite.label, suite.name.replace("_", "")):
                return suite
        known = ", ".join(s.label for s in cls)
        raise ValueError(f"Unknown cipher suite {name!r} (expected one of: {known}).")

    def __str__(self) -> str:
        return self.label
