"""
Environment context
===================
The process environment is used twice: as a cache for generated key
material ({LABEL}_KEY / {LABEL}_NONCE) and as the output channel for
decrypted values. EnvContext wraps any string mapping so both uses can
run against a plain dict in tests instead of os.environ.
"""

import os
from typing import MutableMapping, Optional


class EnvContext:
    """Get/set access to a name -> value mapping (os.environ by default)."""

    def __init__(self, mapping: Optional[MutableMapping[str, str]] = None):
        self._mapping = os.environ if mapping is None else mapping

    @property
    def mapping(self) -> MutableMapping[str, str]:
        return self._mapping

    def get(self, name: str) -> Optional[str]:
        return self._mapping.get(name)

    def set(self, name: str, value: str):
        self._mapping[name] = value

    def unset(self, name: str):
        self._mapping.pop(name, None)

    def __contains__(self, name: str) -> bool:
        return name in self._mapping

    def __repr__(self):
        kind = "os.environ" if self._mapping is os.environ else type(self._mapping).__name__
        return f"EnvContext({kind})"


def default_context(context: Optional[EnvContext] = None) -> EnvContext:
    return context if context is not None else EnvContext()
