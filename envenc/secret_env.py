"""
SecretEnv
=========
One object for the usual flow: pick a suite and key material, set a few
encrypted values, then load the whole store back into the environment.

    material = keys.generate(CipherSuite.AES_256_GCM)
    env = SecretEnv(CipherSuite.AES_256_GCM, material)
    env.set("API_KEY", "super_secret_api_key")
    env.load()
    env.get("API_KEY")
"""

import logging
from typing import Dict, Optional

from . import bridge
from .context import EnvContext, default_context
from .keys import KeyMaterial
from .store import EncryptedStore
from .suites import CipherSuite

logger = logging.getLogger(__name__)


class SecretEnv:
    """Suite + key material + store + environment, bound together."""

    def __init__(self, suite: CipherSuite, material: KeyMaterial,
                 store: Optional[EncryptedStore] = None,
                 context: Optional[EnvContext] = None):
        self.suite    = suite
        self.material = material
        self.store    = store if store is not None else EncryptedStore()
        self.context  = default_context(context)

    def set(self, name: str, value: str) -> bool:
        key, nonce = self.material
        return self.store.set_encrypted(name, value, self.suite, key, nonce)

    def import_dotenv(self, source: str):
        key, nonce = self.material
        return self.store.import_dotenv(source, self.suite, key, nonce)

    def load(self) -> Dict[str, str]:
        """Decrypt the whole store into the environment."""
        key, nonce = self.material
        return bridge.decrypt_all(self.store.load_encrypted(), self.suite,
                                  key, nonce, self.context)

    def get(self, name: str) -> Optional[str]:
        return bridge.read_one(name, self.context)

    def __repr__(self):
        return f"SecretEnv({self.suite}, {self.store!r}, {self.context!r})"
