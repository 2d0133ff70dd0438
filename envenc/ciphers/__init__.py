from .chacha import ChaChaCipher
from .aes    import AESCipher

__all__ = ["ChaChaCipher", "AESCipher"]
