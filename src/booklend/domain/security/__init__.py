from booklend.domain.security.crypto_service import CryptoService

__all__ = ["CryptoService"]
