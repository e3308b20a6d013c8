"""
Exceptions customizadas do ManUp.

Cada tipo corresponde a uma classe de falha do gate de atualizacao:
rede, cache, payload malformado, configuracao e plataforma.
"""
from typing import Optional


class ManUpException(Exception):
    """Base exception para todos os erros do gate."""

    def __init__(
        self,
        message: str,
        details: Optional[dict] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.details = details or {}
        self.original_error = original_error
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class TransportError(ManUpException):
    """Falha ao buscar a policy pela rede (erro de conexao ou status nao-2xx)."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        original_error: Optional[Exception] = None
    ):
        self.url = url
        self.status_code = status_code
        details = {}
        if url:
            details["url"] = url
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details, original_error)


class NotFoundError(ManUpException):
    """Nenhuma entrada no cache para a chave."""

    def __init__(self, key: str):
        self.key = key
        super().__init__("Policy nao encontrada no cache", {"key": key})


class MalformedError(ManUpException):
    """Payload, valor armazenado ou versao que nao pode ser interpretado."""
    pass


class CacheStoreError(ManUpException):
    """O proprio cache store falhou (leitura ou escrita)."""
    pass


class ConfigurationError(ManUpException):
    """Colaborador ou configuracao obrigatoria ausente."""
    pass


class UnsupportedPlatformError(ManUpException):
    """Nenhuma plataforma conhecida corresponde ao host (ou sem registro na policy)."""

    def __init__(self, message: str, platform: Optional[str] = None):
        self.platform = platform
        details = {"platform": platform} if platform else None
        super().__init__(message, details)
