"""
Protocols dos colaboradores do gate.

Usar Protocol permite duck typing com type checking estático:
qualquer classe que implemente os métodos é um colaborador válido,
não precisa herdar explicitamente.

Exemplo de uso:
    async def buscar(transport: Transport, url: str):
        return await transport.get_json(url)
"""
from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Busca o JSON da policy pela rede."""

    async def get_json(self, url: str) -> Any:
        """
        Faz GET e decodifica o corpo como JSON.

        Raises:
            TransportError: Erro de rede ou status não-2xx
            MalformedError: Corpo não é JSON válido
        """
        ...


@runtime_checkable
class CacheStore(Protocol):
    """Armazenamento persistente chave/valor (string)."""

    async def get(self, key: str) -> Optional[str]:
        """Retorna o valor ou None se a chave não existe."""
        ...

    async def set(self, key: str, value: str) -> None:
        """Grava (sobrescreve) o valor da chave."""
        ...


@runtime_checkable
class PlatformIdentity(Protocol):
    """Responde se o host é uma determinada plataforma."""

    def is_platform(self, identifier: str) -> bool:
        ...


@runtime_checkable
class VersionProvider(Protocol):
    """Versão do app em execução."""

    async def get_version_number(self) -> str:
        ...
