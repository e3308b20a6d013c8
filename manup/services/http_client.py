"""
HTTP Client Singleton com connection pooling.

Centraliza as chamadas HTTP do gate para:
- Reutilização de conexões
- Timeout padronizado
- Fechamento gracioso no shutdown
"""

import httpx
import logging
from typing import Any, Optional

from manup.core.config import settings
from manup.core.exceptions import MalformedError, TransportError

logger = logging.getLogger(__name__)

# Cliente HTTP global (singleton)
_client: Optional[httpx.AsyncClient] = None


async def get_http_client() -> httpx.AsyncClient:
    """
    Obtém o cliente HTTP singleton.

    Cria o cliente na primeira chamada com configurações otimizadas.

    Returns:
        httpx.AsyncClient configurado com pooling
    """
    global _client
    if _client is None:
        _client = httpx.AsyncClient(
            timeout=httpx.Timeout(
                connect=settings.HTTP_TIMEOUT_CONNECT,
                read=settings.HTTP_TIMEOUT_READ,
                write=settings.HTTP_TIMEOUT_READ,
                pool=5.0,
            ),
            limits=httpx.Limits(
                max_connections=10,
                max_keepalive_connections=5,
                keepalive_expiry=30.0,
            ),
            http2=True,
            headers={
                "User-Agent": settings.HTTP_USER_AGENT,
                "Accept": "application/json",
            },
            follow_redirects=True,
        )
        logger.info("HTTP client singleton criado com pooling configurado")

    return _client


async def close_http_client() -> None:
    """
    Fecha o cliente HTTP.

    Deve ser chamado no shutdown da aplicação para liberar recursos.
    """
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
        logger.info("HTTP client singleton fechado")


class HttpxTransport:
    """
    Transport de produção sobre httpx.

    Sem retry: uma falha já dispara o fallback para o cache.

    Args:
        client: Cliente próprio (testes). Default: singleton do módulo
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client
        return await get_http_client()

    async def get_json(self, url: str) -> Any:
        client = await self._get_client()

        try:
            response = await client.get(url)
        except httpx.HTTPError as e:
            raise TransportError(
                f"Erro de rede ao buscar policy: {type(e).__name__}",
                url=url,
                original_error=e,
            ) from e

        if not response.is_success:
            raise TransportError(
                "Resposta HTTP sem sucesso",
                url=url,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise MalformedError(
                "Resposta da policy não é JSON válido",
                {"url": url},
                original_error=e,
            ) from e
