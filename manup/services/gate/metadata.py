"""
MetadataSource - Obtém o documento de policy.

Ordem de resolução:
1. Rede (transport) -> persiste no cache e retorna
2. Falhou a rede -> cache last-known-good
3. Sem cache ou cache falhou -> erro propaga (nunca inventa documento)

Validação de configuração é síncrona: resolve(), read_cache() e persist()
levantam ConfigurationError na própria chamada, antes de qualquer I/O.
Por isso são funções normais que retornam a coroutine.
"""
import json
from typing import Any, Awaitable

from manup.core.exceptions import (
    CacheStoreError,
    MalformedError,
    ManUpException,
    NotFoundError,
    TransportError,
)
from manup.core.logging import get_logger

from .protocol import CacheStore, Transport
from .types import CACHE_KEY, GateConfig, PolicyDocument

logger = get_logger(__name__, key=CACHE_KEY)


def _as_document(payload: Any, origem: str) -> PolicyDocument:
    """Garante que o payload é um objeto JSON (dict)."""
    if not isinstance(payload, dict):
        raise MalformedError(
            "Policy deve ser um objeto JSON indexado por plataforma",
            {"origem": origem, "tipo": type(payload).__name__},
        )
    return payload


class MetadataSource:
    """
    Resolve o documento de policy com fallback para cache.

    Requisitos por operação:
    - resolve(): url + transport (cache_store opcional)
    - read_cache() / persist(): cache_store
    """

    def __init__(self, config: GateConfig):
        self.config = config

    def resolve(self) -> Awaitable[PolicyDocument]:
        """
        Busca a policy na rede, com fallback para o cache.

        Raises:
            ConfigurationError: (síncrono) url ou transport ausentes
            TransportError / MalformedError: rede falhou e não há cache
            NotFoundError / MalformedError / CacheStoreError: fallback falhou
        """
        url = self.config.require("url")
        transport = self.config.require("transport")
        return self._resolve(url, transport)

    async def _resolve(self, url: str, transport: Transport) -> PolicyDocument:
        try:
            payload = await transport.get_json(url)
            document = _as_document(payload, origem="rede")
        except (TransportError, MalformedError) as fetch_error:
            return await self._fallback(fetch_error)

        if self.config.cache_store is not None:
            await self._persist_quietly(document)

        logger.debug(
            "[ManUp] Policy obtida da rede",
            extra={"extra_fields": {"url": url, "platforms": sorted(document)}},
        )
        return document

    async def _fallback(self, fetch_error: ManUpException) -> PolicyDocument:
        store = self.config.cache_store
        if store is None:
            logger.warning(f"[ManUp] Falha ao buscar policy e sem cache: {fetch_error}")
            raise fetch_error

        logger.warning(f"[ManUp] Falha ao buscar policy, usando cache: {fetch_error}")
        try:
            return await self._read_cache(store)
        except ManUpException as cache_error:
            logger.error(f"[ManUp] Fallback para cache falhou: {cache_error}")
            raise cache_error from fetch_error

    async def _persist_quietly(self, document: PolicyDocument) -> None:
        # Falha ao gravar não derruba o resolve
        try:
            await self._persist(self.config.cache_store, document)
        except ManUpException as e:
            logger.warning(f"[ManUp] Erro ao salvar policy no cache: {e}")

    def read_cache(self) -> Awaitable[PolicyDocument]:
        """
        Lê a policy persistida.

        Raises:
            ConfigurationError: (síncrono) cache_store ausente
            NotFoundError: Nada gravado na chave
            MalformedError: Valor gravado não é JSON de objeto
            CacheStoreError: Store falhou na leitura
        """
        store = self.config.require("cache_store")
        return self._read_cache(store)

    async def _read_cache(self, store: CacheStore) -> PolicyDocument:
        try:
            raw = await store.get(CACHE_KEY)
        except ManUpException:
            raise
        except Exception as e:
            raise CacheStoreError(
                "Erro ao ler policy do cache",
                {"key": CACHE_KEY},
                original_error=e,
            ) from e

        if raw is None:
            raise NotFoundError(CACHE_KEY)

        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise MalformedError(
                "Policy no cache não é JSON válido",
                {"key": CACHE_KEY},
                original_error=e,
            ) from e

        return _as_document(payload, origem="cache")

    def persist(self, document: PolicyDocument) -> Awaitable[None]:
        """
        Grava a policy no cache (sobrescreve a chave fixa).

        Raises:
            ConfigurationError: (síncrono) cache_store ausente
            CacheStoreError: Store falhou na escrita
        """
        store = self.config.require("cache_store")
        return self._persist(store, document)

    async def _persist(self, store: CacheStore, document: PolicyDocument) -> None:
        value = json.dumps(document)
        try:
            await store.set(CACHE_KEY, value)
        except ManUpException:
            raise
        except Exception as e:
            raise CacheStoreError(
                "Erro ao salvar policy no cache",
                {"key": CACHE_KEY},
                original_error=e,
            ) from e
        logger.debug("[ManUp] Policy salva no cache")
