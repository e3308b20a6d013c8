"""
Configuração global de testes - Fixtures compartilhadas.

Este arquivo contém fixtures reutilizáveis em todos os testes do projeto.
Evita duplicação de código de mock em módulos individuais.
"""

import json

import pytest
from typing import Any
from unittest.mock import AsyncMock, MagicMock

from manup.services.gate import (
    CACHE_KEY,
    FixedPlatform,
    GateConfig,
    InMemoryCacheStore,
    MockTransport,
    StaticVersionProvider,
)


# =============================================================================
# MOCK FACTORIES - Funções para criar mocks configuráveis
# =============================================================================


def criar_mock_redis() -> MagicMock:
    """
    Cria mock do cliente Redis (redis.asyncio).

    Returns:
        MagicMock com métodos async mockados (get, set, ping, aclose)
    """
    mock = MagicMock()
    mock.get = AsyncMock(return_value=None)
    mock.set = AsyncMock(return_value=True)
    mock.ping = AsyncMock(return_value=True)
    mock.aclose = AsyncMock(return_value=None)
    return mock


def criar_policy(
    minimum: str = "1.0.0",
    latest: str = "2.4.5",
    enabled: bool = True,
    url: str = "http://example.com",
) -> dict[str, Any]:
    """Cria um registro cru de policy (formato do JSON)."""
    return {
        "minimum": minimum,
        "latest": latest,
        "url": url,
        "enabled": enabled,
    }


# =============================================================================
# FIXTURES DE DADOS
# =============================================================================


@pytest.fixture
def policy_document() -> dict[str, Any]:
    """Documento com as três plataformas conhecidas."""
    return {
        "ios": criar_policy("1.0.0", "2.4.5", True, "http://example.com"),
        "android": criar_policy("4.0.1", "6.2.1", True, "http://example.com"),
        "windows": criar_policy("1.0.0", "1.0.1", False, "http://example.com"),
    }


@pytest.fixture
def http_document() -> dict[str, Any]:
    """Documento como retornado pela rede."""
    return {"ios": criar_policy(url="http://http.example.com")}


@pytest.fixture
def storage_document() -> dict[str, Any]:
    """Documento como gravado no cache."""
    return {"ios": criar_policy(url="http://storage.example.com")}


# =============================================================================
# FIXTURES DE COLABORADORES
# =============================================================================


@pytest.fixture
def mock_redis():
    """Mock do cliente Redis."""
    return criar_mock_redis()


@pytest.fixture
def http_transport(http_document):
    """Transport que responde com http_document."""
    return MockTransport(payload=http_document)


@pytest.fixture
def empty_store():
    """Cache vazio."""
    return InMemoryCacheStore()


@pytest.fixture
def filled_store(storage_document):
    """Cache com storage_document gravado."""
    return InMemoryCacheStore(data={CACHE_KEY: json.dumps(storage_document)})


@pytest.fixture
def gate_config(http_transport, empty_store):
    """GateConfig completo para iOS 2.3.4."""
    return GateConfig(
        url="test.example.com",
        transport=http_transport,
        cache_store=empty_store,
        platform=FixedPlatform("ios"),
        version_provider=StaticVersionProvider("2.3.4"),
    )
