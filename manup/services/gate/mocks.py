"""
Colaboradores mockados - Para testes sem rede nem Redis.

Permitem configurar respostas fixas ou falhas e registram as chamadas
para assertions.

Exemplo de uso:
    transport = MockTransport(payload={"ios": {...}})
    store = InMemoryCacheStore()
    source = MetadataSource(GateConfig(url="x", transport=transport, cache_store=store))
    document = await source.resolve()
    transport.assert_called_once()
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from manup.core.exceptions import CacheStoreError, TransportError


@dataclass
class MockTransport:
    """Transport mockado."""

    payload: Any = None
    error: Optional[Exception] = None

    calls: List[str] = field(default_factory=list)

    async def get_json(self, url: str) -> Any:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.payload

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def assert_called(self):
        assert self.call_count > 0, "MockTransport.get_json() não foi chamado"

    def assert_not_called(self):
        assert self.call_count == 0, f"MockTransport.get_json() foi chamado {self.call_count}x"

    def assert_called_once(self):
        assert self.call_count == 1, f"MockTransport.get_json() chamado {self.call_count}x, esperado 1x"


@dataclass
class InMemoryCacheStore:
    """CacheStore em memória."""

    data: Dict[str, str] = field(default_factory=dict)

    # Simular falhas do store
    fail_on_get: bool = False
    fail_on_set: bool = False

    get_calls: List[str] = field(default_factory=list)
    set_calls: List[tuple] = field(default_factory=list)

    async def get(self, key: str) -> Optional[str]:
        self.get_calls.append(key)
        if self.fail_on_get:
            raise CacheStoreError("Mock store falhou na leitura", {"key": key})
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.set_calls.append((key, value))
        if self.fail_on_set:
            raise CacheStoreError("Mock store falhou na escrita", {"key": key})
        self.data[key] = value


def create_transport_that_fails(message: str = "HTTP Failed") -> MockTransport:
    """Cria transport que sempre falha com TransportError."""
    return MockTransport(error=TransportError(message, url="mock://policy"))
