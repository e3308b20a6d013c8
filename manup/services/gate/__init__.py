"""
Gate de atualização obrigatória (ManUp).

Separação de OBTENÇÃO da policy (rede + cache) da DECISÃO (determinística).

Componentes:
- MetadataSource: Busca a policy na rede, persiste e cai para o cache
- VersionGate: Seleciona o registro da plataforma e decide o Verdict
- compare_versions: Ordem semver MAJOR.MINOR.PATCH
- UpdateGate: Orquestra o pipeline completo

Uso básico:
    from manup.services.gate import create_update_gate, Verdict

    gate = create_update_gate()
    result = await gate.check()
    if result.verdict == Verdict.MANDATORY:
        ...
"""

from .protocol import CacheStore, PlatformIdentity, Transport, VersionProvider

from .types import (
    CACHE_KEY,
    KNOWN_PLATFORMS,
    GateConfig,
    GateResult,
    PolicyDocument,
    PolicyRecord,
    Verdict,
)

from .version import SemVer, compare_versions, parse_version
from .metadata import MetadataSource
from .decide import VersionGate
from .service import UpdateGate

from .platform import (
    DistributionVersionProvider,
    FixedPlatform,
    HostPlatform,
    StaticVersionProvider,
)
from .mocks import InMemoryCacheStore, MockTransport, create_transport_that_fails
from .factory import create_update_gate

__all__ = [
    # Protocols
    "CacheStore",
    "PlatformIdentity",
    "Transport",
    "VersionProvider",
    # Tipos
    "CACHE_KEY",
    "KNOWN_PLATFORMS",
    "GateConfig",
    "GateResult",
    "PolicyDocument",
    "PolicyRecord",
    "Verdict",
    # Versão
    "SemVer",
    "compare_versions",
    "parse_version",
    # Componentes
    "MetadataSource",
    "VersionGate",
    "UpdateGate",
    # Colaboradores
    "DistributionVersionProvider",
    "FixedPlatform",
    "HostPlatform",
    "StaticVersionProvider",
    "InMemoryCacheStore",
    "MockTransport",
    "create_transport_that_fails",
    # Factory
    "create_update_gate",
]
