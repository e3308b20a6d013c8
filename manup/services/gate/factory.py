"""
Factory para o UpdateGate.

Centraliza a montagem dos colaboradores a partir das settings
para facilitar DI e configuração.
"""

from typing import Optional

from manup.core.config import Settings, settings as default_settings
from manup.services.http_client import HttpxTransport
from manup.services.redis import RedisCacheStore

from .platform import (
    DistributionVersionProvider,
    FixedPlatform,
    HostPlatform,
    StaticVersionProvider,
)
from .service import UpdateGate
from .types import GateConfig


def create_update_gate(
    settings: Optional[Settings] = None,
    **overrides,
) -> UpdateGate:
    """
    Cria UpdateGate configurado.

    - transport: sempre httpx
    - cache_store: Redis só se REDIS_URL estiver configurada
    - platform: MANUP_PLATFORM ou detecção pelo runtime
    - version_provider: MANUP_APP_VERSION ou MANUP_APP_DISTRIBUTION

    Args:
        settings: Settings (default: do ambiente)
        **overrides: Campos de GateConfig que substituem os derivados

    Exemplo:
        gate = create_update_gate()
        result = await gate.check()
    """
    settings = settings or default_settings

    version_provider = None
    if settings.MANUP_APP_VERSION:
        version_provider = StaticVersionProvider(settings.MANUP_APP_VERSION)
    elif settings.MANUP_APP_DISTRIBUTION:
        version_provider = DistributionVersionProvider(settings.MANUP_APP_DISTRIBUTION)

    config = GateConfig(
        url=settings.MANUP_URL or None,
        transport=HttpxTransport(),
        cache_store=RedisCacheStore(url=settings.REDIS_URL) if settings.cache_enabled else None,
        platform=FixedPlatform(settings.MANUP_PLATFORM) if settings.MANUP_PLATFORM else HostPlatform(),
        version_provider=version_provider,
    )

    for name, value in overrides.items():
        if not hasattr(config, name):
            raise TypeError(f"Campo desconhecido em GateConfig: {name}")
        setattr(config, name, value)

    return UpdateGate(config)
