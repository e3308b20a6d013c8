"""
UpdateGate - Orquestra policy + decisão.

Fluxo do check():
1. MetadataSource.resolve() -> documento (rede ou cache)
2. VersionGate.select_platform_record() -> registro da plataforma
3. VersionProvider -> versão em execução (lida uma vez)
4. VersionGate.evaluate() -> Verdict

O que fazer com o Verdict (dialog, bloquear tela, abrir loja) é
responsabilidade de quem hospeda o gate.
"""
from typing import Awaitable, Sequence

from manup.core.logging import get_logger

from .decide import VersionGate
from .metadata import MetadataSource
from .protocol import PlatformIdentity, VersionProvider
from .types import KNOWN_PLATFORMS, GateConfig, GateResult, PolicyRecord, Verdict

class UpdateGate:
    """
    Gate de atualização.

    Args:
        config: Colaboradores (url, transport, cache_store, platform, version_provider)
        known_platforms: Identificadores em ordem de prioridade
    """

    def __init__(
        self,
        config: GateConfig,
        known_platforms: Sequence[str] = KNOWN_PLATFORMS,
    ):
        self.config = config
        self.metadata = MetadataSource(config)
        self.gate = VersionGate(config.platform, known_platforms)

    def check(self) -> Awaitable[GateResult]:
        """
        Executa o pipeline completo.

        Raises:
            ConfigurationError: (síncrono) colaborador obrigatório ausente
            ManUpException: Qualquer falha do pipeline, sem recuperação
        """
        platform_identity = self.config.require("platform")
        version_provider = self.config.require("version_provider")
        resolving = self.metadata.resolve()
        return self._check(resolving, platform_identity, version_provider)

    async def _check(
        self,
        resolving: Awaitable,
        platform_identity: PlatformIdentity,
        version_provider: VersionProvider,
    ) -> GateResult:
        document = await resolving
        # Sempre o platform do config, validado acima
        platform = self.gate.detect_platform(platform_identity)
        record = self.gate.record_for(document, platform)
        current_version = await version_provider.get_version_number()
        verdict = self.gate.evaluate(record, current_version)

        result = GateResult(
            verdict=verdict,
            record=record,
            platform=platform,
            current_version=current_version,
        )

        result_logger = get_logger(__name__, **result.to_dict())
        log = result_logger.warning if result.blocks_usage else result_logger.info
        log(f"[ManUp] Verdict {verdict.value} para {platform} {current_version}")
        return result

    def evaluate_current(self, record: PolicyRecord) -> Awaitable[Verdict]:
        """Avalia um registro contra a versão atual do app."""
        version_provider = self.config.require("version_provider")
        return self._evaluate_current(record, version_provider)

    async def _evaluate_current(self, record: PolicyRecord, version_provider: VersionProvider) -> Verdict:
        current_version = await version_provider.get_version_number()
        return self.gate.evaluate(record, current_version)

    async def close(self) -> None:
        """Libera recursos dos colaboradores que tiverem close()."""
        for collaborator in (self.config.transport, self.config.cache_store):
            close = getattr(collaborator, "close", None)
            if close is not None:
                await close()

