"""
VersionGate - Motor de decisão determinística.

Projeta o documento de policy para a plataforma ativa e classifica
a versão em execução. Síncrono, sem I/O; erros sempre propagam.
"""
import logging
from typing import Optional, Sequence

from manup.core.exceptions import ConfigurationError, UnsupportedPlatformError

from .protocol import PlatformIdentity
from .types import KNOWN_PLATFORMS, PolicyDocument, PolicyRecord, Verdict
from .version import compare_versions

logger = logging.getLogger(__name__)


class VersionGate:
    """
    Avalia regras em ordem de prioridade e retorna a primeira
    que corresponde:

    1. enabled=False          -> MAINTENANCE
    2. current < minimum      -> MANDATORY
    3. current < latest       -> OPTIONAL
    4. caso contrário         -> NOP

    A ordem importa: policy desabilitada vence qualquer versão.
    """

    def __init__(
        self,
        platform: Optional[PlatformIdentity] = None,
        known_platforms: Sequence[str] = KNOWN_PLATFORMS,
    ):
        self.platform = platform
        self.known_platforms = tuple(known_platforms)

    def detect_platform(self, platform: Optional[PlatformIdentity] = None) -> str:
        """
        Retorna o primeiro identificador conhecido que o host confirma.

        Args:
            platform: Sobrescreve o PlatformIdentity do construtor

        Raises:
            ConfigurationError: Sem PlatformIdentity
            UnsupportedPlatformError: Nenhum identificador confirmado
        """
        if platform is None:
            platform = self.platform
        if platform is None:
            raise ConfigurationError("platform não configurado", {"field": "platform"})

        for identifier in self.known_platforms:
            if platform.is_platform(identifier):
                return identifier

        raise UnsupportedPlatformError(
            f"Plataforma não suportada (conhecidas: {', '.join(self.known_platforms)})"
        )

    def select_platform_record(
        self,
        document: PolicyDocument,
        platform: Optional[PlatformIdentity] = None,
    ) -> PolicyRecord:
        """
        Extrai o registro da plataforma ativa.

        Raises:
            UnsupportedPlatformError: Plataforma não detectada ou sem registro
            MalformedError: Registro inválido
        """
        identifier = self.detect_platform(platform)
        return self.record_for(document, identifier)

    def record_for(self, document: PolicyDocument, identifier: str) -> PolicyRecord:
        """Registro validado de um identificador específico."""
        data = document.get(identifier)
        if data is None:
            raise UnsupportedPlatformError(
                "Policy não tem registro para a plataforma",
                platform=identifier,
            )

        return PolicyRecord.from_dict(data, platform=identifier)

    def evaluate(self, record: PolicyRecord, current_version: str) -> Verdict:
        """
        Classifica a versão em execução.

        Raises:
            MalformedError: current_version inválida
        """
        if not record.enabled:
            verdict = Verdict.MAINTENANCE
        elif compare_versions(current_version, record.minimum) < 0:
            verdict = Verdict.MANDATORY
        elif compare_versions(current_version, record.latest) < 0:
            verdict = Verdict.OPTIONAL
        else:
            verdict = Verdict.NOP

        logger.debug(
            f"[ManUp] {current_version} vs min={record.minimum} "
            f"latest={record.latest} enabled={record.enabled} -> {verdict.value}"
        )
        return verdict
