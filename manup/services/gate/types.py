"""
Tipos e estruturas do gate de atualização.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, StrictBool, ValidationError, field_validator

from manup.core.exceptions import ConfigurationError, MalformedError

from .protocol import CacheStore, PlatformIdentity, Transport, VersionProvider
from .version import parse_version

logger = logging.getLogger(__name__)

# Chave única do documento inteiro no cache (não é por plataforma)
CACHE_KEY = "com.nextfaze.ionic-manup.manup"

# Ordem de prioridade quando o host responde "sim" para mais de uma
KNOWN_PLATFORMS = ("ios", "android", "windows")

# Documento cru: {"ios": {"minimum": ..., "latest": ..., "url": ..., "enabled": ...}, ...}
PolicyDocument = Dict[str, Any]


class Verdict(str, Enum):
    """Resultado da avaliação da policy contra a versão em execução."""
    MAINTENANCE = "maintenance"  # Policy desabilitada, bloqueia tudo
    MANDATORY = "mandatory"      # current < minimum
    OPTIONAL = "optional"        # minimum <= current < latest
    NOP = "nop"                  # current >= latest


class PolicyRecord(BaseModel):
    """Policy de uma plataforma (ios, android, windows...)."""

    model_config = {"frozen": True, "extra": "ignore"}

    minimum: str  # Abaixo disso o app é bloqueado
    latest: str  # Versão mais nova publicada
    url: str  # Onde o usuário baixa a atualização
    enabled: StrictBool  # False = manutenção, ignora versões

    @field_validator("minimum", "latest")
    @classmethod
    def _validar_versao(cls, value: str) -> str:
        try:
            parse_version(value)
        except MalformedError as e:
            raise ValueError(str(e)) from e
        return value.strip()

    @classmethod
    def from_dict(cls, data: Any, platform: str = "") -> "PolicyRecord":
        """
        Valida um registro cru vindo do JSON da policy.

        Raises:
            MalformedError: Campos ausentes, tipos errados ou versão inválida
        """
        try:
            record = cls.model_validate(data)
        except ValidationError as e:
            raise MalformedError(
                "Registro de policy inválido",
                {"platform": platform, "errors": e.error_count()},
                original_error=e,
            ) from e

        # minimum <= latest não é garantido pelo autor da policy
        if parse_version(record.minimum) > parse_version(record.latest):
            logger.warning(
                f"[ManUp] Policy de {platform or '?'} com minimum > latest "
                f"({record.minimum} > {record.latest})"
            )

        return record

    def to_dict(self) -> dict:
        """Serializa no formato do JSON da policy."""
        return self.model_dump()


@dataclass
class GateConfig:
    """
    Colaboradores do gate. Todos opcionais.

    Cada operação declara o que precisa via require(); o que faltar
    vira ConfigurationError na hora da chamada.
    """
    url: Optional[str] = None
    transport: Optional[Transport] = None
    cache_store: Optional[CacheStore] = None
    platform: Optional[PlatformIdentity] = None
    version_provider: Optional[VersionProvider] = None

    def require(self, name: str) -> Any:
        """Retorna o campo ou levanta ConfigurationError se ausente."""
        value = getattr(self, name)
        if value is None or value == "":
            raise ConfigurationError(
                f"{name} não configurado",
                {"field": name},
            )
        return value


@dataclass
class GateResult:
    """Resultado completo do check, para a camada de apresentação."""
    verdict: Verdict
    record: PolicyRecord
    platform: str
    current_version: str

    @property
    def blocks_usage(self) -> bool:
        """App não pode continuar (atualização obrigatória ou manutenção)."""
        return self.verdict in (Verdict.MANDATORY, Verdict.MAINTENANCE)

    @property
    def update_available(self) -> bool:
        """Existe versão mais nova para oferecer ao usuário."""
        return self.verdict in (Verdict.MANDATORY, Verdict.OPTIONAL)

    def to_dict(self) -> dict:
        """Serializa para logging/CLI."""
        return {
            "verdict": self.verdict.value,
            "platform": self.platform,
            "current_version": self.current_version,
            "minimum": self.record.minimum,
            "latest": self.record.latest,
            "url": self.record.url,
            "enabled": self.record.enabled,
        }
