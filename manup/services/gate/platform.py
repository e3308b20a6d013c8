"""
Identidade da plataforma e versão do app em execução.

Implementações de PlatformIdentity e VersionProvider para uso em produção.
"""
import logging
import os
import sys
from importlib import metadata
from typing import Optional

from manup.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class FixedPlatform:
    """Host que já sabe a própria plataforma (configurada)."""

    def __init__(self, identifier: str):
        self.identifier = identifier.strip().lower()

    def is_platform(self, identifier: str) -> bool:
        return identifier == self.identifier


class HostPlatform:
    """
    Detecta a plataforma pelo runtime do Python.

    - iOS: sys.platform == "ios" (CPython 3.13+)
    - Android: sys.platform == "android" ou marcas do runtime Android
    - Windows: sys.platform == "win32"
    """

    def __init__(self, sys_platform: Optional[str] = None, environ: Optional[dict] = None):
        self.sys_platform = sys_platform or sys.platform
        self.environ = os.environ if environ is None else environ

    def _is_android(self) -> bool:
        if self.sys_platform == "android":
            return True
        # Python embarcado (Chaquopy, Kivy) roda como "linux"
        return self.sys_platform == "linux" and "ANDROID_ROOT" in self.environ

    def is_platform(self, identifier: str) -> bool:
        if identifier == "ios":
            return self.sys_platform == "ios"
        if identifier == "android":
            return self._is_android()
        if identifier == "windows":
            return self.sys_platform.startswith("win")
        return False


class StaticVersionProvider:
    """Versão fixa (configuração ou testes)."""

    def __init__(self, version: str):
        self.version = version

    async def get_version_number(self) -> str:
        return self.version


class DistributionVersionProvider:
    """
    Versão do pacote instalado (importlib.metadata).

    Args:
        distribution: Nome da distribuição no índice (ex: "meu-app")
    """

    def __init__(self, distribution: str):
        self.distribution = distribution

    async def get_version_number(self) -> str:
        try:
            return metadata.version(self.distribution)
        except metadata.PackageNotFoundError as e:
            raise ConfigurationError(
                "Distribuição não instalada, não há como ler a versão do app",
                {"distribution": self.distribution},
                original_error=e,
            ) from e
