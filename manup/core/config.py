"""
Configurações do gate de atualização.
Carrega variáveis de ambiente.
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Configurações carregadas do .env"""

    # App
    APP_NAME: str = "ManUp"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Policy remota (JSON indexado por plataforma)
    MANUP_URL: str = ""

    # Plataforma ativa: "ios" | "android" | "windows"
    # Vazio = detectar pelo runtime do Python
    MANUP_PLATFORM: str = ""

    # Versão do app em execução
    # MANUP_APP_VERSION tem prioridade; senão lê do pacote instalado
    MANUP_APP_VERSION: str = ""
    MANUP_APP_DISTRIBUTION: str = ""

    # Redis (cache last-known-good). Vazio = sem cache
    REDIS_URL: str = ""

    # HTTP
    HTTP_TIMEOUT_CONNECT: float = 10.0
    HTTP_TIMEOUT_READ: float = 30.0
    HTTP_USER_AGENT: str = "ManUp/1.0"

    @property
    def is_production(self) -> bool:
        """Retorna True se está em produção."""
        return self.ENVIRONMENT.lower() == "production"

    @property
    def cache_enabled(self) -> bool:
        """Cache só existe quando há REDIS_URL configurada."""
        return bool(self.REDIS_URL)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignora variáveis extras do .env


@lru_cache()
def get_settings() -> Settings:
    """Retorna instância cacheada das configurações."""
    return Settings()


settings = get_settings()
