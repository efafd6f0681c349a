import os
import json
from typing import Any, List, Optional, Union
from functools import lru_cache
import logging

from pydantic import AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Configurar el logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"  # Permitir campos extra en .env
    )

    # Configuración básica
    API_V1_STR: str = "/api/v1"

    # Información del proyecto
    PROJECT_NAME: str = "GymDesk"
    PROJECT_DESCRIPTION: str = "API con FastAPI para la administración de un gimnasio"
    VERSION: str = "0.1.0"

    # Debug mode
    DEBUG_MODE: bool = os.getenv("DEBUG_MODE", "False").lower() in ("true", "1", "t")

    # Directorio de logs
    LOG_DIR: str = "logs"

    # CORS
    BACKEND_CORS_ORIGINS: List[AnyHttpUrl] = []

    @field_validator("BACKEND_CORS_ORIGINS", mode='before')
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, str):
            return json.loads(v)
        elif isinstance(v, list):
            return v
        raise ValueError(v)

    # Base de datos
    DATABASE_URL: str = "sqlite+aiosqlite:///./gymdesk.db"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_TIMEOUT: int = 30
    DB_ECHO: bool = False
    CREATE_TABLES_ON_STARTUP: bool = False

    @field_validator("DATABASE_URL", mode="before")
    def ensure_proper_url_format(cls, v: Optional[str]) -> str:
        """Asegura que DATABASE_URL use un driver async."""
        # No loguear el valor completo por seguridad
        logger.info("DATABASE_URL detectado en configuración")
        if not v:
            raise ValueError("DATABASE_URL no puede estar vacío")

        if v.startswith("postgres://"):
            v = "postgresql://" + v[len("postgres://"):]
            logger.info("Corrigiendo formato de postgres:// a postgresql://")
        if v.startswith("postgresql://"):
            v = v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    # Calendario del gimnasio
    GYM_TIMEZONE: str = "America/Sao_Paulo"
    UPCOMING_PAYMENTS_WINDOW_DAYS: int = 7
    DASHBOARD_TIMEOUT_SECONDS: float = 15.0

    # Auth0 Configuration
    AUTH0_DOMAIN: str = "gymdesk.us.auth0.com"
    AUTH0_API_AUDIENCE: str = "https://gymdesk"
    AUTH0_ALGORITHMS: List[str] = ["RS256"]
    AUTH0_ISSUER: str = ""

    @field_validator("AUTH0_ISSUER", mode="before")
    def assemble_auth0_issuer(cls, v: Optional[str], info) -> str:
        if v:
            return v
        domain = info.data.get("AUTH0_DOMAIN")
        if domain:
            return f"https://{domain}/"
        return ""


# Usar una función con caché para obtener la configuración
@lru_cache()
def get_settings() -> Settings:
    settings = Settings()
    logger.info("Configuración cargada correctamente")
    return settings
