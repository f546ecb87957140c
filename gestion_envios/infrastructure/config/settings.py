"""
Configuración de la aplicación.

Los valores se leen de variables de entorno con el prefijo GESTION_ENVIOS_
(por ejemplo GESTION_ENVIOS_PORT=8080) o de un archivo .env.
"""
import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GESTION_ENVIOS_",
        env_file=".env",
        extra="ignore",
    )

    APP_NAME: str = "Gestión de Envíos"
    DEBUG: bool = False

    # Servidor HTTP
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "./assets/logs/gestion-envios.log"

    # Salidas de la tabla de tarifas
    PLOTS_DIR: str = "./assets/plots"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"Nivel de log desconocido: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración, leída una sola vez por proceso."""
    return Settings()
