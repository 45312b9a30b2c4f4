"""Configuración centralizada del sistema de motocompresores"""

import logging
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from dotenv import load_dotenv

# Cargar variables de entorno
load_dotenv()

class APISettings(BaseSettings):
    """Configuración del backend REST de pozos y equipos"""

    model_config = SettingsConfigDict(
        env_prefix="API_",
        case_sensitive=False,
        extra="ignore"
    )

    base_url: str = Field(default="http://localhost:5096/api", description="URL base del backend")
    timeout: float = Field(default=15.0, description="Timeout de peticiones HTTP en segundos")
    verify_ssl: bool = Field(default=True, description="Verificar certificados TLS")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def endpoint(self, path: str) -> str:
        """URL completa de un recurso del backend"""
        return f"{self.base_url}/{path.lstrip('/')}"

class DashboardSettings(BaseSettings):
    """Configuración del dashboard Dash"""

    model_config = SettingsConfigDict(
        env_prefix="DASH_",
        case_sensitive=False,
        extra="ignore"
    )

    host: str = Field(default="localhost", description="Host del dashboard")
    port: int = Field(default=8050, description="Puerto del dashboard")
    debug: bool = Field(default=False, description="Modo debug de Dash")
    title: str = Field(default="Sistema de Motocompresores")
    default_site: str = Field(default="Samaria", description="Activo mostrado al iniciar gestión")

class LoggingSettings(BaseSettings):
    """Configuración de logging"""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
        extra="ignore"
    )

    level: str = Field(default="INFO")
    format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    file: Optional[str] = Field(default=None, description="Archivo de log opcional")

    def handlers(self) -> List[logging.Handler]:
        """Consola siempre; archivo solo si LOG_FILE está definido"""
        handlers: List[logging.Handler] = [logging.StreamHandler()]
        if self.file:
            handlers.append(logging.FileHandler(self.file, encoding="utf-8"))
        return handlers

class Settings(BaseSettings):
    """Configuración principal del sistema"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    api: APISettings = Field(default_factory=APISettings)
    dashboard: DashboardSettings = Field(default_factory=DashboardSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

# Instancia global de configuración
settings = Settings()
