"""Módulo de configuración del sistema"""

from .settings import (
    settings,
    APISettings,
    DashboardSettings,
    LoggingSettings,
    Settings
)

__all__ = [
    "settings",
    "APISettings",
    "DashboardSettings",
    "LoggingSettings",
    "Settings"
]
