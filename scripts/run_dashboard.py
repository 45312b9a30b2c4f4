#!/usr/bin/env python3
"""
Script para ejecutar el dashboard del sistema de motocompresores

Verifica que el backend REST responda antes de levantar Dash, para que un
backend caído se reporte al inicio y no en el primer callback.
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))
sys.path.insert(0, str(PROJECT_ROOT / "frontend"))

import requests

from config import settings

# Configuración de logging con formato estructurado
logging.basicConfig(
    level=getattr(logging, settings.logging.level.upper(), logging.INFO),
    format=settings.logging.format,
    datefmt='%Y-%m-%d %H:%M:%S',
    handlers=settings.logging.handlers()
)
logger = logging.getLogger(__name__)


def check_backend(timeout: float) -> bool:
    """Comprobar que el endpoint de pozos del backend responde"""
    url = settings.api.endpoint("Pozos")
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        logger.error(f"❌ Backend no disponible en {url}: {e}")
        return False

    if not response.ok:
        logger.error(f"❌ Backend respondió HTTP {response.status_code} en {url}")
        return False

    logger.info(f"✅ Backend disponible en {settings.api.base_url}")
    return True


def main() -> int:
    parser = argparse.ArgumentParser(description="Dashboard de pozos y motocompresores")
    parser.add_argument("--skip-check", action="store_true", help="No verificar el backend antes de iniciar")
    args = parser.parse_args()

    if not args.skip_check and not check_backend(settings.api.timeout):
        logger.warning("⚠️ El dashboard se iniciará, pero los datos no podrán cargarse")

    from dashboard import run_dashboard

    logger.info(f"🌐 Dashboard en http://{settings.dashboard.host}:{settings.dashboard.port}")
    run_dashboard()
    return 0


if __name__ == "__main__":
    sys.exit(main())
