"""Cliente REST del backend de pozos, tipos MTC y equipos"""

import asyncio
import logging
from typing import Any, List, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from config import settings
from .exceptions import FetchFailure
from .models import Equipment, MTCRecord, Well

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class PozosApiClient:
    """
    Colaborador de acceso a datos.

    Las peticiones HTTP son bloqueantes (requests) y se ejecutan en el
    executor por defecto, de modo que varias llamadas pueden esperarse
    concurrentemente con asyncio.gather.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        self.base_url = (base_url or settings.api.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.api.timeout
        self.session = session or requests.Session()
        self.session.verify = settings.api.verify_ssl

    def close(self):
        """Cerrar la sesión HTTP"""
        self.session.close()

    def _request(self, method: str, path: str, operation: str, payload: Optional[dict] = None) -> Any:
        """Ejecutar una petición y devolver el JSON decodificado"""
        url = f"{self.base_url}/{path}"
        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"❌ Error de red en {operation}: {e}")
            raise FetchFailure(operation, detail=str(e)) from e

        if not response.ok:
            logger.error(f"❌ {operation}: HTTP {response.status_code} - {response.reason}")
            raise FetchFailure(operation, response.status_code, response.reason or "")

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"❌ Respuesta no JSON en {operation}: {e}")
            raise FetchFailure(operation, response.status_code, "respuesta no JSON") from e

    async def _call(self, method: str, path: str, operation: str, payload: Optional[dict] = None) -> Any:
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(
            None,
            lambda: self._request(method, path, operation, payload)
        )

    @staticmethod
    def _parse(model: Type[ModelT], data: Any, operation: str) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"❌ Payload inválido en {operation}: {e}")
            raise FetchFailure(operation, detail="payload inválido") from e

    def _parse_list(self, model: Type[ModelT], data: Any, operation: str) -> List[ModelT]:
        if not isinstance(data, list):
            logger.error(f"❌ Se esperaba una lista en {operation}")
            raise FetchFailure(operation, detail="se esperaba una lista")
        return [self._parse(model, item, operation) for item in data]

    async def fetch_wells(self) -> List[Well]:
        """GET /Pozos"""
        logger.info("📋 Cargando todos los pozos...")
        data = await self._call("GET", "Pozos", "cargar pozos")
        wells = self._parse_list(Well, data, "cargar pozos")
        logger.info(f"✅ {len(wells)} pozos cargados correctamente")
        return wells

    async def fetch_mtc_records(self) -> List[MTCRecord]:
        """GET /Tipos"""
        logger.info("🏷️ Cargando tipos de MTC...")
        data = await self._call("GET", "Tipos", "cargar tipos MTC")
        records = self._parse_list(MTCRecord, data, "cargar tipos MTC")
        logger.info(f"✅ {len(records)} tipos MTC cargados correctamente")
        return records

    async def fetch_well_by_id(self, well_id: int) -> Well:
        """GET /Pozos/{id}"""
        operation = f"cargar pozo {well_id}"
        data = await self._call("GET", f"Pozos/{well_id}", operation)
        return self._parse(Well, data, operation)

    async def fetch_equipment_by_well(self, well_id: int) -> List[Equipment]:
        """GET /Equipos/Pozo/{id}"""
        operation = f"cargar equipos del pozo {well_id}"
        data = await self._call("GET", f"Equipos/Pozo/{well_id}", operation)
        return self._parse_list(Equipment, data, operation)

    async def update_equipment_ip(self, equipment_id: int, new_ip: str) -> Optional[Equipment]:
        """
        PUT /Equipos/{id} con {"direccionIp": new_ip}

        Devuelve el equipo actualizado, o None si el backend responde sin cuerpo.
        """
        operation = f"actualizar IP del equipo {equipment_id}"
        logger.info(f"🔄 Actualizando IP del equipo {equipment_id} a {new_ip}...")
        data = await self._call("PUT", f"Equipos/{equipment_id}", operation, {"direccionIp": new_ip})
        logger.info("✅ IP actualizada correctamente")
        if data is None:
            return None
        return self._parse(Equipment, data, operation)


# Instancia global del cliente
api_client = PozosApiClient()
