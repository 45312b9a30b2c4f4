"""Selección de pozo y composición de su detalle"""

import asyncio
import ipaddress
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from backend.exceptions import CatalogError, FetchFailure, InvalidIpAddress, SelectionRequired
from backend.models import Equipment, MTCRecord, Well
from .catalog_store import CatalogStore

logger = logging.getLogger(__name__)


class SelectionState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SELECTED = "selected"
    FAILED = "failed"


@dataclass(frozen=True)
class DetailSummary:
    """Resumen del pozo seleccionado"""
    well_name: str
    site_name: str
    equipment_count: int
    has_ip_address: bool
    has_mtc_record: bool


@dataclass(frozen=True)
class WellDetail:
    """Modelo de vista: pozo + equipos + MTC asociado"""
    well: Well
    equipment: List[Equipment]
    mtc_record: Optional[MTCRecord]
    summary: DetailSummary

    @property
    def primary_equipment(self) -> Optional[Equipment]:
        """Equipo 'POZO' (punto de red principal del pozo)"""
        return next((item for item in self.equipment if item.is_primary), None)

    @property
    def auxiliary_equipment(self) -> List[Equipment]:
        return [item for item in self.equipment if not item.is_primary]

    def with_equipment(self, updated: Equipment) -> "WellDetail":
        equipment = [updated if item.id == updated.id else item for item in self.equipment]
        return compose_detail(self.well, equipment, self.mtc_record)


def compose_detail(well: Well, equipment: List[Equipment], mtc_record: Optional[MTCRecord]) -> WellDetail:
    equipment = list(equipment)
    return WellDetail(
        well=well,
        equipment=equipment,
        mtc_record=mtc_record,
        summary=DetailSummary(
            well_name=well.name,
            site_name=well.site_name,
            equipment_count=len(equipment),
            has_ip_address=any(item.ip_address for item in equipment),
            has_mtc_record=mtc_record is not None
        )
    )


class SelectionController:
    """
    Controla qué pozo está seleccionado y publica su detalle.

    Estados: idle -> loading -> selected | failed. Cada llamada a select()
    recibe un token creciente; cuando termina, su resultado solo se aplica
    si el token sigue siendo el último emitido. Así una respuesta lenta de
    una selección anterior nunca sobrescribe la actual.
    """

    def __init__(self, client, store: CatalogStore):
        self.client = client
        self.store = store
        self.state = SelectionState.IDLE
        self.selected_id: Optional[int] = None
        self.detail: Optional[WellDetail] = None
        self.error: Optional[FetchFailure] = None
        self._token = 0

    @property
    def token(self) -> int:
        return self._token

    def _issue_token(self) -> int:
        self._token += 1
        return self._token

    def _is_current(self, token: int) -> bool:
        return token == self._token

    async def select(self, well_id: int) -> Optional[WellDetail]:
        """
        Seleccionar un pozo y cargar su detalle completo.

        El pozo, sus equipos y (si faltan) los tipos MTC se piden en paralelo;
        el detalle solo se publica cuando las tres peticiones terminan bien.

        Returns:
            El detalle publicado, o None si una selección posterior lo dejó obsoleto.

        Raises:
            FetchFailure: si alguna petición falla (el estado pasa a failed). Los
                errores que no son FetchFailure se envuelven en una.
        """
        well_id = int(well_id)
        token = self._issue_token()
        self.state = SelectionState.LOADING
        self.selected_id = well_id
        self.detail = None
        self.error = None
        logger.info(f"👆 Pozo seleccionado: {well_id}")

        try:
            well, equipment, fetched_records = await asyncio.gather(
                self.client.fetch_well_by_id(well_id),
                self.client.fetch_equipment_by_well(well_id),
                self.store.fetch_missing_mtc_records()
            )
        except Exception as e:
            if not self._is_current(token):
                logger.debug(f"Error de selección obsoleta del pozo {well_id} descartado: {e}")
                return None
            failure = e if isinstance(e, FetchFailure) else FetchFailure(f"cargar pozo {well_id}", detail=str(e))
            self.state = SelectionState.FAILED
            self.error = failure
            logger.error(f"❌ Error al cargar información completa del pozo {well_id}: {failure}")
            if failure is e:
                raise
            raise failure from e

        if not self._is_current(token):
            logger.debug(f"Respuesta obsoleta del pozo {well_id} descartada")
            return None

        self.store.adopt_mtc_records(fetched_records)
        detail = compose_detail(well, equipment, self.store.mtc_for_well(well_id))
        self.detail = detail
        self.state = SelectionState.SELECTED
        logger.info(
            f"✅ '{well.name}' cargado: {detail.summary.equipment_count} equipos, "
            f"MTC {'asignado' if detail.summary.has_mtc_record else 'no asignado'}"
        )
        return detail

    def clear(self) -> None:
        """Volver a idle descartando el detalle y cualquier selección en curso"""
        self._issue_token()
        self.state = SelectionState.IDLE
        self.selected_id = None
        self.detail = None
        self.error = None

    async def update_primary_ip(self, new_ip: str) -> Equipment:
        """
        Actualizar la dirección IP del equipo 'POZO' del pozo seleccionado.

        Raises:
            SelectionRequired: si no hay detalle publicado.
            CatalogError: si el pozo no tiene equipo 'POZO'.
            InvalidIpAddress: si la dirección está vacía o mal formada.
            FetchFailure: si el backend rechaza la actualización.
        """
        if self.state != SelectionState.SELECTED or self.detail is None:
            raise SelectionRequired()

        primary = self.detail.primary_equipment
        if primary is None:
            raise CatalogError("No se encontró el equipo POZO del pozo seleccionado")

        value = (new_ip or "").strip()
        try:
            ipaddress.ip_address(value)
        except ValueError:
            raise InvalidIpAddress(value) from None

        token = self._token
        updated = await self.client.update_equipment_ip(primary.id, value)
        if updated is None:
            updated = primary.model_copy(update={"ip_address": value})

        if self._is_current(token) and self.detail is not None:
            self.detail = self.detail.with_equipment(updated)
        return updated
