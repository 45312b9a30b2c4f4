"""Almacén en memoria de pozos y tipos MTC obtenidos del backend"""

import asyncio
import logging
from typing import List, Optional

from backend.models import MTCRecord, Well

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Espejo en memoria de las colecciones del backend.

    Las colecciones se reemplazan completas en cada carga exitosa y nunca
    se parchean de forma incremental. Si una de las dos peticiones falla,
    ninguna colección se modifica.
    """

    def __init__(self, client):
        self.client = client
        self.wells: List[Well] = []
        self.mtc_records: List[MTCRecord] = []

    @property
    def is_loaded(self) -> bool:
        return bool(self.wells) and bool(self.mtc_records)

    async def load(self) -> bool:
        """
        Cargar pozos y tipos MTC si alguna colección está vacía.

        Returns:
            True si se consultó el backend, False si ya había datos.

        Raises:
            FetchFailure: si cualquiera de las dos peticiones falla.
        """
        if self.is_loaded:
            logger.debug("Catálogo ya cargado, no se consulta el backend")
            return False

        wells, records = await asyncio.gather(
            self.client.fetch_wells(),
            self.client.fetch_mtc_records()
        )

        self.wells = list(wells)
        self.mtc_records = list(records)
        logger.info(f"📦 Catálogo cargado: {len(self.wells)} pozos, {len(self.mtc_records)} tipos MTC")
        return True

    async def fetch_missing_mtc_records(self) -> Optional[List[MTCRecord]]:
        """Obtener los tipos MTC del backend solo si la colección está vacía, sin guardarlos"""
        if self.mtc_records:
            return None
        logger.info("🏷️ Tipos MTC no cargados, consultando backend")
        return list(await self.client.fetch_mtc_records())

    def adopt_mtc_records(self, records: Optional[List[MTCRecord]]) -> None:
        """Guardar tipos MTC obtenidos bajo demanda; solo aplica mientras la colección siga vacía"""
        if records is None or self.mtc_records:
            return
        self.mtc_records = list(records)

    def mtc_for_well(self, well_id: int) -> Optional[MTCRecord]:
        # Primer registro que coincide: se asume a lo sumo un MTC por pozo
        for record in self.mtc_records:
            if record.well_id == well_id:
                return record
        return None
