"""Estado de la sesión: catálogo, filtro de activo, búsqueda y selección"""

import logging
from typing import List, Optional

from backend.exceptions import CatalogError
from backend.models import AvailabilityStatus, Equipment, Well, site_id
from config import settings
from .aggregation import KpiSummary, kpi_summary
from .catalog_store import CatalogStore
from .filters import filter_wells, results_label
from .selection import SelectionController, SelectionState, WellDetail

logger = logging.getLogger(__name__)


class AppState:
    """Estado propio de una sesión; los componentes lo reciben de forma explícita"""

    def __init__(self, client, default_site: Optional[str] = None):
        self.client = client
        self.store = CatalogStore(client)
        self.selection = SelectionController(client, self.store)
        self.default_site = default_site if default_site is not None else settings.dashboard.default_site
        self.site_filter: Optional[str] = self.default_site
        self.search_term: str = ""

    async def initialize(self) -> None:
        """Cargar el catálogo (si hace falta) y mostrar el activo por defecto"""
        logger.info("🚀 Inicializando gestión...")
        await self.store.load()
        self.set_site_filter(self.default_site)
        logger.info(f"✅ Gestión inicializada - Mostrando {self.default_site}")

    async def ensure_loaded(self) -> bool:
        return await self.store.load()

    def set_site_filter(self, site: Optional[str]) -> None:
        """Cambiar de activo limpia la selección y la búsqueda"""
        if site and site_id(site) is None:
            logger.warning(f"⚠️ Activo desconocido: {site}")
        self.site_filter = site or None
        self.search_term = ""
        self.selection.clear()
        logger.info(f"🎯 Filtrando por activo: {site or 'todos'}")

    def set_search_term(self, term: Optional[str]) -> None:
        self.search_term = term or ""

    def site_wells(self) -> List[Well]:
        return filter_wells(self.store.wells, self.site_filter)

    def visible_wells(self) -> List[Well]:
        return filter_wells(self.store.wells, self.site_filter, self.search_term)

    def results_label(self) -> str:
        return results_label(len(self.visible_wells()), len(self.site_wells()))

    def kpis(self) -> KpiSummary:
        return kpi_summary(self.store.wells, self.store.mtc_records)

    def is_operating(self, well: Well) -> bool:
        record = self.store.mtc_for_well(well.id)
        return record is not None and record.status == AvailabilityStatus.OPERANDO

    async def select_well(self, well_id: int) -> Optional[WellDetail]:
        return await self.selection.select(well_id)

    def clear_selection(self) -> None:
        self.selection.clear()

    @property
    def detail(self) -> Optional[WellDetail]:
        if self.selection.state == SelectionState.SELECTED:
            return self.selection.detail
        return None

    async def update_ip(self, new_ip: str) -> Equipment:
        try:
            return await self.selection.update_primary_ip(new_ip)
        except CatalogError as e:
            logger.error(f"❌ Error al actualizar IP: {e}")
            raise

    def title(self) -> str:
        site = self.site_filter or "Todos"
        if self.detail is not None:
            return f"{self.detail.well.name} - {site}"
        return f"Activo: {site}"

    def breadcrumb(self) -> List[str]:
        crumbs = ["Sistema", self.site_filter or "Todos"]
        if self.detail is not None:
            crumbs.append(self.detail.well.name)
        return crumbs
