"""Módulo de servicios"""

from .aggregation import (
    availability_breakdown,
    count_by_availability,
    count_by_site,
    kpi_summary,
    percentage_of
)
from .app_state import AppState
from .catalog_store import CatalogStore
from .filters import filter_wells, highlight, highlight_segments
from .selection import SelectionController, SelectionState, WellDetail

# charts se importa bajo demanda para no cargar plotly en el núcleo
__all__ = [
    "availability_breakdown",
    "count_by_availability",
    "count_by_site",
    "kpi_summary",
    "percentage_of",
    "AppState",
    "CatalogStore",
    "filter_wells",
    "highlight",
    "highlight_segments",
    "SelectionController",
    "SelectionState",
    "WellDetail"
]
