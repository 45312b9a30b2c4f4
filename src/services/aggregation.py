"""Agregados para KPIs y gráficas del dashboard"""

from dataclasses import dataclass
from typing import Dict, List, Sequence

from backend.models import AvailabilityStatus, MTCRecord, Well


@dataclass(frozen=True)
class SiteCounts:
    """Pozos activos e inactivos de un activo"""
    active_count: int = 0
    inactive_count: int = 0

    @property
    def total(self) -> int:
        return self.active_count + self.inactive_count


@dataclass(frozen=True)
class StatusRow:
    """Fila de la distribución de estados MTC"""
    status: AvailabilityStatus
    label: str
    count: int
    percentage: float
    color: str


@dataclass(frozen=True)
class KpiSummary:
    total_mtc: int
    operating: int
    available: int
    sites: int


def percentage_of(count: int, total: int) -> float:
    """Porcentaje con un decimal; 0 si el total es 0"""
    if total == 0:
        return 0
    return round(count / total * 100, 1)


def count_by_availability(mtc_records: Sequence[MTCRecord]) -> Dict[AvailabilityStatus, int]:
    """Conteo de MTC por cada uno de los 5 estados; códigos desconocidos se ignoran"""
    counts = {status: 0 for status in AvailabilityStatus}
    for record in mtc_records:
        status = record.status
        if status is not None:
            counts[status] += 1
    return counts


def count_by_site(wells: Sequence[Well]) -> Dict[str, SiteCounts]:
    """
    Pozos activos/inactivos por nombre de activo.

    Los activos se descubren a partir de los datos, en orden de aparición:
    un activo sin pozos no aparece en el resultado.
    """
    raw: Dict[str, List[int]] = {}
    for well in wells:
        bucket = raw.setdefault(well.site_name, [0, 0])
        if well.active:
            bucket[0] += 1
        else:
            bucket[1] += 1
    return {name: SiteCounts(active, inactive) for name, (active, inactive) in raw.items()}


def availability_breakdown(mtc_records: Sequence[MTCRecord]) -> List[StatusRow]:
    counts = count_by_availability(mtc_records)
    total = len(mtc_records)
    return [
        StatusRow(
            status=status,
            label=status.label,
            count=counts[status],
            percentage=percentage_of(counts[status], total),
            color=status.color
        )
        for status in AvailabilityStatus
    ]


def kpi_summary(wells: Sequence[Well], mtc_records: Sequence[MTCRecord]) -> KpiSummary:
    counts = count_by_availability(mtc_records)
    return KpiSummary(
        total_mtc=len(mtc_records),
        operating=counts[AvailabilityStatus.OPERANDO],
        available=counts[AvailabilityStatus.DISPONIBLE],
        sites=len({well.site_name for well in wells})
    )
