"""Modelos de datos del backend de pozos, tipos MTC y equipos"""

from datetime import datetime
from enum import IntEnum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_SITE = "Desconocido"

# Mapeo fijo de activos (id <-> nombre)
SITES: Dict[int, str] = {
    1: "Samaria",
    2: "Muspac",
    3: "5P",
    4: "Bellota",
    5: "Poza Rica",
}

SITES_REVERSE: Dict[str, int] = {name: site_id for site_id, name in SITES.items()}

PRIMARY_EQUIPMENT_TAG = "POZO"


def site_name(site_id: Optional[int]) -> str:
    """Nombre del activo, o 'Desconocido' si el id no existe"""
    return SITES.get(site_id, UNKNOWN_SITE)


def site_id(name: Optional[str]) -> Optional[int]:
    return SITES_REVERSE.get(name)


class AvailabilityStatus(IntEnum):
    """Estado administrativo de un motocompresor"""

    OPERANDO = 1
    DISPONIBLE = 2
    CANCELADO_EN_PROGRAMA = 3
    DE_BAJA = 4
    CANCELADO = 5

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]

    @property
    def color(self) -> str:
        return STATUS_COLORS[self]


STATUS_LABELS: Dict[AvailabilityStatus, str] = {
    AvailabilityStatus.OPERANDO: "Operando",
    AvailabilityStatus.DISPONIBLE: "Disponible",
    AvailabilityStatus.CANCELADO_EN_PROGRAMA: "Cancelado en Programa",
    AvailabilityStatus.DE_BAJA: "De Baja",
    AvailabilityStatus.CANCELADO: "Cancelado",
}

STATUS_COLORS: Dict[AvailabilityStatus, str] = {
    AvailabilityStatus.OPERANDO: "#4caf50",  # Verde
    AvailabilityStatus.DISPONIBLE: "#4a9eff",  # Azul
    AvailabilityStatus.CANCELADO_EN_PROGRAMA: "#ff9800",  # Naranja
    AvailabilityStatus.DE_BAJA: "#f44336",  # Rojo
    AvailabilityStatus.CANCELADO: "#757575",  # Gris
}


class BackendModel(BaseModel):
    """Base común: acepta los nombres camelCase del backend y los nombres Python"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class Well(BackendModel):
    """Pozo"""

    id: int = Field(alias="idPozo")
    name: str = Field(default="", alias="nombrePozo")
    site_id: Optional[int] = Field(default=None, alias="fkIdActivo")
    active: bool = Field(default=False, alias="estatus")
    gateway_code: Optional[str] = Field(default=None, alias="abrvKepServer")
    sector_id: Optional[int] = Field(default=None, alias="fkIdSector")

    @property
    def site_name(self) -> str:
        return site_name(self.site_id)


class MTCRecord(BackendModel):
    """Tipo MTC (motocompresor) asociado a un pozo"""

    id: int = Field(alias="idTipoMtc")
    well_id: Optional[int] = Field(default=None, alias="fkIdPozo")
    description: Optional[str] = Field(default=None, alias="descripcion")
    skid_label: Optional[str] = Field(default=None, alias="patin")
    # Se conserva el código crudo: valores fuera del catálogo no se descartan
    availability_status: Optional[int] = Field(default=None, alias="disponible")
    install_date: Optional[datetime] = Field(default=None, alias="fechaInstalacion")

    @property
    def status(self) -> Optional[AvailabilityStatus]:
        try:
            return AvailabilityStatus(self.availability_status)
        except ValueError:
            return None


class Equipment(BackendModel):
    """Equipo de red asociado a un pozo"""

    id: int = Field(alias="idEquipo")
    well_id: Optional[int] = Field(default=None, alias="fkIdPozo")
    description: Optional[str] = Field(default=None, alias="descripcion")
    ip_address: Optional[str] = Field(default=None, alias="direccionIp")
    identifier: Optional[str] = Field(default=None, alias="identificador")
    brand: Optional[str] = Field(default=None, alias="marca")
    model: Optional[str] = Field(default=None, alias="modelo")

    @property
    def is_primary(self) -> bool:
        return self.description == PRIMARY_EQUIPMENT_TAG
