"""Módulo de acceso al backend REST"""

from .exceptions import CatalogError, FetchFailure, InvalidIpAddress, SelectionRequired
from .models import (
    AvailabilityStatus,
    Equipment,
    MTCRecord,
    SITES,
    UNKNOWN_SITE,
    Well,
    site_id,
    site_name
)
from .rest_client import PozosApiClient, api_client

__all__ = [
    "CatalogError",
    "FetchFailure",
    "InvalidIpAddress",
    "SelectionRequired",
    "AvailabilityStatus",
    "Equipment",
    "MTCRecord",
    "SITES",
    "UNKNOWN_SITE",
    "Well",
    "site_id",
    "site_name",
    "PozosApiClient",
    "api_client"
]
