"""Excepciones del catálogo de pozos"""

from typing import Optional


class CatalogError(Exception):
    """Error base del sistema de motocompresores"""


class FetchFailure(CatalogError):
    """Respuesta no exitosa, fallo de red o payload inválido en una llamada al backend"""

    def __init__(self, operation: str, status_code: Optional[int] = None, detail: str = ""):
        self.operation = operation
        self.status_code = status_code
        self.detail = detail
        message = f"Error en {operation}"
        if status_code is not None:
            message += f": HTTP {status_code}"
        if detail:
            message += f" - {detail}"
        super().__init__(message)


class SelectionRequired(CatalogError):
    """Se pidió una edición sin pozo seleccionado"""

    def __init__(self, message: str = "No hay un pozo seleccionado"):
        super().__init__(message)


class InvalidIpAddress(CatalogError):
    """Dirección IP vacía o mal formada"""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Dirección IP inválida: '{value}'")
