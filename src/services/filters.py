"""Filtrado y búsqueda de pozos"""

import logging
import re
from typing import List, Optional, Sequence, Tuple

from backend.models import Well

logger = logging.getLogger(__name__)


def _normalize_term(term: Optional[str]) -> str:
    return (term or "").strip().lower()


def matches_term(well: Well, term: Optional[str]) -> bool:
    """Coincidencia por subcadena, sin distinguir mayúsculas, en nombre o código KepServer"""
    needle = _normalize_term(term)
    if not needle:
        return True
    return needle in well.name.lower() or needle in (well.gateway_code or "").lower()


def filter_wells(
    wells: Sequence[Well],
    site_filter: Optional[str] = None,
    term: Optional[str] = None
) -> List[Well]:
    """
    Proyección filtrada de pozos, conservando el orden de entrada.

    Args:
        wells: Pozos a filtrar
        site_filter: Nombre exacto del activo; vacío o None acepta todos
        term: Texto libre buscado en nombre o código; vacío o None acepta todos
    """
    result = [
        well for well in wells
        if (not site_filter or well.site_name == site_filter) and matches_term(well, term)
    ]
    logger.debug(
        f"🔍 Filtros aplicados: activo={site_filter or 'todos'} "
        f"termino={term or 'ninguno'} resultados={len(result)}/{len(wells)}"
    )
    return result


def _term_pattern(term: str) -> "re.Pattern[str]":
    return re.compile(re.escape(term), re.IGNORECASE)


def highlight(text: str, term: Optional[str], tag: str = "mark") -> str:
    """Envolver cada aparición literal de term en <tag>…</tag>, conservando el texto original"""
    term = (term or "").strip()
    if not term:
        return text
    return _term_pattern(term).sub(lambda m: f"<{tag}>{m.group(0)}</{tag}>", text)


def highlight_segments(text: str, term: Optional[str]) -> List[Tuple[str, bool]]:
    """Partir text en trozos (texto, coincide) para renderizadores basados en componentes"""
    term = (term or "").strip()
    if not term or not text:
        return [(text, False)] if text else []

    segments: List[Tuple[str, bool]] = []
    position = 0
    for match in _term_pattern(term).finditer(text):
        if match.start() > position:
            segments.append((text[position:match.start()], False))
        segments.append((match.group(0), True))
        position = match.end()
    if position < len(text):
        segments.append((text[position:], False))
    return segments


def results_label(shown: int, total: int) -> str:
    if shown == total:
        return f"{total} pozos"
    if shown == 0:
        return "Sin resultados"
    return f"{shown} de {total}"
