from dataclasses import dataclass

from fastapi import Depends, Query

from juegamas.config import Settings, get_settings


@dataclass(frozen=True)
class Paginacion:
    page: int
    per_page: int


def get_paginacion(
    settings: Settings = Depends(get_settings),
    page: int = Query(default=1),
    per_page: int | None = Query(default=None),
) -> Paginacion:
    # Páginas fuera de rango no fallan: el paginador las ajusta
    tamano = per_page if per_page is not None else settings.default_per_page
    return Paginacion(page=page, per_page=min(max(1, tamano), settings.max_per_page))
