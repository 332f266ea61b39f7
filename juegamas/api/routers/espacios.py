from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from juegamas.api.dependencies import get_use_cases
from juegamas.api.pagination import Paginacion, get_paginacion
from juegamas.api.schemas.common import PaginaOut, pagina_out
from juegamas.api.schemas.espacios import EspacioOut, OpcionesFiltroOut
from juegamas.domain.listing import FiltrosEspacios, OrdenEspacios

router = APIRouter()


# El buscador es público: no exige sesión
@router.get("/espacios", response_model=PaginaOut[EspacioOut])
async def listar_espacios(
    use_cases: Annotated[dict, Depends(get_use_cases)],
    paginacion: Annotated[Paginacion, Depends(get_paginacion)],
    busqueda: str | None = None,
    tipo: str | None = None,
    ciudad: str | None = None,
    precio_min: Decimal | None = Query(default=None, ge=0),
    precio_max: Decimal | None = Query(default=None, ge=0),
    capacidad_min: int | None = Query(default=None, ge=1),
    caracteristicas: list[str] = Query(default=[]),
    ordenar_por: OrdenEspacios | None = None,
) -> dict:
    filtros = FiltrosEspacios(
        busqueda=busqueda,
        tipo=tipo,
        ciudad=ciudad,
        precio_min=precio_min,
        precio_max=precio_max,
        capacidad_min=capacidad_min,
        caracteristicas=set(caracteristicas),
        ordenar_por=ordenar_por,
        page=paginacion.page,
        per_page=paginacion.per_page,
    )
    pagina = await use_cases["listar_espacios"].execute(filtros=filtros)
    return pagina_out(pagina, EspacioOut)


@router.get("/espacios/opciones", response_model=OpcionesFiltroOut)
async def opciones_filtro(use_cases: Annotated[dict, Depends(get_use_cases)]) -> dict:
    return await use_cases["opciones_espacios"].execute()


@router.get("/espacios/{espacio_id}", response_model=EspacioOut)
async def obtener_espacio(
    espacio_id: int,
    use_cases: Annotated[dict, Depends(get_use_cases)],
) -> EspacioOut:
    return EspacioOut.model_validate(await use_cases["obtener_espacio"].execute(espacio_id=espacio_id))
