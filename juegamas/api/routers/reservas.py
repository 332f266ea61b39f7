from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from juegamas.api.dependencies import get_use_cases
from juegamas.api.pagination import Paginacion, get_paginacion
from juegamas.api.schemas.common import PaginaOut, Respuesta, envolver, pagina_out
from juegamas.api.schemas.reservas import CancelarReservaRequest, ReservaOut
from juegamas.api.security import get_sesion, requiere
from juegamas.application.dtos import SesionUsuario
from juegamas.domain.listing import FiltrosReservas

router = APIRouter()

EstadoFiltro = Query(default=None, pattern="^(todas|pendiente|confirmada|cancelada|completada)$")


def _filtros(
    estado: str | None,
    fecha_desde: date | None,
    fecha_hasta: date | None,
    paginacion: Paginacion,
) -> FiltrosReservas:
    return FiltrosReservas(
        estado=estado,
        fecha_desde=fecha_desde,
        fecha_hasta=fecha_hasta,
        page=paginacion.page,
        per_page=paginacion.per_page,
    )


@router.get("/reservas", response_model=PaginaOut[ReservaOut])
async def listar_reservas(
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("reservas:ver_propias"))],
    paginacion: Annotated[Paginacion, Depends(get_paginacion)],
    estado: str | None = EstadoFiltro,
    fecha_desde: date | None = None,
    fecha_hasta: date | None = None,
) -> dict:
    filtros = _filtros(estado, fecha_desde, fecha_hasta, paginacion)
    pagina = await use_cases["listar_reservas"].execute(sesion=sesion, filtros=filtros)
    return pagina_out(pagina, ReservaOut)


@router.get("/reservas/proximas", response_model=list[ReservaOut])
async def proximas_reservas(
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("reservas:ver_propias"))],
    limite: int = Query(default=3, ge=1, le=20),
) -> list[ReservaOut]:
    reservas = await use_cases["proximas_reservas"].execute(sesion=sesion, limite=limite)
    return [ReservaOut.model_validate(r) for r in reservas]


@router.get("/reservas/{reserva_id}", response_model=ReservaOut)
async def obtener_reserva(
    reserva_id: str,
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(get_sesion)],
) -> ReservaOut:
    reserva = await use_cases["obtener_reserva"].execute(reserva_id=reserva_id, sesion=sesion)
    return ReservaOut.model_validate(reserva)


@router.post(
    "/reservas/{reserva_id}/cancelar",
    response_model=Respuesta[ReservaOut],
    status_code=status.HTTP_200_OK,
)
async def cancelar_reserva(
    reserva_id: str,
    payload: CancelarReservaRequest,
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("reservas:cancelar"))],
) -> dict:
    resultado = await use_cases["cancelar_reserva"].execute(
        reserva_id=reserva_id,
        motivo=payload.motivo_cancelacion,
        sesion=sesion,
    )
    return envolver(resultado, ReservaOut)


@router.post(
    "/reservas/{reserva_id}/confirmar",
    response_model=Respuesta[ReservaOut],
    status_code=status.HTTP_200_OK,
)
async def confirmar_reserva(
    reserva_id: str,
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("reservas:confirmar"))],
) -> dict:
    resultado = await use_cases["confirmar_reserva"].execute(reserva_id=reserva_id, sesion=sesion)
    return envolver(resultado, ReservaOut)


@router.get("/propietario/reservas", response_model=PaginaOut[ReservaOut])
async def listar_reservas_propietario(
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("reservas:ver_espacios_propios"))],
    paginacion: Annotated[Paginacion, Depends(get_paginacion)],
    estado: str | None = EstadoFiltro,
    fecha_desde: date | None = None,
    fecha_hasta: date | None = None,
) -> dict:
    filtros = _filtros(estado, fecha_desde, fecha_hasta, paginacion)
    pagina = await use_cases["listar_reservas_propietario"].execute(sesion=sesion, filtros=filtros)
    return pagina_out(pagina, ReservaOut)
