from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from juegamas.api.dependencies import get_use_cases
from juegamas.api.pagination import Paginacion, get_paginacion
from juegamas.api.schemas.common import PaginaOut, Respuesta, envolver, pagina_out
from juegamas.api.schemas.incidencias import (
    ActualizarIncidenciaRequest,
    CrearIncidenciaRequest,
    EstadisticasIncidenciasOut,
    IncidenciaOut,
    ResponderIncidenciaRequest,
)
from juegamas.api.security import get_sesion, requiere
from juegamas.application.dtos import SesionUsuario
from juegamas.domain.listing import FiltrosIncidencias

router = APIRouter()


@router.post(
    "/incidencias",
    response_model=Respuesta[IncidenciaOut],
    status_code=status.HTTP_201_CREATED,
)
async def crear_incidencia(
    payload: CrearIncidenciaRequest,
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("incidencias:crear"))],
) -> dict:
    resultado = await use_cases["crear_incidencia"].execute(sesion=sesion, datos=payload.model_dump())
    return envolver(resultado, IncidenciaOut)


def get_filtros_incidencias(
    paginacion: Annotated[Paginacion, Depends(get_paginacion)],
    tipo: str | None = None,
    estado: str | None = Query(default=None, pattern="^(pendiente|en_revision|resuelta|cerrada)$"),
    fecha_desde: datetime | None = None,
    fecha_hasta: datetime | None = None,
    reserva_id: str | None = None,
) -> FiltrosIncidencias:
    return FiltrosIncidencias(
        tipo=tipo,
        estado=estado,
        fecha_desde=fecha_desde,
        fecha_hasta=fecha_hasta,
        reserva_id=reserva_id,
        page=paginacion.page,
        per_page=paginacion.per_page,
    )


@router.get("/incidencias", response_model=PaginaOut[IncidenciaOut])
async def listar_incidencias(
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("incidencias:ver_propias"))],
    filtros: Annotated[FiltrosIncidencias, Depends(get_filtros_incidencias)],
) -> dict:
    pagina = await use_cases["listar_incidencias"].execute(sesion=sesion, filtros=filtros)
    return pagina_out(pagina, IncidenciaOut)


@router.get("/soporte/incidencias", response_model=PaginaOut[IncidenciaOut])
async def listar_incidencias_soporte(
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("incidencias:gestionar"))],
    filtros: Annotated[FiltrosIncidencias, Depends(get_filtros_incidencias)],
) -> dict:
    pagina = await use_cases["listar_incidencias_soporte"].execute(filtros=filtros)
    return pagina_out(pagina, IncidenciaOut)


@router.get("/incidencias/estadisticas", response_model=EstadisticasIncidenciasOut)
async def estadisticas_incidencias(
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("incidencias:ver_propias"))],
) -> dict:
    return await use_cases["estadisticas_incidencias"].execute(sesion=sesion)


@router.get("/incidencias/{incidencia_id}", response_model=IncidenciaOut)
async def obtener_incidencia(
    incidencia_id: str,
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(get_sesion)],
) -> IncidenciaOut:
    incidencia = await use_cases["obtener_incidencia"].execute(incidencia_id=incidencia_id, sesion=sesion)
    return IncidenciaOut.model_validate(incidencia)


@router.post("/incidencias/{incidencia_id}/actualizar", response_model=Respuesta[IncidenciaOut])
async def actualizar_incidencia(
    incidencia_id: str,
    payload: ActualizarIncidenciaRequest,
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("incidencias:actualizar"))],
) -> dict:
    resultado = await use_cases["actualizar_incidencia"].execute(
        incidencia_id=incidencia_id,
        informacion=payload.informacion_adicional,
        sesion=sesion,
    )
    return envolver(resultado, IncidenciaOut)


@router.post("/incidencias/{incidencia_id}/cerrar", response_model=Respuesta[IncidenciaOut])
async def cerrar_incidencia(
    incidencia_id: str,
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("incidencias:cerrar"))],
) -> dict:
    resultado = await use_cases["cerrar_incidencia"].execute(incidencia_id=incidencia_id, sesion=sesion)
    return envolver(resultado, IncidenciaOut)


@router.post("/incidencias/{incidencia_id}/revision", response_model=Respuesta[IncidenciaOut])
async def poner_en_revision(
    incidencia_id: str,
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("incidencias:gestionar"))],
) -> dict:
    resultado = await use_cases["poner_en_revision"].execute(incidencia_id=incidencia_id, sesion=sesion)
    return envolver(resultado, IncidenciaOut)


@router.post("/incidencias/{incidencia_id}/responder", response_model=Respuesta[IncidenciaOut])
async def responder_incidencia(
    incidencia_id: str,
    payload: ResponderIncidenciaRequest,
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("incidencias:gestionar"))],
) -> dict:
    resultado = await use_cases["responder_incidencia"].execute(
        incidencia_id=incidencia_id,
        respuesta=payload.respuesta,
        sesion=sesion,
    )
    return envolver(resultado, IncidenciaOut)
