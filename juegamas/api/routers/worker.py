from typing import Annotated

from fastapi import APIRouter, Depends, status

from juegamas.api.dependencies import get_use_cases
from juegamas.api.schemas.incidencias import AutoCerrarResponse
from juegamas.api.schemas.reservas import CompletarReservasResponse
from juegamas.api.security import requiere

router = APIRouter()


@router.post(
    "/workers/reservas/completar",
    response_model=CompletarReservasResponse,
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(requiere("reservas:completar"))],
)
async def completar_reservas(use_cases: Annotated[dict, Depends(get_use_cases)]) -> dict:
    """
    Marca como completadas las reservas confirmadas cuya franja ya terminó.

    Pensado para un cron externo; las reservas con otra operación en curso
    se omiten y quedan para la siguiente pasada.
    """
    return await use_cases["completar_reservas"].execute()


@router.post(
    "/workers/incidencias/auto-cerrar",
    response_model=AutoCerrarResponse,
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(requiere("incidencias:auto_cerrar"))],
)
async def auto_cerrar_incidencias(use_cases: Annotated[dict, Depends(get_use_cases)]) -> dict:
    return await use_cases["auto_cerrar_incidencias"].execute()
