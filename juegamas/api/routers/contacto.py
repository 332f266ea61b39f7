from typing import Annotated

from fastapi import APIRouter, Depends, status

from juegamas.api.dependencies import get_use_cases
from juegamas.api.pagination import Paginacion, get_paginacion
from juegamas.api.schemas.common import PaginaOut, Respuesta, envolver, pagina_out
from juegamas.api.schemas.contacto import ContactoRequest, MensajeContactoOut
from juegamas.api.security import requiere

router = APIRouter()


@router.post(
    "/contacto",
    response_model=Respuesta[MensajeContactoOut],
    status_code=status.HTTP_201_CREATED,
)
async def enviar_contacto(
    payload: ContactoRequest,
    use_cases: Annotated[dict, Depends(get_use_cases)],
) -> dict:
    resultado = await use_cases["enviar_contacto"].execute(datos=payload.model_dump())
    return envolver(resultado, MensajeContactoOut)


@router.get(
    "/contacto",
    response_model=PaginaOut[MensajeContactoOut],
    dependencies=[Depends(requiere("contacto:gestionar"))],
)
async def listar_contacto(
    use_cases: Annotated[dict, Depends(get_use_cases)],
    paginacion: Annotated[Paginacion, Depends(get_paginacion)],
    leido: bool | None = None,
) -> dict:
    pagina = await use_cases["listar_contacto"].execute(
        leido=leido, page=paginacion.page, per_page=paginacion.per_page
    )
    return pagina_out(pagina, MensajeContactoOut)


@router.post(
    "/contacto/{mensaje_id}/leido",
    response_model=Respuesta[MensajeContactoOut],
    dependencies=[Depends(requiere("contacto:gestionar"))],
)
async def marcar_leido(mensaje_id: int, use_cases: Annotated[dict, Depends(get_use_cases)]) -> dict:
    resultado = await use_cases["marcar_contacto"].execute(mensaje_id=mensaje_id)
    return envolver(resultado, MensajeContactoOut)


@router.post(
    "/contacto/{mensaje_id}/respondido",
    response_model=Respuesta[MensajeContactoOut],
    dependencies=[Depends(requiere("contacto:gestionar"))],
)
async def marcar_respondido(mensaje_id: int, use_cases: Annotated[dict, Depends(get_use_cases)]) -> dict:
    resultado = await use_cases["marcar_contacto"].execute(mensaje_id=mensaje_id, respondido=True)
    return envolver(resultado, MensajeContactoOut)
