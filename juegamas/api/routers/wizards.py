from typing import Annotated

from fastapi import APIRouter, Depends

from juegamas.api.dependencies import get_use_cases
from juegamas.api.schemas.wizards import ValidarPasoRequest, ValidarPasoResponse

router = APIRouter()


@router.post("/wizards/{wizard}/validar", response_model=ValidarPasoResponse)
async def validar_paso(
    wizard: str,
    payload: ValidarPasoRequest,
    use_cases: Annotated[dict, Depends(get_use_cases)],
) -> dict:
    """Evalúa la compuerta de un paso; el estado del formulario vive en el cliente."""
    return await use_cases["validar_wizard"].execute(wizard=wizard, paso=payload.paso, datos=payload.datos)
