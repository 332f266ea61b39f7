from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Respuesta(BaseModel, Generic[T]):
    """Sobre común de las respuestas de escritura."""

    success: bool
    message: str
    data: T | None = None


class PaginaOut(BaseModel, Generic[T]):
    items: list[T]
    total: int
    pagina_actual: int
    total_paginas: int
    por_pagina: int


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    code: str
    errors: dict[str, str] = Field(default_factory=dict)
    error_id: str | None = None


def pagina_out(pagina: Any, modelo: type[BaseModel]) -> dict:
    """Convierte una `Pagina` de dominio al payload de listado."""
    return {
        "items": [modelo.model_validate(item) for item in pagina.items],
        "total": pagina.total,
        "pagina_actual": pagina.pagina_actual,
        "total_paginas": pagina.total_paginas,
        "por_pagina": pagina.por_pagina,
    }


def envolver(resultado: Any, modelo: type[BaseModel] | None = None) -> dict:
    """`ResultadoOperacion` -> sobre `{success, message, data}`."""
    data = resultado.data
    if modelo is not None and data is not None:
        data = modelo.model_validate(data)
    return {"success": resultado.success, "message": resultado.message, "data": data}
