from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ValidarPasoRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    paso: str
    datos: dict[str, Any] = Field(default_factory=dict)


class ValidarPasoResponse(BaseModel):
    valido: bool
    errores: dict[str, str]
    paso: str
    siguiente_paso: str | None = None
