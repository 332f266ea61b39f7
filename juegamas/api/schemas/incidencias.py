from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

EstadoIncidencia = Literal["pendiente", "en_revision", "resuelta", "cerrada"]


class CrearIncidenciaRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tipo: str
    asunto: str
    descripcion: str
    reserva_id: str | None = None


class ActualizarIncidenciaRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    informacion_adicional: str


class ResponderIncidenciaRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    respuesta: str


class IncidenciaOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    usuario_id: str
    tipo: str
    asunto: str
    descripcion: str
    estado: EstadoIncidencia
    respuesta: str | None = None
    reserva_id: str | None = None
    archivos_adjuntos: list[str] = Field(default_factory=list)
    fecha_creacion: datetime | None = None
    fecha_actualizacion: datetime | None = None


class EstadisticasIncidenciasOut(BaseModel):
    total: int
    pendientes: int
    en_revision: int
    resueltas: int
    cerradas: int


class AutoCerrarResponse(BaseModel):
    cerradas: list[str]
    omitidas: list[str]
