from datetime import date, datetime, time
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, condecimal

Money = condecimal(max_digits=12, decimal_places=2)

EstadoReserva = Literal["pendiente", "confirmada", "cancelada", "completada"]


class CancelarReservaRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # La longitud mínima se valida en el dominio para responder con su mensaje
    motivo_cancelacion: str


class ReservaOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, json_encoders={Decimal: lambda v: format(v, ".2f")})

    id: str
    codigo_reserva: str
    usuario_id: str
    espacio_id: int
    propietario_id: str
    fecha: date
    hora_inicio: time
    hora_fin: time
    precio_total: Money
    estado: EstadoReserva
    metodo_pago: str | None = None
    notas: str | None = None
    motivo_cancelacion: str | None = None
    cancelado_por: str | None = None
    usuario_nombre: str = ""
    usuario_email: str = ""
    espacio_nombre: str = ""
    espacio_tipo: str = ""
    espacio_direccion: str = ""
    espacio_ciudad: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CompletarReservasResponse(BaseModel):
    completadas: list[str]
    omitidas: list[str]
