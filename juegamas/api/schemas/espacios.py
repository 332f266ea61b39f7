from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, condecimal, field_validator

Money = condecimal(max_digits=12, decimal_places=2)


class EspacioOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, json_encoders={Decimal: lambda v: format(v, ".2f")})

    id: int
    propietario_id: str
    nombre: str
    tipo: str
    descripcion: str = ""
    ciudad: str
    direccion: str
    precio_base: Money
    capacidad_min: int | None = None
    capacidad_max: int | None = None
    caracteristicas: list[str]
    estado_espacio: str
    calificacion_promedio: float
    total_resenas: int
    created_at: datetime | None = None

    @field_validator("caracteristicas", mode="before")
    @classmethod
    def ordenar_caracteristicas(cls, value):
        return sorted(value)


class OpcionesFiltroOut(BaseModel):
    ciudades: list[str]
    tipos: list[str]
    caracteristicas: list[str]
