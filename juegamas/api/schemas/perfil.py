from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict


class UsuarioOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    nombre: str
    rol: str
    telefono: str | None = None
    foto_perfil: str | None = None
    biografia: str | None = None
    notificaciones_email: bool
    notificaciones_app: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ActualizarPerfilRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    nombre: str | None = None
    telefono: str | None = None
    biografia: str | None = None
    notificaciones_email: bool | None = None
    notificaciones_app: bool | None = None


class CambiarPasswordRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    password_actual: str
    password_nueva: str
    confirmar_password: str


class PreferenciasRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    view_mode: Literal["cards", "table"] | None = None
    sidebar_abierto: bool | None = None


class PreferenciasOut(BaseModel):
    view_mode: Literal["cards", "table"]
    sidebar_abierto: bool
