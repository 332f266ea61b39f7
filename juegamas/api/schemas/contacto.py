from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr


class ContactoRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    nombre: str
    email: EmailStr
    telefono: str | None = None
    asunto: str
    mensaje: str


class MensajeContactoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    email: str
    telefono: str | None = None
    asunto: str
    mensaje: str
    leido: bool
    respondido: bool
    created_at: datetime | None = None
