"""Entidades de usuario y mensajes de contacto."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Usuario:
    """Perfil de usuario. La autenticación vive en el proveedor externo."""

    id: str
    email: str
    nombre: str
    rol: str
    telefono: str | None = None
    foto_perfil: str | None = None
    biografia: str | None = None
    notificaciones_email: bool = True
    notificaciones_app: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class MensajeContacto:
    """Mensaje enviado desde el formulario público de contacto."""

    nombre: str
    email: str
    asunto: str
    mensaje: str
    telefono: str | None = None
    id: int | None = None
    leido: bool = False
    respondido: bool = False
    created_at: datetime | None = None
