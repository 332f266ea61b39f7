"""Implementación in-memory del repositorio de mensajes de contacto."""

from copy import deepcopy
from typing import Sequence

from juegamas.application.interfaces.contacto_repo import ContactoRepo
from juegamas.domain.entities.usuario import MensajeContacto
from juegamas.domain.errors import MensajeContactoNotFoundError


class InMemoryContactoRepo(ContactoRepo):
    """Implementación in-memory del repositorio de contacto para testing."""

    def __init__(self) -> None:
        self._mensajes: dict[int, MensajeContacto] = {}
        self._next_id = 1

    async def add(self, mensaje: MensajeContacto) -> MensajeContacto:
        mensaje.id = self._next_id
        self._next_id += 1
        self._mensajes[mensaje.id] = deepcopy(mensaje)
        return mensaje

    async def get_by_id(self, mensaje_id: int) -> MensajeContacto | None:
        mensaje = self._mensajes.get(mensaje_id)
        return deepcopy(mensaje) if mensaje else None

    async def list_all(self, leido: bool | None = None) -> Sequence[MensajeContacto]:
        mensajes = [m for m in self._mensajes.values() if leido is None or m.leido == leido]
        # Más recientes primero; empate por id descendente
        mensajes.sort(
            key=lambda m: (m.created_at.timestamp() if m.created_at else float("-inf"), m.id),
            reverse=True,
        )
        return [deepcopy(m) for m in mensajes]

    async def save(self, mensaje: MensajeContacto) -> None:
        if mensaje.id is None or mensaje.id not in self._mensajes:
            raise MensajeContactoNotFoundError(mensaje.id or 0)
        self._mensajes[mensaje.id] = deepcopy(mensaje)

    def clear(self) -> None:
        """Limpia todos los datos (para testing)."""
        self._mensajes.clear()
        self._next_id = 1
