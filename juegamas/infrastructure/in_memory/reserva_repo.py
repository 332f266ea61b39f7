"""Implementación in-memory del repositorio de reservas."""

from copy import deepcopy
from typing import Sequence

from juegamas.application.interfaces.reserva_repo import ReservaRepo
from juegamas.domain.entities.reserva import Reserva
from juegamas.domain.errors import ReservaNotFoundError


class InMemoryReservaRepo(ReservaRepo):
    """Guarda copias: lo que sale del repo nunca es la instancia almacenada."""

    def __init__(self) -> None:
        self.reservas: dict[str, Reserva] = {}

    async def get_by_id(self, reserva_id: str) -> Reserva | None:
        reserva = self.reservas.get(reserva_id)
        return deepcopy(reserva) if reserva else None

    async def list_by_usuario(self, usuario_id: str) -> Sequence[Reserva]:
        return [deepcopy(r) for r in self.reservas.values() if r.usuario_id == usuario_id]

    async def list_by_propietario(self, propietario_id: str) -> Sequence[Reserva]:
        return [deepcopy(r) for r in self.reservas.values() if r.propietario_id == propietario_id]

    async def list_by_estado(self, estado: str) -> Sequence[Reserva]:
        return [deepcopy(r) for r in self.reservas.values() if r.estado == estado]

    async def add(self, reserva: Reserva) -> Reserva:
        if reserva.id in self.reservas:
            raise ValueError("Reserva already exists")
        self.reservas[reserva.id] = deepcopy(reserva)
        return reserva

    async def save(self, reserva: Reserva) -> None:
        if reserva.id not in self.reservas:
            raise ReservaNotFoundError(reserva.id)
        self.reservas[reserva.id] = deepcopy(reserva)

    def clear(self) -> None:
        self.reservas.clear()
