"""Interface ReservaRepo - Puerto para repositorio de reservas."""

from abc import ABC, abstractmethod
from typing import Sequence

from juegamas.domain.entities.reserva import Reserva


class ReservaRepo(ABC):
    """
    Puerto para el repositorio de reservas.

    Las reservas nunca se eliminan: sólo se crean y se actualizan.
    """

    @abstractmethod
    async def get_by_id(self, reserva_id: str) -> Reserva | None:
        """
        Obtiene una reserva por su ID.

        Args:
            reserva_id: ID de la reserva.

        Returns:
            Reserva o None si no existe.
        """
        raise NotImplementedError

    @abstractmethod
    async def list_by_usuario(self, usuario_id: str) -> Sequence[Reserva]:
        """Lista todas las reservas de un cliente."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_propietario(self, propietario_id: str) -> Sequence[Reserva]:
        """Lista las reservas de los espacios de un propietario."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_estado(self, estado: str) -> Sequence[Reserva]:
        """Lista las reservas en un estado (usado por los barridos del sistema)."""
        raise NotImplementedError

    @abstractmethod
    async def add(self, reserva: Reserva) -> Reserva:
        raise NotImplementedError

    @abstractmethod
    async def save(self, reserva: Reserva) -> None:
        """
        Persiste el estado mutable de una reserva existente.

        Raises:
            ReservaNotFoundError: Si la reserva no existe.
        """
        raise NotImplementedError
