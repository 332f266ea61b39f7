"""Interface ContactoRepo - Puerto para mensajes del formulario de contacto."""

from abc import ABC, abstractmethod
from typing import Sequence

from juegamas.domain.entities.usuario import MensajeContacto


class ContactoRepo(ABC):
    """
    Puerto para el repositorio de mensajes de contacto.

    Define las operaciones de persistencia para los mensajes que llegan
    desde el formulario público.
    """

    @abstractmethod
    async def add(self, mensaje: MensajeContacto) -> MensajeContacto:
        """
        Guarda un mensaje nuevo.

        Returns:
            MensajeContacto con el ID asignado.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, mensaje_id: int) -> MensajeContacto | None:
        raise NotImplementedError

    @abstractmethod
    async def list_all(self, leido: bool | None = None) -> Sequence[MensajeContacto]:
        """
        Lista los mensajes, los más recientes primero.

        Args:
            leido: Si se indica, filtra por estado de lectura.
        """
        raise NotImplementedError

    @abstractmethod
    async def save(self, mensaje: MensajeContacto) -> None:
        """Persiste las marcas de leído/respondido."""
        raise NotImplementedError
