"""Interface IncidenciaRepo - Puerto para repositorio de incidencias."""

from abc import ABC, abstractmethod
from typing import Sequence

from juegamas.domain.entities.incidencia import Incidencia


class IncidenciaRepo(ABC):
    @abstractmethod
    async def get_by_id(self, incidencia_id: str) -> Incidencia | None:
        raise NotImplementedError

    @abstractmethod
    async def list_by_usuario(self, usuario_id: str) -> Sequence[Incidencia]:
        raise NotImplementedError

    @abstractmethod
    async def list_by_estado(self, estado: str) -> Sequence[Incidencia]:
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> Sequence[Incidencia]:
        """Todas las incidencias, para la bandeja de soporte."""
        raise NotImplementedError

    @abstractmethod
    async def add(self, incidencia: Incidencia) -> Incidencia:
        raise NotImplementedError

    @abstractmethod
    async def save(self, incidencia: Incidencia) -> None:
        """
        Persiste estado, descripción, respuesta y fecha de actualización.

        Raises:
            IncidenciaNotFoundError: Si la incidencia no existe.
        """
        raise NotImplementedError
