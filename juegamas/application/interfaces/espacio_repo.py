"""Interface EspacioRepo - Puerto de lectura de espacios deportivos."""

from abc import ABC, abstractmethod
from typing import Sequence

from juegamas.domain.entities.espacio import EspacioDeportivo


class EspacioRepo(ABC):
    """Los espacios se administran en otro servicio; aquí sólo se consultan."""

    @abstractmethod
    async def get_by_id(self, espacio_id: int) -> EspacioDeportivo | None:
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> Sequence[EspacioDeportivo]:
        raise NotImplementedError
