"""Interface PreferenciasStore - Puerto clave/valor para preferencias de UI."""

from abc import ABC, abstractmethod
from typing import Any


class PreferenciasStore(ABC):
    @abstractmethod
    async def load(self, usuario_id: str) -> dict[str, Any]:
        """Retorna las preferencias guardadas (vacío si no hay)."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, usuario_id: str, preferencias: dict[str, Any]) -> None:
        raise NotImplementedError
