"""Resultado explícito de una operación de escritura."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class ResultadoOperacion(Generic[T]):
    """
    Lo que retorna cada caso de uso que muta estado.

    `data` es siempre la entidad releída desde el repositorio después de
    persistir, nunca una copia optimista.
    """

    success: bool
    message: str
    data: T | None = None
