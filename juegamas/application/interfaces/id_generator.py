"""Interface IdGenerator - Puerto para generación de identificadores."""

import uuid
from abc import ABC, abstractmethod


class IdGenerator(ABC):
    @abstractmethod
    def generate(self) -> str:
        """Genera un identificador único (UUID v4 en formato estándar)."""
        raise NotImplementedError


class UUIDGenerator(IdGenerator):
    def generate(self) -> str:
        return str(uuid.uuid4())


class FakeIdGenerator(IdGenerator):
    """Genera valores predecibles para pruebas deterministas."""

    def __init__(self, prefix: str = "test"):
        self._prefix = prefix
        self._counter = 0

    def generate(self) -> str:
        self._counter += 1
        return f"{self._prefix}-{self._counter:04d}"
