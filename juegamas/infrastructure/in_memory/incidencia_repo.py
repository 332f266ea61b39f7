"""Implementación in-memory del repositorio de incidencias."""

from copy import deepcopy
from typing import Sequence

from juegamas.application.interfaces.incidencia_repo import IncidenciaRepo
from juegamas.domain.entities.incidencia import Incidencia
from juegamas.domain.errors import IncidenciaNotFoundError


class InMemoryIncidenciaRepo(IncidenciaRepo):
    def __init__(self) -> None:
        self.incidencias: dict[str, Incidencia] = {}

    async def get_by_id(self, incidencia_id: str) -> Incidencia | None:
        incidencia = self.incidencias.get(incidencia_id)
        return deepcopy(incidencia) if incidencia else None

    async def list_by_usuario(self, usuario_id: str) -> Sequence[Incidencia]:
        return [deepcopy(i) for i in self.incidencias.values() if i.usuario_id == usuario_id]

    async def list_by_estado(self, estado: str) -> Sequence[Incidencia]:
        return [deepcopy(i) for i in self.incidencias.values() if i.estado == estado]

    async def list_all(self) -> Sequence[Incidencia]:
        return [deepcopy(i) for i in self.incidencias.values()]

    async def add(self, incidencia: Incidencia) -> Incidencia:
        if incidencia.id in self.incidencias:
            raise ValueError("Incidencia already exists")
        self.incidencias[incidencia.id] = deepcopy(incidencia)
        return incidencia

    async def save(self, incidencia: Incidencia) -> None:
        if incidencia.id not in self.incidencias:
            raise IncidenciaNotFoundError(incidencia.id)
        self.incidencias[incidencia.id] = deepcopy(incidencia)

    def clear(self) -> None:
        self.incidencias.clear()
