from typing import Iterable, Sequence

from juegamas.application.interfaces.espacio_repo import EspacioRepo
from juegamas.domain.entities.espacio import EspacioDeportivo


class InMemoryEspacioRepo(EspacioRepo):
    def __init__(self, espacios: Iterable[EspacioDeportivo] = ()) -> None:
        self.espacios: dict[int, EspacioDeportivo] = {e.id: e for e in espacios}

    async def get_by_id(self, espacio_id: int) -> EspacioDeportivo | None:
        return self.espacios.get(espacio_id)

    async def list_all(self) -> Sequence[EspacioDeportivo]:
        return list(self.espacios.values())

    def add(self, espacio: EspacioDeportivo) -> None:
        self.espacios[espacio.id] = espacio
