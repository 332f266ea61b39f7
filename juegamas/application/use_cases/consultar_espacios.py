"""Buscador de espacios deportivos."""

from juegamas.application.interfaces.espacio_repo import EspacioRepo
from juegamas.domain.entities.espacio import EspacioDeportivo
from juegamas.domain.errors import EspacioNotFoundError
from juegamas.domain.listing import FiltrosEspacios, Pagina, listar_espacios, opciones_filtro


class ListarEspaciosUseCase:
    def __init__(self, espacio_repo: EspacioRepo) -> None:
        self._espacio_repo = espacio_repo

    async def execute(self, filtros: FiltrosEspacios) -> Pagina[EspacioDeportivo]:
        return listar_espacios(await self._espacio_repo.list_all(), filtros)


class OpcionesFiltroEspaciosUseCase:
    def __init__(self, espacio_repo: EspacioRepo) -> None:
        self._espacio_repo = espacio_repo

    async def execute(self) -> dict[str, list[str]]:
        return opciones_filtro(await self._espacio_repo.list_all())


class ObtenerEspacioUseCase:
    def __init__(self, espacio_repo: EspacioRepo) -> None:
        self._espacio_repo = espacio_repo

    async def execute(self, espacio_id: int) -> EspacioDeportivo:
        espacio = await self._espacio_repo.get_by_id(espacio_id)
        if espacio is None or not espacio.esta_activo:
            raise EspacioNotFoundError(espacio_id)
        return espacio
