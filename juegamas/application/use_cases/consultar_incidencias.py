"""Consultas de incidencias: las del cliente y la bandeja de soporte."""

from juegamas.application.dtos import SesionUsuario
from juegamas.application.interfaces.incidencia_repo import IncidenciaRepo
from juegamas.domain.entities.incidencia import Incidencia
from juegamas.domain.errors import IncidenciaNotFoundError
from juegamas.domain.listing import (
    FiltrosIncidencias,
    Pagina,
    contar_por_estado,
    listar_incidencias,
)


class ObtenerIncidenciaUseCase:
    def __init__(self, incidencia_repo: IncidenciaRepo) -> None:
        self._incidencia_repo = incidencia_repo

    async def execute(self, incidencia_id: str, sesion: SesionUsuario) -> Incidencia:
        incidencia = await self._incidencia_repo.get_by_id(incidencia_id)
        if incidencia is None or not (sesion.es_admin or incidencia.pertenece_a(sesion.usuario_id)):
            raise IncidenciaNotFoundError(incidencia_id)
        return incidencia


class ListarIncidenciasUseCase:
    def __init__(self, incidencia_repo: IncidenciaRepo) -> None:
        self._incidencia_repo = incidencia_repo

    async def execute(self, sesion: SesionUsuario, filtros: FiltrosIncidencias) -> Pagina[Incidencia]:
        incidencias = await self._incidencia_repo.list_by_usuario(sesion.usuario_id)
        return listar_incidencias(incidencias, filtros)


class ListarIncidenciasSoporteUseCase:
    """Bandeja de soporte: incidencias de todos los clientes, con los mismos filtros."""

    def __init__(self, incidencia_repo: IncidenciaRepo) -> None:
        self._incidencia_repo = incidencia_repo

    async def execute(self, filtros: FiltrosIncidencias) -> Pagina[Incidencia]:
        return listar_incidencias(await self._incidencia_repo.list_all(), filtros)


class EstadisticasIncidenciasUseCase:
    def __init__(self, incidencia_repo: IncidenciaRepo) -> None:
        self._incidencia_repo = incidencia_repo

    async def execute(self, sesion: SesionUsuario) -> dict[str, int]:
        return contar_por_estado(await self._incidencia_repo.list_by_usuario(sesion.usuario_id))
