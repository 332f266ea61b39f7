"""Consultas de reservas: detalle, listado, próximas y vista del propietario."""

from datetime import tzinfo

from juegamas.application.dtos import SesionUsuario
from juegamas.application.interfaces.clock import Clock
from juegamas.application.interfaces.reserva_repo import ReservaRepo
from juegamas.domain.entities.reserva import Reserva
from juegamas.domain.errors import ReservaNotFoundError
from juegamas.domain.listing import FiltrosReservas, Pagina, listar_reservas, proximas_reservas


def puede_ver(reserva: Reserva, sesion: SesionUsuario) -> bool:
    if sesion.es_admin:
        return True
    if sesion.es_propietario:
        return reserva.propietario_id == sesion.usuario_id
    return reserva.pertenece_a(sesion.usuario_id)


class ObtenerReservaUseCase:
    def __init__(self, reserva_repo: ReservaRepo) -> None:
        self._reserva_repo = reserva_repo

    async def execute(self, reserva_id: str, sesion: SesionUsuario) -> Reserva:
        reserva = await self._reserva_repo.get_by_id(reserva_id)
        # Una reserva ajena se reporta igual que una inexistente
        if reserva is None or not puede_ver(reserva, sesion):
            raise ReservaNotFoundError(reserva_id)
        return reserva


class ListarReservasUseCase:
    def __init__(self, reserva_repo: ReservaRepo) -> None:
        self._reserva_repo = reserva_repo

    async def execute(self, sesion: SesionUsuario, filtros: FiltrosReservas) -> Pagina[Reserva]:
        reservas = await self._reserva_repo.list_by_usuario(sesion.usuario_id)
        return listar_reservas(reservas, filtros)


class ProximasReservasUseCase:
    """Las próximas reservas activas del cliente, para el dashboard."""

    def __init__(self, reserva_repo: ReservaRepo, clock: Clock, zona_horaria: tzinfo | None = None) -> None:
        self._reserva_repo = reserva_repo
        self._clock = clock
        self._tz = zona_horaria

    async def execute(self, sesion: SesionUsuario, limite: int = 3) -> list[Reserva]:
        reservas = await self._reserva_repo.list_by_usuario(sesion.usuario_id)
        return proximas_reservas(reservas, self._clock.today(self._tz), limite)


class ListarReservasPropietarioUseCase:
    def __init__(self, reserva_repo: ReservaRepo) -> None:
        self._reserva_repo = reserva_repo

    async def execute(self, sesion: SesionUsuario, filtros: FiltrosReservas) -> Pagina[Reserva]:
        reservas = await self._reserva_repo.list_by_propietario(sesion.usuario_id)
        return listar_reservas(reservas, filtros)
