import logging

from juegamas.application.dtos import ResultadoOperacion, SesionUsuario
from juegamas.application.interfaces.clock import Clock
from juegamas.application.interfaces.incidencia_repo import IncidenciaRepo
from juegamas.application.interfaces.transaction_manager import TransactionManager
from juegamas.application.submission_guard import OperacionesEnCurso
from juegamas.domain.entities.incidencia import Incidencia
from juegamas.domain.errors import IncidenciaNotFoundError

SUPERFICIE = "incidencia"


class CerrarIncidenciaUseCase:
    """Cierre irreversible de una incidencia por su autor."""

    def __init__(
        self,
        incidencia_repo: IncidenciaRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        guard: OperacionesEnCurso,
    ) -> None:
        self._incidencia_repo = incidencia_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._guard = guard
        self._logger = logging.getLogger(__name__)

    async def execute(self, incidencia_id: str, sesion: SesionUsuario) -> ResultadoOperacion[Incidencia]:
        async with self._guard.reservar(SUPERFICIE, incidencia_id):
            async with self._transaction_manager.start():
                incidencia = await self._incidencia_repo.get_by_id(incidencia_id)
                if incidencia is None or not incidencia.pertenece_a(sesion.usuario_id):
                    raise IncidenciaNotFoundError(incidencia_id)
                incidencia.cerrar(self._clock.now())
                await self._incidencia_repo.save(incidencia)

            actualizada = await self._incidencia_repo.get_by_id(incidencia_id)

        self._logger.info("Incident closed", extra={"incidencia_id": incidencia_id})
        return ResultadoOperacion(
            success=True,
            message="Incidencia cerrada correctamente",
            data=actualizada,
        )
