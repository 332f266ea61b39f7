import logging

from juegamas.application.interfaces.clock import Clock
from juegamas.application.interfaces.incidencia_repo import IncidenciaRepo
from juegamas.application.interfaces.transaction_manager import TransactionManager
from juegamas.application.submission_guard import OperacionesEnCurso
from juegamas.domain.constants import INCIDENCIA_ESTADO_RESUELTA
from juegamas.domain.errors import OperacionEnCursoError

SUPERFICIE = "incidencia"


class AutoCerrarIncidenciasUseCase:
    """Cierra las incidencias resueltas sin actividad durante `dias_espera` días."""

    def __init__(
        self,
        incidencia_repo: IncidenciaRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        guard: OperacionesEnCurso,
        dias_espera: int = 7,
    ) -> None:
        self._incidencia_repo = incidencia_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._guard = guard
        self._dias_espera = dias_espera
        self._logger = logging.getLogger(__name__)

    async def execute(self) -> dict:
        ahora = self._clock.now()
        resueltas = await self._incidencia_repo.list_by_estado(INCIDENCIA_ESTADO_RESUELTA)
        cerradas: list[str] = []
        omitidas: list[str] = []

        for incidencia in resueltas:
            if not incidencia.vence_cierre_automatico(ahora, self._dias_espera):
                continue
            try:
                async with self._guard.reservar(SUPERFICIE, incidencia.id):
                    async with self._transaction_manager.start():
                        actual = await self._incidencia_repo.get_by_id(incidencia.id)
                        if (
                            actual is None
                            or actual.estado != INCIDENCIA_ESTADO_RESUELTA
                            or not actual.vence_cierre_automatico(ahora, self._dias_espera)
                        ):
                            continue
                        actual.cerrar(ahora)
                        await self._incidencia_repo.save(actual)
            except OperacionEnCursoError:
                omitidas.append(incidencia.id)
                continue
            cerradas.append(incidencia.id)

        self._logger.info(
            "Resolved incidents auto-closed",
            extra={"cerradas": len(cerradas), "omitidas": len(omitidas), "dias": self._dias_espera},
        )
        return {"cerradas": cerradas, "omitidas": omitidas}
