import logging
from datetime import tzinfo

from juegamas.application.interfaces.clock import Clock
from juegamas.application.interfaces.reserva_repo import ReservaRepo
from juegamas.application.interfaces.transaction_manager import TransactionManager
from juegamas.application.submission_guard import OperacionesEnCurso
from juegamas.domain.constants import RESERVA_ESTADO_CONFIRMADA
from juegamas.domain.errors import OperacionEnCursoError

SUPERFICIE = "reserva"


class CompletarReservasVencidasUseCase:
    """
    Barrido del sistema: marca como `completada` cada reserva confirmada cuya
    franja horaria ya terminó.
    """

    def __init__(
        self,
        reserva_repo: ReservaRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        guard: OperacionesEnCurso,
        zona_horaria: tzinfo | None = None,
    ) -> None:
        self._reserva_repo = reserva_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._guard = guard
        self._tz = zona_horaria
        self._logger = logging.getLogger(__name__)

    async def execute(self) -> dict:
        ahora = self._clock.now()
        confirmadas = await self._reserva_repo.list_by_estado(RESERVA_ESTADO_CONFIRMADA)
        completadas: list[str] = []
        omitidas: list[str] = []

        for reserva in confirmadas:
            if not reserva.franja.ha_terminado(ahora, self._tz):
                continue
            try:
                async with self._guard.reservar(SUPERFICIE, reserva.id):
                    async with self._transaction_manager.start():
                        # El listado es una foto: se relee bajo la guardia
                        actual = await self._reserva_repo.get_by_id(reserva.id)
                        if actual is None or actual.estado != RESERVA_ESTADO_CONFIRMADA:
                            continue
                        actual.completar(ahora, self._tz)
                        await self._reserva_repo.save(actual)
            except OperacionEnCursoError:
                # Quedará para el próximo barrido
                omitidas.append(reserva.id)
                continue
            completadas.append(reserva.id)

        self._logger.info(
            "Elapsed reservations completed",
            extra={"completadas": len(completadas), "omitidas": len(omitidas)},
        )
        return {"completadas": completadas, "omitidas": omitidas}
