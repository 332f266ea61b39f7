import logging

from juegamas.application.dtos import ResultadoOperacion, SesionUsuario
from juegamas.application.interfaces.clock import Clock
from juegamas.application.interfaces.notification_gateway import Notificacion, NotificationGateway
from juegamas.application.interfaces.reserva_repo import ReservaRepo
from juegamas.application.interfaces.transaction_manager import TransactionManager
from juegamas.application.notifications import despachar
from juegamas.application.submission_guard import OperacionesEnCurso
from juegamas.domain.entities.reserva import Reserva
from juegamas.domain.errors import ReservaNotFoundError

SUPERFICIE = "reserva"


class ConfirmarReservaUseCase:
    """Confirmación de una reserva pendiente por el propietario del espacio o un admin."""

    def __init__(
        self,
        reserva_repo: ReservaRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        guard: OperacionesEnCurso,
        notification_gateway: NotificationGateway | None = None,
    ) -> None:
        self._reserva_repo = reserva_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._guard = guard
        self._notification_gateway = notification_gateway
        self._logger = logging.getLogger(__name__)

    async def execute(self, reserva_id: str, sesion: SesionUsuario) -> ResultadoOperacion[Reserva]:
        async with self._guard.reservar(SUPERFICIE, reserva_id):
            async with self._transaction_manager.start():
                reserva = await self._reserva_repo.get_by_id(reserva_id)
                # Un propietario no ve reservas de espacios ajenos
                if reserva is None or not (
                    sesion.es_admin or reserva.propietario_id == sesion.usuario_id
                ):
                    raise ReservaNotFoundError(reserva_id)
                reserva.confirmar(self._clock.now())
                await self._reserva_repo.save(reserva)

            actualizada = await self._reserva_repo.get_by_id(reserva_id)

        self._logger.info(
            "Reservation confirmed",
            extra={"reserva_id": reserva_id, "confirmada_por": sesion.usuario_id},
        )
        await despachar(
            self._notification_gateway,
            Notificacion(
                tipo="reserva_confirmada",
                destinatario_id=actualizada.usuario_id,
                titulo="Reserva confirmada",
                mensaje=(
                    f"Tu reserva {actualizada.codigo_reserva} en {actualizada.espacio_nombre} "
                    f"para el {actualizada.franja} está confirmada."
                ),
                datos={"reserva_id": reserva_id},
            ),
        )
        return ResultadoOperacion(
            success=True,
            message="Reserva confirmada exitosamente",
            data=actualizada,
        )
