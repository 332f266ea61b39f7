import logging

from juegamas.application.dtos import ResultadoOperacion, SesionUsuario
from juegamas.application.interfaces.clock import Clock
from juegamas.application.interfaces.notification_gateway import Notificacion, NotificationGateway
from juegamas.application.interfaces.reserva_repo import ReservaRepo
from juegamas.application.interfaces.transaction_manager import TransactionManager
from juegamas.application.notifications import despachar
from juegamas.application.submission_guard import OperacionesEnCurso
from juegamas.domain.entities.reserva import Reserva
from juegamas.domain.errors import ReservaNotFoundError, ValidationError
from juegamas.domain.validators import validar_motivo_cancelacion

SUPERFICIE = "reserva"


class CancelarReservaUseCase:
    """
    Cancela una reserva del cliente autenticado.

    El motivo se valida antes de tocar el repositorio. La notificación al
    propietario se envía después de guardar y su fallo no revierte nada.
    """

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

    async def execute(
        self,
        reserva_id: str,
        motivo: str,
        sesion: SesionUsuario,
    ) -> ResultadoOperacion[Reserva]:
        error = validar_motivo_cancelacion(motivo)
        if error:
            raise ValidationError(field="motivo_cancelacion", message=error)

        async with self._guard.reservar(SUPERFICIE, reserva_id):
            async with self._transaction_manager.start():
                reserva = await self._reserva_repo.get_by_id(reserva_id)
                if reserva is None or not reserva.pertenece_a(sesion.usuario_id):
                    raise ReservaNotFoundError(reserva_id)
                reserva.cancelar(motivo, cancelado_por=sesion.usuario_id, ahora=self._clock.now())
                await self._reserva_repo.save(reserva)

            actualizada = await self._reserva_repo.get_by_id(reserva_id)

        self._logger.info(
            "Reservation cancelled",
            extra={"reserva_id": reserva_id, "usuario_id": sesion.usuario_id},
        )
        await despachar(
            self._notification_gateway,
            Notificacion(
                tipo="reserva_cancelada",
                destinatario_id=actualizada.propietario_id,
                titulo="Reserva cancelada",
                mensaje=(
                    f"La reserva {actualizada.codigo_reserva} de {actualizada.espacio_nombre} "
                    f"para el {actualizada.franja} fue cancelada."
                ),
                datos={"reserva_id": reserva_id, "motivo": actualizada.motivo_cancelacion},
            ),
        )
        return ResultadoOperacion(
            success=True,
            message="Reserva cancelada exitosamente",
            data=actualizada,
        )
