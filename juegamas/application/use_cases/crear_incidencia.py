import logging
from typing import Any

from juegamas.application.dtos import ResultadoOperacion, SesionUsuario
from juegamas.application.interfaces.clock import Clock
from juegamas.application.interfaces.id_generator import IdGenerator
from juegamas.application.interfaces.incidencia_repo import IncidenciaRepo
from juegamas.application.interfaces.notification_gateway import Notificacion, NotificationGateway
from juegamas.application.interfaces.reserva_repo import ReservaRepo
from juegamas.application.interfaces.transaction_manager import TransactionManager
from juegamas.application.notifications import despachar
from juegamas.application.submission_guard import OperacionesEnCurso
from juegamas.domain.entities.incidencia import Incidencia
from juegamas.domain.errors import ValidationError
from juegamas.domain.wizard import wizard_incidencia

SUPERFICIE = "incidencia:crear"
DESTINATARIO_SOPORTE = "soporte"


class CrearIncidenciaUseCase:
    """
    Registra una incidencia del cliente.

    Los datos pasan por las mismas compuertas del formulario de reporte. Si
    se indica una reserva, debe ser del mismo cliente.
    """

    def __init__(
        self,
        incidencia_repo: IncidenciaRepo,
        reserva_repo: ReservaRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        id_generator: IdGenerator,
        guard: OperacionesEnCurso,
        notification_gateway: NotificationGateway | None = None,
    ) -> None:
        self._incidencia_repo = incidencia_repo
        self._reserva_repo = reserva_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._id_generator = id_generator
        self._guard = guard
        self._notification_gateway = notification_gateway
        self._logger = logging.getLogger(__name__)

    async def execute(
        self, sesion: SesionUsuario, datos: dict[str, Any]
    ) -> ResultadoOperacion[Incidencia]:
        wizard_incidencia().completar(datos)
        reserva_id = datos.get("reserva_id") or None

        # Un envío por cliente a la vez
        async with self._guard.reservar(SUPERFICIE, sesion.usuario_id):
            async with self._transaction_manager.start():
                if reserva_id is not None:
                    reserva = await self._reserva_repo.get_by_id(reserva_id)
                    if reserva is None or not reserva.pertenece_a(sesion.usuario_id):
                        raise ValidationError(
                            field="reserva_id",
                            message="La reserva indicada no existe o no te pertenece",
                        )
                ahora = self._clock.now()
                incidencia = Incidencia(
                    id=self._id_generator.generate(),
                    usuario_id=sesion.usuario_id,
                    tipo=datos["tipo"],
                    asunto=datos["asunto"].strip(),
                    descripcion=datos["descripcion"].strip(),
                    reserva_id=reserva_id,
                    archivos_adjuntos=list(datos.get("archivos_adjuntos") or []),
                    fecha_creacion=ahora,
                    fecha_actualizacion=ahora,
                )
                await self._incidencia_repo.add(incidencia)

            creada = await self._incidencia_repo.get_by_id(incidencia.id)

        self._logger.info(
            "Incident created",
            extra={"incidencia_id": creada.id, "usuario_id": sesion.usuario_id, "tipo": creada.tipo},
        )
        await despachar(
            self._notification_gateway,
            Notificacion(
                tipo="incidencia_creada",
                destinatario_id=DESTINATARIO_SOPORTE,
                titulo=f"Nueva incidencia: {creada.asunto}",
                mensaje=creada.descripcion,
                datos={"incidencia_id": creada.id, "tipo": creada.tipo, "reserva_id": reserva_id},
            ),
        )
        return ResultadoOperacion(
            success=True,
            message="Incidencia reportada correctamente",
            data=creada,
        )
