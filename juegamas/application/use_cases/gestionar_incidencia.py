"""Acciones del equipo de soporte sobre una incidencia."""

import logging

from juegamas.application.dtos import ResultadoOperacion, SesionUsuario
from juegamas.application.interfaces.clock import Clock
from juegamas.application.interfaces.incidencia_repo import IncidenciaRepo
from juegamas.application.interfaces.notification_gateway import Notificacion, NotificationGateway
from juegamas.application.interfaces.transaction_manager import TransactionManager
from juegamas.application.notifications import despachar
from juegamas.application.submission_guard import OperacionesEnCurso
from juegamas.domain.entities.incidencia import Incidencia
from juegamas.domain.errors import IncidenciaNotFoundError, ValidationError

SUPERFICIE = "incidencia"


class _GestionIncidencia:
    def __init__(
        self,
        incidencia_repo: IncidenciaRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        guard: OperacionesEnCurso,
        notification_gateway: NotificationGateway | None = None,
    ) -> None:
        self._incidencia_repo = incidencia_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._guard = guard
        self._notification_gateway = notification_gateway
        self._logger = logging.getLogger(__name__)

    async def _obtener(self, incidencia_id: str) -> Incidencia:
        incidencia = await self._incidencia_repo.get_by_id(incidencia_id)
        if incidencia is None:
            raise IncidenciaNotFoundError(incidencia_id)
        return incidencia

    async def _avisar_autor(self, incidencia: Incidencia, titulo: str, mensaje: str) -> None:
        await despachar(
            self._notification_gateway,
            Notificacion(
                tipo=f"incidencia_{incidencia.estado}",
                destinatario_id=incidencia.usuario_id,
                titulo=titulo,
                mensaje=mensaje,
                datos={"incidencia_id": incidencia.id},
            ),
        )


class PonerEnRevisionUseCase(_GestionIncidencia):
    async def execute(self, incidencia_id: str, sesion: SesionUsuario) -> ResultadoOperacion[Incidencia]:
        async with self._guard.reservar(SUPERFICIE, incidencia_id):
            async with self._transaction_manager.start():
                incidencia = await self._obtener(incidencia_id)
                incidencia.poner_en_revision(self._clock.now())
                await self._incidencia_repo.save(incidencia)
            actualizada = await self._obtener(incidencia_id)

        self._logger.info(
            "Incident under review",
            extra={"incidencia_id": incidencia_id, "admin_id": sesion.usuario_id},
        )
        await self._avisar_autor(
            actualizada,
            "Incidencia en revisión",
            f"Estamos revisando tu incidencia \"{actualizada.asunto}\".",
        )
        return ResultadoOperacion(success=True, message="Incidencia en revisión", data=actualizada)


class ResponderIncidenciaUseCase(_GestionIncidencia):
    async def execute(
        self, incidencia_id: str, respuesta: str, sesion: SesionUsuario
    ) -> ResultadoOperacion[Incidencia]:
        if not respuesta or not respuesta.strip():
            raise ValidationError(field="respuesta", message="La respuesta es obligatoria")

        async with self._guard.reservar(SUPERFICIE, incidencia_id):
            async with self._transaction_manager.start():
                incidencia = await self._obtener(incidencia_id)
                incidencia.resolver(respuesta, self._clock.now())
                await self._incidencia_repo.save(incidencia)
            actualizada = await self._obtener(incidencia_id)

        self._logger.info(
            "Incident resolved",
            extra={"incidencia_id": incidencia_id, "admin_id": sesion.usuario_id},
        )
        await self._avisar_autor(
            actualizada,
            "Incidencia resuelta",
            actualizada.respuesta or "",
        )
        return ResultadoOperacion(success=True, message="Respuesta registrada", data=actualizada)
