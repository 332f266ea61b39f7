from juegamas.application.interfaces.notification_gateway import (
    Notificacion,
    NotificationGateway,
    NotificationResult,
)


class StubNotificationGateway(NotificationGateway):
    """Registra las notificaciones en memoria en vez de entregarlas."""

    def __init__(self) -> None:
        self.enviadas: list[Notificacion] = []

    async def send(self, notificacion: Notificacion) -> NotificationResult:
        self.enviadas.append(notificacion)
        return NotificationResult(status="SENT")
