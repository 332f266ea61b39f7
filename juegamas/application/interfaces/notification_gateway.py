"""Interface NotificationGateway - Puerto de envío de notificaciones."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Notificacion:
    tipo: str  # reserva_cancelada, reserva_confirmada, incidencia_creada, ...
    destinatario_id: str
    titulo: str
    mensaje: str
    datos: dict[str, Any] = field(default_factory=dict)


@dataclass
class NotificationResult:
    status: str  # SENT, FAILED
    error_code: str | None = None
    error_message: str | None = None
    http_status: int | None = None

    @property
    def enviada(self) -> bool:
        return self.status == "SENT"


class NotificationGateway(ABC):
    @abstractmethod
    async def send(self, notificacion: Notificacion) -> NotificationResult:
        """
        Entrega la notificación al servicio externo.

        Nunca debe usarse para decidir el resultado de una transición: se
        llama después de persistir el cambio.
        """
        pass
