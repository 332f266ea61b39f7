import logging
from typing import Any

import httpx
from pybreaker import CircuitBreaker

from juegamas.application.interfaces.notification_gateway import (
    Notificacion,
    NotificationGateway,
    NotificationResult,
)
from juegamas.infrastructure.circuit_breaker import (
    CircuitBreakerError,
    llamar_protegido,
    notification_breaker,
)

logger = logging.getLogger(__name__)


class NotificacionServidorError(Exception):
    """Respuesta 5xx del servicio de notificaciones (cuenta como fallo del breaker)."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Notification service returned {status_code}")
        self.status_code = status_code
        self.body = body


class HttpNotificationGateway(NotificationGateway):
    def __init__(
        self,
        webhook_url: str,
        timeout_seconds: float = 5.0,
        breaker: CircuitBreaker | None = None,
    ) -> None:
        """
        Entrega notificaciones a un webhook HTTP, protegido por Circuit Breaker.

        Args:
            webhook_url: URL que recibe el POST con la notificación.
            timeout_seconds: Timeout de la petición en segundos.
            breaker: Breaker a usar (por defecto el compartido de notificaciones).
        """
        self._webhook_url = webhook_url
        self._timeout = timeout_seconds
        self._breaker = breaker or notification_breaker

    async def send(self, notificacion: Notificacion) -> NotificationResult:
        payload: dict[str, Any] = {
            "tipo": notificacion.tipo,
            "destinatario_id": notificacion.destinatario_id,
            "titulo": notificacion.titulo,
            "mensaje": notificacion.mensaje,
            "datos": notificacion.datos,
        }

        async def _make_request():
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(self._webhook_url, json=payload)
            if response.status_code >= 500:
                raise NotificacionServidorError(response.status_code, response.text)
            return response

        try:
            response = await llamar_protegido(self._breaker, _make_request)
        except CircuitBreakerError as exc:
            logger.error(
                "Notification circuit breaker is open - service unavailable",
                extra={"tipo": notificacion.tipo, "circuit_state": str(exc)},
            )
            return NotificationResult(
                status="FAILED",
                error_code="CIRCUIT_OPEN",
                error_message="Notification service temporarily unavailable (circuit breaker open)",
            )
        except httpx.TimeoutException as exc:
            logger.warning(
                "Notification request timeout",
                extra={"tipo": notificacion.tipo, "timeout": self._timeout},
            )
            return NotificationResult(status="FAILED", error_code="TIMEOUT", error_message=str(exc))
        except httpx.HTTPError as exc:
            logger.error("Notification HTTP error", exc_info=exc, extra={"tipo": notificacion.tipo})
            return NotificationResult(status="FAILED", error_code="HTTP_ERROR", error_message=str(exc))
        except NotificacionServidorError as exc:
            return NotificationResult(
                status="FAILED",
                error_code="NON_2XX",
                error_message=exc.body,
                http_status=exc.status_code,
            )

        if 200 <= response.status_code < 300:
            return NotificationResult(status="SENT", http_status=response.status_code)

        return NotificationResult(
            status="FAILED",
            error_code="NON_2XX",
            error_message=response.text,
            http_status=response.status_code,
        )
