"""Despacho de notificaciones posterior a una transición ya persistida."""

import logging

from juegamas.application.interfaces.notification_gateway import Notificacion, NotificationGateway

logger = logging.getLogger(__name__)


async def despachar(gateway: NotificationGateway | None, notificacion: Notificacion) -> bool:
    """
    Envía la notificación sin afectar el resultado de la operación.

    Un fallo sólo se registra: el cambio de estado ya está guardado y no se
    revierte.
    """
    if gateway is None:
        return False
    try:
        result = await gateway.send(notificacion)
    except Exception as exc:
        logger.warning(
            "Notification dispatch failed",
            exc_info=exc,
            extra={"tipo": notificacion.tipo, "destinatario_id": notificacion.destinatario_id},
        )
        return False
    if not result.enviada:
        logger.warning(
            "Notification not delivered",
            extra={
                "tipo": notificacion.tipo,
                "destinatario_id": notificacion.destinatario_id,
                "error_code": result.error_code,
            },
        )
    return result.enviada
