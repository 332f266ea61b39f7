"""
Circuit Breakers para los colaboradores externos (notificaciones, almacenamiento).

Cuando un servicio acumula fallos consecutivos el circuito se abre y las
llamadas fallan de inmediato, sin esperar el timeout de red.

Estados:
- CLOSED: operación normal
- OPEN: demasiados fallos, se rechaza sin llamar
- HALF_OPEN: pasado `reset_timeout`, se deja pasar una llamada de prueba
"""

import logging
from pybreaker import CircuitBreaker, CircuitBreakerError, CircuitBreakerListener

logger = logging.getLogger(__name__)


class EstadoCircuitoListener(CircuitBreakerListener):
    """Registra los cambios de estado para monitoreo."""

    def __init__(self, name: str):
        self.name = name

    def state_change(self, cb, old_state, new_state):
        logger.warning(
            "Circuit breaker state changed",
            extra={
                "breaker_name": self.name,
                "old_state": old_state.name if old_state else None,
                "new_state": new_state.name,
            },
        )


def crear_breaker(name: str, fail_max: int = 5, reset_timeout: int = 60) -> CircuitBreaker:
    return CircuitBreaker(
        fail_max=fail_max,
        reset_timeout=reset_timeout,
        name=f"{name}_circuit_breaker",
        listeners=[EstadoCircuitoListener(name)],
    )


notification_breaker = crear_breaker("notification")
storage_breaker = crear_breaker("storage")


async def llamar_protegido(breaker: CircuitBreaker, func, *args, **kwargs):
    """
    Ejecuta una corrutina bajo el breaker.

    `call_async` de pybreaker depende de Tornado, así que el conteo de
    fallos se hace con el context manager `calling()` alrededor del await.
    """
    with breaker.calling():
        return await func(*args, **kwargs)


__all__ = [
    "CircuitBreakerError",
    "crear_breaker",
    "llamar_protegido",
    "notification_breaker",
    "storage_breaker",
]
