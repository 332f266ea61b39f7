"""Máquina de estados de la reserva.

pendiente → confirmada | cancelada
confirmada → cancelada | completada
cancelada, completada → (terminales)
"""

from juegamas.domain.constants import (
    RESERVA_ESTADO_CANCELADA,
    RESERVA_ESTADO_COMPLETADA,
    RESERVA_ESTADO_CONFIRMADA,
    RESERVA_ESTADO_PENDIENTE,
)
from juegamas.domain.errors import TransicionInvalidaError

RESERVA_TRANSITIONS: dict[str, set[str]] = {
    RESERVA_ESTADO_PENDIENTE: {RESERVA_ESTADO_CONFIRMADA, RESERVA_ESTADO_CANCELADA},
    RESERVA_ESTADO_CONFIRMADA: {RESERVA_ESTADO_CANCELADA, RESERVA_ESTADO_COMPLETADA},
    RESERVA_ESTADO_CANCELADA: set(),
    RESERVA_ESTADO_COMPLETADA: set(),
}


def es_transicion_valida(actual: str, destino: str) -> bool:
    return destino in RESERVA_TRANSITIONS.get(actual, set())


def es_terminal(estado: str) -> bool:
    return not RESERVA_TRANSITIONS.get(estado, set())


def assert_reserva_transition(actual: str, destino: str) -> None:
    if not es_transicion_valida(actual, destino):
        raise TransicionInvalidaError("reserva", actual, destino)
