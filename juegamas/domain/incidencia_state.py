"""Máquina de estados de la incidencia.

pendiente → en_revision | cerrada
en_revision → resuelta | cerrada
resuelta → cerrada
cerrada → (terminal)
"""

from juegamas.domain.constants import (
    INCIDENCIA_ESTADO_CERRADA,
    INCIDENCIA_ESTADO_EN_REVISION,
    INCIDENCIA_ESTADO_PENDIENTE,
    INCIDENCIA_ESTADO_RESUELTA,
    INCIDENCIA_ESTADOS_ACTUALIZABLES,
)
from juegamas.domain.errors import TransicionInvalidaError

INCIDENCIA_TRANSITIONS: dict[str, set[str]] = {
    INCIDENCIA_ESTADO_PENDIENTE: {INCIDENCIA_ESTADO_EN_REVISION, INCIDENCIA_ESTADO_CERRADA},
    INCIDENCIA_ESTADO_EN_REVISION: {INCIDENCIA_ESTADO_RESUELTA, INCIDENCIA_ESTADO_CERRADA},
    INCIDENCIA_ESTADO_RESUELTA: {INCIDENCIA_ESTADO_CERRADA},
    INCIDENCIA_ESTADO_CERRADA: set(),
}


def es_transicion_valida(actual: str, destino: str) -> bool:
    return destino in INCIDENCIA_TRANSITIONS.get(actual, set())


def puede_actualizarse(estado: str) -> bool:
    """Sólo se agrega información mientras soporte no ha resuelto la incidencia."""
    return estado in INCIDENCIA_ESTADOS_ACTUALIZABLES


def puede_cerrarse(estado: str) -> bool:
    return es_transicion_valida(estado, INCIDENCIA_ESTADO_CERRADA)


def assert_incidencia_transition(actual: str, destino: str) -> None:
    if not es_transicion_valida(actual, destino):
        raise TransicionInvalidaError("incidencia", actual, destino)
