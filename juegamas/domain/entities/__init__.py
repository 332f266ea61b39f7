"""Entidades del dominio."""

from juegamas.domain.entities.espacio import ESTADOS_ESPACIO, EspacioDeportivo
from juegamas.domain.entities.incidencia import TIPOS_INCIDENCIA, Incidencia
from juegamas.domain.entities.reserva import Reserva
from juegamas.domain.entities.usuario import MensajeContacto, Usuario

__all__ = [
    "ESTADOS_ESPACIO",
    "EspacioDeportivo",
    "Incidencia",
    "MensajeContacto",
    "Reserva",
    "TIPOS_INCIDENCIA",
    "Usuario",
]
