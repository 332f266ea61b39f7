"""
Capa de Dominio - JuegaMás.

Lógica de negocio pura, sin dependencias de frameworks.

Estructura:
- entities/: Entidades (Reserva, Incidencia, EspacioDeportivo, Usuario)
- value_objects/: Objetos de valor inmutables (FranjaHoraria)
- reserva_state.py / incidencia_state.py: Máquinas de estado
- validators.py: Reglas de validación de campos
- listing.py: Filtros, ordenamiento y paginación
- roles.py: Capacidades por rol
- wizard.py: Formularios de varios pasos
- errors.py: Excepciones del dominio
"""

from juegamas.domain.entities import EspacioDeportivo, Incidencia, MensajeContacto, Reserva, Usuario
from juegamas.domain.errors import DomainError, ValidationError

__all__ = [
    "DomainError",
    "EspacioDeportivo",
    "Incidencia",
    "MensajeContacto",
    "Reserva",
    "Usuario",
    "ValidationError",
]
