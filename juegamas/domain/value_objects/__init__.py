"""Value Objects del dominio de reservas."""

from juegamas.domain.value_objects.franja_horaria import FranjaHoraria

__all__ = [
    "FranjaHoraria",
]
