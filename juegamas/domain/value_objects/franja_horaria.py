"""Value Object FranjaHoraria - fecha y rango horario de una reserva."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo


@dataclass(frozen=True)
class FranjaHoraria:
    """
    Value Object inmutable que representa el bloque reservado de un espacio.

    Attributes:
        fecha: Día de la reserva.
        hora_inicio: Hora de inicio (hora local del recinto).
        hora_fin: Hora de término, siempre posterior a hora_inicio.
    """

    fecha: date
    hora_inicio: time
    hora_fin: time

    def __post_init__(self) -> None:
        if self.hora_fin <= self.hora_inicio:
            raise ValueError(
                f"hora_fin debe ser posterior a hora_inicio: {self.hora_inicio} >= {self.hora_fin}"
            )

    def inicio(self, tz: tzinfo | None = None) -> datetime:
        return datetime.combine(self.fecha, self.hora_inicio, tzinfo=tz)

    def fin(self, tz: tzinfo | None = None) -> datetime:
        return datetime.combine(self.fecha, self.hora_fin, tzinfo=tz)

    @property
    def duracion(self) -> timedelta:
        """Retorna la duración del bloque."""
        return self.fin() - self.inicio()

    def ha_terminado(self, ahora: datetime, tz: tzinfo | None = None) -> bool:
        """
        Verifica si el bloque ya terminó respecto de `ahora`.

        Si `ahora` trae zona horaria, la franja se interpreta en `tz`
        (hora local del recinto).
        """
        if ahora.tzinfo is not None:
            return self.fin(tz or ahora.tzinfo) < ahora
        return self.fin() < ahora

    def __str__(self) -> str:
        return f"{self.fecha.isoformat()} {self.hora_inicio:%H:%M}-{self.hora_fin:%H:%M}"
