"""Entidad Reserva - Agregado raíz del ciclo de vida de una reserva."""

from dataclasses import dataclass
from datetime import date, datetime, time, tzinfo
from decimal import Decimal

from juegamas.domain import reserva_state
from juegamas.domain.constants import (
    RESERVA_ESTADO_CANCELADA,
    RESERVA_ESTADO_COMPLETADA,
    RESERVA_ESTADO_CONFIRMADA,
    RESERVA_ESTADO_PENDIENTE,
    RESERVA_ESTADOS_CANCELABLES,
)
from juegamas.domain.errors import (
    ReservaNoCancelableError,
    ReservaNoFinalizadaError,
    ValidationError,
)
from juegamas.domain.validators import validar_motivo_cancelacion
from juegamas.domain.value_objects.franja_horaria import FranjaHoraria


@dataclass
class Reserva:
    """
    Reserva de un espacio deportivo para una fecha y rango horario.

    Se crea en `pendiente` (flujo de reserva externo) y sólo cambia de estado
    a través de los métodos de negocio. Nunca se elimina: la cancelación es
    un estado terminal.
    """

    # Identificadores
    id: str
    codigo_reserva: str

    # Referencias
    usuario_id: str
    espacio_id: int
    propietario_id: str

    # Franja y precio
    fecha: date
    hora_inicio: time
    hora_fin: time
    precio_total: Decimal

    estado: str = RESERVA_ESTADO_PENDIENTE
    metodo_pago: str | None = None
    id_transaccion: str | None = None
    notas: str | None = None
    motivo_cancelacion: str | None = None
    cancelado_por: str | None = None

    # Datos desnormalizados para mostrar
    usuario_nombre: str = ""
    usuario_email: str = ""
    espacio_nombre: str = ""
    espacio_tipo: str = ""
    espacio_direccion: str = ""
    espacio_ciudad: str = ""

    # Timestamps
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.precio_total, Decimal):
            self.precio_total = Decimal(str(self.precio_total))
        if self.precio_total <= 0:
            raise ValueError(f"precio_total debe ser positivo: {self.precio_total}")
        # Valida hora_fin > hora_inicio
        FranjaHoraria(self.fecha, self.hora_inicio, self.hora_fin)

    # === Propiedades calculadas ===

    @property
    def franja(self) -> FranjaHoraria:
        return FranjaHoraria(self.fecha, self.hora_inicio, self.hora_fin)

    @property
    def puede_ser_cancelada(self) -> bool:
        return self.estado in RESERVA_ESTADOS_CANCELABLES

    @property
    def es_terminal(self) -> bool:
        return reserva_state.es_terminal(self.estado)

    @property
    def esta_activa(self) -> bool:
        return self.estado in (RESERVA_ESTADO_PENDIENTE, RESERVA_ESTADO_CONFIRMADA)

    # === Métodos de negocio ===

    def confirmar(self, ahora: datetime) -> None:
        """Confirmación por el propietario o el sistema (pago/disponibilidad externos)."""
        reserva_state.assert_reserva_transition(self.estado, RESERVA_ESTADO_CONFIRMADA)
        self.estado = RESERVA_ESTADO_CONFIRMADA
        self.updated_at = ahora

    def cancelar(self, motivo: str, cancelado_por: str, ahora: datetime) -> None:
        """
        Cancela la reserva.

        El precio total no se modifica. El motivo es obligatorio (mínimo 10
        caracteres) y se valida antes de mirar el estado.
        """
        error = validar_motivo_cancelacion(motivo)
        if error:
            raise ValidationError(field="motivo_cancelacion", message=error)
        if not self.puede_ser_cancelada:
            raise ReservaNoCancelableError(self.id, self.estado)
        self.estado = RESERVA_ESTADO_CANCELADA
        self.motivo_cancelacion = motivo.strip()
        self.cancelado_por = cancelado_por
        self.updated_at = ahora

    def completar(self, ahora: datetime, tz: tzinfo | None = None) -> None:
        """Transición del sistema cuando la franja horaria ya terminó."""
        reserva_state.assert_reserva_transition(self.estado, RESERVA_ESTADO_COMPLETADA)
        if not self.franja.ha_terminado(ahora, tz):
            raise ReservaNoFinalizadaError(self.id)
        self.estado = RESERVA_ESTADO_COMPLETADA
        self.updated_at = ahora

    def pertenece_a(self, usuario_id: str) -> bool:
        return self.usuario_id == usuario_id

    def es_cancelada(self) -> bool:
        return self.estado == RESERVA_ESTADO_CANCELADA
