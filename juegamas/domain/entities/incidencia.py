"""Entidad Incidencia - ticket de soporte reportado por un cliente."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from juegamas.domain import incidencia_state
from juegamas.domain.constants import (
    INCIDENCIA_ESTADO_CERRADA,
    INCIDENCIA_ESTADO_EN_REVISION,
    INCIDENCIA_ESTADO_PENDIENTE,
    INCIDENCIA_ESTADO_RESUELTA,
    SEPARADOR_ACTUALIZACION,
)
from juegamas.domain.errors import (
    IncidenciaCerradaError,
    IncidenciaNoActualizableError,
    ValidationError,
)
from juegamas.domain.validators import validar_informacion_adicional

TIPOS_INCIDENCIA = (
    "problema_reserva",
    "problema_espacio",
    "problema_pago",
    "problema_acceso",
    "sugerencia",
    "otro",
)


@dataclass
class Incidencia:
    """
    Incidencia de soporte.

    La descripción sólo crece: cada ampliación se agrega tras
    `SEPARADOR_ACTUALIZACION`. Una incidencia resuelta o cerrada ya no admite
    más información, y `cerrada` es terminal.
    """

    id: str
    usuario_id: str
    tipo: str
    asunto: str
    descripcion: str
    estado: str = INCIDENCIA_ESTADO_PENDIENTE
    respuesta: str | None = None
    reserva_id: str | None = None
    archivos_adjuntos: list[str] = field(default_factory=list)
    fecha_creacion: datetime | None = None
    fecha_actualizacion: datetime | None = None

    @property
    def es_terminal(self) -> bool:
        return self.estado == INCIDENCIA_ESTADO_CERRADA

    @property
    def puede_actualizarse(self) -> bool:
        return incidencia_state.puede_actualizarse(self.estado)

    @property
    def puede_cerrarse(self) -> bool:
        return incidencia_state.puede_cerrarse(self.estado)

    def agregar_informacion(self, texto: str, ahora: datetime) -> None:
        error = validar_informacion_adicional(texto)
        if error:
            raise ValidationError(field="informacion_adicional", message=error)
        if not self.puede_actualizarse:
            raise IncidenciaNoActualizableError(self.id, self.estado)
        self.descripcion = f"{self.descripcion}{SEPARADOR_ACTUALIZACION}{texto.strip()}"
        self.fecha_actualizacion = ahora

    def poner_en_revision(self, ahora: datetime) -> None:
        incidencia_state.assert_incidencia_transition(self.estado, INCIDENCIA_ESTADO_EN_REVISION)
        self.estado = INCIDENCIA_ESTADO_EN_REVISION
        self.fecha_actualizacion = ahora

    def resolver(self, respuesta: str, ahora: datetime) -> None:
        if not respuesta or not respuesta.strip():
            raise ValidationError(field="respuesta", message="La respuesta es obligatoria")
        incidencia_state.assert_incidencia_transition(self.estado, INCIDENCIA_ESTADO_RESUELTA)
        self.estado = INCIDENCIA_ESTADO_RESUELTA
        self.respuesta = respuesta.strip()
        self.fecha_actualizacion = ahora

    def cerrar(self, ahora: datetime) -> None:
        """Cierre irreversible, por el cliente o por el cierre automático."""
        if self.es_terminal:
            raise IncidenciaCerradaError(self.id)
        incidencia_state.assert_incidencia_transition(self.estado, INCIDENCIA_ESTADO_CERRADA)
        self.estado = INCIDENCIA_ESTADO_CERRADA
        self.fecha_actualizacion = ahora

    def vence_cierre_automatico(self, ahora: datetime, dias: int) -> bool:
        """Una incidencia resuelta se cierra sola tras `dias` sin actividad."""
        if self.estado != INCIDENCIA_ESTADO_RESUELTA:
            return False
        referencia = self.fecha_actualizacion or self.fecha_creacion
        if referencia is None:
            return False
        return ahora - referencia >= timedelta(days=dias)

    def pertenece_a(self, usuario_id: str) -> bool:
        return self.usuario_id == usuario_id
