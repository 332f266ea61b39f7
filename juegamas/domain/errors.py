"""Excepciones de dominio para JuegaMás."""


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Errores de Validación ===


class ValidationError(DomainError):
    """Error de validación de datos de entrada (previo a cualquier llamada externa)."""

    def __init__(self, field: str, message: str, errors: dict[str, str] | None = None):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field
        self.errors = errors or {field: message}


# === Errores de Reserva ===


class ReservaNotFoundError(DomainError):
    """La reserva no existe o no pertenece al usuario."""

    def __init__(self, reserva_id: str):
        super().__init__(
            message="No se encontró la reserva solicitada",
            code="RESERVA_NOT_FOUND",
        )
        self.reserva_id = reserva_id


class ReservaNoCancelableError(DomainError):
    """El estado actual de la reserva no admite cancelación."""

    def __init__(self, reserva_id: str, estado_actual: str):
        super().__init__(
            message=f"La reserva no puede ser cancelada: estado actual '{estado_actual}'",
            code="RESERVA_NO_CANCELABLE",
        )
        self.reserva_id = reserva_id
        self.estado_actual = estado_actual


class TransicionInvalidaError(DomainError):
    """Transición de estado no permitida por la máquina de estados."""

    def __init__(self, entidad: str, estado_actual: str, estado_destino: str):
        super().__init__(
            message=f"Transición no permitida para {entidad}: {estado_actual} → {estado_destino}",
            code="TRANSICION_INVALIDA",
        )
        self.entidad = entidad
        self.estado_actual = estado_actual
        self.estado_destino = estado_destino


class ReservaNoFinalizadaError(DomainError):
    """La franja horaria de la reserva todavía no termina."""

    def __init__(self, reserva_id: str):
        super().__init__(
            message="La reserva aún no ha finalizado",
            code="RESERVA_NO_FINALIZADA",
        )
        self.reserva_id = reserva_id


# === Errores de Incidencia ===


class IncidenciaNotFoundError(DomainError):
    """La incidencia no existe o no pertenece al usuario."""

    def __init__(self, incidencia_id: str):
        super().__init__(
            message="No se encontró la incidencia solicitada",
            code="INCIDENCIA_NOT_FOUND",
        )
        self.incidencia_id = incidencia_id


class IncidenciaNoActualizableError(DomainError):
    """La incidencia ya está resuelta o cerrada."""

    def __init__(self, incidencia_id: str, estado_actual: str):
        super().__init__(
            message=f"La incidencia no admite más información: estado actual '{estado_actual}'",
            code="INCIDENCIA_NO_ACTUALIZABLE",
        )
        self.incidencia_id = incidencia_id
        self.estado_actual = estado_actual


class IncidenciaCerradaError(DomainError):
    """La incidencia está cerrada; no admite más operaciones."""

    def __init__(self, incidencia_id: str):
        super().__init__(
            message="La incidencia ya está cerrada",
            code="INCIDENCIA_CERRADA",
        )
        self.incidencia_id = incidencia_id


# === Errores de Espacio ===


class EspacioNotFoundError(DomainError):
    """El espacio deportivo no existe o no está activo."""

    def __init__(self, espacio_id: int):
        super().__init__(
            message="No se encontró el espacio deportivo",
            code="ESPACIO_NOT_FOUND",
        )
        self.espacio_id = espacio_id


# === Errores de Usuario / Acceso ===


class UsuarioNotFoundError(DomainError):
    """El usuario no existe."""

    def __init__(self, usuario_id: str):
        super().__init__(message="Usuario no encontrado", code="USUARIO_NOT_FOUND")
        self.usuario_id = usuario_id


class NoAutenticadoError(DomainError):
    """No hay una sesión válida."""

    def __init__(self, message: str = "No autorizado. Inicia sesión para continuar."):
        super().__init__(message=message, code="NO_AUTENTICADO")


class AccesoDenegadoError(DomainError):
    """El rol del usuario no permite la acción solicitada."""

    def __init__(self, rol: str, accion: str):
        super().__init__(
            message="No tienes permiso para realizar esta acción",
            code="ACCESO_DENEGADO",
        )
        self.rol = rol
        self.accion = accion


class PasswordIncorrectaError(DomainError):
    """La contraseña actual no coincide."""

    def __init__(self):
        super().__init__(
            message="La contraseña actual es incorrecta",
            code="PASSWORD_INCORRECTA",
        )


class MensajeContactoNotFoundError(DomainError):
    """El mensaje de contacto no existe."""

    def __init__(self, mensaje_id: int):
        super().__init__(message="Mensaje de contacto no encontrado", code="MENSAJE_NOT_FOUND")
        self.mensaje_id = mensaje_id


# === Errores de Concurrencia ===


class OperacionEnCursoError(DomainError):
    """Ya existe una operación de escritura en curso para la misma entidad."""

    def __init__(self, superficie: str, entidad_id: str):
        super().__init__(
            message="Ya hay una operación en curso para este elemento. Espera a que finalice.",
            code="OPERACION_EN_CURSO",
        )
        self.superficie = superficie
        self.entidad_id = entidad_id


# === Errores de Servicios Externos ===


class ServicioExternoError(DomainError):
    """Un colaborador externo (almacenamiento, notificaciones) falló."""

    def __init__(self, servicio: str, detalle: str | None = None):
        super().__init__(
            message="El servicio no está disponible en este momento. Intenta nuevamente.",
            code="SERVICIO_EXTERNO_ERROR",
        )
        self.servicio = servicio
        self.detalle = detalle
