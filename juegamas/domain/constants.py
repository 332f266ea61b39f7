"""Constantes del dominio JuegaMás."""

# Estados de reserva
RESERVA_ESTADO_PENDIENTE = "pendiente"
RESERVA_ESTADO_CONFIRMADA = "confirmada"
RESERVA_ESTADO_CANCELADA = "cancelada"
RESERVA_ESTADO_COMPLETADA = "completada"

RESERVA_ESTADOS_CANCELABLES = (RESERVA_ESTADO_PENDIENTE, RESERVA_ESTADO_CONFIRMADA)

# Estados de incidencia
INCIDENCIA_ESTADO_PENDIENTE = "pendiente"
INCIDENCIA_ESTADO_EN_REVISION = "en_revision"
INCIDENCIA_ESTADO_RESUELTA = "resuelta"
INCIDENCIA_ESTADO_CERRADA = "cerrada"

INCIDENCIA_ESTADOS_ACTUALIZABLES = (INCIDENCIA_ESTADO_PENDIENTE, INCIDENCIA_ESTADO_EN_REVISION)

# Marca que separa cada ampliación de la descripción de una incidencia
SEPARADOR_ACTUALIZACION = "\n\n--- ACTUALIZACIÓN ---\n"

# Límites de longitud de campos
MIN_NOMBRE_LENGTH = 3
MIN_ASUNTO_LENGTH = 5
MAX_ASUNTO_LENGTH = 100
MIN_MENSAJE_LENGTH = 20
MAX_MENSAJE_LENGTH = 2000
MIN_DESCRIPCION_LENGTH = 20
MAX_DESCRIPCION_LENGTH = 2000
MIN_MOTIVO_CANCELACION_LENGTH = 10
MIN_INFORMACION_ADICIONAL_LENGTH = 10
MIN_PASSWORD_LENGTH = 8

# Dominios aceptados en el formulario de contacto
DOMINIOS_PERMITIDOS = frozenset(
    {
        "gmail.com",
        "hotmail.com",
        "outlook.com",
        "outlook.cl",
        "yahoo.com",
        "icloud.com",
        "live.com",
        "msn.com",
        "me.com",
    }
)

# Preferencias de interfaz
VIEW_MODE_CARDS = "cards"
VIEW_MODE_TABLE = "table"
VIEW_MODES = (VIEW_MODE_CARDS, VIEW_MODE_TABLE)
