from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    Time,
)

metadata = MetaData()

usuarios = Table(
    "usuarios",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("nombre", String(150), nullable=False),
    Column("rol", String(20), nullable=False),
    Column("telefono", String(20)),
    Column("foto_perfil", String(500)),
    Column("biografia", Text),
    Column("notificaciones_email", Boolean, nullable=False, default=True),
    Column("notificaciones_app", Boolean, nullable=False, default=True),
    Column("created_at", DateTime(timezone=True)),
    Column("updated_at", DateTime(timezone=True)),
)

espacios = Table(
    "espacios_deportivos",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("propietario_id", String(36), nullable=False, index=True),
    Column("nombre", String(150), nullable=False),
    Column("tipo", String(50), nullable=False),
    Column("ciudad", String(100), nullable=False),
    Column("direccion", String(255), nullable=False),
    Column("precio_base", Numeric(12, 2), nullable=False),
    Column("descripcion", Text),
    Column("capacidad_min", Integer),
    Column("capacidad_max", Integer),
    Column("caracteristicas", JSON),
    Column("estado_espacio", String(20), nullable=False, default="activo"),
    Column("calificacion_promedio", Float, nullable=False, default=0.0),
    Column("total_resenas", Integer, nullable=False, default=0),
    Column("created_at", DateTime(timezone=True)),
)

reservas = Table(
    "reservas",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("codigo_reserva", String(50), nullable=False, unique=True),
    Column("usuario_id", String(36), nullable=False, index=True),
    Column("espacio_id", Integer, nullable=False),
    Column("propietario_id", String(36), nullable=False, index=True),
    Column("fecha", Date, nullable=False),
    Column("hora_inicio", Time, nullable=False),
    Column("hora_fin", Time, nullable=False),
    Column("precio_total", Numeric(12, 2), nullable=False),
    Column("estado", String(20), nullable=False, index=True),
    Column("metodo_pago", String(50)),
    Column("id_transaccion", String(100)),
    Column("notas", Text),
    Column("motivo_cancelacion", Text),
    Column("cancelado_por", String(36)),
    Column("created_at", DateTime(timezone=True)),
    Column("updated_at", DateTime(timezone=True)),
)

incidencias = Table(
    "incidencias",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("usuario_id", String(36), nullable=False, index=True),
    Column("tipo", String(30), nullable=False),
    Column("asunto", String(100), nullable=False),
    Column("descripcion", Text, nullable=False),
    Column("estado", String(20), nullable=False, index=True),
    Column("respuesta", Text),
    Column("reserva_id", String(36)),
    Column("archivos_adjuntos", JSON),
    Column("fecha_creacion", DateTime(timezone=True)),
    Column("fecha_actualizacion", DateTime(timezone=True)),
)

mensajes_contacto = Table(
    "mensajes_contacto",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("nombre", String(150), nullable=False),
    Column("email", String(255), nullable=False),
    Column("telefono", String(20)),
    Column("asunto", String(100), nullable=False),
    Column("mensaje", Text, nullable=False),
    Column("leido", Boolean, nullable=False, default=False),
    Column("respondido", Boolean, nullable=False, default=False),
    Column("created_at", DateTime(timezone=True)),
)
