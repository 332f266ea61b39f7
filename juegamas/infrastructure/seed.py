"""Datos de demostración para el modo in-memory y el script de seed."""

from dataclasses import dataclass, field
from datetime import datetime, time, timedelta
from decimal import Decimal

from juegamas.domain.constants import (
    INCIDENCIA_ESTADO_PENDIENTE,
    RESERVA_ESTADO_CONFIRMADA,
    RESERVA_ESTADO_PENDIENTE,
)
from juegamas.domain.entities import EspacioDeportivo, Incidencia, Reserva, Usuario

CLIENTE_DEMO_ID = "u-cliente-demo"
PROPIETARIO_DEMO_ID = "u-propietario-demo"
ADMIN_DEMO_ID = "u-admin-demo"
PASSWORD_DEMO = "juegamas123"


@dataclass
class DatosDemo:
    usuarios: list[Usuario] = field(default_factory=list)
    espacios: list[EspacioDeportivo] = field(default_factory=list)
    reservas: list[Reserva] = field(default_factory=list)
    incidencias: list[Incidencia] = field(default_factory=list)


def datos_demo(ahora: datetime) -> DatosDemo:
    hoy = ahora.date()
    usuarios = [
        Usuario(CLIENTE_DEMO_ID, "camila.rojas@gmail.com", "Camila Rojas", "cliente",
                telefono="+56912345678", created_at=ahora),
        Usuario(PROPIETARIO_DEMO_ID, "deportes.nunoa@outlook.cl", "Complejo Ñuñoa", "propietario",
                created_at=ahora),
        Usuario(ADMIN_DEMO_ID, "admin@juegamas.cl", "Administración JuegaMás", "admin", created_at=ahora),
    ]
    espacios = [
        EspacioDeportivo(1, PROPIETARIO_DEMO_ID, "Cancha Los Leones", "Fútbol 5", "Santiago",
                         "Av. Los Leones 1200", Decimal("18000"),
                         descripcion="Cancha de pasto sintético con iluminación",
                         capacidad_min=6, capacidad_max=10,
                         caracteristicas={"iluminacion", "camarines", "estacionamiento"},
                         calificacion_promedio=4.6, total_resenas=58,
                         created_at=ahora - timedelta(days=40)),
        EspacioDeportivo(2, PROPIETARIO_DEMO_ID, "Club Pádel Ñuñoa", "Pádel", "Santiago",
                         "Irarrázaval 3400", Decimal("22000"),
                         descripcion="Dos canchas de pádel techadas",
                         capacidad_min=2, capacidad_max=4,
                         caracteristicas={"techado", "arriendo_equipo"},
                         calificacion_promedio=4.8, total_resenas=31,
                         created_at=ahora - timedelta(days=20)),
        EspacioDeportivo(3, PROPIETARIO_DEMO_ID, "Piscina Temperada Viña", "Piscina", "Viña del Mar",
                         "1 Norte 850", Decimal("8000"),
                         descripcion="Piscina semiolímpica temperada",
                         capacidad_min=1, capacidad_max=30,
                         caracteristicas={"techado", "camarines"},
                         calificacion_promedio=4.1, total_resenas=12,
                         created_at=ahora - timedelta(days=5)),
        EspacioDeportivo(4, PROPIETARIO_DEMO_ID, "Multicancha Providencia", "Fútbol 5", "Santiago",
                         "Pedro de Valdivia 55", Decimal("25000"),
                         capacidad_min=6, capacidad_max=12,
                         caracteristicas={"iluminacion"},
                         estado_espacio="inactivo",
                         created_at=ahora - timedelta(days=60)),
    ]
    base = {
        "usuario_id": CLIENTE_DEMO_ID,
        "propietario_id": PROPIETARIO_DEMO_ID,
        "usuario_nombre": "Camila Rojas",
        "usuario_email": "camila.rojas@gmail.com",
        "created_at": ahora - timedelta(days=2),
    }
    reservas = [
        Reserva(id="r-demo-1", codigo_reserva="JM-DEMO0001", espacio_id=1, fecha=hoy + timedelta(days=3),
                hora_inicio=time(19, 0), hora_fin=time(20, 0), precio_total=Decimal("18000"),
                estado=RESERVA_ESTADO_PENDIENTE, espacio_nombre="Cancha Los Leones",
                espacio_tipo="Fútbol 5", espacio_direccion="Av. Los Leones 1200",
                espacio_ciudad="Santiago", **base),
        Reserva(id="r-demo-2", codigo_reserva="JM-DEMO0002", espacio_id=2, fecha=hoy + timedelta(days=7),
                hora_inicio=time(10, 0), hora_fin=time(11, 30), precio_total=Decimal("33000"),
                estado=RESERVA_ESTADO_CONFIRMADA, metodo_pago="webpay",
                espacio_nombre="Club Pádel Ñuñoa", espacio_tipo="Pádel",
                espacio_direccion="Irarrázaval 3400", espacio_ciudad="Santiago", **base),
        Reserva(id="r-demo-3", codigo_reserva="JM-DEMO0003", espacio_id=1, fecha=hoy - timedelta(days=1),
                hora_inicio=time(18, 0), hora_fin=time(19, 0), precio_total=Decimal("18000"),
                estado=RESERVA_ESTADO_CONFIRMADA, metodo_pago="webpay",
                espacio_nombre="Cancha Los Leones", espacio_tipo="Fútbol 5",
                espacio_direccion="Av. Los Leones 1200", espacio_ciudad="Santiago", **base),
    ]
    incidencias = [
        Incidencia(id="i-demo-1", usuario_id=CLIENTE_DEMO_ID, tipo="problema_espacio",
                   asunto="Iluminación defectuosa",
                   descripcion="Dos focos de la cancha no encendieron durante el partido.",
                   estado=INCIDENCIA_ESTADO_PENDIENTE, reserva_id="r-demo-3",
                   fecha_creacion=ahora - timedelta(hours=20),
                   fecha_actualizacion=ahora - timedelta(hours=20)),
    ]
    return DatosDemo(usuarios=usuarios, espacios=espacios, reservas=reservas, incidencias=incidencias)
