"""Datos y fábricas de entidades para las pruebas."""

from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal

from juegamas.application.dtos import SesionUsuario
from juegamas.domain.entities import EspacioDeportivo, Incidencia, Reserva, Usuario

# 12:00 en Santiago (UTC-3 en horario de verano)
AHORA = datetime(2025, 3, 10, 15, 0, tzinfo=timezone.utc)
HOY = date(2025, 3, 10)

CLIENTE_ID = "u-cliente"
OTRO_CLIENTE_ID = "u-otro"
PROPIETARIO_ID = "u-propietario"
ADMIN_ID = "u-admin"


def headers_de(sesion: SesionUsuario) -> dict[str, str]:
    return {"X-User-Id": sesion.usuario_id, "X-User-Role": sesion.rol}


def make_reserva(**overrides) -> Reserva:
    datos = {
        "id": "r-1",
        "codigo_reserva": "JM-TEST0001",
        "usuario_id": CLIENTE_ID,
        "espacio_id": 1,
        "propietario_id": PROPIETARIO_ID,
        "fecha": HOY + timedelta(days=2),
        "hora_inicio": time(18, 0),
        "hora_fin": time(19, 0),
        "precio_total": Decimal("18000"),
        "espacio_nombre": "Cancha Los Leones",
        "created_at": AHORA - timedelta(days=1),
    }
    datos.update(overrides)
    return Reserva(**datos)


def make_incidencia(**overrides) -> Incidencia:
    datos = {
        "id": "i-1",
        "usuario_id": CLIENTE_ID,
        "tipo": "problema_espacio",
        "asunto": "Iluminación defectuosa",
        "descripcion": "Dos focos de la cancha no encendieron durante el partido.",
        "fecha_creacion": AHORA - timedelta(hours=2),
        "fecha_actualizacion": AHORA - timedelta(hours=2),
    }
    datos.update(overrides)
    return Incidencia(**datos)


def make_espacio(**overrides) -> EspacioDeportivo:
    datos = {
        "id": 1,
        "propietario_id": PROPIETARIO_ID,
        "nombre": "Cancha Los Leones",
        "tipo": "Fútbol 5",
        "ciudad": "Santiago",
        "direccion": "Av. Los Leones 1200",
        "precio_base": Decimal("18000"),
        "capacidad_min": 6,
        "capacidad_max": 10,
        "created_at": AHORA - timedelta(days=10),
    }
    datos.update(overrides)
    return EspacioDeportivo(**datos)


def make_usuario(**overrides) -> Usuario:
    datos = {
        "id": CLIENTE_ID,
        "email": "camila.rojas@gmail.com",
        "nombre": "Camila Rojas",
        "rol": "cliente",
        "created_at": AHORA - timedelta(days=30),
    }
    datos.update(overrides)
    return Usuario(**datos)
