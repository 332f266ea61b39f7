"""Interfaces (Puertos) de la capa de aplicación."""

from juegamas.application.interfaces.auth_provider import AuthProvider
from juegamas.application.interfaces.clock import Clock, FakeClock
from juegamas.application.interfaces.contacto_repo import ContactoRepo
from juegamas.application.interfaces.espacio_repo import EspacioRepo
from juegamas.application.interfaces.file_storage import FileStorage
from juegamas.application.interfaces.id_generator import FakeIdGenerator, IdGenerator, UUIDGenerator
from juegamas.application.interfaces.incidencia_repo import IncidenciaRepo
from juegamas.application.interfaces.notification_gateway import (
    Notificacion,
    NotificationGateway,
    NotificationResult,
)
from juegamas.application.interfaces.preferencias_store import PreferenciasStore
from juegamas.application.interfaces.reserva_repo import ReservaRepo
from juegamas.application.interfaces.transaction_manager import TransactionManager
from juegamas.application.interfaces.usuario_repo import UsuarioRepo

__all__ = [
    # Repositories
    "ContactoRepo",
    "EspacioRepo",
    "IncidenciaRepo",
    "ReservaRepo",
    "UsuarioRepo",
    "PreferenciasStore",
    # Gateways
    "AuthProvider",
    "FileStorage",
    "Notificacion",
    "NotificationGateway",
    "NotificationResult",
    # Services
    "Clock",
    "FakeClock",
    "IdGenerator",
    "UUIDGenerator",
    "FakeIdGenerator",
    "TransactionManager",
]
