"""Implementaciones in-memory de los puertos (modo por defecto y tests)."""

from juegamas.infrastructure.in_memory.auth_provider import InMemoryAuthProvider
from juegamas.infrastructure.in_memory.contacto_repo import InMemoryContactoRepo
from juegamas.infrastructure.in_memory.espacio_repo import InMemoryEspacioRepo
from juegamas.infrastructure.in_memory.file_storage import InMemoryFileStorage
from juegamas.infrastructure.in_memory.incidencia_repo import InMemoryIncidenciaRepo
from juegamas.infrastructure.in_memory.notification_gateway import StubNotificationGateway
from juegamas.infrastructure.in_memory.preferencias_store import InMemoryPreferenciasStore
from juegamas.infrastructure.in_memory.reserva_repo import InMemoryReservaRepo
from juegamas.infrastructure.in_memory.transaction_manager import NoopTransactionManager
from juegamas.infrastructure.in_memory.usuario_repo import InMemoryUsuarioRepo

__all__ = [
    "InMemoryAuthProvider",
    "InMemoryContactoRepo",
    "InMemoryEspacioRepo",
    "InMemoryFileStorage",
    "InMemoryIncidenciaRepo",
    "InMemoryPreferenciasStore",
    "InMemoryReservaRepo",
    "InMemoryUsuarioRepo",
    "NoopTransactionManager",
    "StubNotificationGateway",
]
