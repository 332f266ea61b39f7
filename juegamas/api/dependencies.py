from functools import lru_cache
from zoneinfo import ZoneInfo

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from juegamas.api.deps import AsyncSessionLocal
from juegamas.application.interfaces.id_generator import UUIDGenerator
from juegamas.application.submission_guard import OperacionesEnCurso
from juegamas.application.use_cases.actualizar_incidencia import ActualizarIncidenciaUseCase
from juegamas.application.use_cases.auto_cerrar_incidencias import AutoCerrarIncidenciasUseCase
from juegamas.application.use_cases.cancelar_reserva import CancelarReservaUseCase
from juegamas.application.use_cases.cerrar_incidencia import CerrarIncidenciaUseCase
from juegamas.application.use_cases.completar_reservas_vencidas import CompletarReservasVencidasUseCase
from juegamas.application.use_cases.confirmar_reserva import ConfirmarReservaUseCase
from juegamas.application.use_cases.consultar_espacios import (
    ListarEspaciosUseCase,
    ObtenerEspacioUseCase,
    OpcionesFiltroEspaciosUseCase,
)
from juegamas.application.use_cases.consultar_incidencias import (
    EstadisticasIncidenciasUseCase,
    ListarIncidenciasUseCase,
    ListarIncidenciasSoporteUseCase,
    ObtenerIncidenciaUseCase,
)
from juegamas.application.use_cases.consultar_reservas import (
    ListarReservasPropietarioUseCase,
    ListarReservasUseCase,
    ObtenerReservaUseCase,
    ProximasReservasUseCase,
)
from juegamas.application.use_cases.contacto import (
    EnviarMensajeContactoUseCase,
    ListarMensajesContactoUseCase,
    MarcarMensajeContactoUseCase,
)
from juegamas.application.use_cases.crear_incidencia import CrearIncidenciaUseCase
from juegamas.application.use_cases.gestionar_incidencia import (
    PonerEnRevisionUseCase,
    ResponderIncidenciaUseCase,
)
from juegamas.application.use_cases.perfil import (
    ActualizarPerfilUseCase,
    CambiarPasswordUseCase,
    ObtenerPerfilUseCase,
    SubirAvatarUseCase,
)
from juegamas.application.use_cases.preferencias import (
    GuardarPreferenciasUseCase,
    ObtenerPreferenciasUseCase,
)
from juegamas.application.use_cases.validar_wizard import ValidarPasoWizardUseCase
from juegamas.config import Settings, get_settings
from juegamas.infrastructure.db.repositories import (
    ContactoRepoSQL,
    EspacioRepoSQL,
    IncidenciaRepoSQL,
    ReservaRepoSQL,
    UsuarioRepoSQL,
)
from juegamas.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from juegamas.infrastructure.gateways.file_storage_http import HttpFileStorage
from juegamas.infrastructure.gateways.notification_gateway_http import HttpNotificationGateway
from juegamas.infrastructure.in_memory import (
    InMemoryAuthProvider,
    InMemoryContactoRepo,
    InMemoryEspacioRepo,
    InMemoryFileStorage,
    InMemoryIncidenciaRepo,
    InMemoryPreferenciasStore,
    InMemoryReservaRepo,
    InMemoryUsuarioRepo,
    NoopTransactionManager,
    StubNotificationGateway,
)
from juegamas.infrastructure.seed import PASSWORD_DEMO, datos_demo
from juegamas.infrastructure.services import ClockImpl, JsonPreferenciasStore


async def get_session(settings: Settings = Depends(get_settings)) -> AsyncSession | None:
    if settings.use_in_memory:
        yield None
        return
    async with AsyncSessionLocal() as session:
        yield session


def _notification_gateway(settings: Settings):
    if settings.notification_webhook_url:
        return HttpNotificationGateway(
            webhook_url=settings.notification_webhook_url,
            timeout_seconds=settings.notification_timeout_seconds,
        )
    return None


def _file_storage(settings: Settings):
    if settings.storage_base_url:
        return HttpFileStorage(
            base_url=settings.storage_base_url,
            api_key=settings.storage_api_key,
            timeout_seconds=settings.storage_timeout_seconds,
        )
    return InMemoryFileStorage()


def _preferencias_store(settings: Settings):
    if settings.preferencias_path:
        return JsonPreferenciasStore(settings.preferencias_path)
    return InMemoryPreferenciasStore()


def build_in_memory_bundle(settings: Settings, clock=None, seed: bool | None = None) -> dict:
    """Arma todos los colaboradores in-memory; con `seed` carga los datos de demo."""
    clock = clock or ClockImpl()
    bundle = {
        "reserva_repo": InMemoryReservaRepo(),
        "incidencia_repo": InMemoryIncidenciaRepo(),
        "espacio_repo": InMemoryEspacioRepo(),
        "usuario_repo": InMemoryUsuarioRepo(),
        "contacto_repo": InMemoryContactoRepo(),
        "tx_manager": NoopTransactionManager(),
        "clock": clock,
        "id_generator": UUIDGenerator(),
        "guard": OperacionesEnCurso(),
        "notification_gateway": _notification_gateway(settings) or StubNotificationGateway(),
        "file_storage": _file_storage(settings),
        "auth_provider": InMemoryAuthProvider(),
        "preferencias_store": _preferencias_store(settings),
    }
    if settings.seed_demo_data if seed is None else seed:
        _cargar_demo(bundle)
    return bundle


def _cargar_demo(bundle: dict) -> None:
    datos = datos_demo(bundle["clock"].now())
    for usuario in datos.usuarios:
        bundle["usuario_repo"].usuarios[usuario.id] = usuario
        bundle["auth_provider"].registrar(usuario.id, PASSWORD_DEMO)
    for espacio in datos.espacios:
        bundle["espacio_repo"].add(espacio)
    for reserva in datos.reservas:
        bundle["reserva_repo"].reservas[reserva.id] = reserva
    for incidencia in datos.incidencias:
        bundle["incidencia_repo"].incidencias[incidencia.id] = incidencia


@lru_cache(maxsize=1)
def _in_memory_bundle():
    return build_in_memory_bundle(get_settings())


# Colaboradores que sobreviven a la sesión de BD de cada request
@lru_cache(maxsize=1)
def _shared_services():
    settings = get_settings()
    return {
        "clock": ClockImpl(),
        "id_generator": UUIDGenerator(),
        "guard": OperacionesEnCurso(),
        "notification_gateway": _notification_gateway(settings),
        "file_storage": _file_storage(settings),
        # La autenticación es externa; en modo SQL sólo se usa para desarrollo
        "auth_provider": InMemoryAuthProvider(),
        "preferencias_store": _preferencias_store(settings),
    }


def build_use_cases(bundle: dict, settings: Settings) -> dict:
    tz = ZoneInfo(settings.zona_horaria)
    reserva_repo = bundle["reserva_repo"]
    incidencia_repo = bundle["incidencia_repo"]
    espacio_repo = bundle["espacio_repo"]
    usuario_repo = bundle["usuario_repo"]
    contacto_repo = bundle["contacto_repo"]
    tx_manager = bundle["tx_manager"]
    clock = bundle["clock"]
    guard = bundle["guard"]
    notification_gateway = bundle["notification_gateway"]
    return {
        # Reservas
        "cancelar_reserva": CancelarReservaUseCase(
            reserva_repo=reserva_repo,
            transaction_manager=tx_manager,
            clock=clock,
            guard=guard,
            notification_gateway=notification_gateway,
        ),
        "confirmar_reserva": ConfirmarReservaUseCase(
            reserva_repo=reserva_repo,
            transaction_manager=tx_manager,
            clock=clock,
            guard=guard,
            notification_gateway=notification_gateway,
        ),
        "completar_reservas": CompletarReservasVencidasUseCase(
            reserva_repo=reserva_repo,
            transaction_manager=tx_manager,
            clock=clock,
            guard=guard,
            zona_horaria=tz,
        ),
        "obtener_reserva": ObtenerReservaUseCase(reserva_repo=reserva_repo),
        "listar_reservas": ListarReservasUseCase(reserva_repo=reserva_repo),
        "proximas_reservas": ProximasReservasUseCase(reserva_repo=reserva_repo, clock=clock, zona_horaria=tz),
        "listar_reservas_propietario": ListarReservasPropietarioUseCase(reserva_repo=reserva_repo),
        # Incidencias
        "crear_incidencia": CrearIncidenciaUseCase(
            incidencia_repo=incidencia_repo,
            reserva_repo=reserva_repo,
            transaction_manager=tx_manager,
            clock=clock,
            id_generator=bundle["id_generator"],
            guard=guard,
            notification_gateway=notification_gateway,
        ),
        "actualizar_incidencia": ActualizarIncidenciaUseCase(
            incidencia_repo=incidencia_repo,
            transaction_manager=tx_manager,
            clock=clock,
            guard=guard,
        ),
        "cerrar_incidencia": CerrarIncidenciaUseCase(
            incidencia_repo=incidencia_repo,
            transaction_manager=tx_manager,
            clock=clock,
            guard=guard,
        ),
        "poner_en_revision": PonerEnRevisionUseCase(
            incidencia_repo=incidencia_repo,
            transaction_manager=tx_manager,
            clock=clock,
            guard=guard,
            notification_gateway=notification_gateway,
        ),
        "responder_incidencia": ResponderIncidenciaUseCase(
            incidencia_repo=incidencia_repo,
            transaction_manager=tx_manager,
            clock=clock,
            guard=guard,
            notification_gateway=notification_gateway,
        ),
        "auto_cerrar_incidencias": AutoCerrarIncidenciasUseCase(
            incidencia_repo=incidencia_repo,
            transaction_manager=tx_manager,
            clock=clock,
            guard=guard,
            dias_espera=settings.incidencia_auto_cierre_dias,
        ),
        "obtener_incidencia": ObtenerIncidenciaUseCase(incidencia_repo=incidencia_repo),
        "listar_incidencias": ListarIncidenciasUseCase(incidencia_repo=incidencia_repo),
        "listar_incidencias_soporte": ListarIncidenciasSoporteUseCase(incidencia_repo=incidencia_repo),
        "estadisticas_incidencias": EstadisticasIncidenciasUseCase(incidencia_repo=incidencia_repo),
        # Espacios
        "listar_espacios": ListarEspaciosUseCase(espacio_repo=espacio_repo),
        "opciones_espacios": OpcionesFiltroEspaciosUseCase(espacio_repo=espacio_repo),
        "obtener_espacio": ObtenerEspacioUseCase(espacio_repo=espacio_repo),
        # Contacto
        "enviar_contacto": EnviarMensajeContactoUseCase(
            contacto_repo=contacto_repo,
            transaction_manager=tx_manager,
            clock=clock,
            guard=guard,
        ),
        "listar_contacto": ListarMensajesContactoUseCase(contacto_repo=contacto_repo),
        "marcar_contacto": MarcarMensajeContactoUseCase(
            contacto_repo=contacto_repo,
            transaction_manager=tx_manager,
            guard=guard,
        ),
        # Perfil y preferencias
        "obtener_perfil": ObtenerPerfilUseCase(usuario_repo=usuario_repo),
        "actualizar_perfil": ActualizarPerfilUseCase(
            usuario_repo=usuario_repo,
            transaction_manager=tx_manager,
            clock=clock,
            guard=guard,
        ),
        "cambiar_password": CambiarPasswordUseCase(
            usuario_repo=usuario_repo,
            auth_provider=bundle["auth_provider"],
            guard=guard,
        ),
        "subir_avatar": SubirAvatarUseCase(
            usuario_repo=usuario_repo,
            file_storage=bundle["file_storage"],
            transaction_manager=tx_manager,
            clock=clock,
            guard=guard,
            max_bytes=settings.avatar_max_bytes,
        ),
        "obtener_preferencias": ObtenerPreferenciasUseCase(preferencias_store=bundle["preferencias_store"]),
        "guardar_preferencias": GuardarPreferenciasUseCase(preferencias_store=bundle["preferencias_store"]),
        "validar_wizard": ValidarPasoWizardUseCase(),
    }


def get_use_cases(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
):
    if settings.use_in_memory:
        return build_use_cases(_in_memory_bundle(), settings)

    if not session:
        raise RuntimeError("DB session not available")

    bundle = {
        **_shared_services(),
        "reserva_repo": ReservaRepoSQL(session),
        "incidencia_repo": IncidenciaRepoSQL(session),
        "espacio_repo": EspacioRepoSQL(session),
        "usuario_repo": UsuarioRepoSQL(session),
        "contacto_repo": ContactoRepoSQL(session),
        "tx_manager": SQLAlchemyTransactionManager(session),
    }
    return build_use_cases(bundle, settings)
