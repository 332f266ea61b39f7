"""
Configuración de pytest y fixtures compartidas.

Este módulo provee:
- Reloj fijo e identificadores predecibles
- Bundle in-memory completo (repos, guardia, gateways stub)
- Sesiones por rol
- Cliente HTTP (FastAPI TestClient) conectado al bundle
"""

import pytest
from fastapi.testclient import TestClient

from juegamas.api.dependencies import build_in_memory_bundle, build_use_cases, get_use_cases
from juegamas.application.dtos import SesionUsuario
from juegamas.application.interfaces import FakeClock, FakeIdGenerator
from juegamas.config import Settings
from juegamas.main import app
from tests.factories import ADMIN_ID, AHORA, CLIENTE_ID, OTRO_CLIENTE_ID, PROPIETARIO_ID

# ============================================================================
# SESIONES
# ============================================================================

@pytest.fixture
def sesion_cliente() -> SesionUsuario:
    return SesionUsuario(usuario_id=CLIENTE_ID, rol="cliente")


@pytest.fixture
def sesion_otro() -> SesionUsuario:
    return SesionUsuario(usuario_id=OTRO_CLIENTE_ID, rol="cliente")


@pytest.fixture
def sesion_propietario() -> SesionUsuario:
    return SesionUsuario(usuario_id=PROPIETARIO_ID, rol="propietario")


@pytest.fixture
def sesion_admin() -> SesionUsuario:
    return SesionUsuario(usuario_id=ADMIN_ID, rol="admin")


# ============================================================================
# BUNDLE IN-MEMORY
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, use_in_memory=True, seed_demo_data=False)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(AHORA)


@pytest.fixture
def bundle(settings, clock):
    bundle = build_in_memory_bundle(settings, clock=clock, seed=False)
    bundle["id_generator"] = FakeIdGenerator(prefix="inc")
    return bundle


@pytest.fixture
def use_cases(bundle, settings):
    return build_use_cases(bundle, settings)


# ============================================================================
# CLIENTE HTTP
# ============================================================================

@pytest.fixture
def client(use_cases):
    """TestClient con los casos de uso armados sobre el bundle de la prueba."""
    app.dependency_overrides[get_use_cases] = lambda: use_cases
    test_client = TestClient(app, raise_server_exceptions=False)
    yield test_client
    app.dependency_overrides.clear()
