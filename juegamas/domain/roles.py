"""
Capacidades por rol.

Una sola tabla decide qué acciones y qué navegación tiene cada rol. La
verificación se hace una vez en la frontera de acceso (API), no repartida
por los casos de uso.
"""

from dataclasses import dataclass

from juegamas.domain.errors import AccesoDenegadoError

ROL_CLIENTE = "cliente"
ROL_PROPIETARIO = "propietario"
ROL_ADMIN = "admin"

ROLES = (ROL_CLIENTE, ROL_PROPIETARIO, ROL_ADMIN)

# 'usuario' es el nombre heredado del rol cliente
ALIAS_ROLES = {"usuario": ROL_CLIENTE}


@dataclass(frozen=True)
class EnlaceNavegacion:
    nombre: str
    href: str


@dataclass(frozen=True)
class CapacidadesRol:
    acciones: frozenset[str]
    navegacion: tuple[EnlaceNavegacion, ...]
    ruta_inicio: str


_NAV_COMUN = (EnlaceNavegacion("Mi Perfil", "/dashboard/perfil"),)

CAPACIDADES: dict[str, CapacidadesRol] = {
    ROL_CLIENTE: CapacidadesRol(
        acciones=frozenset(
            {
                "espacios:buscar",
                "reservas:ver_propias",
                "reservas:cancelar",
                "incidencias:crear",
                "incidencias:ver_propias",
                "incidencias:actualizar",
                "incidencias:cerrar",
                "perfil:editar",
                "preferencias:editar",
            }
        ),
        navegacion=(
            EnlaceNavegacion("Dashboard", "/dashboard/cliente"),
            *_NAV_COMUN,
            EnlaceNavegacion("Explorar", "/dashboard/cliente/explorar"),
            EnlaceNavegacion("Mis Reservas", "/dashboard/cliente/reservas"),
            EnlaceNavegacion("Reportar un Problema", "/dashboard/cliente/reportar-problema"),
        ),
        ruta_inicio="/dashboard/cliente",
    ),
    ROL_PROPIETARIO: CapacidadesRol(
        acciones=frozenset(
            {
                "espacios:buscar",
                "reservas:ver_espacios_propios",
                "reservas:confirmar",
                "perfil:editar",
                "preferencias:editar",
            }
        ),
        navegacion=(
            EnlaceNavegacion("Dashboard", "/dashboard/propietario"),
            *_NAV_COMUN,
            EnlaceNavegacion("Mis Espacios", "/dashboard/propietario/espacios"),
            EnlaceNavegacion("Reservas", "/dashboard/propietario/reservas"),
            EnlaceNavegacion("Finanzas", "/dashboard/propietario/finanzas"),
        ),
        ruta_inicio="/dashboard/propietario",
    ),
    ROL_ADMIN: CapacidadesRol(
        acciones=frozenset(
            {
                "espacios:buscar",
                "reservas:ver_espacios_propios",
                "reservas:confirmar",
                "reservas:completar",
                "incidencias:gestionar",
                "incidencias:auto_cerrar",
                "contacto:gestionar",
                "perfil:editar",
                "preferencias:editar",
            }
        ),
        navegacion=(
            EnlaceNavegacion("Dashboard", "/dashboard/admin"),
            *_NAV_COMUN,
            EnlaceNavegacion("Usuarios", "/dashboard/admin/usuarios"),
            EnlaceNavegacion("Espacios", "/dashboard/admin/espacios"),
            EnlaceNavegacion("Reportes", "/dashboard/admin/reportes"),
        ),
        ruta_inicio="/dashboard/admin",
    ),
}

# Prefijo de ruta → roles que pueden entrar. El primer prefijo que calza manda.
REGLAS_RUTAS: tuple[tuple[str, frozenset[str]], ...] = (
    ("/dashboard/admin", frozenset({ROL_ADMIN})),
    ("/dashboard/propietario", frozenset({ROL_PROPIETARIO, ROL_ADMIN})),
    ("/dashboard/cliente", frozenset({ROL_CLIENTE, ROL_ADMIN})),
    ("/dashboard", frozenset(ROLES)),
)


def normalizar_rol(rol: str | None) -> str | None:
    """Nombre canónico del rol, o None si no es un rol conocido."""
    if not rol:
        return None
    rol = rol.strip().lower()
    rol = ALIAS_ROLES.get(rol, rol)
    return rol if rol in CAPACIDADES else None


def capacidades(rol: str) -> CapacidadesRol | None:
    canonico = normalizar_rol(rol)
    return CAPACIDADES.get(canonico) if canonico else None


def puede(rol: str | None, accion: str) -> bool:
    caps = capacidades(rol) if rol else None
    return caps is not None and accion in caps.acciones


def verificar_permiso(rol: str | None, accion: str) -> None:
    if not puede(rol, accion):
        raise AccesoDenegadoError(rol or "", accion)


def ruta_inicio(rol: str | None) -> str:
    """Dashboard al que se redirige un rol; sin rol conocido va al inicio público."""
    caps = capacidades(rol) if rol else None
    return caps.ruta_inicio if caps else "/inicio"


def navegacion(rol: str | None) -> tuple[EnlaceNavegacion, ...]:
    caps = capacidades(rol) if rol else None
    return caps.navegacion if caps else ()


def puede_acceder_ruta(rol: str | None, path: str) -> bool:
    canonico = normalizar_rol(rol)
    for prefijo, permitidos in REGLAS_RUTAS:
        if path == prefijo or path.startswith(prefijo + "/"):
            return canonico in permitidos
    return True
