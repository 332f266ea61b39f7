"""DTO de la sesión del usuario autenticado."""

from dataclasses import dataclass

from juegamas.domain.roles import ROL_ADMIN, ROL_PROPIETARIO


@dataclass(frozen=True)
class SesionUsuario:
    """Identidad explícita que viaja con cada petición."""

    usuario_id: str
    rol: str  # rol canónico (ver domain.roles.normalizar_rol)

    @property
    def es_admin(self) -> bool:
        return self.rol == ROL_ADMIN

    @property
    def es_propietario(self) -> bool:
        return self.rol == ROL_PROPIETARIO
