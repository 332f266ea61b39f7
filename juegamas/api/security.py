"""
Identidad de la petición.

La autenticación vive en un proveedor externo (gateway/BFF) que reenvía el
usuario y su rol en las cabeceras `X-User-Id` y `X-User-Role`. Aquí sólo se
normaliza el rol y se aplica la tabla de capacidades.
"""

from fastapi import Depends, Header

from juegamas.application.dtos import SesionUsuario
from juegamas.domain.errors import NoAutenticadoError
from juegamas.domain.roles import normalizar_rol, verificar_permiso


async def get_sesion(
    user_id: str | None = Header(default=None, alias="X-User-Id"),
    user_role: str | None = Header(default=None, alias="X-User-Role"),
) -> SesionUsuario:
    rol = normalizar_rol(user_role)
    if not user_id or not user_id.strip() or rol is None:
        raise NoAutenticadoError()
    return SesionUsuario(usuario_id=user_id.strip(), rol=rol)


def requiere(accion: str):
    """Dependencia que exige que el rol de la sesión tenga `accion`."""

    async def _dependencia(sesion: SesionUsuario = Depends(get_sesion)) -> SesionUsuario:
        verificar_permiso(sesion.rol, accion)
        return sesion

    return _dependencia
