"""
Operaciones sobre el perfil del usuario autenticado.

Después de cada mutación se relee el usuario y ese es el que se retorna:
es el refresco explícito de la sesión.
"""

import logging
import mimetypes
from typing import Any

from juegamas.application.dtos import ResultadoOperacion, SesionUsuario
from juegamas.application.interfaces.auth_provider import AuthProvider
from juegamas.application.interfaces.clock import Clock
from juegamas.application.interfaces.file_storage import FileStorage
from juegamas.application.interfaces.transaction_manager import TransactionManager
from juegamas.application.interfaces.usuario_repo import UsuarioRepo
from juegamas.application.submission_guard import OperacionesEnCurso
from juegamas.domain.entities.usuario import Usuario
from juegamas.domain.errors import PasswordIncorrectaError, UsuarioNotFoundError, ValidationError
from juegamas.domain.validators import exigir_valido, validar_password

SUPERFICIE = "perfil"
CAMPOS_EDITABLES = ("nombre", "telefono", "biografia", "notificaciones_email", "notificaciones_app")
MAX_BIOGRAFIA_LENGTH = 500

logger = logging.getLogger(__name__)


class _PerfilBase:
    def __init__(self, usuario_repo: UsuarioRepo) -> None:
        self._usuario_repo = usuario_repo

    async def _obtener(self, usuario_id: str) -> Usuario:
        usuario = await self._usuario_repo.get_by_id(usuario_id)
        if usuario is None:
            raise UsuarioNotFoundError(usuario_id)
        return usuario


class ObtenerPerfilUseCase(_PerfilBase):
    async def execute(self, sesion: SesionUsuario) -> Usuario:
        return await self._obtener(sesion.usuario_id)


class ActualizarPerfilUseCase(_PerfilBase):
    def __init__(
        self,
        usuario_repo: UsuarioRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        guard: OperacionesEnCurso,
    ) -> None:
        super().__init__(usuario_repo)
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._guard = guard

    async def execute(self, sesion: SesionUsuario, cambios: dict[str, Any]) -> ResultadoOperacion[Usuario]:
        cambios = {k: v for k, v in cambios.items() if k in CAMPOS_EDITABLES}
        exigir_valido({k: cambios[k] for k in ("nombre", "telefono") if k in cambios})
        if len(cambios.get("biografia") or "") > MAX_BIOGRAFIA_LENGTH:
            raise ValidationError(
                field="biografia",
                message=f"La biografía no puede tener más de {MAX_BIOGRAFIA_LENGTH} caracteres",
            )

        async with self._guard.reservar(SUPERFICIE, sesion.usuario_id):
            async with self._transaction_manager.start():
                usuario = await self._obtener(sesion.usuario_id)
                for campo, valor in cambios.items():
                    if isinstance(valor, str):
                        valor = valor.strip()
                        # Teléfono o biografía en blanco se borran
                        if campo != "nombre" and not valor:
                            valor = None
                    setattr(usuario, campo, valor)
                usuario.updated_at = self._clock.now()
                await self._usuario_repo.save(usuario)
            actualizado = await self._obtener(sesion.usuario_id)

        logger.info("Profile updated", extra={"usuario_id": sesion.usuario_id, "campos": sorted(cambios)})
        return ResultadoOperacion(success=True, message="Perfil actualizado correctamente", data=actualizado)


class CambiarPasswordUseCase(_PerfilBase):
    def __init__(self, usuario_repo: UsuarioRepo, auth_provider: AuthProvider, guard: OperacionesEnCurso) -> None:
        super().__init__(usuario_repo)
        self._auth_provider = auth_provider
        self._guard = guard

    async def execute(
        self,
        sesion: SesionUsuario,
        password_actual: str,
        password_nueva: str,
        confirmar_password: str,
    ) -> ResultadoOperacion[Usuario]:
        error = validar_password(password_nueva)
        if error:
            raise ValidationError(field="password_nueva", message=error)
        if password_nueva != confirmar_password:
            raise ValidationError(field="confirmar_password", message="Las contraseñas no coinciden")

        async with self._guard.reservar(SUPERFICIE, sesion.usuario_id):
            if not await self._auth_provider.verificar_password(sesion.usuario_id, password_actual):
                raise PasswordIncorrectaError()
            await self._auth_provider.cambiar_password(sesion.usuario_id, password_nueva)
            usuario = await self._obtener(sesion.usuario_id)

        logger.info("Password changed", extra={"usuario_id": sesion.usuario_id})
        return ResultadoOperacion(success=True, message="Contraseña actualizada correctamente", data=usuario)


class SubirAvatarUseCase(_PerfilBase):
    def __init__(
        self,
        usuario_repo: UsuarioRepo,
        file_storage: FileStorage,
        transaction_manager: TransactionManager,
        clock: Clock,
        guard: OperacionesEnCurso,
        max_bytes: int = 5 * 1024 * 1024,
    ) -> None:
        super().__init__(usuario_repo)
        self._file_storage = file_storage
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._guard = guard
        self._max_bytes = max_bytes

    async def execute(
        self,
        sesion: SesionUsuario,
        contenido: bytes,
        content_type: str | None,
    ) -> ResultadoOperacion[Usuario]:
        if not contenido:
            raise ValidationError(field="foto", message="No se ha enviado ninguna imagen")
        if not (content_type or "").startswith("image/"):
            raise ValidationError(field="foto", message="El archivo debe ser una imagen")
        if len(contenido) > self._max_bytes:
            limite_mb = self._max_bytes // (1024 * 1024)
            raise ValidationError(field="foto", message=f"La imagen no debe exceder los {limite_mb}MB")

        async with self._guard.reservar(SUPERFICIE, sesion.usuario_id):
            usuario = await self._obtener(sesion.usuario_id)
            ahora = self._clock.now()
            extension = mimetypes.guess_extension(content_type) or ""
            path = f"avatars/{sesion.usuario_id}/{int(ahora.timestamp())}{extension}"
            url = await self._file_storage.upload(path, contenido, content_type)
            async with self._transaction_manager.start():
                usuario.foto_perfil = url
                usuario.updated_at = ahora
                await self._usuario_repo.save(usuario)
            actualizado = await self._obtener(sesion.usuario_id)

        logger.info("Avatar uploaded", extra={"usuario_id": sesion.usuario_id, "bytes": len(contenido)})
        return ResultadoOperacion(success=True, message="Foto de perfil actualizada", data=actualizado)
