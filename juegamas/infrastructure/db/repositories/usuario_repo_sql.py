from typing import Any, Mapping

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from juegamas.application.interfaces.usuario_repo import UsuarioRepo
from juegamas.domain.entities.usuario import Usuario
from juegamas.infrastructure.db.tables import usuarios
from juegamas.infrastructure.db.utils import aware


class UsuarioRepoSQL(UsuarioRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, usuario_id: str) -> Usuario | None:
        result = await self._session.execute(select(usuarios).where(usuarios.c.id == usuario_id))
        row = result.mappings().first()
        return self._row_to_entity(row) if row else None

    async def save(self, usuario: Usuario) -> None:
        values = {
            "email": usuario.email,
            "nombre": usuario.nombre,
            "rol": usuario.rol,
            "telefono": usuario.telefono,
            "foto_perfil": usuario.foto_perfil,
            "biografia": usuario.biografia,
            "notificaciones_email": usuario.notificaciones_email,
            "notificaciones_app": usuario.notificaciones_app,
            "updated_at": usuario.updated_at,
        }
        result = await self._session.execute(
            update(usuarios).where(usuarios.c.id == usuario.id).values(values)
        )
        if result.rowcount == 0:
            await self._session.execute(
                insert(usuarios).values(id=usuario.id, created_at=usuario.created_at, **values)
            )

    @staticmethod
    def _row_to_entity(row: Mapping[str, Any]) -> Usuario:
        return Usuario(
            id=row["id"],
            email=row["email"],
            nombre=row["nombre"],
            rol=row["rol"],
            telefono=row["telefono"],
            foto_perfil=row["foto_perfil"],
            biografia=row["biografia"],
            notificaciones_email=bool(row["notificaciones_email"]),
            notificaciones_app=bool(row["notificaciones_app"]),
            created_at=aware(row["created_at"]),
            updated_at=aware(row["updated_at"]),
        )
