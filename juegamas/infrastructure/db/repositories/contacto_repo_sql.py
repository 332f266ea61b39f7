"""Implementación SQL del repositorio de mensajes de contacto."""

from typing import Any, Mapping, Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from juegamas.application.interfaces.contacto_repo import ContactoRepo
from juegamas.domain.entities.usuario import MensajeContacto
from juegamas.domain.errors import MensajeContactoNotFoundError
from juegamas.infrastructure.db.tables import mensajes_contacto
from juegamas.infrastructure.db.utils import aware


class ContactoRepoSQL(ContactoRepo):
    """Implementación SQL del repositorio de contacto usando SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, mensaje: MensajeContacto) -> MensajeContacto:
        values = {
            "nombre": mensaje.nombre,
            "email": mensaje.email,
            "telefono": mensaje.telefono,
            "asunto": mensaje.asunto,
            "mensaje": mensaje.mensaje,
            "leido": mensaje.leido,
            "respondido": mensaje.respondido,
            "created_at": mensaje.created_at,
        }
        result = await self._session.execute(insert(mensajes_contacto).values(values))
        mensaje.id = result.inserted_primary_key[0]
        return mensaje

    async def get_by_id(self, mensaje_id: int) -> MensajeContacto | None:
        stmt = select(mensajes_contacto).where(mensajes_contacto.c.id == mensaje_id)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return self._row_to_entity(row)

    async def list_all(self, leido: bool | None = None) -> Sequence[MensajeContacto]:
        stmt = select(mensajes_contacto).order_by(
            mensajes_contacto.c.created_at.desc(), mensajes_contacto.c.id.desc()
        )
        if leido is not None:
            stmt = stmt.where(mensajes_contacto.c.leido == leido)
        result = await self._session.execute(stmt)
        return [self._row_to_entity(row) for row in result.mappings().all()]

    async def save(self, mensaje: MensajeContacto) -> None:
        if mensaje.id is None:
            raise ValueError("Mensaje ID is required for update")
        stmt = (
            update(mensajes_contacto)
            .where(mensajes_contacto.c.id == mensaje.id)
            .values(leido=mensaje.leido, respondido=mensaje.respondido)
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise MensajeContactoNotFoundError(mensaje.id)

    @staticmethod
    def _row_to_entity(row: Mapping[str, Any]) -> MensajeContacto:
        return MensajeContacto(
            id=row["id"],
            nombre=row["nombre"],
            email=row["email"],
            telefono=row["telefono"],
            asunto=row["asunto"],
            mensaje=row["mensaje"],
            leido=bool(row["leido"]),
            respondido=bool(row["respondido"]),
            created_at=aware(row["created_at"]),
        )
