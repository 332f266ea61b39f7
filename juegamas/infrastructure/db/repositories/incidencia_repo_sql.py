"""Implementación SQL del repositorio de incidencias."""

from typing import Any, Mapping, Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from juegamas.application.interfaces.incidencia_repo import IncidenciaRepo
from juegamas.domain.entities.incidencia import Incidencia
from juegamas.domain.errors import IncidenciaNotFoundError
from juegamas.infrastructure.db.tables import incidencias
from juegamas.infrastructure.db.utils import aware


class IncidenciaRepoSQL(IncidenciaRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _fetch(self, *condiciones) -> list[Incidencia]:
        result = await self._session.execute(select(incidencias).where(*condiciones))
        return [self._row_to_entity(row) for row in result.mappings().all()]

    async def get_by_id(self, incidencia_id: str) -> Incidencia | None:
        stmt = select(incidencias).where(incidencias.c.id == incidencia_id)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return self._row_to_entity(row)

    async def list_by_usuario(self, usuario_id: str) -> Sequence[Incidencia]:
        return await self._fetch(incidencias.c.usuario_id == usuario_id)

    async def list_by_estado(self, estado: str) -> Sequence[Incidencia]:
        return await self._fetch(incidencias.c.estado == estado)

    async def list_all(self) -> Sequence[Incidencia]:
        result = await self._session.execute(select(incidencias))
        return [self._row_to_entity(row) for row in result.mappings().all()]

    async def add(self, incidencia: Incidencia) -> Incidencia:
        values = {
            "id": incidencia.id,
            "usuario_id": incidencia.usuario_id,
            "tipo": incidencia.tipo,
            "asunto": incidencia.asunto,
            "reserva_id": incidencia.reserva_id,
            "archivos_adjuntos": list(incidencia.archivos_adjuntos),
            "fecha_creacion": incidencia.fecha_creacion,
            **self._mutable_values(incidencia),
        }
        await self._session.execute(insert(incidencias).values(values))
        return incidencia

    async def save(self, incidencia: Incidencia) -> None:
        stmt = (
            update(incidencias)
            .where(incidencias.c.id == incidencia.id)
            .values(self._mutable_values(incidencia))
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise IncidenciaNotFoundError(incidencia.id)

    @staticmethod
    def _mutable_values(incidencia: Incidencia) -> dict[str, Any]:
        return {
            "descripcion": incidencia.descripcion,
            "estado": incidencia.estado,
            "respuesta": incidencia.respuesta,
            "fecha_actualizacion": incidencia.fecha_actualizacion,
        }

    @staticmethod
    def _row_to_entity(row: Mapping[str, Any]) -> Incidencia:
        return Incidencia(
            id=row["id"],
            usuario_id=row["usuario_id"],
            tipo=row["tipo"],
            asunto=row["asunto"],
            descripcion=row["descripcion"],
            estado=row["estado"],
            respuesta=row["respuesta"],
            reserva_id=row["reserva_id"],
            archivos_adjuntos=list(row["archivos_adjuntos"] or []),
            fecha_creacion=aware(row["fecha_creacion"]),
            fecha_actualizacion=aware(row["fecha_actualizacion"]),
        )
