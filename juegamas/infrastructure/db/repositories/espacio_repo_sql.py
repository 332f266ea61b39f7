from typing import Any, Mapping, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from juegamas.application.interfaces.espacio_repo import EspacioRepo
from juegamas.domain.entities.espacio import EspacioDeportivo
from juegamas.infrastructure.db.tables import espacios
from juegamas.infrastructure.db.utils import aware


class EspacioRepoSQL(EspacioRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, espacio_id: int) -> EspacioDeportivo | None:
        result = await self._session.execute(select(espacios).where(espacios.c.id == espacio_id))
        row = result.mappings().first()
        return self._row_to_entity(row) if row else None

    async def list_all(self) -> Sequence[EspacioDeportivo]:
        result = await self._session.execute(select(espacios))
        return [self._row_to_entity(row) for row in result.mappings().all()]

    @staticmethod
    def _row_to_entity(row: Mapping[str, Any]) -> EspacioDeportivo:
        return EspacioDeportivo(
            id=row["id"],
            propietario_id=row["propietario_id"],
            nombre=row["nombre"],
            tipo=row["tipo"],
            ciudad=row["ciudad"],
            direccion=row["direccion"],
            precio_base=row["precio_base"],
            descripcion=row["descripcion"] or "",
            capacidad_min=row["capacidad_min"],
            capacidad_max=row["capacidad_max"],
            caracteristicas=frozenset(row["caracteristicas"] or []),
            estado_espacio=row["estado_espacio"],
            calificacion_promedio=row["calificacion_promedio"] or 0.0,
            total_resenas=row["total_resenas"] or 0,
            created_at=aware(row["created_at"]),
        )
