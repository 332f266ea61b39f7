"""Implementación SQL del repositorio de reservas."""

from typing import Any, Mapping, Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from juegamas.application.interfaces.reserva_repo import ReservaRepo
from juegamas.domain.entities.reserva import Reserva
from juegamas.domain.errors import ReservaNotFoundError
from juegamas.infrastructure.db.tables import espacios, reservas, usuarios
from juegamas.infrastructure.db.utils import aware


class ReservaRepoSQL(ReservaRepo):
    """Las columnas de despliegue (nombre del espacio, del cliente) vienen por join."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _select(self):
        return select(
            reservas,
            usuarios.c.nombre.label("usuario_nombre"),
            usuarios.c.email.label("usuario_email"),
            espacios.c.nombre.label("espacio_nombre"),
            espacios.c.tipo.label("espacio_tipo"),
            espacios.c.direccion.label("espacio_direccion"),
            espacios.c.ciudad.label("espacio_ciudad"),
        ).select_from(
            reservas.outerjoin(espacios, espacios.c.id == reservas.c.espacio_id).outerjoin(
                usuarios, usuarios.c.id == reservas.c.usuario_id
            )
        )

    async def _fetch(self, *condiciones) -> list[Reserva]:
        stmt = self._select().where(*condiciones)
        result = await self._session.execute(stmt)
        return [self._row_to_entity(row) for row in result.mappings().all()]

    async def get_by_id(self, reserva_id: str) -> Reserva | None:
        encontradas = await self._fetch(reservas.c.id == reserva_id)
        return encontradas[0] if encontradas else None

    async def list_by_usuario(self, usuario_id: str) -> Sequence[Reserva]:
        return await self._fetch(reservas.c.usuario_id == usuario_id)

    async def list_by_propietario(self, propietario_id: str) -> Sequence[Reserva]:
        return await self._fetch(reservas.c.propietario_id == propietario_id)

    async def list_by_estado(self, estado: str) -> Sequence[Reserva]:
        return await self._fetch(reservas.c.estado == estado)

    async def add(self, reserva: Reserva) -> Reserva:
        values = {
            "id": reserva.id,
            "codigo_reserva": reserva.codigo_reserva,
            "usuario_id": reserva.usuario_id,
            "espacio_id": reserva.espacio_id,
            "propietario_id": reserva.propietario_id,
            "fecha": reserva.fecha,
            "hora_inicio": reserva.hora_inicio,
            "hora_fin": reserva.hora_fin,
            "precio_total": reserva.precio_total,
            "created_at": reserva.created_at,
            **self._mutable_values(reserva),
        }
        await self._session.execute(insert(reservas).values(values))
        return reserva

    async def save(self, reserva: Reserva) -> None:
        stmt = (
            update(reservas)
            .where(reservas.c.id == reserva.id)
            .values(self._mutable_values(reserva))
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise ReservaNotFoundError(reserva.id)

    @staticmethod
    def _mutable_values(reserva: Reserva) -> dict[str, Any]:
        # precio_total, franja y referencias no cambian después de crear
        return {
            "estado": reserva.estado,
            "metodo_pago": reserva.metodo_pago,
            "id_transaccion": reserva.id_transaccion,
            "notas": reserva.notas,
            "motivo_cancelacion": reserva.motivo_cancelacion,
            "cancelado_por": reserva.cancelado_por,
            "updated_at": reserva.updated_at,
        }

    @staticmethod
    def _row_to_entity(row: Mapping[str, Any]) -> Reserva:
        return Reserva(
            id=row["id"],
            codigo_reserva=row["codigo_reserva"],
            usuario_id=row["usuario_id"],
            espacio_id=row["espacio_id"],
            propietario_id=row["propietario_id"],
            fecha=row["fecha"],
            hora_inicio=row["hora_inicio"],
            hora_fin=row["hora_fin"],
            precio_total=row["precio_total"],
            estado=row["estado"],
            metodo_pago=row["metodo_pago"],
            id_transaccion=row["id_transaccion"],
            notas=row["notas"],
            motivo_cancelacion=row["motivo_cancelacion"],
            cancelado_por=row["cancelado_por"],
            usuario_nombre=row["usuario_nombre"] or "",
            usuario_email=row["usuario_email"] or "",
            espacio_nombre=row["espacio_nombre"] or "",
            espacio_tipo=row["espacio_tipo"] or "",
            espacio_direccion=row["espacio_direccion"] or "",
            espacio_ciudad=row["espacio_ciudad"] or "",
            created_at=aware(row["created_at"]),
            updated_at=aware(row["updated_at"]),
        )
