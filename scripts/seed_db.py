"""Crea las tablas y carga los datos de demostración en la base configurada."""

import asyncio
from datetime import datetime, timezone

from sqlalchemy import insert

from juegamas.api.deps import AsyncSessionLocal, engine
from juegamas.infrastructure.db.repositories import (
    IncidenciaRepoSQL,
    ReservaRepoSQL,
    UsuarioRepoSQL,
)
from juegamas.infrastructure.db.tables import espacios, metadata
from juegamas.infrastructure.seed import datos_demo


async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        print("Created all tables.")

    datos = datos_demo(datetime.now(timezone.utc))
    async with AsyncSessionLocal() as session:
        async with session.begin():
            usuario_repo = UsuarioRepoSQL(session)
            for usuario in datos.usuarios:
                await usuario_repo.save(usuario)
            for espacio in datos.espacios:
                await session.execute(
                    insert(espacios).values(
                        id=espacio.id,
                        propietario_id=espacio.propietario_id,
                        nombre=espacio.nombre,
                        tipo=espacio.tipo,
                        ciudad=espacio.ciudad,
                        direccion=espacio.direccion,
                        precio_base=espacio.precio_base,
                        descripcion=espacio.descripcion,
                        capacidad_min=espacio.capacidad_min,
                        capacidad_max=espacio.capacidad_max,
                        caracteristicas=sorted(espacio.caracteristicas),
                        estado_espacio=espacio.estado_espacio,
                        calificacion_promedio=espacio.calificacion_promedio,
                        total_resenas=espacio.total_resenas,
                        created_at=espacio.created_at,
                    )
                )
            reserva_repo = ReservaRepoSQL(session)
            for reserva in datos.reservas:
                await reserva_repo.add(reserva)
            incidencia_repo = IncidenciaRepoSQL(session)
            for incidencia in datos.incidencias:
                await incidencia_repo.add(incidencia)

    print(
        f"Seeded {len(datos.usuarios)} users, {len(datos.espacios)} venues, "
        f"{len(datos.reservas)} reservations and {len(datos.incidencias)} incidents."
    )
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
