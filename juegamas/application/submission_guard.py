"""
Guardia de operaciones en curso.

Una segunda escritura sobre la misma entidad, en la misma superficie, se
rechaza mientras la primera no termine. No hay cola ni espera ni reintento.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from juegamas.domain.errors import OperacionEnCursoError

logger = logging.getLogger(__name__)


class OperacionesEnCurso:
    def __init__(self) -> None:
        self._en_curso: set[tuple[str, str]] = set()

    def esta_en_curso(self, superficie: str, entidad_id: str) -> bool:
        return (superficie, str(entidad_id)) in self._en_curso

    @asynccontextmanager
    async def reservar(self, superficie: str, entidad_id: str) -> AsyncIterator[None]:
        clave = (superficie, str(entidad_id))
        # Sin await entre la verificación y el registro: atómico en el event loop
        if clave in self._en_curso:
            logger.info(
                "Operación rechazada: ya hay una en curso",
                extra={"superficie": superficie, "entidad_id": clave[1]},
            )
            raise OperacionEnCursoError(superficie, clave[1])
        self._en_curso.add(clave)
        try:
            yield
        finally:
            self._en_curso.discard(clave)
