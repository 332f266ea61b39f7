from typing import Any

from juegamas.application.interfaces.preferencias_store import PreferenciasStore


class InMemoryPreferenciasStore(PreferenciasStore):
    def __init__(self) -> None:
        self._datos: dict[str, dict[str, Any]] = {}

    async def load(self, usuario_id: str) -> dict[str, Any]:
        return dict(self._datos.get(usuario_id, {}))

    async def save(self, usuario_id: str, preferencias: dict[str, Any]) -> None:
        self._datos[usuario_id] = dict(preferencias)
