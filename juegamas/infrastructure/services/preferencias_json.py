"""Preferencias de UI persistidas en un archivo JSON (un objeto por usuario)."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from juegamas.application.interfaces.preferencias_store import PreferenciasStore

logger = logging.getLogger(__name__)


class JsonPreferenciasStore(PreferenciasStore):
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = asyncio.Lock()

    def _leer(self) -> dict[str, dict[str, Any]]:
        if not self._path.exists():
            return {}
        try:
            datos = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError:
            logger.warning("Preferences file is corrupt, starting empty", extra={"path": str(self._path)})
            return {}
        return datos if isinstance(datos, dict) else {}

    def _escribir(self, datos: dict[str, dict[str, Any]]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        temporal = self._path.with_suffix(self._path.suffix + ".tmp")
        temporal.write_text(json.dumps(datos, ensure_ascii=False, indent=2), encoding="utf-8")
        temporal.replace(self._path)

    async def load(self, usuario_id: str) -> dict[str, Any]:
        async with self._lock:
            datos = await asyncio.to_thread(self._leer)
        return dict(datos.get(usuario_id) or {})

    async def save(self, usuario_id: str, preferencias: dict[str, Any]) -> None:
        async with self._lock:
            datos = await asyncio.to_thread(self._leer)
            datos[usuario_id] = dict(preferencias)
            await asyncio.to_thread(self._escribir, datos)
