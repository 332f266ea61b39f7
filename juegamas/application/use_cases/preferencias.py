"""Preferencias de interfaz persistidas por usuario (modo de vista, sidebar)."""

from typing import Any

from juegamas.application.dtos import ResultadoOperacion, SesionUsuario
from juegamas.application.interfaces.preferencias_store import PreferenciasStore
from juegamas.domain.constants import VIEW_MODE_CARDS, VIEW_MODES
from juegamas.domain.errors import ValidationError

PREFERENCIAS_DEFAULT: dict[str, Any] = {
    "view_mode": VIEW_MODE_CARDS,
    "sidebar_abierto": True,
}


def _validar(preferencias: dict[str, Any]) -> None:
    desconocidas = set(preferencias) - set(PREFERENCIAS_DEFAULT)
    if desconocidas:
        campo = sorted(desconocidas)[0]
        raise ValidationError(field=campo, message=f"Preferencia desconocida: {campo}")
    if "view_mode" in preferencias and preferencias["view_mode"] not in VIEW_MODES:
        raise ValidationError(field="view_mode", message="El modo de vista debe ser 'cards' o 'table'")
    if "sidebar_abierto" in preferencias and not isinstance(preferencias["sidebar_abierto"], bool):
        raise ValidationError(field="sidebar_abierto", message="sidebar_abierto debe ser verdadero o falso")


class ObtenerPreferenciasUseCase:
    def __init__(self, preferencias_store: PreferenciasStore) -> None:
        self._store = preferencias_store

    async def execute(self, sesion: SesionUsuario) -> dict[str, Any]:
        guardadas = await self._store.load(sesion.usuario_id)
        # Valores corruptos o antiguos no deben romper la interfaz
        validas = {k: v for k, v in guardadas.items() if k in PREFERENCIAS_DEFAULT}
        if validas.get("view_mode") not in VIEW_MODES:
            validas.pop("view_mode", None)
        return {**PREFERENCIAS_DEFAULT, **validas}


class GuardarPreferenciasUseCase:
    def __init__(self, preferencias_store: PreferenciasStore) -> None:
        self._store = preferencias_store
        self._obtener = ObtenerPreferenciasUseCase(preferencias_store)

    async def execute(self, sesion: SesionUsuario, cambios: dict[str, Any]) -> ResultadoOperacion[dict]:
        _validar(cambios)
        actuales = await self._obtener.execute(sesion)
        await self._store.save(sesion.usuario_id, {**actuales, **cambios})
        return ResultadoOperacion(
            success=True,
            message="Preferencias guardadas",
            data=await self._obtener.execute(sesion),
        )
