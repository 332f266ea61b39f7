"""Entidad EspacioDeportivo - recinto consultado por el buscador."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

ESTADOS_ESPACIO = ("activo", "inactivo", "pendiente")


@dataclass
class EspacioDeportivo:
    """Recinto deportivo (cancha, piscina, gimnasio). Sólo lectura para este servicio."""

    id: int
    propietario_id: str
    nombre: str
    tipo: str
    ciudad: str
    direccion: str
    precio_base: Decimal
    descripcion: str = ""
    capacidad_min: int | None = None
    capacidad_max: int | None = None
    caracteristicas: frozenset[str] = field(default_factory=frozenset)
    estado_espacio: str = "activo"
    calificacion_promedio: float = 0.0
    total_resenas: int = 0
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.precio_base, Decimal):
            self.precio_base = Decimal(str(self.precio_base))
        if not isinstance(self.caracteristicas, frozenset):
            self.caracteristicas = frozenset(self.caracteristicas)

    @property
    def esta_activo(self) -> bool:
        return self.estado_espacio == "activo"

    def tiene_caracteristicas(self, requeridas: set[str] | frozenset[str]) -> bool:
        return set(requeridas).issubset(self.caracteristicas)
