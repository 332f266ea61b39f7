"""
Motor de listado: filtros, ordenamiento y paginación.

Todos los filtros son opcionales y se combinan con AND. El ordenamiento es
total: cuando la clave principal empata, se desempata por id ascendente.
La paginación nunca falla: una página fuera de rango se ajusta a la última
página válida y un resultado vacío retorna `items=[]` con `total=0`.

El motor no conoce el modo de vista (tarjetas o tabla): ambas vistas lo
consumen igual.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Callable, Generic, Iterable, Literal, Sequence, TypeVar

from juegamas.domain.entities.espacio import EspacioDeportivo
from juegamas.domain.entities.incidencia import Incidencia
from juegamas.domain.entities.reserva import Reserva

T = TypeVar("T")

OrdenEspacios = Literal["precio_asc", "precio_desc", "calificacion", "popularidad"]
ORDENES_ESPACIOS = ("precio_asc", "precio_desc", "calificacion", "popularidad")

DEFAULT_PER_PAGE = 10


@dataclass
class Pagina(Generic[T]):
    items: list[T]
    total: int
    pagina_actual: int
    total_paginas: int
    por_pagina: int


def paginar(items: Sequence[T], page: int = 1, per_page: int = DEFAULT_PER_PAGE) -> Pagina[T]:
    """Corta `items` en páginas, ajustando la página pedida al rango válido."""
    por_pagina = max(1, per_page)
    total = len(items)
    total_paginas = math.ceil(total / por_pagina)
    pagina_actual = min(max(1, page), max(1, total_paginas))
    desde = (pagina_actual - 1) * por_pagina
    return Pagina(
        items=list(items[desde : desde + por_pagina]),
        total=total,
        pagina_actual=pagina_actual,
        total_paginas=total_paginas,
        por_pagina=por_pagina,
    )


def _ordenar(
    items: Iterable[T],
    clave: Callable[[T], object],
    descendente: bool,
    id_de: Callable[[T], object],
) -> list[T]:
    # sorted() es estable también con reverse=True: el orden previo por id
    # se conserva entre empates.
    por_id = sorted(items, key=id_de)
    return sorted(por_id, key=clave, reverse=descendente)


def _instante(momento: datetime | None) -> float:
    # Sin fecha: al final en orden descendente
    return momento.timestamp() if momento else float("-inf")


# === Espacios ===


@dataclass
class FiltrosEspacios:
    busqueda: str | None = None
    tipo: str | None = None
    ciudad: str | None = None
    precio_min: Decimal | None = None
    precio_max: Decimal | None = None
    capacidad_min: int | None = None
    caracteristicas: set[str] = field(default_factory=set)
    ordenar_por: OrdenEspacios | None = None
    page: int = 1
    per_page: int = DEFAULT_PER_PAGE


def cumple_filtros(espacio: EspacioDeportivo, filtros: FiltrosEspacios) -> bool:
    if not espacio.esta_activo:
        return False
    if filtros.busqueda:
        termino = filtros.busqueda.strip().casefold()
        if termino and termino not in espacio.nombre.casefold() and termino not in (
            espacio.descripcion or ""
        ).casefold():
            return False
    if filtros.tipo and espacio.tipo != filtros.tipo:
        return False
    if filtros.ciudad and espacio.ciudad != filtros.ciudad:
        return False
    if filtros.precio_min is not None and espacio.precio_base < Decimal(str(filtros.precio_min)):
        return False
    if filtros.precio_max is not None and espacio.precio_base > Decimal(str(filtros.precio_max)):
        return False
    if filtros.capacidad_min is not None:
        if espacio.capacidad_max is None or espacio.capacidad_max < filtros.capacidad_min:
            return False
    if filtros.caracteristicas and not espacio.tiene_caracteristicas(filtros.caracteristicas):
        return False
    return True


def ordenar_espacios(
    espacios: Iterable[EspacioDeportivo], ordenar_por: str | None
) -> list[EspacioDeportivo]:
    def por_id(e: EspacioDeportivo) -> int:
        return e.id

    if ordenar_por == "precio_asc":
        return _ordenar(espacios, lambda e: e.precio_base, False, por_id)
    if ordenar_por == "precio_desc":
        return _ordenar(espacios, lambda e: e.precio_base, True, por_id)
    if ordenar_por == "calificacion":
        return _ordenar(espacios, lambda e: e.calificacion_promedio, True, por_id)
    if ordenar_por == "popularidad":
        return _ordenar(espacios, lambda e: e.total_resenas, True, por_id)
    # Sin criterio: más recientes primero
    return _ordenar(espacios, lambda e: _instante(e.created_at), True, por_id)


def listar_espacios(
    espacios: Iterable[EspacioDeportivo], filtros: FiltrosEspacios
) -> Pagina[EspacioDeportivo]:
    seleccion = [e for e in espacios if cumple_filtros(e, filtros)]
    ordenados = ordenar_espacios(seleccion, filtros.ordenar_por)
    return paginar(ordenados, filtros.page, filtros.per_page)


def opciones_filtro(espacios: Iterable[EspacioDeportivo]) -> dict[str, list[str]]:
    """Ciudades, tipos y características distintas de los espacios activos."""
    activos = [e for e in espacios if e.esta_activo]
    return {
        "ciudades": sorted({e.ciudad for e in activos}),
        "tipos": sorted({e.tipo for e in activos}),
        "caracteristicas": sorted({c for e in activos for c in e.caracteristicas}),
    }


# === Reservas ===


@dataclass
class FiltrosReservas:
    estado: str | None = None  # 'todas' equivale a sin filtro
    fecha_desde: date | None = None
    fecha_hasta: date | None = None
    page: int = 1
    per_page: int = DEFAULT_PER_PAGE


def filtrar_reservas(reservas: Iterable[Reserva], filtros: FiltrosReservas) -> list[Reserva]:
    resultado = []
    for reserva in reservas:
        if filtros.estado and filtros.estado != "todas" and reserva.estado != filtros.estado:
            continue
        if filtros.fecha_desde and reserva.fecha < filtros.fecha_desde:
            continue
        if filtros.fecha_hasta and reserva.fecha > filtros.fecha_hasta:
            continue
        resultado.append(reserva)
    return _ordenar(resultado, lambda r: (r.fecha, r.hora_inicio), False, lambda r: r.id)


def listar_reservas(reservas: Iterable[Reserva], filtros: FiltrosReservas) -> Pagina[Reserva]:
    return paginar(filtrar_reservas(reservas, filtros), filtros.page, filtros.per_page)


def proximas_reservas(reservas: Iterable[Reserva], hoy: date, limite: int = 3) -> list[Reserva]:
    """Reservas activas desde hoy en adelante, las más cercanas primero."""
    candidatas = [r for r in reservas if r.esta_activa and r.fecha >= hoy]
    ordenadas = _ordenar(candidatas, lambda r: (r.fecha, r.hora_inicio), False, lambda r: r.id)
    return ordenadas[: max(0, limite)]


# === Incidencias ===


@dataclass
class FiltrosIncidencias:
    tipo: str | None = None
    estado: str | None = None
    fecha_desde: datetime | None = None
    fecha_hasta: datetime | None = None
    reserva_id: str | None = None
    page: int = 1
    per_page: int = DEFAULT_PER_PAGE

    def __post_init__(self) -> None:
        # Un límite sin zona se interpreta como UTC
        if self.fecha_desde and self.fecha_desde.tzinfo is None:
            self.fecha_desde = self.fecha_desde.replace(tzinfo=timezone.utc)
        if self.fecha_hasta and self.fecha_hasta.tzinfo is None:
            self.fecha_hasta = self.fecha_hasta.replace(tzinfo=timezone.utc)


def filtrar_incidencias(
    incidencias: Iterable[Incidencia], filtros: FiltrosIncidencias
) -> list[Incidencia]:
    resultado = []
    for incidencia in incidencias:
        if filtros.tipo and incidencia.tipo != filtros.tipo:
            continue
        if filtros.estado and incidencia.estado != filtros.estado:
            continue
        creada = incidencia.fecha_creacion
        if filtros.fecha_desde and (creada is None or creada < filtros.fecha_desde):
            continue
        if filtros.fecha_hasta and (creada is None or creada > filtros.fecha_hasta):
            continue
        if filtros.reserva_id and incidencia.reserva_id != filtros.reserva_id:
            continue
        resultado.append(incidencia)
    # Más recientes primero
    return _ordenar(
        resultado,
        lambda i: _instante(i.fecha_creacion),
        True,
        lambda i: i.id,
    )


def listar_incidencias(
    incidencias: Iterable[Incidencia], filtros: FiltrosIncidencias
) -> Pagina[Incidencia]:
    return paginar(filtrar_incidencias(incidencias, filtros), filtros.page, filtros.per_page)


def contar_por_estado(incidencias: Iterable[Incidencia]) -> dict[str, int]:
    conteo = {"total": 0, "pendientes": 0, "en_revision": 0, "resueltas": 0, "cerradas": 0}
    claves = {
        "pendiente": "pendientes",
        "en_revision": "en_revision",
        "resuelta": "resueltas",
        "cerrada": "cerradas",
    }
    for incidencia in incidencias:
        conteo["total"] += 1
        clave = claves.get(incidencia.estado)
        if clave:
            conteo[clave] += 1
    return conteo
