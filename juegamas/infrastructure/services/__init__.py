"""Implementaciones concretas de servicios de infraestructura."""

from juegamas.infrastructure.services.clock_impl import ClockImpl
from juegamas.infrastructure.services.preferencias_json import JsonPreferenciasStore

__all__ = ["ClockImpl", "JsonPreferenciasStore"]
