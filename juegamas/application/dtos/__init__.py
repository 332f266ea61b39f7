"""DTOs de la capa de aplicación."""

from juegamas.application.dtos.resultado import ResultadoOperacion
from juegamas.application.dtos.sesion import SesionUsuario

__all__ = [
    "ResultadoOperacion",
    "SesionUsuario",
]
