"""Repositorios SQL (SQLAlchemy Core, async)."""

from juegamas.infrastructure.db.repositories.contacto_repo_sql import ContactoRepoSQL
from juegamas.infrastructure.db.repositories.espacio_repo_sql import EspacioRepoSQL
from juegamas.infrastructure.db.repositories.incidencia_repo_sql import IncidenciaRepoSQL
from juegamas.infrastructure.db.repositories.reserva_repo_sql import ReservaRepoSQL
from juegamas.infrastructure.db.repositories.usuario_repo_sql import UsuarioRepoSQL

__all__ = [
    "ContactoRepoSQL",
    "EspacioRepoSQL",
    "IncidenciaRepoSQL",
    "ReservaRepoSQL",
    "UsuarioRepoSQL",
]
