"""Interface UsuarioRepo - Puerto para perfiles de usuario."""

from abc import ABC, abstractmethod

from juegamas.domain.entities.usuario import Usuario


class UsuarioRepo(ABC):
    @abstractmethod
    async def get_by_id(self, usuario_id: str) -> Usuario | None:
        raise NotImplementedError

    @abstractmethod
    async def save(self, usuario: Usuario) -> None:
        """Crea o actualiza el perfil."""
        raise NotImplementedError
