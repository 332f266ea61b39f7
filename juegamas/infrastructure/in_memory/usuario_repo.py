from copy import deepcopy

from juegamas.application.interfaces.usuario_repo import UsuarioRepo
from juegamas.domain.entities.usuario import Usuario


class InMemoryUsuarioRepo(UsuarioRepo):
    def __init__(self) -> None:
        self.usuarios: dict[str, Usuario] = {}

    async def get_by_id(self, usuario_id: str) -> Usuario | None:
        usuario = self.usuarios.get(usuario_id)
        return deepcopy(usuario) if usuario else None

    async def save(self, usuario: Usuario) -> None:
        self.usuarios[usuario.id] = deepcopy(usuario)
