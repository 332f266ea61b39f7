"""Interface AuthProvider - Puerto hacia el proveedor de autenticación."""

from abc import ABC, abstractmethod


class AuthProvider(ABC):
    """Las credenciales viven en el proveedor externo; este servicio no guarda hashes."""

    @abstractmethod
    async def verificar_password(self, usuario_id: str, password: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def cambiar_password(self, usuario_id: str, nueva_password: str) -> None:
        raise NotImplementedError
