import hashlib
import hmac

from juegamas.application.interfaces.auth_provider import AuthProvider


def _hash(password: str) -> str:
    return hashlib.sha256(password.encode()).hexdigest()


class InMemoryAuthProvider(AuthProvider):
    """Proveedor de credenciales para desarrollo y tests."""

    def __init__(self, passwords: dict[str, str] | None = None) -> None:
        self._hashes = {uid: _hash(pwd) for uid, pwd in (passwords or {}).items()}

    def registrar(self, usuario_id: str, password: str) -> None:
        self._hashes[usuario_id] = _hash(password)

    async def verificar_password(self, usuario_id: str, password: str) -> bool:
        guardado = self._hashes.get(usuario_id)
        return guardado is not None and hmac.compare_digest(guardado, _hash(password))

    async def cambiar_password(self, usuario_id: str, nueva_password: str) -> None:
        self._hashes[usuario_id] = _hash(nueva_password)
