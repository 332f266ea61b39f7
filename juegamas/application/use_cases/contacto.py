"""Mensajes del formulario público de contacto."""

import logging
from typing import Any

from juegamas.application.dtos import ResultadoOperacion
from juegamas.application.interfaces.clock import Clock
from juegamas.application.interfaces.contacto_repo import ContactoRepo
from juegamas.application.interfaces.transaction_manager import TransactionManager
from juegamas.application.submission_guard import OperacionesEnCurso
from juegamas.domain.entities.usuario import MensajeContacto
from juegamas.domain.errors import MensajeContactoNotFoundError
from juegamas.domain.listing import DEFAULT_PER_PAGE, Pagina, paginar
from juegamas.domain.validators import exigir_valido

SUPERFICIE = "contacto"

logger = logging.getLogger(__name__)


class EnviarMensajeContactoUseCase:
    """
    Guarda un mensaje de contacto como no leído y no respondido.

    El correo debe pertenecer a un proveedor de la lista permitida.
    """

    def __init__(
        self,
        contacto_repo: ContactoRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        guard: OperacionesEnCurso,
    ) -> None:
        self._contacto_repo = contacto_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._guard = guard

    async def execute(self, datos: dict[str, Any]) -> ResultadoOperacion[MensajeContacto]:
        campos = {
            "nombre": datos.get("nombre"),
            "email": datos.get("email"),
            "telefono": datos.get("telefono"),
            "asunto": datos.get("asunto"),
            "mensaje": datos.get("mensaje"),
        }
        exigir_valido(campos)

        email = campos["email"].strip().lower()
        async with self._guard.reservar(SUPERFICIE, email):
            async with self._transaction_manager.start():
                mensaje = await self._contacto_repo.add(
                    MensajeContacto(
                        nombre=campos["nombre"].strip(),
                        email=email,
                        telefono=(campos["telefono"] or "").strip() or None,
                        asunto=campos["asunto"].strip(),
                        mensaje=campos["mensaje"].strip(),
                        created_at=self._clock.now(),
                    )
                )
            guardado = await self._contacto_repo.get_by_id(mensaje.id)

        logger.info("Contact message received", extra={"mensaje_id": guardado.id})
        return ResultadoOperacion(
            success=True,
            message="Mensaje recibido correctamente",
            data=guardado,
        )


class ListarMensajesContactoUseCase:
    def __init__(self, contacto_repo: ContactoRepo) -> None:
        self._contacto_repo = contacto_repo

    async def execute(
        self, leido: bool | None = None, page: int = 1, per_page: int = DEFAULT_PER_PAGE
    ) -> Pagina[MensajeContacto]:
        return paginar(await self._contacto_repo.list_all(leido=leido), page, per_page)


class MarcarMensajeContactoUseCase:
    """Marca un mensaje como leído o como respondido (respondido implica leído)."""

    def __init__(
        self,
        contacto_repo: ContactoRepo,
        transaction_manager: TransactionManager,
        guard: OperacionesEnCurso,
    ) -> None:
        self._contacto_repo = contacto_repo
        self._transaction_manager = transaction_manager
        self._guard = guard

    async def execute(self, mensaje_id: int, respondido: bool = False) -> ResultadoOperacion[MensajeContacto]:
        async with self._guard.reservar(SUPERFICIE, str(mensaje_id)):
            async with self._transaction_manager.start():
                mensaje = await self._contacto_repo.get_by_id(mensaje_id)
                if mensaje is None:
                    raise MensajeContactoNotFoundError(mensaje_id)
                mensaje.leido = True
                if respondido:
                    mensaje.respondido = True
                await self._contacto_repo.save(mensaje)
            actualizado = await self._contacto_repo.get_by_id(mensaje_id)

        return ResultadoOperacion(
            success=True,
            message="Mensaje marcado como respondido" if respondido else "Mensaje marcado como leído",
            data=actualizado,
        )
