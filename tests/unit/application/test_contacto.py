import pytest

from juegamas.domain.errors import MensajeContactoNotFoundError, ValidationError
from tests.factories import AHORA

MENSAJE = {
    "nombre": "Ignacio Fuentes",
    "email": "Ignacio.Fuentes@Gmail.com",
    "telefono": "+56 9 8765 4321",
    "asunto": "Arriendo para campeonato",
    "mensaje": "Quisiera cotizar tres canchas para un campeonato de empresas en abril.",
}


async def test_mensaje_valido_queda_no_leido(use_cases):
    resultado = await use_cases["enviar_contacto"].execute(dict(MENSAJE))

    mensaje = resultado.data
    assert resultado.message == "Mensaje recibido correctamente"
    assert mensaje.id == 1
    assert mensaje.email == "ignacio.fuentes@gmail.com"
    assert mensaje.leido is False
    assert mensaje.respondido is False
    assert mensaje.created_at == AHORA


async def test_dominio_no_permitido_se_rechaza(use_cases, bundle):
    with pytest.raises(ValidationError) as exc_info:
        await use_cases["enviar_contacto"].execute(dict(MENSAJE, email="user@unknown-domain.xyz"))

    assert exc_info.value.field == "email"
    assert await bundle["contacto_repo"].list_all() == []


async def test_telefono_es_opcional_pero_se_valida(use_cases):
    sin_telefono = await use_cases["enviar_contacto"].execute(dict(MENSAJE, telefono=""))
    assert sin_telefono.data.telefono is None

    with pytest.raises(ValidationError) as exc_info:
        await use_cases["enviar_contacto"].execute(dict(MENSAJE, telefono="12345"))
    assert exc_info.value.field == "telefono"


async def test_mensaje_corto_informa_todos_los_errores(use_cases):
    with pytest.raises(ValidationError) as exc_info:
        await use_cases["enviar_contacto"].execute(dict(MENSAJE, nombre="Al", mensaje="Hola"))

    assert set(exc_info.value.errors) == {"nombre", "mensaje"}


async def test_listado_y_marcas(use_cases, clock):
    await use_cases["enviar_contacto"].execute(dict(MENSAJE))
    clock.advance(minutes=5)
    await use_cases["enviar_contacto"].execute(dict(MENSAJE, email="otra.persona@outlook.cl"))

    todos = await use_cases["listar_contacto"].execute()
    assert [m.id for m in todos.items] == [2, 1]

    leido = await use_cases["marcar_contacto"].execute(1)
    assert leido.data.leido is True
    assert leido.data.respondido is False

    respondido = await use_cases["marcar_contacto"].execute(2, respondido=True)
    assert respondido.data.leido is True
    assert respondido.data.respondido is True

    no_leidos = await use_cases["listar_contacto"].execute(leido=False)
    assert no_leidos.items == []
    assert (await use_cases["listar_contacto"].execute(leido=True)).total == 2


async def test_marcar_mensaje_inexistente(use_cases):
    with pytest.raises(MensajeContactoNotFoundError):
        await use_cases["marcar_contacto"].execute(99)


async def test_listado_paginado(use_cases, clock):
    for _ in range(3):
        await use_cases["enviar_contacto"].execute(dict(MENSAJE))
        clock.advance(minutes=1)

    pagina = await use_cases["listar_contacto"].execute(page=2, per_page=2)

    assert [m.id for m in pagina.items] == [1]
    assert pagina.total == 3
