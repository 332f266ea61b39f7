import pytest

from juegamas.domain.errors import ValidationError
from juegamas.domain.validators import (
    es_email_permitido,
    es_telefono_chileno,
    exigir_valido,
    validar_asunto,
    validar_campo,
    validar_descripcion,
    validar_email,
    validar_formulario,
    validar_informacion_adicional,
    validar_mensaje,
    validar_motivo_cancelacion,
    validar_nombre,
    validar_password,
    validar_telefono,
)


@pytest.mark.parametrize(
    "email",
    ["ana@gmail.com", "pedro.soto@outlook.cl", "x@ICLOUD.com", "maria@hotmail.com"],
)
def test_email_de_dominio_permitido(email):
    assert es_email_permitido(email)


@pytest.mark.parametrize(
    "email",
    ["user@unknown-domain.xyz", "sin-arroba.com", "a b@gmail.com", "", None],
)
def test_email_rechazado(email):
    assert not es_email_permitido(email)


def test_email_contacto_con_dominio_desconocido_da_mensaje():
    assert validar_campo("email", "user@unknown-domain.xyz") == (
        "Por favor, ingresa un correo electrónico válido"
    )


def test_email_registro_solo_exige_formato():
    assert validar_email("alguien@empresa.io") == ""
    assert validar_email("alguien@") != ""


@pytest.mark.parametrize("telefono", ["+56912345678", "912345678", "+56 9 1234 5678", "56-9-1234-5678"])
def test_telefono_chileno_valido(telefono):
    assert es_telefono_chileno(telefono)


@pytest.mark.parametrize("telefono", ["+56212345678", "12345", "+5491123456789"])
def test_telefono_chileno_invalido(telefono):
    assert not es_telefono_chileno(telefono)


def test_telefono_es_opcional():
    assert validar_telefono("") == ""
    assert validar_telefono(None) == ""
    assert validar_telefono("123") != ""


def test_motivo_corto_da_mensaje_de_diez_caracteres():
    assert validar_motivo_cancelacion("no") == (
        "El motivo de cancelación debe tener al menos 10 caracteres"
    )
    assert validar_motivo_cancelacion("Tengo un conflicto de horario") == ""


def test_motivo_solo_espacios_no_cuenta():
    assert validar_motivo_cancelacion("          ") != ""


def test_limites_de_asunto():
    assert validar_asunto("") == "El asunto es obligatorio"
    assert validar_asunto("Hola") != ""
    assert validar_asunto("Hola!") == ""
    assert validar_asunto("x" * 100) == ""
    assert validar_asunto("x" * 101) != ""


def test_limites_de_mensaje_y_descripcion():
    assert validar_mensaje("x" * 19) != ""
    assert validar_mensaje("x" * 20) == ""
    assert validar_mensaje("x" * 2001) != ""
    assert validar_descripcion("x" * 19) != ""
    assert validar_descripcion("x" * 2000) == ""
    assert validar_descripcion("x" * 2001) != ""


def test_informacion_adicional():
    assert validar_informacion_adicional("corto") != ""
    assert validar_informacion_adicional("El problema continúa hoy") == ""
    assert validar_informacion_adicional("x" * 2001) != ""


def test_nombre_y_password():
    assert validar_nombre("Al") != ""
    assert validar_nombre("Ana") == ""
    assert validar_password("1234567") != ""
    assert validar_password("12345678") == ""


def test_campo_sin_regla_es_valido():
    assert validar_campo("color_favorito", "") == ""


def test_validar_formulario_retorna_solo_errores():
    errores = validar_formulario(
        {"nombre": "Ana María", "email": "ana@dominio-raro.org", "asunto": "Hola"}
    )
    assert set(errores) == {"email", "asunto"}


def test_exigir_valido_lanza_con_todos_los_errores():
    with pytest.raises(ValidationError) as exc_info:
        exigir_valido({"nombre": "A", "mensaje": "corto"})

    assert exc_info.value.field == "nombre"
    assert set(exc_info.value.errors) == {"nombre", "mensaje"}
