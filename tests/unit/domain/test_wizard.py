import pytest

from juegamas.domain.errors import ValidationError
from juegamas.domain.wizard import wizard_incidencia, wizard_registro

CREDENCIALES = {"email": "ana@empresa.cl", "password": "secreta123", "confirmar_password": "secreta123"}
PERFIL = {"nombre": "Ana Pérez", "telefono": "+56912345678"}


def test_registro_avanza_y_completa():
    wizard = wizard_registro()
    assert wizard.pasos == ("credenciales", "perfil")
    assert wizard.paso_actual == "credenciales"

    assert wizard.avanzar(CREDENCIALES) == "perfil"
    assert wizard.es_ultimo_paso

    datos = wizard.completar({**CREDENCIALES, **PERFIL})
    assert datos["nombre"] == "Ana Pérez"


def test_no_avanza_con_contrasenas_distintas():
    wizard = wizard_registro()

    with pytest.raises(ValidationError) as exc_info:
        wizard.avanzar({**CREDENCIALES, "confirmar_password": "otra-clave"})

    assert exc_info.value.errors == {"confirmar_password": "Las contraseñas no coinciden"}
    assert wizard.paso_actual == "credenciales"


def test_puede_avanzar_es_puro():
    wizard = wizard_registro()

    assert wizard.puede_avanzar("credenciales", CREDENCIALES)
    assert not wizard.puede_avanzar("perfil", {"nombre": "A"})
    assert wizard.paso_actual == "credenciales"


def test_retroceder_nunca_valida():
    wizard = wizard_registro()
    wizard.avanzar(CREDENCIALES)

    assert wizard.retroceder() == "credenciales"
    assert wizard.retroceder() == "credenciales"


def test_completar_exige_todas_las_compuertas():
    wizard = wizard_incidencia()

    with pytest.raises(ValidationError) as exc_info:
        wizard.completar({"tipo": "otro", "asunto": "Hola", "descripcion": "corta"})

    assert set(exc_info.value.errors) == {"asunto", "descripcion"}


def test_tipo_de_incidencia_desconocido():
    wizard = wizard_incidencia()

    assert wizard.errores_paso("tipo", {"tipo": "queja"}) == {
        "tipo": "Selecciona un tipo de incidencia válido"
    }
    assert wizard.errores_paso("tipo", {"tipo": "problema_pago"}) == {}


def test_paso_desconocido():
    with pytest.raises(KeyError):
        wizard_incidencia().errores_paso("confirmacion", {})
