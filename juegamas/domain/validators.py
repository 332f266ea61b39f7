"""
Reglas de validación de campos.

Funciones puras sin efectos secundarios: cada una recibe el valor del campo y
retorna el mensaje de error, o cadena vacía si el valor es válido. Se pueden
invocar de forma independiente por campo o a través de `validar_campo`.
"""

import re
from typing import Any, Callable, Mapping

from juegamas.domain.constants import (
    DOMINIOS_PERMITIDOS,
    MAX_ASUNTO_LENGTH,
    MAX_DESCRIPCION_LENGTH,
    MAX_MENSAJE_LENGTH,
    MIN_ASUNTO_LENGTH,
    MIN_DESCRIPCION_LENGTH,
    MIN_INFORMACION_ADICIONAL_LENGTH,
    MIN_MENSAJE_LENGTH,
    MIN_MOTIVO_CANCELACION_LENGTH,
    MIN_NOMBRE_LENGTH,
    MIN_PASSWORD_LENGTH,
)
from juegamas.domain.errors import ValidationError

EMAIL_REGEX = re.compile(r"^\S+@\S+\.\S+$")
TELEFONO_CHILE_REGEX = re.compile(r"^(\+?56)?[ -]*(9)[ -]*([0-9][ -]*){8}$")


def _texto(value: Any) -> str:
    return "" if value is None else str(value)


def es_email_valido(email: str) -> bool:
    return bool(EMAIL_REGEX.match(_texto(email)))


def es_email_permitido(email: str) -> bool:
    """Email con formato válido y dominio en la lista de proveedores aceptados."""
    email = _texto(email)
    if not es_email_valido(email):
        return False
    dominio = email.rsplit("@", 1)[1].lower()
    return dominio in DOMINIOS_PERMITIDOS


def es_telefono_chileno(telefono: str) -> bool:
    return bool(TELEFONO_CHILE_REGEX.match(re.sub(r"\s", "", _texto(telefono))))


def validar_nombre(value: Any) -> str:
    if len(_texto(value).strip()) < MIN_NOMBRE_LENGTH:
        return f"El nombre debe tener al menos {MIN_NOMBRE_LENGTH} caracteres"
    return ""


def validar_email_contacto(value: Any) -> str:
    if not es_email_permitido(value):
        return "Por favor, ingresa un correo electrónico válido"
    return ""


def validar_email(value: Any) -> str:
    if not es_email_valido(value):
        return "Por favor, introduce un email válido"
    return ""


def validar_telefono(value: Any) -> str:
    # El teléfono es opcional: sólo se valida si viene informado
    if _texto(value).strip() and not es_telefono_chileno(value):
        return "Por favor, ingresa un número de teléfono válido (+569XXXXXXXX)"
    return ""


def validar_asunto(value: Any) -> str:
    asunto = _texto(value).strip()
    if not asunto:
        return "El asunto es obligatorio"
    if len(asunto) < MIN_ASUNTO_LENGTH:
        return f"El asunto debe tener al menos {MIN_ASUNTO_LENGTH} caracteres"
    if len(asunto) > MAX_ASUNTO_LENGTH:
        return f"El asunto no puede tener más de {MAX_ASUNTO_LENGTH} caracteres"
    return ""


def validar_mensaje(value: Any) -> str:
    mensaje = _texto(value).strip()
    if len(mensaje) < MIN_MENSAJE_LENGTH:
        return f"El mensaje debe tener al menos {MIN_MENSAJE_LENGTH} caracteres"
    if len(mensaje) > MAX_MENSAJE_LENGTH:
        return f"El mensaje no puede tener más de {MAX_MENSAJE_LENGTH} caracteres"
    return ""


def validar_descripcion(value: Any) -> str:
    descripcion = _texto(value).strip()
    if not descripcion:
        return "La descripción es obligatoria"
    if len(descripcion) < MIN_DESCRIPCION_LENGTH:
        return f"La descripción debe tener al menos {MIN_DESCRIPCION_LENGTH} caracteres"
    if len(descripcion) > MAX_DESCRIPCION_LENGTH:
        return f"La descripción no puede tener más de {MAX_DESCRIPCION_LENGTH} caracteres"
    return ""


def validar_motivo_cancelacion(value: Any) -> str:
    if len(_texto(value).strip()) < MIN_MOTIVO_CANCELACION_LENGTH:
        return (
            f"El motivo de cancelación debe tener al menos "
            f"{MIN_MOTIVO_CANCELACION_LENGTH} caracteres"
        )
    return ""


def validar_informacion_adicional(value: Any) -> str:
    texto = _texto(value).strip()
    if len(texto) < MIN_INFORMACION_ADICIONAL_LENGTH:
        return (
            "Por favor, proporciona una descripción más detallada "
            f"(mínimo {MIN_INFORMACION_ADICIONAL_LENGTH} caracteres)"
        )
    if len(texto) > MAX_DESCRIPCION_LENGTH:
        return f"La información adicional no puede tener más de {MAX_DESCRIPCION_LENGTH} caracteres"
    return ""


def validar_password(value: Any) -> str:
    if len(_texto(value)) < MIN_PASSWORD_LENGTH:
        return f"La contraseña debe tener al menos {MIN_PASSWORD_LENGTH} caracteres"
    return ""


VALIDADORES: dict[str, Callable[[Any], str]] = {
    "nombre": validar_nombre,
    "email": validar_email_contacto,
    "email_registro": validar_email,
    "telefono": validar_telefono,
    "asunto": validar_asunto,
    "mensaje": validar_mensaje,
    "descripcion": validar_descripcion,
    "motivo_cancelacion": validar_motivo_cancelacion,
    "informacion_adicional": validar_informacion_adicional,
    "password": validar_password,
}


def validar_campo(field: str, value: Any) -> str:
    """Valida un campo por nombre. Los campos sin regla se consideran válidos."""
    validador = VALIDADORES.get(field)
    if validador is None:
        return ""
    return validador(value)


def validar_formulario(datos: Mapping[str, Any]) -> dict[str, str]:
    """Retorna sólo los campos con error."""
    errores: dict[str, str] = {}
    for field, value in datos.items():
        error = validar_campo(field, value)
        if error:
            errores[field] = error
    return errores


def exigir_valido(datos: Mapping[str, Any]) -> None:
    """Lanza ValidationError con el primer campo inválido."""
    errores = validar_formulario(datos)
    if errores:
        field, message = next(iter(errores.items()))
        raise ValidationError(field=field, message=message, errors=errores)
