"""
Formularios de varios pasos como máquina de estados finita.

Cada paso tiene una compuerta de validación pura que retorna los errores por
campo. Avanzar exige que la compuerta del paso actual pase; retroceder nunca
valida; completar exige que pasen todas.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from juegamas.domain.entities.incidencia import TIPOS_INCIDENCIA
from juegamas.domain.errors import ValidationError
from juegamas.domain.validators import (
    validar_asunto,
    validar_descripcion,
    validar_email,
    validar_nombre,
    validar_password,
    validar_telefono,
)

Errores = dict[str, str]
Compuerta = Callable[[Mapping[str, Any]], Errores]


@dataclass(frozen=True)
class Paso:
    nombre: str
    compuerta: Compuerta


def _sin_vacios(errores: Errores) -> Errores:
    return {campo: mensaje for campo, mensaje in errores.items() if mensaje}


class Wizard:
    def __init__(self, nombre: str, pasos: tuple[Paso, ...]) -> None:
        if not pasos:
            raise ValueError("Un wizard necesita al menos un paso")
        self.nombre = nombre
        self._pasos = pasos
        self._indice = 0

    @property
    def pasos(self) -> tuple[str, ...]:
        return tuple(p.nombre for p in self._pasos)

    @property
    def paso_actual(self) -> str:
        return self._pasos[self._indice].nombre

    @property
    def es_ultimo_paso(self) -> bool:
        return self._indice == len(self._pasos) - 1

    def _paso(self, nombre: str) -> Paso:
        for paso in self._pasos:
            if paso.nombre == nombre:
                return paso
        raise KeyError(f"Paso desconocido en {self.nombre}: {nombre}")

    def errores_paso(self, paso: str, datos: Mapping[str, Any]) -> Errores:
        return _sin_vacios(self._paso(paso).compuerta(datos))

    def puede_avanzar(self, paso: str, datos: Mapping[str, Any]) -> bool:
        return not self.errores_paso(paso, datos)

    def avanzar(self, datos: Mapping[str, Any]) -> str:
        """Pasa al siguiente paso si la compuerta del actual se cumple."""
        errores = self.errores_paso(self.paso_actual, datos)
        if errores:
            field, message = next(iter(errores.items()))
            raise ValidationError(field=field, message=message, errors=errores)
        if not self.es_ultimo_paso:
            self._indice += 1
        return self.paso_actual

    def retroceder(self) -> str:
        if self._indice > 0:
            self._indice -= 1
        return self.paso_actual

    def completar(self, datos: Mapping[str, Any]) -> dict[str, Any]:
        """Valida todas las compuertas y retorna los datos si todas pasan."""
        errores: Errores = {}
        for paso in self._pasos:
            errores.update(_sin_vacios(paso.compuerta(datos)))
        if errores:
            field, message = next(iter(errores.items()))
            raise ValidationError(field=field, message=message, errors=errores)
        self._indice = len(self._pasos) - 1
        return dict(datos)


# === Registro ===


def _credenciales(datos: Mapping[str, Any]) -> Errores:
    errores = {
        "email": validar_email(datos.get("email")),
        "password": validar_password(datos.get("password")),
    }
    if datos.get("password") != datos.get("confirmar_password"):
        errores["confirmar_password"] = "Las contraseñas no coinciden"
    return errores


def _perfil(datos: Mapping[str, Any]) -> Errores:
    return {
        "nombre": validar_nombre(datos.get("nombre")),
        "telefono": validar_telefono(datos.get("telefono")),
    }


def wizard_registro() -> Wizard:
    return Wizard("registro", (Paso("credenciales", _credenciales), Paso("perfil", _perfil)))


# === Reporte de incidencia ===


def _tipo(datos: Mapping[str, Any]) -> Errores:
    if datos.get("tipo") not in TIPOS_INCIDENCIA:
        return {"tipo": "Selecciona un tipo de incidencia válido"}
    return {}


def _asunto(datos: Mapping[str, Any]) -> Errores:
    return {"asunto": validar_asunto(datos.get("asunto"))}


def _descripcion(datos: Mapping[str, Any]) -> Errores:
    # reserva_id es opcional; su pertenencia se verifica al crear
    return {"descripcion": validar_descripcion(datos.get("descripcion"))}


def wizard_incidencia() -> Wizard:
    return Wizard(
        "incidencia",
        (Paso("tipo", _tipo), Paso("asunto", _asunto), Paso("descripcion", _descripcion)),
    )


WIZARDS: dict[str, Callable[[], Wizard]] = {
    "registro": wizard_registro,
    "incidencia": wizard_incidencia,
}
