from typing import Any

from juegamas.domain.errors import ValidationError
from juegamas.domain.wizard import WIZARDS


class ValidarPasoWizardUseCase:
    """Evalúa la compuerta de un paso sin avanzar ningún estado del servidor."""

    async def execute(self, wizard: str, paso: str, datos: dict[str, Any]) -> dict[str, Any]:
        fabrica = WIZARDS.get(wizard)
        if fabrica is None:
            raise ValidationError(field="wizard", message=f"Formulario desconocido: {wizard}")
        instancia = fabrica()
        if paso not in instancia.pasos:
            raise ValidationError(field="paso", message=f"Paso desconocido: {paso}")

        errores = instancia.errores_paso(paso, datos)
        indice = instancia.pasos.index(paso)
        siguiente = instancia.pasos[indice + 1] if indice + 1 < len(instancia.pasos) else None
        return {
            "valido": not errores,
            "errores": errores,
            "paso": paso,
            "siguiente_paso": siguiente if not errores else paso,
        }
