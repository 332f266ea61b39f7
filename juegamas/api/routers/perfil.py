from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from juegamas.api.dependencies import get_use_cases
from juegamas.api.schemas.common import Respuesta, envolver
from juegamas.api.schemas.perfil import (
    ActualizarPerfilRequest,
    CambiarPasswordRequest,
    PreferenciasOut,
    PreferenciasRequest,
    UsuarioOut,
)
from juegamas.api.security import get_sesion, requiere
from juegamas.application.dtos import SesionUsuario

router = APIRouter()


@router.get("/perfil", response_model=UsuarioOut)
async def obtener_perfil(
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(get_sesion)],
) -> UsuarioOut:
    return UsuarioOut.model_validate(await use_cases["obtener_perfil"].execute(sesion=sesion))


@router.put("/perfil", response_model=Respuesta[UsuarioOut])
async def actualizar_perfil(
    payload: ActualizarPerfilRequest,
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("perfil:editar"))],
) -> dict:
    # Sólo los campos enviados; None en booleanos no es un cambio válido
    cambios = {
        campo: valor
        for campo, valor in payload.model_dump(exclude_unset=True).items()
        if valor is not None or campo in ("telefono", "biografia")
    }
    resultado = await use_cases["actualizar_perfil"].execute(sesion=sesion, cambios=cambios)
    return envolver(resultado, UsuarioOut)


@router.post("/perfil/password", response_model=Respuesta[UsuarioOut])
async def cambiar_password(
    payload: CambiarPasswordRequest,
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("perfil:editar"))],
) -> dict:
    resultado = await use_cases["cambiar_password"].execute(
        sesion=sesion,
        password_actual=payload.password_actual,
        password_nueva=payload.password_nueva,
        confirmar_password=payload.confirmar_password,
    )
    return envolver(resultado, UsuarioOut)


@router.post("/perfil/avatar", response_model=Respuesta[UsuarioOut])
async def subir_avatar(
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("perfil:editar"))],
    foto: UploadFile = File(...),
) -> dict:
    contenido = await foto.read()
    resultado = await use_cases["subir_avatar"].execute(
        sesion=sesion,
        contenido=contenido,
        content_type=foto.content_type,
    )
    return envolver(resultado, UsuarioOut)


@router.get("/preferencias", response_model=PreferenciasOut)
async def obtener_preferencias(
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("preferencias:editar"))],
) -> dict:
    return await use_cases["obtener_preferencias"].execute(sesion=sesion)


@router.put("/preferencias", response_model=Respuesta[PreferenciasOut])
async def guardar_preferencias(
    payload: PreferenciasRequest,
    use_cases: Annotated[dict, Depends(get_use_cases)],
    sesion: Annotated[SesionUsuario, Depends(requiere("preferencias:editar"))],
) -> dict:
    cambios = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
    resultado = await use_cases["guardar_preferencias"].execute(sesion=sesion, cambios=cambios)
    return envolver(resultado)
