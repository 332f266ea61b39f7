import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from juegamas import __version__
from juegamas.api.deps import engine
from juegamas.api.routers.contacto import router as contacto_router
from juegamas.api.routers.espacios import router as espacios_router
from juegamas.api.routers.health import router as health_router
from juegamas.api.routers.incidencias import router as incidencias_router
from juegamas.api.routers.perfil import router as perfil_router
from juegamas.api.routers.reservas import router as reservas_router
from juegamas.api.routers.wizards import router as wizards_router
from juegamas.api.routers.worker import router as worker_router
from juegamas.config import get_settings
from juegamas.domain.errors import (
    AccesoDenegadoError,
    DomainError,
    EspacioNotFoundError,
    IncidenciaNotFoundError,
    MensajeContactoNotFoundError,
    NoAutenticadoError,
    ReservaNotFoundError,
    ServicioExternoError,
    UsuarioNotFoundError,
    ValidationError,
)
from juegamas.infrastructure.db.tables import metadata

settings = get_settings()

# Configure structured logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# El resto de DomainError son reglas de negocio: 409
STATUS_POR_ERROR: dict[type[DomainError], int] = {
    ValidationError: 422,
    ReservaNotFoundError: 404,
    IncidenciaNotFoundError: 404,
    EspacioNotFoundError: 404,
    UsuarioNotFoundError: 404,
    MensajeContactoNotFoundError: 404,
    AccesoDenegadoError: 403,
    NoAutenticadoError: 401,
    ServicioExternoError: 503,
}


def status_para(exc: DomainError) -> int:
    for tipo in type(exc).__mro__:
        if tipo in STATUS_POR_ERROR:
            return STATUS_POR_ERROR[tipo]
    return 409


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize DB tables (for dev/demo purposes)
    if not settings.use_in_memory:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
    yield
    await engine.dispose()


app = FastAPI(
    title="JuegaMás API",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    status_code = status_para(exc)
    logger.info(
        "Domain error",
        extra={"code": exc.code, "status_code": status_code, "path": request.url.path},
    )
    content = {"success": False, "message": exc.message, "code": exc.code}
    if isinstance(exc, ValidationError):
        content["errors"] = exc.errors
    return JSONResponse(status_code=status_code, content=content)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = {}
    for error in exc.errors():
        # ("body", "campo") -> "campo"
        campo = ".".join(str(parte) for parte in error["loc"][1:]) or str(error["loc"][0])
        errors.setdefault(campo, error["msg"])
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "message": "Los datos enviados no son válidos",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Evita exponer trazas al cliente.

    El error completo se registra con un error_id; el cliente sólo recibe un
    mensaje genérico y ese identificador.
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "message": "Ocurrió un error inesperado. Intenta nuevamente en unos minutos.",
            "code": "INTERNAL_ERROR",
            "error_id": error_id,
        },
    )


app.include_router(health_router, tags=["Health"])
app.include_router(espacios_router, prefix="/api/v1", tags=["Espacios"])
app.include_router(reservas_router, prefix="/api/v1", tags=["Reservas"])
app.include_router(incidencias_router, prefix="/api/v1", tags=["Incidencias"])
app.include_router(perfil_router, prefix="/api/v1", tags=["Perfil"])
app.include_router(contacto_router, prefix="/api/v1", tags=["Contacto"])
app.include_router(wizards_router, prefix="/api/v1", tags=["Wizards"])
app.include_router(worker_router, prefix="/api/v1", tags=["Worker"])
