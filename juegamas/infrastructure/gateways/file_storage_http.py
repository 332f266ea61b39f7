import json
import logging

import httpx
from pybreaker import CircuitBreaker

from juegamas.application.interfaces.file_storage import FileStorage
from juegamas.domain.errors import ServicioExternoError
from juegamas.infrastructure.circuit_breaker import (
    CircuitBreakerError,
    llamar_protegido,
    storage_breaker,
)

logger = logging.getLogger(__name__)

SERVICIO = "almacenamiento"


class HttpFileStorage(FileStorage):
    """Sube archivos a un bucket expuesto por HTTP (PUT por ruta)."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout_seconds: float = 10.0,
        breaker: CircuitBreaker | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout_seconds
        self._breaker = breaker or storage_breaker

    async def upload(self, path: str, content: bytes, content_type: str) -> str:
        url = f"{self._base_url}/{path.lstrip('/')}"
        headers = {"Content-Type": content_type}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"

        async def _make_request():
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                return await client.put(url, content=content, headers=headers)

        try:
            response = await llamar_protegido(self._breaker, _make_request)
        except CircuitBreakerError as exc:
            logger.error("Storage circuit breaker is open", extra={"path": path})
            raise ServicioExternoError(SERVICIO, "circuit breaker open") from exc
        except httpx.HTTPError as exc:
            logger.error("Storage HTTP error", exc_info=exc, extra={"path": path})
            raise ServicioExternoError(SERVICIO, str(exc)) from exc

        if not 200 <= response.status_code < 300:
            logger.error(
                "Storage rejected upload",
                extra={"path": path, "http_status": response.status_code},
            )
            raise ServicioExternoError(SERVICIO, f"HTTP {response.status_code}")

        # El bucket puede devolver la URL pública; si no, es la misma ruta
        try:
            body = response.json()
        except json.JSONDecodeError:
            body = None
        if isinstance(body, dict) and body.get("url"):
            return body["url"]
        return url
