from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from config import Settings

logger = logging.getLogger("uvicorn.error")

GENERIC_UPSTREAM_ERROR = "NASA API Error"


class NasaAPIError(Exception):
    """
    Falla de una llamada a la API de NASA.

    kind: "transport" (red, timeout) o "upstream" (NASA respondió con error).
    Hacia el cliente HTTP ambas se ven igual: {"error": message}.
    """

    def __init__(self, message: str, kind: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code


def _upstream_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return GENERIC_UPSTREAM_ERROR

    if not isinstance(body, dict):
        return GENERIC_UPSTREAM_ERROR

    if body.get("msg"):
        return str(body["msg"])

    # Errores de api_key vienen como {"error": {"code": ..., "message": ...}}
    err = body.get("error")
    if isinstance(err, dict) and err.get("message"):
        return str(err["message"])

    return GENERIC_UPSTREAM_ERROR


class NasaClient:
    def __init__(self, settings: Settings):
        self._api_key = settings.nasa_api_key
        self._timeout = settings.timeout_seconds

    async def get(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Un único GET a la API de NASA con api_key inyectada. Sin reintentos.
        """
        query = {k: v for k, v in (params or {}).items() if v is not None}
        query["api_key"] = self._api_key

        try:
            async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
                # El timeout de httpx es por fase; este es el límite total de la llamada
                resp = await asyncio.wait_for(client.get(url, params=query), self._timeout)
        except asyncio.TimeoutError as e:
            message = f"timeout of {self._timeout:g}s exceeded"
            logger.error("NASA API Error: %s", message)
            raise NasaAPIError(message, kind="transport") from e
        except httpx.HTTPError as e:
            message = str(e) or f"{type(e).__name__} after {self._timeout:g}s"
            logger.error("NASA API Error: %s", message)
            raise NasaAPIError(message, kind="transport") from e

        if resp.is_error:
            message = _upstream_message(resp)
            logger.error("NASA API Error: %s (status=%s)", message, resp.status_code)
            raise NasaAPIError(message, kind="upstream", status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            logger.error("NASA API Error: invalid JSON from %s", url)
            raise NasaAPIError(
                "Invalid JSON from NASA API", kind="upstream", status_code=resp.status_code
            ) from e
