from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

NASA_BASE_URL = "https://api.nasa.gov"

# Rover fijo para las fotos de Marte
MARS_ROVER = "curiosity"

APOD_URL = f"{NASA_BASE_URL}/planetary/apod"
MARS_PHOTOS_URL = f"{NASA_BASE_URL}/mars-photos/api/v1/rovers/{MARS_ROVER}/photos"
NEO_FEED_URL = f"{NASA_BASE_URL}/neo/rest/v1/feed"

# Tamaño de página que devuelve la API de fotos
MARS_PAGE_SIZE = 25

DEFAULT_PORT = 5001
DEFAULT_API_KEY = "DEMO_KEY"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    nasa_api_key: str = DEFAULT_API_KEY
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    cors_origins: Tuple[str, ...] = ("*",)


def _parse_origins(raw: str) -> Tuple[str, ...]:
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or ("*",)


def load_settings() -> Settings:
    """
    Lee la configuración una sola vez (variables de entorno y .env si existe).
    """
    load_dotenv()

    return Settings(
        port=int(os.getenv("PORT") or DEFAULT_PORT),
        nasa_api_key=os.getenv("NASA_API_KEY") or DEFAULT_API_KEY,
        timeout_seconds=float(os.getenv("NASA_TIMEOUT_SECONDS") or DEFAULT_TIMEOUT_SECONDS),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS", "*")),
    )
