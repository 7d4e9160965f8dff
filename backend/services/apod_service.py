from __future__ import annotations

from typing import Any, Optional

from config import APOD_URL
from nasa_client import NasaClient


async def fetch_apod(client: NasaClient, date: Optional[str] = None) -> Any:
    # Sin fecha, NASA devuelve la imagen de hoy
    return await client.get(APOD_URL, {"date": date})
