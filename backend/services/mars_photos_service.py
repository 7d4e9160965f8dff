from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Union

from config import MARS_PAGE_SIZE, MARS_PHOTOS_URL
from nasa_client import NasaClient

SUGGESTIONS: List[str] = [
    "Try a different date",
    "Try a different camera",
    "Check if the date is within the rover mission duration",
]


class NoPhotosFound(Exception):
    def __init__(self, earth_date: str, camera: Optional[str] = None):
        self.earth_date = earth_date
        self.camera = camera
        super().__init__(self.message)

    @property
    def message(self) -> str:
        msg = f"No Mars photos available for {self.earth_date}"
        if self.camera:
            msg += f" with camera {self.camera}"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": "No photos found",
            "message": self.message,
            "suggestions": list(SUGGESTIONS),
        }


def default_earth_date(today: Optional[date] = None) -> str:
    # Ayer: las fotos del día suelen publicarse con retraso
    today = today or date.today()
    return (today - timedelta(days=1)).strftime("%Y-%m-%d")


async def fetch_mars_photos(
    client: NasaClient,
    earth_date: Optional[str] = None,
    camera: Optional[str] = None,
    page: Optional[Union[int, str]] = None,
) -> Dict[str, Any]:
    """
    Fotos de Curiosity para una fecha terrestre.

    hasMore es heurístico: True si vino una página completa (25 fotos).
    La API no expone un cursor real de continuación.
    """
    earth_date = earth_date or default_earth_date()
    page = page or 1

    data = await client.get(
        MARS_PHOTOS_URL,
        {"earth_date": earth_date, "camera": camera, "page": page},
    )

    photos = data.get("photos") if isinstance(data, dict) else None
    if not photos:
        raise NoPhotosFound(earth_date, camera)

    result = {
        "photos": photos,
        "hasMore": len(photos) >= MARS_PAGE_SIZE,
        "earth_date": earth_date,
    }
    # Sin cámara pedida, la clave no se incluye
    if camera is not None:
        result["camera"] = camera
    return result
