from __future__ import annotations

from typing import Any, Optional

from config import NEO_FEED_URL
from nasa_client import NasaClient


async def fetch_neo_feed(
    client: NasaClient,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> Any:
    return await client.get(NEO_FEED_URL, {"start_date": start_date, "end_date": end_date})
