from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from nasa_client import NasaAPIError, NasaClient
from routes.deps import get_nasa_client
from services.neo_service import fetch_neo_feed

router = APIRouter(prefix="/api", tags=["neo"])

@router.get("/neo")
async def neo(
    start_date: Optional[str] = Query(None),
    end_date: Optional[str] = Query(None),
    client: NasaClient = Depends(get_nasa_client),
):
    try:
        return await fetch_neo_feed(
            client,
            start_date=start_date,
            end_date=end_date,
        )
    except NasaAPIError as e:
        return JSONResponse(status_code=500, content={"error": e.message})
