from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from nasa_client import NasaAPIError, NasaClient
from routes.deps import get_nasa_client
from services.apod_service import fetch_apod

router = APIRouter(prefix="/api", tags=["apod"])

@router.get("/apod")
async def apod(
    date: Optional[str] = Query(None),
    client: NasaClient = Depends(get_nasa_client),
):
    try:
        return await fetch_apod(client, date=date)
    except NasaAPIError as e:
        return JSONResponse(status_code=500, content={"error": e.message})
