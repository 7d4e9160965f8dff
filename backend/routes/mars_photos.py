from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from nasa_client import NasaAPIError, NasaClient
from routes.deps import get_nasa_client
from services.mars_photos_service import NoPhotosFound, fetch_mars_photos

router = APIRouter(prefix="/api", tags=["mars"])

@router.get("/mars-photos")
async def mars_photos(
    earth_date: Optional[str] = Query(None),
    camera: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
    client: NasaClient = Depends(get_nasa_client),
):
    try:
        return await fetch_mars_photos(
            client,
            earth_date=earth_date,
            camera=camera,
            page=page,
        )
    except NoPhotosFound as e:
        return JSONResponse(status_code=404, content=e.to_dict())
    except NasaAPIError as e:
        return JSONResponse(status_code=500, content={"error": e.message})
