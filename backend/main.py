import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, load_settings
from nasa_client import NasaClient
from routes.apod import router as apod_router
from routes.mars_photos import router as mars_photos_router
from routes.neo import router as neo_router
from routes.health import router as health_router

logger = logging.getLogger("uvicorn.error")


def create_app(settings: Settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Server running on port %s", settings.port)
        yield

    app = FastAPI(title="nasa-proxy", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Configuración inmutable: se comparte tal cual entre requests
    app.state.settings = settings
    app.state.nasa_client = NasaClient(settings)

    app.include_router(health_router)
    app.include_router(apod_router)
    app.include_router(mars_photos_router)
    app.include_router(neo_router)

    return app


settings = load_settings()
app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
