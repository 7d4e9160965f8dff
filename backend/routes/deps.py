from __future__ import annotations

from fastapi import Request

from nasa_client import NasaClient


def get_nasa_client(request: Request) -> NasaClient:
    return request.app.state.nasa_client

