"""FastAPI web interface for station, train and bus city search."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional, Union

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from . import config
from .search import QueryError, SearchCatalog

logger = logging.getLogger(__name__)


class StationResult(BaseModel):
    code: str
    name: str
    city: str


class TrainResult(BaseModel):
    number: str
    name: str


class CityResult(BaseModel):
    id: Union[int, str]
    name: str
    state: str


router = APIRouter(prefix="/search", tags=["search"])


def get_catalog(request: Request) -> SearchCatalog:
    return request.app.state.catalog


@router.get("/station", response_model=list[StationResult])
async def search_station(request: Request, q: Optional[str] = None):
    """Search stations, e.g. /search/station?q=coimbatore"""
    stations = get_catalog(request).search_stations(q)
    return [station.to_dict() for station in stations]


@router.get("/train", response_model=list[TrainResult])
async def search_train(request: Request, q: Optional[str] = None):
    """Search trains, e.g. /search/train?q=22666 or ?q=uday"""
    trains = get_catalog(request).search_trains(q)
    return [train.to_dict() for train in trains]


@router.get("/cities", response_model=list[CityResult])
async def search_cities(request: Request, q: Optional[str] = None):
    """Search bus cities, e.g. /search/cities?q=mysuru"""
    cities = get_catalog(request).search_cities(q)
    return [city.to_dict() for city in cities]


async def query_error_handler(request: Request, exc: QueryError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def create_app(catalog: Optional[SearchCatalog] = None) -> FastAPI:
    """Build the API.

    Args:
        catalog: Prebuilt catalog to serve. When omitted, the catalog is
            loaded from the configured data files during startup, and a
            malformed file stops the server from starting.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "catalog", None) is None:
            app.state.catalog = SearchCatalog.from_files()
            logger.info("Search indexes ready: %s", app.state.catalog.counts())
        app.state.started_at = time.monotonic()
        yield

    app = FastAPI(
        title="Quickets Search",
        description="Typo-tolerant autocomplete for stations, trains and bus cities",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.catalog = catalog
    app.state.started_at = time.monotonic()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    app.add_exception_handler(QueryError, query_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.get("/health")
    async def health(request: Request):
        """Liveness probe."""
        uptime = time.monotonic() - request.app.state.started_at
        return {
            "status": "ok",
            "uptime": round(uptime, 3),
            **get_catalog(request).counts(),
        }

    return app


app = create_app()


def run_server(host: str = config.HOST, port: int = config.PORT):
    """Run the FastAPI server."""
    import uvicorn
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    logger.info("Quickets search API starting on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
