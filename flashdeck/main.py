import logging
import random
from contextlib import asynccontextmanager
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pymongo import MongoClient
from starlette.exceptions import HTTPException as StarletteHTTPException
from dotenv import load_dotenv

from .config import Settings, get_settings
from .database import connect
from .logging_config import setup_logging
from .routers import cards
from . import schemas

load_dotenv()

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Origin, Content-Type",
}


def create_app(
    settings: Optional[Settings] = None,
    client_factory: Callable[[Settings], MongoClient] = connect,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = client_factory(settings)
        app.state.client = client
        app.state.db = client[settings.database_name]
        app.state.rng = random.Random()
        logger.info("Serving decks from database %s", settings.database_name)
        try:
            yield
        finally:
            client.close()

    app = FastAPI(title="Flashdeck API", lifespan=lifespan)
    app.state.settings = settings

    @app.middleware("http")
    async def cors(request: Request, call_next):
        # not CORSMiddleware: it answers preflight with 200, here every OPTIONS gets 204
        # and never reaches the routers
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def error_body(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.get("/health", response_model=schemas.HealthOut)
    def health_check():
        """Health check endpoint for monitoring"""
        return {"status": "healthy"}

    app.include_router(cards.router)
    return app


app = create_app()


def run():
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
