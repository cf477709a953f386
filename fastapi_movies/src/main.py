import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from api.error_handlers import register_error_handlers
from api.v1 import genres, health, movies
from core.config import settings
from core.logger import LOGGING
from db import mongo

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    mongo.mongo_client = mongo.create_mongo_client()
    logger.info("MongoDB connected: %s", settings.mongo_host)
    yield
    mongo.mongo_client.close()
    logger.info("MongoDB disconnected")


app = FastAPI(
    title=settings.project_name,
    description=settings.project_description,
    version=settings.project_version,
    docs_url="/api-docs",
    openapi_url="/api-docs/openapi.json",
    lifespan=lifespan,
)

register_error_handlers(app)


@app.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def index() -> str:
    return "Hello World!"


app.include_router(health.router, prefix="/health-check", tags=["Health check"])
app.include_router(movies.router, prefix="/api/movies", tags=["Movies"])
app.include_router(genres.router, prefix="/api/genres", tags=["Genres"])


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.service_host,
        port=settings.service_port,
        log_config=LOGGING,
        log_level=settings.log_level.lower(),
    )
