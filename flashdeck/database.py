import logging

from fastapi import Request
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .config import Settings

logger = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """The document store could not be reached when the app started."""


def connect(settings: Settings) -> MongoClient:
    client = MongoClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
    )
    try:
        client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        logger.critical("Could not connect to MongoDB at %s: %s", settings.mongodb_uri, e)
        raise StartupError("Could not connect to MongoDB") from e

    logger.info("Connected to MongoDB")
    return client


def get_db(request: Request) -> Database:
    return request.app.state.db
