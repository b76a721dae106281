import logging
import re

from pymongo import MongoClient  # type: ignore
from pymongo.database import Database  # type: ignore

from .config import Settings

log = logging.getLogger(__name__)

SERVER_SELECTION_TIMEOUT_MS = 5000

_CREDENTIALS = re.compile(r"(?<=://)[^/@]+@")


def mask_uri(uri: str) -> str:
    """Hide the user:password part of a MongoDB URI."""
    return _CREDENTIALS.sub("***@", uri)


def get_client(settings: Settings) -> MongoClient:
    log.info("Connecting to MongoDB at %s", mask_uri(settings.mongodb_uri))
    client = MongoClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS,
    )
    client.admin.command("ping")
    log.info("Connected to MongoDB")
    return client


def get_database(client: MongoClient, settings: Settings) -> Database:
    # created by the server on first write
    return client[settings.database]
