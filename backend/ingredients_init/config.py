import logging
import os
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv  # type: ignore
from pydantic import BaseModel, Field, field_validator

log = logging.getLogger(__name__)

DEFAULT_MONGODB_URI = "mongodb://localhost:27017"
DEFAULT_INGREDIENTS_FILE = "/docker-entrypoint-initdb.d/ingredients.json"

LOG_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

# field name -> environment variable
ENV_VARS = {
    "database": "MONGODB_DATABASE",
    "username": "MONGODB_USERNAME",
    "password": "MONGODB_PASSWORD",
    "ingredients_collection": "MONGODB_INGREDIENTS_COLLECTION",
    "ingredients_file": "MONGODB_INGREDIENTS_FILE",
    "mongodb_uri": "MONGODB_URI",
    "log_level": "LOG_LEVEL",
}


def load_env() -> bool:
    """Seed os.environ from the .env nearest the working directory.

    Variables already set in the process environment win.
    """
    return load_dotenv(find_dotenv(usecwd=True))


class Settings(BaseModel):
    database: str = Field(min_length=1)
    username: str = Field(min_length=1)
    password: str = Field(min_length=1, repr=False)
    ingredients_collection: str = Field(min_length=1)
    ingredients_file: str = DEFAULT_INGREDIENTS_FILE
    mongodb_uri: str = DEFAULT_MONGODB_URI
    log_level: str = "info"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        level = str(v or "").strip().lower()
        if level not in LOG_LEVELS:
            log.warning("LOG_LEVEL %r not recognised, using 'info'", v)
            return "info"
        return level

    @property
    def python_log_level(self) -> int:
        return LOG_LEVELS[self.log_level]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from the environment.

        Unset or empty variables are left out so that required fields fail
        validation and optional ones keep their defaults.
        """
        if environ is None:
            environ = os.environ
        values = {}
        for field, name in ENV_VARS.items():
            value = environ.get(name)
            if value:
                values[field] = value
        return cls(**values)
