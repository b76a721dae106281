"""
Pytest configuration file.
Puts backend/ on sys.path and provides a mocked MongoDB database.
"""
import json
import logging
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

backend_root = Path(__file__).parent.parent
sys.path.insert(0, str(backend_root))

from ingredients_init.config import ENV_VARS, Settings  # noqa: E402


@pytest.fixture
def write_dataset(tmp_path):
    def _write(content, name="ingredients.json"):
        path = tmp_path / name
        if not isinstance(content, str):
            content = json.dumps(content)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings_for(write_dataset):
    def _settings(content):
        return Settings(
            database="testdb",
            username="alice",
            password="x",
            ingredients_collection="ingredients",
            ingredients_file=str(write_dataset(content)),
        )

    return _settings


@pytest.fixture
def db():
    """
    Stand-in for pymongo.database.Database.

    The collection returned by create_collection counts whatever was
    passed to insert_many.
    """
    database = MagicMock()
    database.name = "testdb"
    collection = database.create_collection.return_value
    collection.name = "ingredients"
    inserted = []

    def insert_many(documents):
        inserted.extend(documents)
        result = MagicMock()
        result.inserted_ids = list(range(len(documents)))
        return result

    collection.insert_many.side_effect = insert_many
    collection.count_documents.side_effect = lambda query: len(inserted)
    return database


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """
    Run from an empty directory with no MONGODB_*/LOG_LEVEL variables set.

    Each variable is set before being removed so monkeypatch also undoes
    whatever load_dotenv writes into os.environ.
    """
    for name in ENV_VARS.values():
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def root_log_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)
