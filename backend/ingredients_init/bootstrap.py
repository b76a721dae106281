"""
One-time bootstrap of the ingredients catalog database.

Creates the application user with readWrite on the target database, creates
the ingredients collection and loads it from a JSON array file. Meant to run
once against an empty data volume: a second run fails on the existing user
or collection instead of inserting duplicates.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from pymongo.collection import Collection  # type: ignore
from pymongo.database import Database  # type: ignore

from .config import Settings

log = logging.getLogger(__name__)

USER_ROLE = "readWrite"


def load_ingredients(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Parse the dataset file. Records are inserted as-is."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array, got {type(data).__name__}")
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"{path}: item {i} is {type(item).__name__}, not an object")

    log.info("Loaded %d ingredient records from %s", len(data), path)
    return data


def create_user(db: Database, username: str, password: str):
    db.command(
        "createUser",
        username,
        pwd=password,
        roles=[{"role": USER_ROLE, "db": db.name}],
    )
    log.info("Created user %s with %s on %s", username, USER_ROLE, db.name)


def create_collection(db: Database, name: str) -> Collection:
    collection = db.create_collection(name)
    log.info("Created collection %s", name)
    return collection


def insert_ingredients(collection: Collection, documents: List[Dict[str, Any]]) -> int:
    # insert_many refuses an empty batch
    if not documents:
        log.info("No ingredients to insert")
        return 0
    result = collection.insert_many(documents)
    inserted = len(result.inserted_ids)
    log.info("Inserted %d documents into %s", inserted, collection.name)
    return inserted


def confirmation_message(count: int, collection_name: str, database_name: str) -> str:
    return (
        f"Inserted {count} ingredients insert in collection "
        f"{collection_name} into {database_name} database"
    )


def bootstrap(db: Database, settings: Settings) -> int:
    """Run the whole setup and print the resulting document count.

    The dataset is parsed before anything is written, so a bad file leaves
    the database untouched. Later failures are not rolled back.
    """
    documents = load_ingredients(settings.ingredients_file)

    create_user(db, settings.username, settings.password)
    collection = create_collection(db, settings.ingredients_collection)
    insert_ingredients(collection, documents)

    # collection.create_index("name")

    count = collection.count_documents({})
    print(confirmation_message(count, settings.ingredients_collection, settings.database))
    return count
