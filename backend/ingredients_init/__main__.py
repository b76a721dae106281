"""
Bootstrap the ingredients catalog database.

Usage (from the repository root, MONGODB_* variables set or in .env):
    ingredients-init
    python -m ingredients_init

Any failure is left uncaught so the process exits non-zero and container
startup stops.
"""

import logging

from .bootstrap import bootstrap
from .config import Settings, load_env
from .database import get_client, get_database


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    load_env()
    settings = Settings.from_env()
    logging.getLogger().setLevel(settings.python_log_level)

    client = get_client(settings)
    try:
        bootstrap(get_database(client, settings), settings)
    finally:
        client.close()


if __name__ == "__main__":
    main()
