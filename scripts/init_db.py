from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.ops_dashboard.ops_dashboard.database.connection import DBConfig, DatabaseConnection
from src.ops_dashboard.ops_dashboard.database.mongo_store import MongoDocumentStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection.get_instance(DBConfig(uri=settings.MONGO_URI, database=settings.MONGO_DB_NAME))
    try:
        indexes = MongoDocumentStore(conn).ensure_indexes()
    finally:
        conn.close()
    print(f"OK: Ensured indexes on {settings.MONGO_DB_NAME}: {', '.join(indexes)}")


if __name__ == "__main__":
    main()
