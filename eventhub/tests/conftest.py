import os
import sys
import sqlite3
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@pytest.fixture(scope="session")
def tmp_db_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("db") / "events_test.db"
    # Point eventhub to this temp DB
    os.environ["EVENTS_DB_PATH"] = str(path)
    from eventhub.db import Store
    store = Store(str(path))
    store.ensure_schema()
    return str(path)


@pytest.fixture()
def store(tmp_db_path):
    from eventhub.db import Store
    return Store(tmp_db_path)


@pytest.fixture()
def client(store):
    # Import app factory after DB ready so startup hooks can use it
    from eventhub.api import create_app
    from fastapi.testclient import TestClient
    with TestClient(create_app(store)) as c:
        yield c


@pytest.fixture(autouse=True)
def _clean_db(tmp_db_path):
    # Clean tables before each test for isolation
    # Safety: ensure we only ever wipe the temp DB, never a real one
    assert os.environ.get("EVENTS_DB_PATH") == tmp_db_path, "Refusing to clean non-temp DB"
    tables = [
        "participants",
        "events",
    ]
    conn = sqlite3.connect(tmp_db_path)
    try:
        for t in tables:
            conn.execute(f"DELETE FROM {t}")
        # restart AUTOINCREMENT ids at 1
        conn.execute("DELETE FROM sqlite_sequence")
        conn.commit()
    finally:
        conn.close()
    yield
