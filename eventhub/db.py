from __future__ import annotations

# eventhub/db.py
import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator

import yaml

from .errors import StoreError
from .repository import event_repo, participant_repo

logger = logging.getLogger(__name__)

# DB path resolution order:
# 1) env EVENTS_DB_PATH (highest priority)
# 2) config.yaml test_db_path (when running under tests)
# 3) config.yaml db_path
# 4) fallback: events.db at the project root
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_ROOT_DB = os.path.join(_PROJECT_ROOT, "events.db")

DEFAULT_PORT = 3000


def read_config_yaml(cfg_path: str | None = None) -> dict:
    cfg_path = cfg_path or os.path.join(_PROJECT_ROOT, "config.yaml")
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("ignoring unreadable config %s: %s", cfg_path, e)
        return {}
    if not isinstance(cfg, dict):
        return {}
    out: dict = {}
    for k in ("db_path", "test_db_path", "host"):
        v = cfg.get(k)
        if isinstance(v, str) and v.strip():
            out[k] = v.strip()
    port = cfg.get("port")
    if isinstance(port, int) and port > 0:
        out["port"] = port
    origins = cfg.get("cors_origins")
    if isinstance(origins, list) and origins:
        out["cors_origins"] = [str(o) for o in origins]
    return out


def get_db_path(cfg_path: str | None = None) -> str:
    env_path = os.environ.get("EVENTS_DB_PATH")
    cfg = read_config_yaml(cfg_path)
    cfg_db = cfg.get("db_path")
    cfg_test = cfg.get("test_db_path")
    is_test = (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)

    if env_path:
        path = env_path
    elif is_test and cfg_test:
        path = cfg_test
    elif cfg_db:
        path = cfg_db
    else:
        path = _ROOT_DB

    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)
    return path


class Store:
    """
    Handle on the SQLite file holding events and participants.

    Handlers receive the store explicitly (see ``api.get_store``); every call to
    ``connect`` opens a fresh connection with foreign keys on, so the
    participants -> events cascade is enforced by SQLite itself.
    """

    def __init__(self, db_path: str | None = None, cfg_path: str | None = None):
        self.db_path = db_path or get_db_path(cfg_path)

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = sqlite3.connect(
                self.db_path,
                detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES,
                check_same_thread=False,
                isolation_level=None,
            )
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        try:
            conn.execute("PRAGMA foreign_keys = ON;")
            conn.row_factory = sqlite3.Row
            yield conn
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        finally:
            conn.close()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Connection inside BEGIN IMMEDIATE; commits on success, rolls back on any error."""
        with self.connect() as conn:
            conn.execute("BEGIN IMMEDIATE")
            try:
                yield conn
            except BaseException:
                conn.execute("ROLLBACK")
                raise
            conn.execute("COMMIT")

    def ensure_schema(self) -> None:
        with self.connect() as conn:
            event_repo.ensure_schema(conn)
            participant_repo.ensure_schema(conn)

    def ping(self) -> None:
        with self.connect() as conn:
            conn.execute("SELECT 1").fetchone()
