from __future__ import annotations

from sqlite3 import Connection, Row


def ensure_schema(conn: Connection):
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS events (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            date TEXT NOT NULL,
            location TEXT NOT NULL
        )
        """
    )


def list_all(conn: Connection) -> list[Row]:
    return conn.execute("SELECT id, name, date, location FROM events").fetchall()


def get_one(conn: Connection, event_id: int) -> Row | None:
    return conn.execute(
        "SELECT id, name, date, location FROM events WHERE id=?", (event_id,)
    ).fetchone()


def exists(conn: Connection, event_id: int) -> bool:
    row = conn.execute("SELECT 1 FROM events WHERE id=?", (event_id,)).fetchone()
    return row is not None


def insert(conn: Connection, name: str, date: str, location: str) -> int:
    cur = conn.execute(
        "INSERT INTO events(name, date, location) VALUES(?, ?, ?)",
        (name, date, location),
    )
    return int(cur.lastrowid)


def delete(conn: Connection, event_id: int) -> int:
    """Returns the number of rows removed; participants go with it via ON DELETE CASCADE."""
    cur = conn.execute("DELETE FROM events WHERE id=?", (event_id,))
    return cur.rowcount
