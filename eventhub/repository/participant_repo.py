from __future__ import annotations

from sqlite3 import Connection, Row


def ensure_schema(conn: Connection):
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS participants (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            event_id INTEGER NOT NULL,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            FOREIGN KEY(event_id) REFERENCES events(id) ON DELETE CASCADE
        )
        """
    )
    conn.execute("CREATE INDEX IF NOT EXISTS idx_participants_event ON participants(event_id)")


def list_by_event(conn: Connection, event_id: int) -> list[Row]:
    return conn.execute(
        "SELECT id, event_id, name, email FROM participants WHERE event_id=?",
        (event_id,),
    ).fetchall()


def insert(conn: Connection, event_id: int, name: str, email: str) -> int:
    cur = conn.execute(
        "INSERT INTO participants(event_id, name, email) VALUES(?, ?, ?)",
        (event_id, name, email),
    )
    return int(cur.lastrowid)


def delete(conn: Connection, participant_id: int) -> int:
    cur = conn.execute("DELETE FROM participants WHERE id=?", (participant_id,))
    return cur.rowcount

