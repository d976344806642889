# db.py
import logging
import sqlite3
from pathlib import Path

log = logging.getLogger(__name__)


class DatabaseConnectionError(RuntimeError):
    """Raised when the database cannot be reached at startup."""


def db_connect(path):
    """Return a sqlite3 connection (row factory set)."""
    con = sqlite3.connect(str(path))
    con.row_factory = sqlite3.Row
    return con


def connect_db(path) -> None:
    """Open the database once and run a round-trip query; raise on failure."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        con = db_connect(path)
        try:
            con.execute("SELECT 1").fetchone()
        finally:
            con.close()
    except (sqlite3.Error, OSError) as e:
        raise DatabaseConnectionError(f"cannot connect to database at {path}: {e}") from e
    log.info("Database connected: %s", path)
