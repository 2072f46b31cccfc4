"""
SQLite persistence layer — search history in a single key-value slot.

The history list lives as one JSON array under the ``past_weathers`` key.
Nothing outside this module reads or writes that value.
"""

import json
import logging
import sqlite3
import threading
from typing import Optional

from config import DB_PATH
from errors import CorruptHistoryError
from models import HistoryEntry

log = logging.getLogger(__name__)

HISTORY_KEY = "past_weathers"


def _init_db(conn: sqlite3.Connection):
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS kv (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        );
    """)


class HistoryStore:
    """
    Write-through history list. Every mutation is persisted before it
    returns, and the returned list is re-read from the slot.
    """

    def __init__(self, db_path: str = DB_PATH):
        self.db_path = db_path
        # Shared by the bot loop and the dashboard thread
        self._conn = sqlite3.connect(db_path, check_same_thread=False)
        self._lock = threading.Lock()
        _init_db(self._conn)

    def close(self):
        self._conn.close()

    # ── Public operations ───────────────────────────────────────

    def get_history(self) -> list[HistoryEntry]:
        with self._lock:
            return self._read()

    def append(self, entry: HistoryEntry) -> list[HistoryEntry]:
        with self._lock:
            entries = self._read()
            entries.append(entry)
            self._write(entries)
            return self._read()

    def remove_at(self, index: int) -> list[HistoryEntry]:
        """Remove the entry at `index`; out-of-range indexes are ignored."""
        with self._lock:
            entries = self._read()
            if not 0 <= index < len(entries):
                log.info(f"Ignoring delete of history index {index} (size {len(entries)})")
                return entries
            del entries[index]
            self._write(entries)
            return self._read()

    # ── Slot access ─────────────────────────────────────────────

    def _read_raw(self) -> Optional[str]:
        row = self._conn.execute(
            "SELECT value FROM kv WHERE key = ?", (HISTORY_KEY,)
        ).fetchone()
        return row[0] if row else None

    def _read(self) -> list[HistoryEntry]:
        raw = self._read_raw()
        if raw is None:
            return []
        try:
            records = json.loads(raw)
            if not isinstance(records, list):
                raise TypeError(f"expected a list, got {type(records).__name__}")
            return [HistoryEntry.from_dict(r) for r in records]
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            log.error(f"Unreadable history in {self.db_path}: {e}")
            raise CorruptHistoryError() from e

    def _write(self, entries: list[HistoryEntry]):
        self._conn.execute(
            "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
            (HISTORY_KEY, json.dumps([e.to_dict() for e in entries])),
        )
        self._conn.commit()
