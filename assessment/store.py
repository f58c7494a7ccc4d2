import logging
import os
import sqlite3
from typing import Optional

logger = logging.getLogger(__name__)

DB_PATH = os.getenv("SNOWFLAKE_DB_PATH", "snowflake_state.db")


def init_db():
    conn = sqlite3.connect(DB_PATH)
    c = conn.cursor()
    c.execute(
        """
        CREATE TABLE IF NOT EXISTS assessment_fragment (
            id INTEGER PRIMARY KEY,
            fragment TEXT
        )
    """
    )
    conn.commit()
    conn.close()


def load_fragment() -> Optional[str]:
    conn = sqlite3.connect(DB_PATH)
    c = conn.cursor()
    c.execute("SELECT fragment FROM assessment_fragment WHERE id = 1")
    row = c.fetchone()
    conn.close()

    if not row:
        return None
    return row[0]


def save_fragment(fragment: str):
    conn = sqlite3.connect(DB_PATH)
    c = conn.cursor()
    c.execute(
        "REPLACE INTO assessment_fragment (id, fragment) VALUES (1, ?)", (fragment,)
    )
    conn.commit()
    conn.close()
    logger.debug("Saved fragment to %s", DB_PATH)


class FragmentStore:
    """The sqlite slot holding the current fragment, as seen by the controller."""

    def __init__(self):
        init_db()

    def load(self) -> Optional[str]:
        return load_fragment()

    def save(self, fragment: str):
        save_fragment(fragment)


class MemoryFragmentStore:
    """In-process slot, lives as long as the object does."""

    def __init__(self, fragment: Optional[str] = None):
        self.fragment = fragment

    def load(self) -> Optional[str]:
        return self.fragment

    def save(self, fragment: str):
        self.fragment = fragment
