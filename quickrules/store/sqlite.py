from __future__ import annotations

import asyncio
import re
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from quickrules.models.page import Page, PageFlags, PageOrigin, TitleDisplay
from quickrules.store.base import PageStore


@dataclass(slots=True)
class SQLitePageConfig:
    """Configuration for the SQLite page store."""

    db_path: Path
    batch_size: int = 50
    enable_wal: bool = True


class SQLitePageStore(PageStore):
    """Persists generated pages into SQLite + FTS5 for lookup and search."""

    def __init__(self, config: SQLitePageConfig) -> None:
        self.config = config
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self.config.db_path.parent.mkdir(parents=True, exist_ok=True)
            # replace_all runs in a worker thread.
            self._conn = sqlite3.connect(self.config.db_path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            if self.config.enable_wal:
                self._conn.execute("PRAGMA journal_mode=WAL;")
        return self._conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def initialize(self) -> None:
        """Create tables and FTS indices if they do not exist."""

        cursor = self.conn.cursor()
        cursor.executescript(
            """
            CREATE TABLE IF NOT EXISTS pages (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                collection TEXT NOT NULL,
                position INTEGER NOT NULL,
                name TEXT NOT NULL,
                content_html TEXT NOT NULL,
                show_title INTEGER NOT NULL,
                title_level INTEGER NOT NULL,
                origin TEXT NOT NULL,
                source_tag TEXT,
                page_order INTEGER
            );

            CREATE INDEX IF NOT EXISTS idx_pages_collection
                ON pages (collection, position);

            CREATE VIRTUAL TABLE IF NOT EXISTS pages_fts USING fts5(
                name,
                content_html,
                content='pages',
                content_rowid='id'
            );

            CREATE TRIGGER IF NOT EXISTS pages_ai AFTER INSERT ON pages BEGIN
                INSERT INTO pages_fts(rowid, name, content_html)
                VALUES (new.id, new.name, new.content_html);
            END;

            CREATE TRIGGER IF NOT EXISTS pages_ad AFTER DELETE ON pages BEGIN
                INSERT INTO pages_fts(pages_fts, rowid, name, content_html)
                VALUES ('delete', old.id, old.name, old.content_html);
            END;
            """
        )
        self.conn.commit()

    async def replace_all(self, collection_key: str, pages: Sequence[Page]) -> int:
        return await asyncio.to_thread(self.replace_all_sync, collection_key, list(pages))

    def replace_all_sync(self, collection_key: str, pages: Sequence[Page]) -> int:
        """Delete the collection and insert ``pages`` in one transaction."""

        conn = self.conn
        batch_size = max(1, self.config.batch_size)
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM pages WHERE collection = ?;", (collection_key,))
            for start in range(0, len(pages), batch_size):
                batch = pages[start:start + batch_size]
                cursor.executemany(
                    """
                    INSERT INTO pages(
                        collection, position, name, content_html,
                        show_title, title_level, origin, source_tag, page_order
                    )
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?);
                    """,
                    (
                        (
                            collection_key,
                            start + offset,
                            page.name,
                            page.content_html,
                            int(page.title_display.show),
                            page.title_display.level,
                            page.flags.origin.value,
                            page.flags.source_tag,
                            page.flags.order,
                        )
                        for offset, page in enumerate(batch)
                    ),
                )
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        return len(pages)

    def count(self, collection_key: str) -> int:
        cursor = self.conn.cursor()
        cursor.execute("SELECT COUNT(*) FROM pages WHERE collection = ?;", (collection_key,))
        return int(cursor.fetchone()[0])

    def fetch_pages(self, collection_key: str) -> List[Page]:
        cursor = self.conn.cursor()
        cursor.execute(
            "SELECT * FROM pages WHERE collection = ? ORDER BY position;",
            (collection_key,),
        )
        return [_row_to_page(row) for row in cursor.fetchall()]

    def fetch_page(self, collection_key: str, order: int) -> Optional[Page]:
        cursor = self.conn.cursor()
        cursor.execute(
            "SELECT * FROM pages WHERE collection = ? AND page_order = ?;",
            (collection_key, order),
        )
        row = cursor.fetchone()
        return _row_to_page(row) if row is not None else None

    def search(self, collection_key: str, query: str, *, limit: int = 10) -> List[Page]:
        """Run a full-text search across one collection."""

        safe = re.sub(r"[^\w\s]", " ", query)
        tokens = [token for token in re.sub(r"\s+", " ", safe).strip().split(" ") if token]
        if not tokens:
            return []
        match_query = " OR ".join(f'"{token}"' for token in tokens)

        cursor = self.conn.cursor()
        cursor.execute(
            """
            SELECT p.*,
                   bm25(pages_fts) AS score
            FROM pages p
            JOIN pages_fts ON p.id = pages_fts.rowid
            WHERE pages_fts MATCH ? AND p.collection = ?
            ORDER BY score, p.position
            LIMIT ?;
            """,
            (match_query, collection_key, limit),
        )
        return [_row_to_page(row) for row in cursor.fetchall()]


def _row_to_page(row: sqlite3.Row) -> Page:
    return Page(
        name=row["name"],
        content_html=row["content_html"],
        title_display=TitleDisplay(show=bool(row["show_title"]), level=row["title_level"]),
        flags=PageFlags(
            origin=PageOrigin(row["origin"]),
            source_tag=row["source_tag"],
            order=row["page_order"],
        ),
    )


__all__ = ["SQLitePageConfig", "SQLitePageStore"]
