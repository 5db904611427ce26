from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import aiosqlite


@dataclass(slots=True)
class UserSettings:
    user_id: int
    language: str
    updated_at: str


class UserSettingsRepository:
    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        directory = os.path.dirname(os.path.abspath(db_path))
        if directory and not os.path.exists(directory):
            os.makedirs(directory, exist_ok=True)

    async def init(self) -> None:
        async with aiosqlite.connect(self._db_path) as db:
            await db.execute(
                """
                CREATE TABLE IF NOT EXISTS user_settings (
                    user_id INTEGER PRIMARY KEY,
                    language TEXT NOT NULL,
                    updated_at TEXT NOT NULL DEFAULT ''
                )
                """
            )
            await self._ensure_columns(db)
            await db.commit()

    async def _ensure_columns(self, db: aiosqlite.Connection) -> None:
        cursor = await db.execute("PRAGMA table_info(user_settings)")
        columns = {row[1] for row in await cursor.fetchall()}
        if "updated_at" not in columns:
            await db.execute("ALTER TABLE user_settings ADD COLUMN updated_at TEXT NOT NULL DEFAULT ''")

    async def set_language(self, user_id: int, language: str) -> None:
        now = datetime.now(timezone.utc).isoformat(timespec="seconds")
        async with aiosqlite.connect(self._db_path) as db:
            await db.execute(
                """
                INSERT INTO user_settings (user_id, language, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(user_id) DO UPDATE SET language = excluded.language, updated_at = excluded.updated_at
                """,
                (user_id, language, now),
            )
            await db.commit()

    async def get_settings(self, user_id: int) -> Optional[UserSettings]:
        async with aiosqlite.connect(self._db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT user_id, language, updated_at FROM user_settings WHERE user_id = ? LIMIT 1",
                (user_id,),
            )
            row = await cursor.fetchone()
        if row is None:
            return None
        return UserSettings(user_id=row["user_id"], language=row["language"], updated_at=row["updated_at"])

    async def get_language(self, user_id: int) -> Optional[str]:
        settings = await self.get_settings(user_id)
        return settings.language if settings else None
