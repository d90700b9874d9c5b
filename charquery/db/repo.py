from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

import asyncpg

from .builder import build
from .statements import (
    count_characters_stmt,
    delete_character_stmt,
    insert_character_stmt,
    select_latest_characters_stmt,
    update_font_size_stmt,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CharacterRow:
    id: int
    character: str
    font_size: int

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "CharacterRow":
        return cls(id=int(r["id"]), character=r["character"], font_size=r["font_size"])


class CharacterRepo:
    """Выполняет собранные запросы к таблице character на одном соединении."""

    def __init__(self, conn: asyncpg.Connection):
        self.conn = conn

    async def insert(self, *, character: str, font_size: int) -> str:
        sql, values = build(insert_character_stmt(character=character, font_size=font_size))
        return await self.conn.execute(sql, *values)

    async def select_latest(self, *, limit: int = 1) -> list[CharacterRow]:
        sql, values = build(select_latest_characters_stmt(limit=limit))
        rows = await self.conn.fetch(sql, *values)
        return [CharacterRow.from_record(r) for r in rows]

    async def update_font_size(self, *, character_id: int, font_size: int) -> str:
        sql, values = build(update_font_size_stmt(character_id=character_id, font_size=font_size))
        return await self.conn.execute(sql, *values)

    async def count(self) -> int:
        sql, values = build(count_characters_stmt())
        return int(await self.conn.fetchval(sql, *values))

    async def delete(self, *, character_id: int) -> str:
        sql, values = build(delete_character_stmt(character_id=character_id))
        return await self.conn.execute(sql, *values)
