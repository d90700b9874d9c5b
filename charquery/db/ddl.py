from __future__ import annotations

import asyncpg

from .builder import build
from .statements import create_character_table_stmt


async def ensure_schema(conn: asyncpg.Connection) -> str:
    sql, _ = build(create_character_table_stmt())
    return await conn.execute(sql)
