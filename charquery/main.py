from __future__ import annotations

import asyncio
import logging
from typing import Callable

import asyncpg

from .config import Settings
from .db.pool import create_pool
from .db.ddl import ensure_schema
from .db.repo import CharacterRepo

log = logging.getLogger(__name__)


class CharacterNotFoundError(LookupError):
    pass


async def run_demo(conn: asyncpg.Connection, *, out: Callable[..., None] = print) -> None:
    """
    Полный цикл над таблицей character: схема, вставка, чтение,
    обновление, повторное чтение, подсчёт и удаление.
    """
    repo = CharacterRepo(conn)

    # Schema
    result = await ensure_schema(conn)
    out(f"Create table character: {result!r}\n")

    # Create
    result = await repo.insert(character="A", font_size=12)
    out(f"Insert into character: {result!r}\n")

    # Read
    rows = await repo.select_latest(limit=1)
    out("Select one from character:")
    for row in rows:
        out(repr(row))
    out()
    if not rows:
        raise CharacterNotFoundError("character table is empty after insert")
    character_id = rows[-1].id

    # Update
    result = await repo.update_font_size(character_id=character_id, font_size=24)
    out(f"Update character: {result!r}\n")

    # Read
    rows = await repo.select_latest(limit=1)
    out("Select one from character:")
    for row in rows:
        out(repr(row))
    out()

    # Count
    count = await repo.count()
    out(f"Count character: {count}\n")

    # Delete
    result = await repo.delete(character_id=character_id)
    out(f"Delete character: {result!r}")


async def main() -> None:
    s = Settings()
    logging.basicConfig(level=getattr(logging, s.log_level.upper(), logging.INFO))
    log.info("Starting...")

    pool = await create_pool(
        s.pg_dsn,
        min_size=s.pg_pool_min_size,
        max_size=s.pg_pool_max_size,
        command_timeout=s.pg_command_timeout,
    )
    try:
        async with pool.acquire() as conn:
            await run_demo(conn)
    finally:
        await pool.close()
        log.info("Stopped.")


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
