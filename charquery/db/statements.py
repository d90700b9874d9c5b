from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.schema import CreateTable

from .schema import CHARACTER_COLUMNS, characters


def create_character_table_stmt() -> CreateTable:
    return CreateTable(characters, if_not_exists=True)


def insert_character_stmt(*, character: str, font_size: int):
    return sa.insert(characters).values(character=character, font_size=font_size)


def select_latest_characters_stmt(*, limit: int = 1):
    return (
        sa.select(*CHARACTER_COLUMNS)
        .select_from(characters)
        .order_by(characters.c.id.desc())
        .limit(limit)
    )


def update_font_size_stmt(*, character_id: int, font_size: int):
    return (
        sa.update(characters)
        .values(font_size=font_size)
        .where(characters.c.id == character_id)
    )


def count_characters_stmt():
    return sa.select(sa.func.count(characters.c.id)).select_from(characters)


def delete_character_stmt(*, character_id: int):
    return sa.delete(characters).where(characters.c.id == character_id)
