from __future__ import annotations

import sqlalchemy as sa

metadata = sa.MetaData()

characters = sa.Table(
    "character",
    metadata,
    sa.Column("id", sa.Integer, primary_key=True, autoincrement=True, nullable=False),
    sa.Column("font_size", sa.Integer, nullable=True),
    sa.Column("character", sa.String, nullable=True),
    # conn.execute() отбрасывает строки, RETURNING id тут лишний.
    implicit_returning=False,
)

CHARACTER_COLUMNS = [
    characters.c.id,
    characters.c.character,
    characters.c.font_size,
]
