"""Рендеринг SQLAlchemy Core выражений в (sql, values) для asyncpg."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.dialects.postgresql import asyncpg as pg_asyncpg
from sqlalchemy.sql import ClauseElement
from sqlalchemy.sql.compiler import DDLCompiler

log = logging.getLogger(__name__)

# Плейсхолдеры $1, $2, ... ровно в том виде, который ждут conn.execute()/conn.fetch().
_DIALECT = pg_asyncpg.dialect(paramstyle="numeric_dollar")


def build(stmt: ClauseElement) -> tuple[str, list[Any]]:
    """
    Компилирует выражение и возвращает SQL-строку и значения параметров
    в порядке плейсхолдеров. Для DDL список значений пустой.
    """
    compiled = stmt.compile(dialect=_DIALECT)
    if isinstance(compiled, DDLCompiler):
        sql, values = compiled.string.strip(), []
    else:
        params = compiled.params
        sql = compiled.string
        values = [params[name] for name in (compiled.positiontup or ())]
    log.debug("sql=%s values=%r", sql, values)
    return sql, values
