"""Тесты сценария CRUD над таблицей character."""

from __future__ import annotations

import os
import unittest
from unittest.mock import AsyncMock, patch

from charquery.main import CharacterNotFoundError, main, run_demo

from tests.fakes import FakeConnection, FakePool


class RunDemoTests(unittest.IsolatedAsyncioTestCase):
    """Проверяет порядок запросов и передачу id из SELECT в UPDATE/DELETE."""

    async def test_full_sequence(self) -> None:
        conn = FakeConnection(
            fetch_results=[
                [{"id": 42, "character": "A", "font_size": 12}],
                [{"id": 42, "character": "A", "font_size": 24}],
            ],
            fetchval_results=[1],
        )
        lines: list[str] = []

        await run_demo(conn, out=lambda *a: lines.append(" ".join(str(x) for x in a)))

        verbs = [sql.split()[0].upper() for _, sql, _ in conn.calls]
        self.assertEqual(verbs, ["CREATE", "INSERT", "SELECT", "UPDATE", "SELECT", "SELECT", "DELETE"])
        # id из первого SELECT используется в UPDATE и DELETE.
        self.assertEqual(conn.calls[3][2], (24, 42))
        self.assertEqual(conn.calls[6][2], (42,))

        full = "\n".join(lines)
        self.assertIn("Create table character: 'CREATE TABLE'", full)
        self.assertIn("Insert into character: 'INSERT 0 1'", full)
        self.assertIn("CharacterRow(id=42, character='A', font_size=24)", full)
        self.assertIn("Count character: 1", full)
        self.assertIn("Delete character: 'DELETE 1'", full)

    async def test_empty_select_stops_before_update(self) -> None:
        conn = FakeConnection(fetch_results=[[]])

        with self.assertRaises(CharacterNotFoundError):
            await run_demo(conn, out=lambda *a: None)

        verbs = [sql.split()[0].upper() for _, sql, _ in conn.calls]
        self.assertEqual(verbs, ["CREATE", "INSERT", "SELECT"])


class MainLifecycleTests(unittest.IsolatedAsyncioTestCase):
    """Проверяет параметры пула из окружения и закрытие пула при ошибке."""

    async def test_pool_closed_when_demo_fails(self) -> None:
        pool = FakePool(FakeConnection(fetch_results=[[]]))
        env = {
            "DATABASE_URL": "postgresql://u:p@db:5432/query",
            "PG_POOL_MIN_SIZE": "2",
            "PG_POOL_MAX_SIZE": "4",
            "PG_COMMAND_TIMEOUT": "15",
            "LOG_LEVEL": "WARNING",
        }

        with patch.dict(os.environ, env), patch("charquery.main.create_pool", new=AsyncMock(return_value=pool)) as create_pool:
            with self.assertRaises(CharacterNotFoundError):
                await main()

        create_pool.assert_awaited_once_with(
            "postgresql://u:p@db:5432/query",
            min_size=2,
            max_size=4,
            command_timeout=15.0,
        )
        self.assertTrue(pool.closed)


if __name__ == "__main__":
    unittest.main()
