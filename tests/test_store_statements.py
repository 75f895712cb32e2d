"""The upsert must stay one conditional write; the read one ranked select."""
from __future__ import annotations

import unittest

from sqlalchemy.dialects import postgresql

from friend_leaderboards.models import TimeRecord, TimeSubmission
from friend_leaderboards.services.times import best_time_upsert, leaderboard_query


def _compile(stmt) -> str:
    return " ".join(str(stmt.compile(dialect=postgresql.dialect())).split())


class TestBestTimeUpsert(unittest.TestCase):
    def setUp(self):
        self.submission = TimeSubmission(group_key="g1", account_id="alice", map_id="m1", time_ms=4000)

    def test_postgres_statement_keeps_minimum_atomically(self):
        sql = _compile(best_time_upsert("postgresql", self.submission))
        self.assertTrue(sql.startswith("INSERT INTO times"))
        self.assertIn("ON CONFLICT (group_key, map_id, account_id) DO UPDATE SET", sql)
        self.assertIn("time_ms = least(excluded.time_ms, times.time_ms)", sql)
        self.assertIn("updated_at = now()", sql)
        self.assertRegex(sql, r"RETURNING (times\.)?time_ms$")

    def test_sqlite_statement_uses_scalar_min(self):
        from sqlalchemy.dialects import sqlite

        stmt = best_time_upsert("sqlite", self.submission)
        sql = " ".join(str(stmt.compile(dialect=sqlite.dialect())).split())
        self.assertIn("ON CONFLICT (group_key, map_id, account_id) DO UPDATE SET", sql)
        self.assertIn("min(excluded.time_ms, times.time_ms)", sql)

    def test_unknown_dialect_is_refused(self):
        with self.assertRaises(RuntimeError):
            best_time_upsert("mysql", self.submission)


class TestLeaderboardQuery(unittest.TestCase):
    def test_ranked_select(self):
        sql = _compile(leaderboard_query("g1", "m1", 50))
        self.assertIn("row_number() OVER (ORDER BY times.time_ms ASC, times.account_id ASC)", sql)
        self.assertIn("WHERE times.group_key = ", sql)
        self.assertIn("AND times.map_id = ", sql)
        self.assertIn("ORDER BY times.time_ms ASC, times.account_id ASC", sql)
        self.assertIn("LIMIT ", sql)


class TestTableLayout(unittest.TestCase):
    def test_primary_key_is_the_triple(self):
        table = TimeRecord.__table__
        self.assertEqual(table.name, "times")
        self.assertEqual(
            [c.name for c in table.primary_key.columns], ["group_key", "map_id", "account_id"]
        )

    def test_ranking_index_and_positive_check(self):
        table = TimeRecord.__table__
        index = next(i for i in table.indexes if i.name == "idx_times_group_map_time")
        self.assertEqual([c.name for c in index.columns], ["group_key", "map_id", "time_ms"])
        checks = [c.sqltext.text for c in table.constraints if hasattr(c, "sqltext")]
        self.assertIn("time_ms > 0", checks)


if __name__ == "__main__":
    unittest.main()
