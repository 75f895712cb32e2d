import unittest

from friend_leaderboards.core.config import normalize_database_url
from friend_leaderboards.core.database import build_engine


class TestDatabaseUrl(unittest.TestCase):
    def test_libpq_urls_get_driver(self):
        self.assertEqual(
            normalize_database_url("postgres://u:p@db:5432/friend_leaderboards?sslmode=disable"),
            "postgresql+psycopg2://u:p@db:5432/friend_leaderboards?sslmode=disable",
        )
        self.assertEqual(
            normalize_database_url("postgresql://u:p@db/x"),
            "postgresql+psycopg2://u:p@db/x",
        )

    def test_driver_urls_untouched(self):
        for url in ("postgresql+psycopg2://u:p@db/x", "sqlite://", "sqlite:///data/app.db"):
            self.assertEqual(normalize_database_url(url), url)


class TestBuildEngine(unittest.TestCase):
    def test_postgres_pool_is_bounded(self):
        engine = build_engine("postgresql+psycopg2://u:p@db/x", max_connections=8, timeout_ms=3000)
        self.assertEqual(engine.pool.size(), 8)
        self.assertEqual(engine.pool._max_overflow, 0)
        self.assertEqual(engine.pool._timeout, 3.0)
        engine.dispose()

    def test_memory_sqlite_shares_one_connection(self):
        engine = build_engine("sqlite://")
        self.assertEqual(type(engine.pool).__name__, "StaticPool")
        engine.dispose()


class TestSetupLogging(unittest.TestCase):
    def test_single_stdout_handler(self):
        import logging

        from friend_leaderboards.core import setup_logging

        root_logger = logging.getLogger()
        saved = (list(root_logger.handlers), root_logger.level)
        self.addCleanup(self._restore, root_logger, saved)

        root = setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)
        self.assertIs(root, logging.getLogger())
        self.assertEqual(len(root.handlers), 1)
        self.assertEqual(root.level, logging.DEBUG)

    @staticmethod
    def _restore(root_logger, saved):
        handlers, level = saved
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
        for handler in handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(level)


if __name__ == "__main__":
    unittest.main()
