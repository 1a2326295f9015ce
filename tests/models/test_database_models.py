#!/usr/bin/env python3
"""
Tests for database configuration and result models.
"""

import unittest

from psycopg.conninfo import conninfo_to_dict

from artist_dal.models import DatabaseConfig, DatabaseResult


class TestDatabaseConfig(unittest.TestCase):
    def test_conninfo(self):
        config = DatabaseConfig(
            host="db.local", port=6543, dbname="music", user="app",
            password="p@ss word", connection_timeout=5,
        )

        self.assertEqual(
            conninfo_to_dict(config.conninfo()),
            {
                "host": "db.local",
                "port": "6543",
                "dbname": "music",
                "user": "app",
                "password": "p@ss word",
                "connect_timeout": "5",
            },
        )

    def test_conninfo_without_password(self):
        config = DatabaseConfig(host="localhost", port=5432, dbname="music", user="app")
        self.assertNotIn("password", conninfo_to_dict(config.conninfo()))

    def test_describe_hides_password(self):
        config = DatabaseConfig(host="localhost", port=5432, dbname="music", user="app", password="secret")
        self.assertEqual(config.describe(), "app@localhost:5432/music")
        self.assertNotIn("secret", config.describe())


class TestDatabaseResult(unittest.TestCase):
    def test_unwrap_success(self):
        self.assertEqual(DatabaseResult(success=True, value=[1]).unwrap_or([]), [1])
        self.assertEqual(DatabaseResult(success=True, value=0).unwrap_or(-1), 0)
        self.assertFalse(DatabaseResult(success=True, value=False).unwrap_or(True))

    def test_unwrap_failure(self):
        result = DatabaseResult(success=False, error="boom", error_type="transient", stage="connect")
        self.assertEqual(result.unwrap_or(-1), -1)
        self.assertEqual(result.rows_affected, 0)

    def test_immutable(self):
        result = DatabaseResult(success=True)
        with self.assertRaises(AttributeError):
            result.success = False


if __name__ == "__main__":
    unittest.main()
