#!/usr/bin/env python3
"""
Tests for statement-level database operations and the operation boundary.
"""

import json
import unittest

import psycopg

from artist_dal.database import (
    count_table_rows,
    delete_artist_row,
    insert_artist_row,
    insert_comment_row,
    recreate_artist_table,
    run_database_operation,
    select_artists,
    select_comments,
    select_fun_fact_artists,
    update_name_row,
)
from artist_dal.database.queries import (
    q_count_rows,
    q_create_artist_table,
    q_delete_artist,
    q_drop_artist_table,
    q_fun_fact_artists,
    q_insert_artist,
    q_insert_comment,
    q_select_artists,
    q_select_comments,
    q_update_name,
)
from artist_dal.models import DatabaseResult
from tests.helpers.fakes import FakeConnection, FakePool


class TestReadStatements(unittest.TestCase):
    def test_select_artists(self):
        rows = [{"artist_name": "Radiohead", "artist_origin": "Abingdon",
                 "artist_description": None, "monthly_listeners": None}]
        conn = FakeConnection(rows=rows)

        result = select_artists(conn, "artists")

        self.assertTrue(result.success)
        self.assertEqual(result.value, rows)
        self.assertEqual(conn.executed, [(q_select_artists("artists"), None)])

    def test_select_artists_uses_given_table(self):
        conn = FakeConnection()
        select_artists(conn, "test_artists")
        self.assertEqual(conn.executed[0][0], q_select_artists("test_artists"))

    def test_select_comments(self):
        rows = [{"description": "great band", "commented_by": "sam"}]
        conn = FakeConnection(rows=rows)

        result = select_comments(conn)

        self.assertEqual(result.value, rows)
        self.assertEqual(conn.executed[0][0], q_select_comments())

    def test_select_fun_fact_artists_returns_names(self):
        conn = FakeConnection(rows=[{"artist_name": "A"}, {"artist_name": "C"}])

        result = select_fun_fact_artists(conn)

        self.assertEqual(result.value, ["A", "C"])
        self.assertEqual(conn.executed[0][0], q_fun_fact_artists())

    def test_select_empty_table(self):
        result = select_artists(FakeConnection(rows=[]), "artists")
        self.assertTrue(result.success)
        self.assertEqual(result.value, [])


class TestSchemaReset(unittest.TestCase):
    def test_drop_then_create(self):
        conn = FakeConnection()

        with self.assertLogs("artist_dal.database.operations", level="INFO") as logs:
            result = recreate_artist_table(conn, "artists")

        self.assertEqual(result, DatabaseResult(success=True, value=True))
        self.assertEqual(
            [query for query, _ in conn.executed],
            [q_drop_artist_table("artists"), q_create_artist_table("artists")],
        )
        self.assertTrue(any("Dropped table artists" in line for line in logs.output))

    def test_missing_table_is_not_fatal(self):
        conn = FakeConnection(outcomes=[psycopg.errors.UndefinedTable('table "artists" does not exist')])

        with self.assertLogs("artist_dal.database.operations", level="INFO") as logs:
            result = recreate_artist_table(conn, "artists")

        self.assertTrue(result.value)
        self.assertEqual(len(conn.executed), 2)
        self.assertTrue(any("might not exist" in line for line in logs.output))

    def test_create_failure_propagates(self):
        conn = FakeConnection(outcomes=[None, psycopg.errors.InsufficientPrivilege("permission denied")])

        with self.assertRaises(psycopg.errors.InsufficientPrivilege):
            recreate_artist_table(conn, "artists")


class TestWriteStatements(unittest.TestCase):
    def test_insert_artist_binds_name_and_origin_only(self):
        conn = FakeConnection(rowcount=1)

        result = insert_artist_row(conn, "artists", "Radiohead", "Abingdon")

        self.assertTrue(result.value)
        self.assertEqual(result.rows_affected, 1)
        self.assertEqual(
            conn.executed,
            [(q_insert_artist("artists"), {"name": "Radiohead", "origin": "Abingdon"})],
        )

    def test_insert_artist_zero_rows(self):
        result = insert_artist_row(FakeConnection(rowcount=0), "artists", "X", None)
        self.assertTrue(result.success)
        self.assertFalse(result.value)

    def test_unknown_rowcount_counts_as_no_rows(self):
        result = insert_comment_row(FakeConnection(rowcount=-1), "hi", "sam")
        self.assertFalse(result.value)
        self.assertEqual(result.rows_affected, 0)

    def test_delete_artist(self):
        conn = FakeConnection(rowcount=1)

        result = delete_artist_row(conn, "artists", "Radiohead")

        self.assertTrue(result.value)
        self.assertEqual(conn.executed, [(q_delete_artist("artists"), {"name": "Radiohead"})])

    def test_delete_missing_artist(self):
        result = delete_artist_row(FakeConnection(rowcount=0), "artists", "Nobody")
        self.assertFalse(result.value)

    def test_insert_comment(self):
        conn = FakeConnection(rowcount=1)

        result = insert_comment_row(conn, "great band", "sam")

        self.assertTrue(result.value)
        self.assertEqual(
            conn.executed,
            [(q_insert_comment(), {"description": "great band", "author": "sam"})],
        )

    def test_update_name(self):
        conn = FakeConnection(rowcount=2)

        result = update_name_row(conn, "old", "new")

        self.assertTrue(result.value)
        self.assertEqual(result.rows_affected, 2)
        self.assertEqual(conn.executed, [(q_update_name(), {"old_name": "old", "new_name": "new"})])


class TestCountStatement(unittest.TestCase):
    def test_count_rows(self):
        conn = FakeConnection(rows=[{"row_count": 7}])

        result = count_table_rows(conn, "artists")

        self.assertEqual(result.value, 7)
        self.assertEqual(conn.executed[0][0], q_count_rows("artists"))

    def test_count_empty_table_is_zero(self):
        result = count_table_rows(FakeConnection(rows=[{"row_count": 0}]), "comments")
        self.assertEqual(result.value, 0)

    def test_count_unknown_table_rejected(self):
        conn = FakeConnection()
        with self.assertRaises(ValueError):
            count_table_rows(conn, "pg_authid")
        self.assertEqual(conn.executed, [])


class TestRunDatabaseOperation(unittest.TestCase):
    def test_success_returns_work_result(self):
        pool = FakePool(FakeConnection(rows=[{"artist_name": "A"}]))

        result = run_database_operation(
            "list_artists", lambda conn: select_artists(conn, "artists"), pool=pool
        )

        self.assertTrue(result.success)
        self.assertEqual(result.value, [{"artist_name": "A"}])
        self.assertEqual(pool.put_count, 1)

    def test_execution_failure_is_captured(self):
        conn = FakeConnection(outcomes=[psycopg.errors.UndefinedTable('relation "comments" does not exist')])
        pool = FakePool(conn)

        with self.assertLogs("artist_dal.database.operations", level="WARNING") as logs:
            result = run_database_operation("list_comments", select_comments, pool=pool)

        self.assertFalse(result.success)
        self.assertIsNone(result.value)
        self.assertEqual(result.error_type, "permanent")
        self.assertEqual(result.stage, "execute")
        self.assertIn("list_comments failed", result.error)
        self.assertEqual(pool.put_count, 1)

        failure_lines = [line for line in logs.output if "OPERATION_FAILURE: " in line]
        self.assertEqual(len(failure_lines), 1)
        record = json.loads(failure_lines[0].split("OPERATION_FAILURE: ", 1)[1])
        self.assertEqual(record["operation"], "list_comments")
        self.assertEqual(record["stage"], "execute")

    def test_connection_failure_is_captured(self):
        pool = FakePool(getconn_error=psycopg.OperationalError("connection refused"))

        with self.assertLogs("artist_dal.database.operations", level="WARNING"):
            result = run_database_operation("list_artists", lambda conn: self.fail("not reached"), pool=pool)

        self.assertFalse(result.success)
        self.assertEqual(result.stage, "connect")
        self.assertEqual(result.error_type, "transient")
        self.assertEqual(pool.put_count, 0)


if __name__ == "__main__":
    unittest.main()
