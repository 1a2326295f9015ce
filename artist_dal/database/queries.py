"""
SQL statements used by the data access layer.

Statements that target the artist table take the table name so test mode
can point them at the test table. Values are always bound as parameters.
"""

from psycopg import sql

from ..constants import (
    COMMENT_TABLE,
    INSTRUMENT_TABLE,
    LEGACY_NAME_TABLE,
    PLAYS_TABLE,
)


def q_drop_artist_table(table_name: str) -> sql.Composed:
    return sql.SQL("DROP TABLE {table}").format(table=sql.Identifier(table_name))


def q_create_artist_table(table_name: str) -> sql.Composed:
    return sql.SQL(
        """
        CREATE TABLE {table} (
            artist_name VARCHAR(255) PRIMARY KEY,
            artist_origin VARCHAR(255),
            artist_description TEXT,
            monthly_listeners INTEGER
        )
        """
    ).format(table=sql.Identifier(table_name))


def q_select_artists(table_name: str) -> sql.Composed:
    return sql.SQL("SELECT * FROM {table}").format(table=sql.Identifier(table_name))


def q_select_comments() -> sql.Composed:
    return sql.SQL("SELECT * FROM {table}").format(table=sql.Identifier(COMMENT_TABLE))


def q_fun_fact_artists() -> sql.Composed:
    # Relational division: artists for whom no catalogued instrument is unplayed
    return sql.SQL(
        """
        SELECT DISTINCT p.artist_name
        FROM {plays} p
        WHERE NOT EXISTS (
            SELECT i.instrument_name
            FROM {instruments} i
            WHERE NOT EXISTS (
                SELECT *
                FROM {plays} p2
                WHERE p2.artist_name = p.artist_name
                  AND p2.instrument_name = i.instrument_name
            )
        )
        ORDER BY p.artist_name
        """
    ).format(
        plays=sql.Identifier(PLAYS_TABLE),
        instruments=sql.Identifier(INSTRUMENT_TABLE),
    )


def q_insert_artist(table_name: str) -> sql.Composed:
    return sql.SQL(
        "INSERT INTO {table} (artist_name, artist_origin) VALUES (%(name)s, %(origin)s)"
    ).format(table=sql.Identifier(table_name))


def q_delete_artist(table_name: str) -> sql.Composed:
    return sql.SQL("DELETE FROM {table} WHERE artist_name = %(name)s").format(
        table=sql.Identifier(table_name)
    )


def q_insert_comment() -> sql.Composed:
    return sql.SQL(
        "INSERT INTO {table} (description, commented_by) VALUES (%(description)s, %(author)s)"
    ).format(table=sql.Identifier(COMMENT_TABLE))


def q_update_name() -> sql.Composed:
    return sql.SQL("UPDATE {table} SET name = %(new_name)s WHERE name = %(old_name)s").format(
        table=sql.Identifier(LEGACY_NAME_TABLE)
    )


def q_count_rows(table_name: str) -> sql.Composed:
    return sql.SQL("SELECT COUNT(*) AS row_count FROM {table}").format(
        table=sql.Identifier(table_name)
    )
