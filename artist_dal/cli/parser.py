"""
CLI argument parser module.

Global options are generated from the configuration schema; each data
access operation is added as a subcommand.
"""

from ..config.loader import ConfigLoader


def create_argument_parser():
    """
    Create and configure the argument parser.

    The schema-driven ConfigLoader supplies the connection options, and
    one subcommand is registered per repository operation.
    """
    parser = ConfigLoader.generate_cli_parser()
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    subparsers.add_parser("test-connection", help="Check that the database is reachable")
    subparsers.add_parser("init-schema", help="Drop and recreate the artist table (destroys data)")
    subparsers.add_parser("list-artists", help="List every artist")
    subparsers.add_parser("list-comments", help="List every comment")
    subparsers.add_parser("fun-fact", help="List artists who play every catalogued instrument")

    insert = subparsers.add_parser("insert-artist", help="Add an artist")
    insert.add_argument("name", help="Artist name (unique)")
    insert.add_argument("--origin", help="Where the artist is from")
    insert.add_argument("--listeners", type=int, help="Monthly listeners (not stored)")

    delete = subparsers.add_parser("delete-artist", help="Delete an artist by exact name")
    delete.add_argument("name", help="Artist name")

    comment = subparsers.add_parser("add-comment", help="Post a comment")
    comment.add_argument("description", help="Comment text")
    comment.add_argument("--author", required=True, help="Who wrote the comment")

    update = subparsers.add_parser("update-name", help="Rename a row of the legacy demo table")
    update.add_argument("old_name", help="Current name")
    update.add_argument("new_name", help="New name")

    count = subparsers.add_parser("count", help="Count rows of a table")
    count.add_argument("--table", help="Table to count (default: the artist table)")

    return parser
