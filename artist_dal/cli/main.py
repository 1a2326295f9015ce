"""
CLI main application module.

This module contains the main application entry point: it loads the
configuration, builds the repository and runs one operation.
"""

import json
import logging
import sys
from typing import Callable, Dict

from ..constants import (
    COUNT_FAILED,
    EXIT_CONFIG_ERROR,
    EXIT_INTERRUPTED,
    EXIT_OPERATION_FAILED,
    EXIT_SUCCESS,
    EXIT_UNEXPECTED_ERROR,
)
from ..config import Env
from ..core import ArtistRepository
from ..models import DatabaseResult
from ..utils import setup_logging
from .parser import create_argument_parser

logger = logging.getLogger(__name__)


COMMANDS: Dict[str, Callable[[ArtistRepository, object], DatabaseResult]] = {
    "test-connection": lambda repo, args: repo.check_connection(),
    "init-schema": lambda repo, args: repo.initialize_schema(),
    "list-artists": lambda repo, args: repo.fetch_artists(),
    "list-comments": lambda repo, args: repo.fetch_comments(),
    "fun-fact": lambda repo, args: repo.fetch_fun_fact_artists(),
    "insert-artist": lambda repo, args: repo.create_artist(args.name, args.listeners, args.origin),
    "delete-artist": lambda repo, args: repo.remove_artist(args.name),
    "add-comment": lambda repo, args: repo.create_comment(args.description, args.author),
    "update-name": lambda repo, args: repo.rename(args.old_name, args.new_name),
    "count": lambda repo, args: repo.count(args.table),
}

# Value printed when a command fails, matching the repository's sentinels
FAILURE_OUTPUT = {
    "list-artists": [],
    "list-comments": [],
    "fun-fact": [],
    "count": COUNT_FAILED,
}


def run_command(repository: ArtistRepository, args) -> int:
    """
    Run the selected command and print its value as JSON.

    Returns:
        Process exit code
    """
    result = COMMANDS[args.command](repository, args)
    value = result.unwrap_or(FAILURE_OUTPUT.get(args.command, False))
    print(json.dumps(value, indent=2, default=str, ensure_ascii=False))

    if not result.success:
        logger.error(result.error)
        return EXIT_OPERATION_FAILED
    if value is False:
        logger.error(f"{args.command}: no rows affected")
        return EXIT_OPERATION_FAILED
    return EXIT_SUCCESS


def main(argv=None):
    """Main entry point for the script."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        env = Env.load(cli_args=args)
        db_config = env.database_config()
        logger.debug(f"Configuration: {env.mask()}")
    except Exception as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(EXIT_CONFIG_ERROR)

    try:
        repository = ArtistRepository(db_config, test_mode=env.TEST_MODE)
        exit_code = run_command(repository, args)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (Ctrl+C)")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(EXIT_UNEXPECTED_ERROR)

    sys.exit(exit_code)
