"""
DynamoDB Migrator command line

Exports a table to JSON on standard output, or imports such a document
back into a table.

Usage:
    ddbm --table foo > /path/to/file.json
    ddbm --table foo --import /path/to/file.json

Exit codes:
    0 - export printed, import finished or declined
    1 - usage error or failed run
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .config import MigratorConfig
from .exceptions import MigratorError
from .handlers import TableExportReadApi, TableImportWriteApi
from .prompt import AlwaysConfirm, Confirmer, TerminalConfirmer

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

USAGE = """
DynamoDB Migrator
=================

To export:

ddbm --table foo

This will print to STDOUT, so direct the output to a file:

ddbm --table foo > /path/to/file.json

To import:

ddbm --table foo --import /path/to/file.json
"""


def configure_logging(debug: bool = False) -> None:
    """Send log records to standard error; standard output carries the export."""
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("dynamodb_migrator").setLevel(logging.DEBUG if debug else logging.INFO)
    if debug:
        logging.getLogger("botocore").setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ddbm",
        description="Export a DynamoDB table to JSON or import it back",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=USAGE
    )

    parser.add_argument(
        "--table",
        default="",
        help="Specify the table name"
    )

    parser.add_argument(
        "--import",
        dest="import_path",
        default="",
        help="Import data from a file in JSON format"
    )

    parser.add_argument(
        "--region",
        help="AWS region (default: AWS_REGION or us-east-1)"
    )

    parser.add_argument(
        "--endpoint-url",
        help="DynamoDB endpoint, e.g. http://localhost:8000 for DynamoDB Local"
    )

    parser.add_argument(
        "--profile",
        help="Named AWS profile (default: AWS_PROFILE)"
    )

    parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Import without asking for confirmation"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def run(config: MigratorConfig, confirmer: Optional[Confirmer] = None, stdout: Optional[TextIO] = None) -> int:
    """Run exactly one export or import described by config.

    Raises:
        MigratorError: Any failed step
    """
    stdout = stdout or sys.stdout

    if config.is_import:
        if confirmer is None:
            confirmer = AlwaysConfirm() if config.assume_yes else TerminalConfirmer()
        api = TableImportWriteApi(config.dynamodb, config.table_name, confirmer=confirmer)
        result = api.import_file(config.import_path)
        if not result.confirmed:
            logger.info("Import cancelled")
        return 0

    api = TableExportReadApi(config.dynamodb, config.table_name)
    stdout.write(api.export_json() + "\n")
    stdout.flush()
    return 0


def main(argv: Optional[List[str]] = None, confirmer: Optional[Confirmer] = None, stdout: Optional[TextIO] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if not args.table:
        print(USAGE)
        return 1

    configure_logging(args.debug)

    try:
        config = MigratorConfig.build(
            table_name=args.table,
            import_path=args.import_path or None,
            assume_yes=args.yes,
            region_name=args.region,
            endpoint_url=args.endpoint_url,
            profile_name=args.profile,
            enable_debug_logging=True if args.debug else None
        )
        if config.dynamodb.enable_debug_logging:
            configure_logging(debug=True)
        return run(config, confirmer, stdout)
    except MigratorError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
