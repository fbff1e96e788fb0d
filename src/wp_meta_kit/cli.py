"""Command-line interface for wp-meta-kit.

Usage:
    wp-meta-kit export [--out PATH]
    wp-meta-kit import --in PATH [--json]

Connection settings come from ``WP_*`` environment variables or a ``.env``
file (see WordPressConfig); ``--base-url`` and ``--username`` override them.
The application password is never read from the command line.
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .__version__ import __version__
from .client.sync_client import WordPressClient
from .config_factory import load_config
from .exceptions import (
    ConfigurationError,
    ImportExportError,
    StoreError,
    StoreWriteError,
    WPMetaKitError,
)
from .export.importer import MetaDescriptionImporter
from .models.export_format import ImportSummary
from .protocols import RecordStore
from .service import MetaTransferService
from .store.wordpress import WordPressRecordStore
from .utils.notices import render_error, render_summary

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wp-meta-kit",
        description="Export and import Yoast SEO meta descriptions between WordPress sites.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--env-file", type=Path, help="Load settings from this .env file")
    parser.add_argument("--base-url", help="Site root URL (overrides WP_BASE_URL)")
    parser.add_argument("--username", help="WordPress user (overrides WP_USERNAME)")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser("export", help="Export meta descriptions to JSON")
    export_parser.add_argument(
        "--out",
        dest="output",
        help="Output file or directory; '-' writes to stdout "
        "(default: timestamped file in the current directory)",
    )

    import_parser = subparsers.add_parser("import", help="Import meta descriptions from JSON")
    import_parser.add_argument(
        "--in", dest="input", required=True, type=Path, help="Export file to import"
    )
    import_parser.add_argument(
        "--json", action="store_true", help="Print the import summary as JSON"
    )

    return parser


def configure_logging(verbosity: int) -> None:
    """Send log output to stderr at a level picked by ``-v`` flags."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run_export(service: MetaTransferService, output: str | None) -> int:
    """Run an export and deliver it to ``output``."""
    export_file = service.run_export()

    if output == "-":
        sys.stdout.buffer.write(export_file.content)
        sys.stdout.flush()
        return EXIT_OK

    path = Path(output) if output else Path(export_file.filename)
    if path.is_dir():
        path = path / export_file.filename

    service.exporter.save_to_file(export_file.content, path)
    print(f"Exported meta descriptions to {path}", file=sys.stderr)
    return EXIT_OK


def run_import(service: MetaTransferService, input_path: Path, *, as_json: bool = False) -> int:
    """Run an import and print its summary."""
    data = MetaDescriptionImporter.load_from_file(input_path)
    summary = service.run_import(data)
    _print_summary(summary, as_json=as_json)
    return EXIT_OK


def run_command(args: argparse.Namespace, store: RecordStore) -> int:
    """Dispatch a parsed command against ``store`` and map failures to exit codes."""
    service = MetaTransferService(store)
    as_json = getattr(args, "json", False)
    operation = args.command.capitalize()

    try:
        if args.command == "export":
            return run_export(service, args.output)
        return run_import(service, args.input, as_json=as_json)

    except StoreWriteError as e:
        if isinstance(e.summary, ImportSummary):
            _print_summary(e.summary, as_json=as_json)
        _print_error(e.detail_code, e.message, operation=operation, as_json=as_json)
        return EXIT_FAILURE

    except (ImportExportError, StoreError) as e:
        _print_error(e.detail_code, e.message, operation=operation, as_json=as_json)
        return EXIT_FAILURE


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``wp-meta-kit`` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    overrides = {
        name: value
        for name, value in (("base_url", args.base_url), ("username", args.username))
        if value
    }

    try:
        config = load_config(args.env_file, required=args.env_file is not None, **overrides)
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return EXIT_USAGE

    try:
        client = WordPressClient(config)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        with client:
            store = WordPressRecordStore(client, page_size=config.page_size)
            return run_command(args, store)
    except WPMetaKitError as e:
        logger.debug("Unhandled wp-meta-kit error", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_FAILURE


def _print_summary(summary: ImportSummary, *, as_json: bool) -> None:
    if as_json:
        print(summary.to_json())
    else:
        print(render_summary(summary))


def _print_error(detail: str, message: str, *, operation: str, as_json: bool) -> None:
    if as_json:
        print(json.dumps({"error": detail, "message": message}), file=sys.stderr)
    else:
        print(render_error(detail, message, operation=operation), file=sys.stderr)
