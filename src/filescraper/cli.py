"""Command-line interface for File Scraper."""

import argparse
import logging
import sys
from pathlib import Path

from .config import Config
from .errors import ConfigError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(level: int, log_file: Path | None = None) -> None:
    """Configure logging to stderr, and to a file when requested."""
    # Clear any existing handlers to prevent duplicate output
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)
        root_logger.setLevel(logging.DEBUG)
    else:
        root_logger.setLevel(level)


class _FilterAction(argparse.Action):
    """Collect ``MODE VALUE [VALUE ...]`` as (mode, [values])."""

    def __call__(self, parser, namespace, values, option_string=None):
        mode, *tokens = values
        if not tokens:
            parser.error(f"{option_string}: at least one value is required after '{mode}'")
        setattr(namespace, self.dest, (mode, tokens))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filescraper",
        description="A simple cli-application for fast scraping of data from a system",
    )
    parser.add_argument(
        "source_root",
        type=Path,
        help="The root folder from which all data should be scraped recursively",
    )
    parser.add_argument(
        "target_root",
        type=Path,
        help="The target root folder to which all data should be copied to",
    )
    parser.add_argument(
        "-e", "--file-extensions",
        nargs="+",
        action=_FilterAction,
        metavar=("{ignore,target}", "EXT"),
        help="File extensions that should be either ignored or copied specifically",
    )
    parser.add_argument(
        "-f", "--folders",
        nargs="+",
        action=_FilterAction,
        metavar=("{ignore,target}", "FOLDER"),
        help="Folders that should be either ignored or copied specifically",
    )
    parser.add_argument(
        "-l", "--follow-links",
        action="store_true",
        help="Follow symbolic links instead of copying them as links",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="More output per occurrence (-v info, -vv debug)",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="count",
        default=0,
        help="Less output per occurrence",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write a debug-level log to this file",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List what would be copied without touching the target",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    """Convert parsed arguments into an immutable Config."""
    ext_mode, ext_values = args.file_extensions or (None, ())
    folder_mode, folder_values = args.folders or (None, ())
    verbosity = args.verbose - args.quiet

    return Config.build(
        args.source_root,
        args.target_root,
        extension_mode=ext_mode,
        extension_values=ext_values,
        folder_mode=folder_mode,
        folder_values=folder_values,
        follow_links=args.follow_links,
        verbosity=verbosity,
        log_file=args.log_file,
        show_progress=not args.no_progress and verbosity >= 0,
        dry_run=args.dry_run,
    )


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Argument list; defaults to sys.argv[1:]

    Returns:
        Exit code. 0 once the batch completes, even with per-item
        failures; 1 for configuration errors.
    """
    from .copier import copy_all
    from .display import (
        print_banner,
        print_elapsed,
        print_error,
        print_header,
        print_plan,
        print_scan_result,
        print_summary,
        print_warning,
    )
    from .models import CopyStats, ScanStats
    from .scanner import gather_files_for_copying

    args = build_parser().parse_args(argv)
    try:
        config = config_from_args(args)
    except ConfigError as e:
        print_error(str(e))
        return 1

    # Fail fast on configuration problems
    errors = config.validate()
    if errors:
        for error in errors:
            print_error(error)
        return 1

    try:
        setup_logging(config.log_level, config.log_file)
    except OSError as e:
        print_error(f"Could not open log file {config.log_file}: {e}")
        return 1

    quiet = config.verbosity < 0
    if not quiet:
        print_banner()
        print_plan(config)
        print_header("Scanning")

    scan_stats = ScanStats()
    files = gather_files_for_copying(config, scan_stats)
    logger.info("Found %d files and directories eligible for copying", len(files))

    if not quiet:
        print_scan_result(len(files), scan_stats)

    if not files:
        print_warning("Nothing to copy.")
        return 0

    if not config.dry_run:
        try:
            config.ensure_target_exists()
        except OSError as e:
            print_error(f"Could not create target directory {config.target_root}: {e}")
            return 1

    if not quiet:
        print_header("Copying")
        print()

    stats = CopyStats()
    elapsed = copy_all(config, files, stats)

    if not quiet:
        print_summary(stats, elapsed)
    logger.info("Whole operation took %.3fs", elapsed)
    print_elapsed(elapsed)

    return 0


def cli_main() -> int:
    """Console-script entry point."""
    try:
        return main()
    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(cli_main())
