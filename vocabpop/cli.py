"""Command line interface for VocabPop"""

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from . import __version__
from .config.settings import RunConfig, settings
from .core.factory import create_scheduler
from .exceptions import ConfigurationError, VocabPopError
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def positive_int(value: str) -> int:
    """argparse type for strictly positive integers"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser"""
    prog_name = Path(sys.argv[0]).name
    parser = argparse.ArgumentParser(
        prog=prog_name,
        description="Show vocabulary entries as periodic desktop notifications",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Vocabulary files hold one entry per line: term<TAB>meaning

Examples:
  vocabpop                         # Notify from ./vocab every minute
  vocabpop --dir ~/jp --interval 5 # Custom directory, every 5 minutes
  vocabpop --force                 # Show one entry now and exit
  vocabpop --shuffle --console     # Random order, print to the terminal
        """,
    )

    vocab_group = parser.add_argument_group("vocabulary options")
    vocab_group.add_argument(
        "-d",
        "--dir",
        type=Path,
        default=settings.vocabulary.dir,
        help=f"Vocabulary directory (default: {settings.vocabulary.dir})",
    )
    vocab_group.add_argument(
        "--shuffle",
        action=argparse.BooleanOptionalAction,
        default=settings.vocabulary.shuffle,
        help="Shuffle entries once at startup",
    )
    vocab_group.add_argument(
        "--comment-prefix",
        default=settings.vocabulary.comment_prefix,
        metavar="PREFIX",
        help="Ignore lines starting with PREFIX (default: disabled)",
    )

    schedule_group = parser.add_argument_group("schedule options")
    schedule_group.add_argument(
        "-i",
        "--interval",
        type=positive_int,
        default=settings.vocabulary.interval_minutes,
        help=(
            "Minutes between notifications "
            f"(default: {settings.vocabulary.interval_minutes})"
        ),
    )
    schedule_group.add_argument(
        "--force",
        action="store_true",
        help="Show a single notification immediately and exit",
    )

    notify_group = parser.add_argument_group("notification options")
    notify_group.add_argument(
        "--console",
        action=argparse.BooleanOptionalAction,
        default=settings.notifier.console_only,
        help="Print entries to the terminal instead of desktop notifications",
    )

    log_group = parser.add_argument_group("logging options")
    log_group.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    log_group.add_argument("--debug", action="store_true", help="Enable debug logging")
    log_group.add_argument("--log-file", type=Path, help="Write logs to file")

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def build_run_config(args: argparse.Namespace) -> RunConfig:
    """Freeze parsed arguments into the run configuration"""
    try:
        return RunConfig(
            dir=args.dir,
            interval_minutes=args.interval,
            force=args.force,
            shuffle=args.shuffle,
            console_only=args.console,
            comment_prefix=args.comment_prefix or None,
        )
    except ValidationError as e:
        first = e.errors()[0]
        setting = ".".join(str(part) for part in first["loc"]) or "config"
        raise ConfigurationError(setting, first.get("input"), first["msg"]) from e


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI"""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Setup logging
    log_level = "DEBUG" if (args.debug or args.verbose) else settings.logging.level
    log_file = args.log_file or settings.logging.file
    setup_logging(log_level, str(log_file) if log_file else None, settings.logging.format)

    scheduler = None
    try:
        logger.debug("🚀 VocabPop started")
        config = build_run_config(args)
        logger.debug(f"Run configuration: {config.model_dump()}")

        scheduler = create_scheduler(config)
        scheduler.run(force=config.force)

    except VocabPopError as e:
        # Fatal errors reach stderr regardless of the configured log level
        print(f"Error: {e}", file=sys.stderr)
        logger.debug(f"Application error: {e}")
        if args.debug:
            logger.exception("Full traceback:")
        sys.exit(1)
    except KeyboardInterrupt:
        if scheduler is not None:
            stats = scheduler.notifier.get_statistics()
            logger.info(
                f"Shown {stats['shown']} entries "
                f"({stats['fallbacks']} via console fallback)"
            )
        logger.info("Exiting VocabPop.")
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if args.debug or args.verbose:
            logger.exception("Full traceback:")
        sys.exit(1)


if __name__ == "__main__":
    main()
