"""
CLI entry point for tadoku-stats.

Usage:
    python -m tadoku_stats
    python -m tadoku_stats --save stats.json
    python -m tadoku_stats --load stats.json --brief --html --output report.html
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

import structlog

# Log level mapping
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def setup_logging(level: str = "INFO", json_output: bool = False):
    """Configure structured logging on stderr."""
    log_level = LOG_LEVELS.get(level.upper(), logging.INFO)

    if json_output:
        processors = [
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="tadoku-stats",
        description="Tadoku reading contest statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Scrape the contest and print the full report
  python -m tadoku_stats

  # Scrape and save the records for later
  python -m tadoku_stats --save stats.json

  # Re-render saved records as a brief HTML fragment
  python -m tadoku_stats --load stats.json --brief --html --output report.html
        """,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--load",
        metavar="FILE",
        help="Read saved records instead of scraping",
    )
    source.add_argument(
        "--save",
        metavar="FILE",
        help="Scrape and write records to FILE without rendering a report",
    )

    parser.add_argument(
        "--brief",
        action="store_true",
        help="Summarise category standings in two sentences each",
    )

    parser.add_argument(
        "--html",
        action="store_true",
        help="Render an HTML fragment instead of plain text",
    )

    parser.add_argument(
        "--output",
        metavar="FILE",
        help="Write the report to FILE (default: stdout)",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to contest.yml config file",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Output logs as JSON",
    )

    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit",
    )

    return parser


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.save:
        conflicting = [
            flag
            for flag, used in (
                ("--brief", args.brief),
                ("--html", args.html),
                ("--output", args.output),
            )
            if used
        ]
        if conflicting:
            parser.error(f"--save cannot be combined with {', '.join(conflicting)}")

    return args


def write_report(text: str, output: Optional[str] = None) -> None:
    """Write rendered report to a file or stdout."""
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
    else:
        sys.stdout.write(text)


def run(args) -> None:
    """Run the selected mode."""
    from .orchestrator import StatsHarvester
    from .ranking.engine import build_report_tables
    from .report.renderer import render_report
    from .storage import load_records, save_records

    logger = structlog.get_logger(__name__)

    if args.load:
        records = load_records(args.load)
    else:
        harvester = StatsHarvester(config_path=args.config)
        records = asyncio.run(harvester.run())

    if args.save:
        save_records(records, args.save)
        return

    tables = build_report_tables(records)
    report = render_report(tables, as_html=args.html, brief=args.brief)
    write_report(report, args.output)

    logger.info("report_written", output=args.output or "<stdout>", tables=len(tables))


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    if args.version:
        from . import __version__
        print(f"tadoku-stats {__version__}")
        sys.exit(0)

    setup_logging(args.log_level, args.json_logs)

    try:
        run(args)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        logger = structlog.get_logger(__name__)
        logger.exception("fatal_error", error=str(e))
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
