"""CLI entrypoint for a11yscore."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from a11yscore import __version__
from a11yscore.cli.handlers import handle_report, handle_validate_config, resolve_output_formats
from a11yscore.config import load_config
from a11yscore.constants.branding import CLI_DESCRIPTION
from a11yscore.constants.reporting import VALID_OUTPUT_FORMATS
from a11yscore.exceptions import A11yScoreError, ConfigError, ViolationInputError

SEVERITY_CHOICES: list[str] = ["High", "Medium", "Low"]


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="a11yscore",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    report = subparsers.add_parser("report", help="Score saved rule-engine results and build a report")
    report.add_argument("-i", "--input", type=Path, required=True, help="Rule-engine violations JSON file")
    report.add_argument(
        "-R",
        "--recommendations",
        type=Path,
        default=None,
        help="Recommendations JSON file (overrides any embedded in the input)",
    )
    report.add_argument("-u", "--url", default=None, help="URL the violations were collected from")
    report.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Output directory (no files written if omitted)",
    )
    report.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding a11yscore.yaml")
    report.add_argument("-c", "--config", type=Path, help="Explicit config file")
    report.add_argument(
        "--output-format",
        default=None,
        help="Comma-separated output formats: json, csv, records (default: from config, else json)",
    )
    report.add_argument(
        "--min-severity",
        choices=SEVERITY_CHOICES,
        default=None,
        help="Hide issues below this severity in outputs (scores are unaffected)",
    )
    report.add_argument(
        "--interpret",
        action="store_true",
        help="Request an AI interpretation for every issue from the configured endpoint",
    )
    report.add_argument(
        "--fail-on",
        choices=SEVERITY_CHOICES,
        default=None,
        help="Exit 1 if any issue has at least this severity",
    )
    report.add_argument("--fail-under", type=int, default=None, help="Exit 1 if the score is below this value")
    report.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    report.add_argument("--no-color", action="store_true", help="Disable colored output")
    report.add_argument("-v", "--verbose", action="store_true", help="Show issue details and input warnings")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without building a report")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding a11yscore.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)

    if args.command != "report":
        parser.error(f"Unsupported command: {args.command}")

    if args.fail_under is not None and not 0 <= args.fail_under <= 100:
        print("Configuration error: --fail-under must be between 0 and 100", file=sys.stderr)
        return 2

    try:
        config = load_config(args.root, args.config)
        output_formats = resolve_output_formats(args.output_format, config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    invalid_formats = set(output_formats) - VALID_OUTPUT_FORMATS
    if invalid_formats:
        print(
            f"Configuration error: unknown output format(s): {', '.join(sorted(invalid_formats))}. "
            f"Valid formats: {', '.join(sorted(VALID_OUTPUT_FORMATS))}",
            file=sys.stderr,
        )
        return 2

    try:
        return handle_report(args, config, output_formats)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except ViolationInputError as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        return 2
    except A11yScoreError as exc:
        print(f"Report error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
