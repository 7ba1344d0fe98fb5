"""cronfield CLI -- the `cronfield` command.

Usage:
    cronfield field <kind> <text>          Parse one field and print its values
    cronfield check <expression>           Validate a full cron expression
    cronfield match <expression> [--at T]  Check whether a moment matches
    cronfield schedules                    List configured schedules
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from core.config import load_config
from scheduler.cron import CronField, parse_field
from scheduler.expression import CronExpression
from scheduler.fields import FieldKind

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Configure logging for the application."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(numeric_level)


def format_values(cron_field: CronField) -> str:
    """Render set bits compactly, e.g. '0-4,8-12'."""
    runs: list[str] = []
    values = cron_field.values()
    i = 0
    while i < len(values):
        start = end = values[i]
        while i + 1 < len(values) and values[i + 1] == end + 1:
            i += 1
            end = values[i]
        runs.append(str(start) if start == end else f"{start}-{end}")
        i += 1
    return ",".join(runs) or "(none)"


def _print_expression(expression: CronExpression) -> None:
    for cron_field in expression.fields:
        print(f"  {cron_field.kind.label:13s} {cron_field.source:12s} {format_values(cron_field)}")


def cmd_field(args: argparse.Namespace) -> None:
    kind = FieldKind.parse_kind(args.kind)
    cron_field = parse_field(kind, args.text)
    print(f"  {kind.label}: {format_values(cron_field)}")


def cmd_check(args: argparse.Namespace) -> None:
    expression = CronExpression.parse(args.expression)
    print(f"  Valid: {expression}")
    _print_expression(expression)


def cmd_match(args: argparse.Namespace) -> None:
    expression = CronExpression.parse(args.expression)
    moment = datetime.fromisoformat(args.at) if args.at else datetime.now()
    matched = expression.matches(moment)
    print(f"  {moment.isoformat()} {'matches' if matched else 'does not match'} {expression}")
    if not matched:
        sys.exit(1)


def cmd_schedules(args: argparse.Namespace) -> None:
    config = load_config(config_path=args.config, env_path=args.env)
    if args.log_level is None:
        logging.getLogger().setLevel(getattr(logging, config.logging.level.upper(), logging.INFO))
    if not config.schedules:
        print("  No schedules configured.")
        return

    now = datetime.now()
    compiled = config.compiled_schedules()
    for schedule in config.schedules:
        expression = compiled.get(schedule.name)
        if expression is None:
            status = "disabled"
        else:
            status = "due now" if expression.matches(now) else "idle"
        print(f"  {schedule.name:20s} {schedule.cron_expression:20s} {status}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cronfield",
        description="cronfield -- cron field parser and expression checker",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: WARNING; schedules uses config.yaml logging.level)",
    )

    sub = parser.add_subparsers(dest="command")

    # field
    field_parser = sub.add_parser("field", help="Parse a single cron field")
    field_parser.add_argument("kind", type=str, help="second | minute | hour | day_of_month | month | day_of_week")
    field_parser.add_argument("text", type=str, help="Field text, e.g. '0-23/2'")

    # check
    check_parser = sub.add_parser("check", help="Validate a cron expression")
    check_parser.add_argument("expression", type=str, help="5- or 6-field expression or @macro")

    # match
    match_parser = sub.add_parser("match", help="Check whether a moment matches an expression")
    match_parser.add_argument("expression", type=str, help="5- or 6-field expression or @macro")
    match_parser.add_argument("--at", type=str, default=None, help="ISO-8601 moment (default: now)")

    # schedules
    schedules_parser = sub.add_parser("schedules", help="List schedules from config.yaml")
    schedules_parser.add_argument("--config", "-c", type=Path, default=None, help="Path to config.yaml")
    schedules_parser.add_argument("--env", type=Path, default=None, help="Path to .env file")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level or "WARNING")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    commands = {
        "field": cmd_field,
        "check": cmd_check,
        "match": cmd_match,
        "schedules": cmd_schedules,
    }

    handler = commands[args.command]
    try:
        handler(args)
    except (ValueError, ValidationError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"  Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
