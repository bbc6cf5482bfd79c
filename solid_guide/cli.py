"""
Command-line interface for the SOLID guide.

    solid-guide list
    solid-guide show L --part adherence
    solid-guide recap
    solid-guide render --output SOLID.md
    solid-guide check S D
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Optional

from . import __version__
from .catalog import PARTS, get_principle, list_principles, recap, snippet
from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .errors import GuideError
from .fidelity import FidelityChecker
from .logging import configure_logging, get_logger
from .output import create_output
from .renderer import MarkdownRenderer

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="solid-guide",
        description="Browse, render and verify the SOLID principle examples",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config-dir", type=Path, default=None,
                        help="Directory holding guide.yaml")
    parser.add_argument("--log-level", default=None,
                        help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    parser.add_argument("--json-logs", action="store_true",
                        help="Emit logs as JSON lines on stderr")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List the principles")

    show = subparsers.add_parser("show", help="Show one principle and its examples")
    show.add_argument("key", help="Letter, slug or name, e.g. L or liskov-substitution")
    show.add_argument("--part", choices=PARTS, default=None,
                      help="Only print one snippet")

    subparsers.add_parser("recap", help="Print the quick recap")

    render = subparsers.add_parser("render", help="Render the markdown guide")
    render.add_argument("--output", "-o", default=None,
                        help="Write to this file instead of stdout")
    render.add_argument("--no-images", action="store_true",
                        help="Leave out image references")
    render.add_argument("--no-violations", action="store_true",
                        help="Only show the adherence examples")
    render.add_argument("--no-recap", action="store_true",
                        help="Leave out the quick recap")

    check = subparsers.add_parser("check", help="Verify that each example demonstrates its principle")
    check.add_argument("keys", nargs="*", help="Principles to check (default: all)")

    return parser


def collect_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Translate command line flags into configuration overrides."""
    overrides: dict[str, Any] = {}

    if args.log_level:
        overrides.setdefault("logging", {})["level"] = args.log_level
    if args.json_logs:
        overrides.setdefault("logging", {})["format_json"] = True

    if args.command == "render":
        if args.output:
            overrides["output"] = {"method": "file", "path": args.output}
        if args.no_images:
            overrides.setdefault("images", {})["enabled"] = False
        if args.no_violations:
            overrides.setdefault("document", {})["include_violations"] = False
        if args.no_recap:
            overrides.setdefault("document", {})["include_recap"] = False

    return overrides


def cmd_list(config: DefaultConfig, args: argparse.Namespace) -> int:
    for principle in list_principles():
        print(f"{principle.letter}  {principle.name}")
    return EXIT_OK


def cmd_show(config: DefaultConfig, args: argparse.Namespace) -> int:
    principle = get_principle(args.key)
    if args.part:
        print(snippet(principle, args.part))
        return EXIT_OK

    print(f"{principle.letter}: {principle.name}")
    print()
    print(principle.summary)
    for part, text in (("violation", principle.violation_text),
                       ("adherence", principle.adherence_text)):
        print()
        print(f"-- {part} --")
        print(text)
        print()
        print(snippet(principle, part))
    return EXIT_OK


def cmd_recap(config: DefaultConfig, args: argparse.Namespace) -> int:
    for bullet in recap():
        print(f"- {bullet}")
    return EXIT_OK


def cmd_render(config: DefaultConfig, args: argparse.Namespace) -> int:
    document = MarkdownRenderer(config).render()
    output = create_output(config.output)
    result = output.write(document)
    if not result.ok:
        print(f"error: {result.message}", file=sys.stderr)
        return EXIT_FAILED
    if result.target != "stdout":
        print(f"Wrote {result.target} ({result.bytes_written} bytes)", file=sys.stderr)
    return EXIT_OK


def cmd_check(config: DefaultConfig, args: argparse.Namespace) -> int:
    report = FidelityChecker(config).run(args.keys or None)
    for result in report.results:
        status = "PASS" if result.passed else "FAIL"
        print(f"[{status}] {result.principle} {result.name}: {result.detail}")
    print(report.summary())
    return EXIT_OK if report.passed else EXIT_FAILED


COMMANDS = {
    "list": cmd_list,
    "show": cmd_show,
    "recap": cmd_recap,
    "render": cmd_render,
    "check": cmd_check,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the ``solid-guide`` console script."""
    args = build_parser().parse_args(argv)

    # Configured twice: once so config loading itself logs to stderr,
    # then again with the loaded settings.
    configure_logging(level="WARNING", format_json=args.json_logs)

    try:
        config = ConfigLoader.create(args.config_dir).load(collect_overrides(args))
        configure_logging(
            level=config.logging.level,
            format_json=config.logging.format_json,
        )
        logger.debug("Running command", command=args.command)
        return COMMANDS[args.command](config, args)
    except GuideError as e:
        logger.debug("Command failed", command=args.command, error=str(e), context=e.context)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
