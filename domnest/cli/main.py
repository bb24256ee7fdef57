"""
domnest CLI — Command-line interface for nesting checks.
"""

import argparse
import sys
from pathlib import Path

from domnest import __version__
from domnest.config.loader import resolve_settings
from domnest.core.context import CheckRequest
from domnest.core.engine import Engine
from domnest.core.logging import LogChannel, configure_logging, get_logger
from domnest.model.engine import get_content_model, load_content_model
from domnest.model.loader import list_rulesets
from domnest.model.models import Nesting
from domnest.report.format import format_text
from domnest.report.serialization import results_to_json


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="domnest",
        description="Check JSX / createElement trees for invalid DOM nesting",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"domnest {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Check command
    check_parser = subparsers.add_parser("check", help="Check ESTree JSON files")
    check_parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="ESTree JSON files (e.g. from espree or @babel/parser)",
    )
    check_parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output file path (default: stdout)",
    )
    check_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    check_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file (default: ./domnest.yaml if present)",
    )
    _add_ruleset_args(check_parser)
    check_parser.add_argument(
        "--pragma",
        type=str,
        default=None,
        help="Object owning createElement (default: React)",
    )
    check_parser.add_argument(
        "--jobs",
        type=int,
        default=1,
        help="Number of files to check in parallel (default: 1)",
    )
    _add_logging_args(check_parser)

    # Query command
    query_parser = subparsers.add_parser("query", help="Test a single parent/child pair")
    query_parser.add_argument("parent", help="Parent tag name")
    query_parser.add_argument("child", help="Child tag name")
    _add_ruleset_args(query_parser)

    # Rules command
    rules_parser = subparsers.add_parser("rules", help="List content-model rules")
    _add_ruleset_args(rules_parser)

    return parser


def _add_ruleset_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--ruleset",
        type=str,
        default=None,
        choices=list_rulesets(),
        help="Bundled ruleset (default: html)",
    )
    parser.add_argument(
        "--rules",
        type=Path,
        default=None,
        help="Custom ruleset YAML file (overrides --ruleset)",
    )


def _add_logging_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: info, or DOMNEST_LOG_LEVEL env var)",
    )
    parser.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels to show (model,check,report,system). Default: all",
    )


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "check":
        return run_check(args)
    if args.command == "query":
        return run_query(args)
    if args.command == "rules":
        return run_rules(args)

    return 0


def run_check(args: argparse.Namespace) -> int:
    """Run check command."""
    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]

    configure_logging(level=args.log_level, channels=channels, force=True)

    settings = resolve_settings(
        args.config,
        ruleset=args.ruleset,
        ruleset_path=args.rules,
        pragma=args.pragma,
    )
    engine = Engine(settings)

    requests = [CheckRequest(source=path) for path in args.files]
    results = engine.check_many(requests, jobs=args.jobs)

    if args.format == "json":
        output = results_to_json(results)
    else:
        output = format_text(results)

    if args.output:
        Path(args.output).write_text(output)
        get_logger(LogChannel.REPORT).verbose("report_written", path=args.output)
    else:
        print(output)

    return 0 if all(r.ok for r in results) else 1


def _model_from_args(args: argparse.Namespace):
    if args.rules is not None:
        return load_content_model(args.rules)
    return get_content_model(args.ruleset or "html")


def run_query(args: argparse.Namespace) -> int:
    """Print valid/invalid/unknown for one pair; exit 1 only when invalid."""
    model = _model_from_args(args)
    verdict = model.is_valid_nesting(args.parent, args.child)
    print(verdict.value)
    return 1 if verdict is Nesting.INVALID else 0


def run_rules(args: argparse.Namespace) -> int:
    """List the rules of a content model."""
    model = _model_from_args(args)
    ruleset = model.ruleset

    lines = [f"{ruleset.name} {ruleset.version}: {len(ruleset)} tags"]
    for tag in ruleset.tags():
        rule = ruleset.get(tag)
        parents = ", ".join(sorted(rule.parents)) or "(root)"
        flags = [
            name for name, on in (
                ("interactive", rule.interactive),
                ("no-interactive", rule.no_interactive),
                ("transparent", rule.transparent),
            ) if on
        ]
        line = f"  <{tag}> context={rule.context.value} parents=[{parents}]"
        if rule.exclude:
            line += f" exclude=[{', '.join(sorted(rule.exclude))}]"
        if flags:
            line += f" {' '.join(flags)}"
        lines.append(line)

    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
