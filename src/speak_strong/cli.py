"""CLI interface for speak-strong.

Usage:
    # Rewrite a message (report on stderr, result on stdout)
    speak-strong rewrite -m "I just wanted to check if maybe we could try this"

    # Rewrite a file into another file, including fillers and weak requests
    speak-strong rewrite -f email.md -o email-strong.md --moderate

    # Machine-readable output (stdin: text, stdout: JSON)
    echo "I think we should go" | speak-strong rewrite --json

    # Show the active rules version and per-level counts
    speak-strong rules

Exit codes: 2 bad arguments or unreadable input, 3 output not writable,
4 invalid rules or config.
"""

from __future__ import annotations
import argparse
import json
import logging
import sys

from . import __version__
from .config import create_rewriter, load_config, load_from_yaml
from .reporter import format_output, format_stats, result_to_dict
from .rewriter import Rewriter, get_strictness_level
from .rules import RulesError
from .types import LEVELS

EXIT_INPUT = 2
EXIT_OUTPUT = 3
EXIT_RULES = 4


def _setup_logging(args: argparse.Namespace) -> None:
    level = logging.WARNING
    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_rewriter(args: argparse.Namespace) -> Rewriter:
    cfg = load_from_yaml(args.config) if args.config else load_config({})
    if args.rules:
        cfg["rules_path"] = args.rules
    return create_rewriter(cfg)


def _read_input(args: argparse.Namespace) -> str:
    if args.message is not None:
        return args.message
    if args.file and args.file != "-":
        with open(args.file, encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def cmd_rewrite(args: argparse.Namespace) -> None:
    """Rewrite text from --message, --file or stdin."""
    rewriter = _build_rewriter(args)
    text = _read_input(args)

    level = None
    if args.moderate or args.aggressive:
        level = get_strictness_level(moderate=args.moderate, aggressive=args.aggressive)
    result = rewriter.process(text, level)

    if args.json:
        json.dump(result_to_dict(result), sys.stdout, ensure_ascii=False)
        sys.stdout.write("\n")
        return

    show_diff = not args.quiet
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(result.transformed)
        if show_diff:
            sys.stderr.write(format_output(result, show_diff) + "\n")
            sys.stderr.write(f"Output written to {args.output}\n")
    else:
        sys.stdout.write(format_output(result, show_diff) + "\n")

    if not args.quiet:
        sys.stderr.write(f"── Stats: {format_stats(result)} ──\n")


def cmd_rules(args: argparse.Namespace) -> None:
    """Print the rules version and how many rules each level applies."""
    rules = _build_rewriter(args).rules
    output = {
        "version": rules.version,
        "counts": {level: rules.count(level) for level in LEVELS},
        "total": rules.count(),
    }
    json.dump(output, sys.stdout, indent=2)
    sys.stdout.write("\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="speak-strong",
        description="Transform weak language into strong, confident communication",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--rules", help="Rules file (YAML or JSON) replacing the bundled rules")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print the result")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show progress")
    parser.add_argument("--debug", action="store_true", help="Show debug information")

    sub = parser.add_subparsers(dest="command", required=True)

    rw = sub.add_parser("rewrite", help="Rewrite text (message, file or stdin)")
    source = rw.add_mutually_exclusive_group()
    source.add_argument("-m", "--message", help="Input message string")
    source.add_argument("-f", "--file", help="Input file ('-' for stdin)")
    rw.add_argument("-o", "--output", help="Write the result to a file")
    strictness = rw.add_mutually_exclusive_group()
    strictness.add_argument("--moderate", action="store_true", help="Include fillers and weak requests")
    strictness.add_argument("--aggressive", action="store_true", help="Flag everything, including common phrases")
    rw.add_argument("--json", action="store_true", help="Emit the full result as JSON")

    sub.add_parser("rules", help="Show rules version and counts")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args)

    cmds = {
        "rewrite": cmd_rewrite,
        "rules": cmd_rules,
    }
    try:
        cmds[args.command](args)
    except RulesError as e:
        sys.stderr.write(f"Error: {e}\n")
        return EXIT_RULES
    except OSError as e:
        sys.stderr.write(f"Error: {e}\n")
        # errors opening --output are the only write-side OSErrors
        return EXIT_OUTPUT if getattr(args, "output", None) and e.filename == args.output else EXIT_INPUT
    return 0


if __name__ == "__main__":
    sys.exit(main())
