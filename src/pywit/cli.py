#!/usr/bin/env python3
"""
pywit CLI

A command-line interface for inspecting the exported functions of a
component and preparing invocation payloads from its metadata.

Usage:
    python -m pywit.cli <metadata.json> [options]
    pywit <metadata.json> [options]

Examples:
    pywit component.json
    pywit component.json --search user
    pywit component.json --details get-user
    pywit component.json --skeleton get-user
    pywit component.json --invoke get-user --args '[42]'
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pywit.codec import build_payload, parse_editor_text
from pywit.errors import WitError
from pywit.exports import describe_exports, find_function, search_functions
from pywit.render import render
from pywit.skeleton import skeleton_params
from pywit.types import Export
from pywit.validator import load_exports

logger = logging.getLogger(__name__)


#==============================================================================
# CLI Options
#==============================================================================

@dataclass
class CliOptions:
    """Options collected from the command line"""
    path: str
    search: str | None = None
    details: str | None = None
    skeleton: str | None = None
    invoke: str | None = None
    args: str | None = None
    args_file: str | None = None
    verbose: bool = False


#==============================================================================
# CLI Output Formatting
#==============================================================================

class Colors:
    """ANSI color codes for terminal output"""
    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"
    DIM = "\x1b[2m"
    RED = "\x1b[31m"
    YELLOW = "\x1b[33m"
    CYAN = "\x1b[36m"


def print_msg(msg: str, color: str = Colors.RESET) -> None:
    """Print a message with optional color"""
    print(f"{color}{msg}{Colors.RESET}")


def print_json(value: Any) -> None:
    """Print a JSON value with two-space indent"""
    print(json.dumps(value, indent=2, ensure_ascii=False))


#==============================================================================
# Document Loading
#==============================================================================

def load_metadata(path: str) -> list[Export] | None:
    """
    Load component exports from a metadata JSON file.

    Args:
        path: Path to the metadata file

    Returns:
        The exports, or None if the file cannot be read or parsed
    """
    try:
        with open(Path(path), "r", encoding="utf-8") as f:
            doc = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError, OSError) as e:
        logger.debug("Could not read %s: %s", path, e)
        return None
    return load_exports(doc)


def read_arguments(options: CliOptions) -> list[Any]:
    """Read the invocation arguments from --args or --args-file"""
    text = "[]"
    if options.args is not None:
        text = options.args
    elif options.args_file is not None:
        text = Path(options.args_file).read_text(encoding="utf-8")

    parsed = parse_editor_text(text)
    if isinstance(parsed, str):
        raise WitError.validation("args", "arguments must be valid JSON", parsed)
    return parsed


#==============================================================================
# Commands
#==============================================================================

def list_functions(exports: list[Export], search: str | None) -> int:
    """Print the signature of every exported function"""
    summaries = describe_exports(exports)
    if search:
        summaries = search_functions(summaries, search)

    if not summaries:
        print_msg("No exports found.", Colors.DIM)
        return 0

    width = max(len(s.package) for s in summaries)
    for s in summaries:
        print(f"{Colors.DIM}{s.package.ljust(width)}{Colors.RESET}  {s.signature}")
    return 0


def show_details(exports: list[Export], name: str) -> int:
    """Print the full declaration of each parameter and the return type"""
    fn = find_function(exports, name)

    print_msg(f"{Colors.BOLD}{fn.name}{Colors.RESET}")
    for param in fn.parameters:
        rendered = render(param.typ)
        print_msg(f"\n{param.name}: {rendered.short}", Colors.YELLOW)
        print(rendered.full)

    if fn.return_type is None:
        print_msg("\nreturns: void", Colors.CYAN)
    else:
        rendered = render(fn.return_type)
        print_msg(f"\nreturns: {rendered.short}", Colors.CYAN)
        print(rendered.full)
    return 0


def show_skeleton(exports: list[Export], name: str) -> int:
    """Print the default argument list for a function"""
    print_json(skeleton_params(find_function(exports, name)))
    return 0


def show_payload(exports: list[Export], options: CliOptions) -> int:
    """Print the invocation payload for the given arguments"""
    fn = find_function(exports, options.invoke)  # type: ignore[arg-type]
    print_json(build_payload(read_arguments(options), fn))
    return 0


#==============================================================================
# Main CLI
#==============================================================================

def run(options: CliOptions) -> int:
    """
    Run a CLI command against a metadata file.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        exports = load_metadata(options.path)
        if exports is None:
            print_msg(f"Error: Could not load metadata: {options.path}", Colors.RED)
            return 1

        if options.details:
            return show_details(exports, options.details)
        if options.skeleton:
            return show_skeleton(exports, options.skeleton)
        if options.invoke:
            return show_payload(exports, options)
        return list_functions(exports, options.search)

    except WitError as e:
        print_msg(f"{Colors.RED}{e.code.value}:{Colors.RESET} {e.message}", Colors.RED)
        if options.verbose:
            logger.exception("Command failed")
        return 1
    except OSError as e:
        print_msg(f"Error: {e}", Colors.RED)
        return 1


def show_help() -> None:
    """Show help message"""
    print_msg(f"\n{Colors.BOLD}pywit{Colors.RESET}\n")
    print_msg(f"{Colors.BOLD}Usage:{Colors.RESET}")
    print("  pywit <metadata.json> [options]\n")
    print_msg(f"{Colors.BOLD}Options:{Colors.RESET}")
    print("  --search <text>         Only list functions whose name contains text")
    print("  --details <fn>          Show full type declarations of a function")
    print("  --skeleton <fn>         Print default arguments for a function")
    print("  --invoke <fn>           Print the invocation payload for a function")
    print("  --args <json>           Arguments for --invoke (JSON array)")
    print("  --args-file <path>      Read arguments for --invoke from a JSON file")
    print("  -v, --verbose           Show debug logging")
    print("  -h, --help              Show this help message")
    print()


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser"""
    parser = argparse.ArgumentParser(
        description="pywit - inspect component exports and build invocation payloads",
        add_help=False,
    )
    parser.add_argument("path", nargs="?", help="Path to the component metadata JSON")
    parser.add_argument("--search", type=str, help="Filter functions by name")
    parser.add_argument("--details", type=str, help="Show full type declarations")
    parser.add_argument("--skeleton", type=str, help="Print default arguments")
    parser.add_argument("--invoke", type=str, help="Print the invocation payload")
    parser.add_argument("--args", type=str, help="Arguments as a JSON array")
    parser.add_argument("--args-file", type=str, dest="args_file", help="Arguments JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    parser.add_argument("-h", "--help", action="store_true", help="Show help message")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point"""
    args = build_parser().parse_args(argv)

    if args.help or not args.path:
        show_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    return run(CliOptions(
        path=args.path,
        search=args.search,
        details=args.details,
        skeleton=args.skeleton,
        invoke=args.invoke,
        args=args.args,
        args_file=args.args_file,
        verbose=args.verbose,
    ))


if __name__ == "__main__":
    sys.exit(main())
