import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from dafny_export.config import Settings
from dafny_export.export import render_module, write_exports
from dafny_export.load import load_closure
from dafny_export.result import Err, Ok
from dafny_export.state import TranslationState, merge_from_imports


def _load_state(state_dir: Path, module: str) -> TranslationState | None:
    match load_closure(state_dir, module):
        case str(err):
            print(f"Error loading '{module}': {err}", file=sys.stderr)
            return None
        case closure:
            return merge_from_imports(closure)


def handle_dump(module: str, state_dir: Path, fmt: str) -> int:
    """Print every export visible from `module`, in recording order."""
    state = _load_state(state_dir, module)
    if state is None:
        return 1

    match fmt:
        case "module":
            sys.stdout.write(render_module(module, state))
        case _:
            write_exports(state, sys.stdout)
    return 0


def handle_symbols(module: str, state_dir: Path) -> int:
    """Print the symbol mapping visible from `module`."""
    state = _load_state(state_dir, module)
    if state is None:
        return 1

    if not state.symbols:
        print("(no symbols)")
        return 0
    width = max(len(k) for k in state.symbols)
    for decl, name in state.symbols.items():
        print(f"{decl:<{width}}  ->  {name}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    match Settings.from_env():
        case Ok(settings):
            pass
        case Err(e):
            print(f"Configuration error: {e}", file=sys.stderr)
            return 1

    logging.basicConfig(
        level=settings.log_level_value,
        format="%(levelname)s %(name)s: %(message)s",
    )

    parser = argparse.ArgumentParser(
        prog="dafny-export",
        description="Inspect Dafny exports recorded by compiled units",
    )
    parser.add_argument(
        "--state-dir",
        type=Path,
        default=settings.state_dir,
        help=f"Directory holding <module>.json unit logs (default: {settings.state_dir}).",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Command: dump
    dump_parser = subparsers.add_parser(
        "dump",
        help="Print every Dafny declaration exported by MODULE and its imports.",
    )
    dump_parser.add_argument("module", metavar="MODULE")
    dump_parser.add_argument(
        "--format",
        choices=["lines", "module"],
        default="lines",
        help="One declaration per line, or wrapped in a Dafny module (default: lines).",
    )

    # Command: symbols
    symbols_parser = subparsers.add_parser(
        "symbols",
        help="Print the declaration -> Dafny name mapping visible from MODULE.",
    )
    symbols_parser.add_argument("module", metavar="MODULE")

    args = parser.parse_args(argv)

    match args.command:
        case "dump":
            return handle_dump(args.module, args.state_dir, args.format)
        case "symbols":
            return handle_symbols(args.module, args.state_dir)
        case None:
            parser.print_help()
            return 1
        case _:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            parser.print_help()
            return 1


def run() -> int:
    """Entry point for the console script."""
    try:
        return main()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(run())
