"""Command-line interface for mathlex."""

from __future__ import annotations

import argparse
import io
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mathlex.errors import ExpressionError

CONFIG_NAME = "mathlex.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    expression: str | None
    output_file: Path | None
    spans: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="mathlex",
        description="Tokenize math expressions and report lexical errors",
    )
    p.add_argument("input", nargs="?", help="Input file ('-' for stdin)")
    p.add_argument("-x", "--expr", metavar="TEXT", help="Expression to tokenize")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--spans",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include byte spans in the token dump",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    if args.input is not None and args.expr is not None:
        raise argparse.ArgumentTypeError("give either an input file or --expr, not both")
    if args.input is None and args.expr is None:
        raise argparse.ArgumentTypeError("no input (expected a file, '-' or --expr)")

    input_file = None
    search_dir = Path(".")
    if args.input is not None and args.input != "-":
        input_file = Path(args.input)
        if input_file.parent.parts:
            search_dir = input_file.parent

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir)

    spans = False
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_spans = cfg_output.get("spans")
        if isinstance(cfg_spans, bool):
            spans = cfg_spans
    if args.spans is not None:
        spans = args.spans

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        expression=args.expr,
        output_file=output_file,
        spans=spans,
    )


def read_source(options: CliOptions) -> str:
    """Return the expression text selected by the options."""
    if options.expression is not None:
        return options.expression
    if options.input_file is not None:
        return options.input_file.read_text(encoding="utf-8")
    return sys.stdin.read()


def lex_source(source: str, options: CliOptions) -> str:
    """Tokenize source and return the token dump text."""
    from mathlex.debug import dump_tokens
    from mathlex.lexer import tokenize

    tokens = tokenize(source)
    out = io.StringIO()
    dump_tokens(tokens, file=out, spans=options.spans)
    return out.getvalue()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
        source = read_source(options)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        dump = lex_source(source, options)
    except ExpressionError as exc:
        print(exc.format(source), file=sys.stderr)
        return 1

    if options.output_file:
        options.output_file.write_text(dump, encoding="utf-8")
    else:
        sys.stdout.write(dump)

    return 0
