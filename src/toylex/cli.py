"""Command-line interface for toylex."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from toylex.lexer import Lexer, iter_tokens
from toylex.lint import DEFAULT_OPERATORS, check_tokens
from toylex.source import StreamLineProvider
from toylex.tokens import LexedToken, token_name

logger = logging.getLogger(__name__)

FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    output_format: str
    check: bool
    operators: str
    log_level: str
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="toylex",
        description="Tokenize a Toy source file",
    )
    p.add_argument("input", help="Input .toy file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--check",
        action="store_true",
        default=None,
        help="Report unrecognized characters and malformed numbers; exit 1 if any",
    )
    p.add_argument(
        "--operators",
        metavar="CHARS",
        default=None,
        help=f"Operator characters accepted by --check (default: {DEFAULT_OPERATORS!r})",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover toylex.toml)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log lexer activity to stderr")
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "toylex.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def _table(config: dict[str, Any], name: str) -> dict[str, Any]:
    value = config.get(name)
    return value if isinstance(value, dict) else {}


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Output format: config < CLI
    output_format = "text"
    cfg_format = _table(config, "output").get("format")
    if cfg_format is not None:
        if cfg_format not in FORMATS:
            raise argparse.ArgumentTypeError(f"invalid output format in config: {cfg_format!r}")
        output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    # Checking: config < CLI
    cfg_check = _table(config, "check")
    check = bool(cfg_check.get("enabled", False))
    if args.check is not None:
        check = args.check
    operators = DEFAULT_OPERATORS
    if isinstance(cfg_check.get("operators"), str):
        operators = cfg_check["operators"]
    if args.operators is not None:
        operators = args.operators

    # Logging: config < CLI
    log_level = "WARNING"
    cfg_level = _table(config, "logging").get("level")
    if cfg_level is not None:
        cfg_level = str(cfg_level).upper()
        if cfg_level not in LOG_LEVELS:
            raise argparse.ArgumentTypeError(f"invalid log level in config: {cfg_level!r}")
        log_level = cfg_level
    if args.verbose:
        log_level = "DEBUG"

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        output_format=output_format,
        check=check,
        operators=operators,
        log_level=log_level,
        debug=args.debug,
    )


def lex_file(options: CliOptions) -> list[LexedToken]:
    """Read and tokenize the input file, streaming it line by line."""
    with open(options.input_file, encoding="utf-8", newline="") as f:
        lexer = Lexer(StreamLineProvider(f), str(options.input_file))
        tokens = list(iter_tokens(lexer))
    logger.info(f"{options.input_file}: {len(tokens)} tokens")
    return tokens


def render_text(tokens: list[LexedToken]) -> str:
    """One tab-separated line per token: location, token name, lexeme."""
    lines = []
    for tok in tokens:
        loc = f"{tok.location.line}:{tok.location.column}"
        lines.append(f"{loc}\t{token_name(tok.token)}\t{tok.text}")
    return "\n".join(lines) + "\n"


def _json_value(value: str | float | None) -> str | float | None:
    # Over-long digit runs decode to inf, which JSON cannot represent.
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def render_json(tokens: list[LexedToken]) -> str:
    records = [
        {
            "token": int(tok.token),
            "name": token_name(tok.token),
            "text": tok.text,
            "value": _json_value(tok.value),
            "line": tok.location.line,
            "column": tok.location.column,
        }
        for tok in tokens
    ]
    filename = tokens[-1].location.file if tokens else None
    return json.dumps({"file": filename, "tokens": records}, indent=2, allow_nan=False) + "\n"


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except (OSError, tomllib.TOMLDecodeError) as exc:
        print(f"error: cannot load config: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=options.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        tokens = lex_file(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return 2

    if options.debug:
        from toylex.debug import dump_tokens

        dump_tokens(tokens, file=sys.stderr)

    output = render_json(tokens) if options.output_format == "json" else render_text(tokens)
    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    if options.check:
        findings = check_tokens(tokens, options.operators)
        for finding in findings:
            print(f"warning: {finding}", file=sys.stderr)
        if findings:
            return 1

    return 0


def run() -> None:
    """Console script wrapper around main()."""
    sys.exit(main())
