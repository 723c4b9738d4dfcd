"""Command-line interface for flatlex."""

from __future__ import annotations

import argparse
import io
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from flatlex.errors import LexError
from flatlex.log import LEVELS, configure_logging, get_logger

FORMATS = ("text", "json")

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    use_hex: bool
    output_format: str
    strict: bool
    log_level: str


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="flatlex",
        description="Tokenize a file and print its token stream",
    )
    p.add_argument("input", help="Input file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--hex",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Treat a-f/A-F at the start of a token as hex digits (--no-hex overrides config)",
    )
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover flatlex.toml)",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first unknown character",
    )
    p.add_argument(
        "--log-level",
        choices=list(LEVELS),
        default=None,
        help="Diagnostic log level (default: warning)",
    )
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "flatlex.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
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
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    use_hex = False
    cfg_hex = _section(config, "lexer").get("hex")
    if isinstance(cfg_hex, bool):
        use_hex = cfg_hex
    if args.hex is not None:
        use_hex = args.hex

    output_format = "text"
    cfg_format = _section(config, "output").get("format")
    if cfg_format is not None:
        if cfg_format not in FORMATS:
            raise argparse.ArgumentTypeError(f"invalid output format in config: {cfg_format!r}")
        output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    log_level = "warning"
    cfg_level = _section(config, "log").get("level")
    if cfg_level is not None:
        if not isinstance(cfg_level, str) or cfg_level.lower() not in LEVELS:
            raise argparse.ArgumentTypeError(f"invalid log level in config: {cfg_level!r}")
        log_level = cfg_level.lower()
    if args.log_level is not None:
        log_level = args.log_level

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        use_hex=use_hex,
        output_format=output_format,
        strict=args.strict,
        log_level=log_level,
    )


def tokenize_file(options: CliOptions) -> str:
    """Read and tokenize a file, returning the rendered token dump.

    With ``options.strict`` the first UNKNOWN token raises LexError.
    """
    from flatlex.debug import dump_tokens, dump_tokens_json
    from flatlex.lexer import Lexer
    from flatlex.tokens import TokenKind

    source = options.input_file.read_text(encoding="utf-8")
    lexer = Lexer(source, use_hex=options.use_hex)
    tokens = []
    while True:
        tok = lexer.next_token()
        if options.strict and tok.kind is TokenKind.UNKNOWN:
            raise LexError(
                f"unknown character {tok.text!r}", lexer.position(tok.offset), lexer.source
            )
        tokens.append(tok)
        if tok.kind is TokenKind.END:
            break
    logger.info("%s: %d tokens", options.input_file, len(tokens))

    out = io.StringIO()
    if options.output_format == "json":
        dump_tokens_json(lexer, tokens, file=out)
    else:
        dump_tokens(lexer, tokens, file=out)
    return out.getvalue()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    configure_logging(options.log_level)

    try:
        result = tokenize_file(options)
    except LexError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(result, encoding="utf-8")
    else:
        sys.stdout.write(result)

    return 0
