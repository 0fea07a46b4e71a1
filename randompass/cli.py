"""CLI for randompass: generate passwords and manage saved defaults (generate, config show, config set)."""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .config import DEFAULTS, config_path, load_config, set_setting
from .errors import ValidationError
from .export import to_csv, to_json
from .generator import generate
from .models import GenerationRequest
from .storage import atomic_write_text

logger = logging.getLogger(__name__)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def setup_logging(level: str) -> None:
    pkg_logger = logging.getLogger("randompass")
    pkg_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        pkg_logger.addHandler(
            RichHandler(console=err_console, show_time=False, show_path=False, markup=False)
        )


def _error(msg: str) -> int:
    err_console.print(f"[red]Error: {escape(msg)}[/red]")
    return 2


def _print_output(output, exportable: bool, as_json: bool) -> None:
    if exportable:
        sys.stdout.write(to_csv(output))
    elif as_json:
        sys.stdout.write(to_json(output) + "\n")
    elif isinstance(output, str):
        console.print(Text(output), soft_wrap=True)
    else:
        table = Table(show_header=True, header_style="bold green")
        table.add_column("Name")
        table.add_column("Password", no_wrap=True)
        for name, pw in output.items():
            table.add_row(name, Text(pw))
        console.print(table)


def cmd_generate(args) -> int:
    cfg = load_config()
    count = args.count if args.count is not None else cfg["count"]
    length = args.length if args.length is not None else cfg["length"]
    specials = args.specials if args.specials is not None else cfg["specials"]
    exportable = args.exportable or bool(cfg["exportable"])

    request = GenerationRequest.from_exclusions(
        count=count,
        length=length,
        exclude_uppercase=args.exclude_uppercase,
        exclude_lowercase=args.exclude_lowercase,
        exclude_numbers=args.exclude_numbers,
        exclude_specials=args.exclude_specials,
        specials=specials,
    )
    try:
        result = generate(request, exportable=exportable)
    except ValidationError as e:
        return _error(str(e))

    for w in result.warnings:
        logger.warning(w)

    if args.output:
        text = to_csv(result.output) if exportable else to_json(result.output) + "\n"
        atomic_write_text(args.output, text)
        err_console.print(f"[green]Wrote {request.count} password(s) to:[/green] {escape(args.output)}")
    else:
        _print_output(result.output, exportable, args.json)
    return 0


# Config subcommands

def cmd_config_show(args) -> int:
    cfg = load_config()
    table = Table(show_header=True, header_style="bold cyan", title=escape(config_path()))
    table.add_column("Setting")
    table.add_column("Value")
    for key in DEFAULTS:
        table.add_row(key, Text(repr(cfg[key])))
    console.print(table)
    return 0


def cmd_config_set(args) -> int:
    try:
        cfg = set_setting(args.key, args.value)
    except ValidationError as e:
        return _error(str(e))
    console.print(f"[green]Saved[/green] {args.key} = {escape(repr(cfg[args.key]))}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="randompass")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        type=str.upper,
        help="Logging verbosity (diagnostics go to stderr)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--count", "-c", type=int, help="How many passwords to generate (default 1)")
    gen.add_argument("--length", "-l", type=int, help="Password length, at least 6 (default 16)")
    gen.add_argument("--exportable", action="store_true", help="Emit numbered records as CSV")
    gen.add_argument("--exclude-uppercase", action="store_true", help="Disable uppercase letters")
    gen.add_argument("--exclude-lowercase", action="store_true", help="Disable lowercase letters")
    gen.add_argument("--exclude-numbers", action="store_true", help="Disable digits")
    gen.add_argument("--exclude-specials", action="store_true", help="Disable special characters")
    gen.add_argument("--specials", type=str, help="Only use these special characters")
    gen.add_argument("--json", action="store_true", help="Print the result as JSON")
    gen.add_argument("--output", "-o", type=str, help="Write the result to a file instead of stdout")
    gen.set_defaults(func=cmd_generate)

    cfg = sub.add_parser("config", help="Show or change saved defaults")
    csub = cfg.add_subparsers(dest="ccmd", required=True)

    c_show = csub.add_parser("show", help="Show the effective defaults")
    c_show.set_defaults(func=cmd_config_show)

    c_set = csub.add_parser("set", help="Change one default")
    c_set.add_argument("key", choices=list(DEFAULTS), help="Setting name")
    c_set.add_argument("value", type=str, help="New value (empty string resets specials)")
    c_set.set_defaults(func=cmd_config_set)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
