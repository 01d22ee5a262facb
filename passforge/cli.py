"""CLI for passforge: generate, strength, history, config."""

import argparse
import logging
import sys

from rich import print
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .config import (
    DEFAULTS,
    coerce_value,
    config_to_generator,
    load_config,
    reset_config,
    save_config,
)
from .errors import PassforgeError
from .generator import generate, generate_many, validate
from .history import load_history, save_history
from .score import estimate_entropy, score_password


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _strength_line(pw: str) -> str:
    s = score_password(pw)
    return f"[{s['color']}]{s['label']}[/{s['color']}]"


def cmd_generate(args):
    cfg = load_config()
    # explicit flags win over saved settings
    if args.length is not None:
        cfg["length"] = args.length
    if args.no_upper:
        cfg["upper"] = False
    if args.no_lower:
        cfg["lower"] = False
    if args.no_digits:
        cfg["digits"] = False
    if args.no_special:
        cfg["special"] = False
    if args.exclude_ambiguous:
        cfg["exclude_ambiguous"] = True
    copies = args.copies if args.copies is not None else cfg["copies"]

    gen_config = config_to_generator(cfg)
    if copies == 1:
        passwords = [generate(gen_config)]
    else:
        passwords = generate_many(gen_config, copies)

    for i, pw in enumerate(passwords):
        print(f"[bold green]Password #{i+1}:[/bold green] {pw}  {_strength_line(pw)}")
    print(f"[dim]~{estimate_entropy(gen_config):.1f} bits of entropy[/dim]")

    if copies == 1 and cfg["history_enabled"] and not args.no_history:
        history = load_history(max_size=cfg["history_size"])
        history.add(passwords[0])
        save_history(history)


def cmd_strength(args):
    result = score_password(args.password)
    color = result["color"]
    filled = result["score"] // 5
    bar = f"[{color}]{'█' * filled}[/{color}]{'░' * (20 - filled)}"
    print(Panel(f"{bar}\nScore: {result['score']} / 100", title=f"[{color}]{result['label']}[/{color}]"))


def cmd_history(args):
    cfg = load_config()
    history = load_history(max_size=cfg["history_size"])
    if args.clear:
        history.clear()
        save_history(history)
        print("[green]History cleared![/green]")
        return
    if not len(history):
        print("[yellow]No passwords generated yet.[/yellow]")
        return
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", width=4)
    table.add_column("Password")
    table.add_column("Generated")
    for i, e in enumerate(history):
        table.add_row(str(i), e.password, e.timestamp)
    print(table)


def cmd_config_show(args):
    cfg = load_config()
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Setting")
    table.add_column("Value")
    for key in DEFAULTS:
        table.add_row(key, str(cfg[key]))
    print(table)


def cmd_config_set(args):
    cfg = load_config()
    try:
        cfg[args.key] = coerce_value(args.key, args.value)
    except KeyError:
        raise PassforgeError(f"unknown setting: {args.key}") from None
    except ValueError as e:
        raise PassforgeError(str(e)) from e
    # refuse to save settings that can't generate anything
    validate(config_to_generator(cfg))
    if cfg["copies"] < 1 or cfg["history_size"] < 1:
        raise PassforgeError(f"{args.key} must be at least 1")
    save_config(cfg)
    print(f"[green]{args.key} = {cfg[args.key]}[/green]")


def cmd_config_reset(args):
    reset_config()
    print("[green]Settings reset to defaults.[/green]")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passforge")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, help="Password length")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--no-special", "--no-symbols", dest="no_special", action="store_true",
                     help="Disable special characters")
    gen.add_argument("--exclude-ambiguous", action="store_true", help="Leave out 0 O 1 l I")
    gen.add_argument("--copies", type=int, help="How many passwords to generate")
    gen.add_argument("--no-history", action="store_true", help="Don't record the password in history")
    gen.set_defaults(func=cmd_generate)

    st = sub.add_parser("strength", help="Rate a password")
    st.add_argument("password", type=str, help="Password to rate (wrap in quotes)")
    st.set_defaults(func=cmd_strength)

    hi = sub.add_parser("history", help="Show recently generated passwords")
    hi.add_argument("--clear", action="store_true", help="Clear the history")
    hi.set_defaults(func=cmd_history)

    c = sub.add_parser("config", help="Show or change saved settings")
    csub = c.add_subparsers(dest="ccmd", required=True)
    c_show = csub.add_parser("show", help="Show settings")
    c_show.set_defaults(func=cmd_config_show)
    c_set = csub.add_parser("set", help="Change a setting")
    c_set.add_argument("key", choices=list(DEFAULTS))
    c_set.add_argument("value")
    c_set.set_defaults(func=cmd_config_set)
    c_reset = csub.add_parser("reset", help="Restore default settings")
    c_reset.set_defaults(func=cmd_config_reset)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    try:
        args.func(args)
    except PassforgeError as e:
        print(f"[red]{e}[/red]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
