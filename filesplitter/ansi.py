"""Colored console output.

Every helper takes ``quiet`` explicitly; warnings and errors ignore it.
Rich honors NO_COLOR and dumb terminals on its own.
"""
from rich.console import Console
from rich.panel import Panel

from .constants import BANNER

_console = Console(highlight=False)
_err_console = Console(stderr=True, highlight=False)


def _emit(console: Console, msg: str, style: str) -> None:
    console.print(msg, style=style, markup=False, emoji=False, soft_wrap=True)


def info(msg: str, quiet: bool = False) -> None:
    if not quiet:
        _emit(_console, f"✅ {msg}", "green")


def ok(msg: str, quiet: bool = False) -> None:
    if not quiet:
        _emit(_console, f"🎯 {msg}", "cyan")


def warn(msg: str) -> None:
    _emit(_console, f"⚠️  {msg}", "yellow")


def err(msg: str) -> None:
    _emit(_err_console, f"❌ {msg}", "red")


def banner(quiet: bool = False) -> None:
    if not quiet:
        _console.print(Panel.fit(BANNER, style="cyan", border_style="cyan"))
