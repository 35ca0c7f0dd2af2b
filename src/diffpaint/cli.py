"""diffpaint CLI: colorize a diff read from standard input."""

from __future__ import annotations

import os
import sys
from typing import Optional

import typer
from rich.console import Console

from diffpaint import __version__
from diffpaint.output.pager import PagingMode

app = typer.Typer(
    name="diffpaint",
    help="Syntax-highlight diffs for the terminal.",
    add_completion=False,
)

console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        print(f"diffpaint {__version__}")
        raise typer.Exit()


def _list_themes() -> None:
    from diffpaint.config.schema import is_light_theme
    from diffpaint.highlighting.assets import HighlightingAssets

    for name in HighlightingAssets().theme_names():
        suffix = "  (light)" if is_light_theme(name) else ""
        print(f"{name}{suffix}")


def _describe(color) -> str:
    return f"#{color.red:02x}{color.green:02x}{color.blue:02x}"


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's exit flush cannot fail."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, ValueError):
        return  # not backed by a file descriptor
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


@app.command()
def main(
    theme: Optional[str] = typer.Option(
        None, "--theme", envvar="DIFFPAINT_THEME", help="Pygments style to highlight with"
    ),
    light: bool = typer.Option(
        False, "--light", help="Pick a default theme for a light terminal background"
    ),
    plus_color: Optional[str] = typer.Option(
        None, "--plus-color", envvar="DIFFPAINT_PLUS_COLOR", help="Background for added lines, e.g. #013b01"
    ),
    minus_color: Optional[str] = typer.Option(
        None, "--minus-color", envvar="DIFFPAINT_MINUS_COLOR", help="Background for removed lines, e.g. #3f0001"
    ),
    highlight_removed: bool = typer.Option(
        False, "--highlight-removed", help="Syntax-highlight removed lines too"
    ),
    width: Optional[int] = typer.Option(None, "--width", "-w", help="Display width (reserved)"),
    paging: PagingMode = typer.Option(PagingMode.AUTO, "--paging", help="When to use the pager"),
    pager: str = typer.Option("less", "--pager", envvar="DIFFPAINT_PAGER", help="Pager command"),
    list_themes: bool = typer.Option(False, "--list-themes", help="List available themes and exit"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print the resolved settings to stderr"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Read a diff on stdin and write it back with syntax highlighting."""
    from diffpaint.classifier.engine import delta
    from diffpaint.config.resolver import ConfigError, get_config
    from diffpaint.highlighting.assets import HighlightingAssets
    from diffpaint.output.pager import open_output

    if list_themes:
        _list_themes()
        raise typer.Exit(code=0)

    # --- Resolve config before touching input ---
    try:
        cfg = get_config(
            HighlightingAssets(),
            theme=theme,
            light=light,
            plus_color=plus_color,
            minus_color=minus_color,
            highlight_removed=highlight_removed,
            width=width,
            pager=pager,
        )
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.print(f"[dim]Theme: {cfg.theme_name}[/dim]")
        console.print(f"[dim]Plus color: {_describe(cfg.plus_color)}[/dim]")
        console.print(f"[dim]Minus color: {_describe(cfg.minus_color)}[/dim]")
        console.print(f"[dim]Paging: {paging.value} ({cfg.pager})[/dim]")

    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(errors="replace")

    # --- Run ---
    try:
        with open_output(paging, cfg.pager) as writer:
            delta(sys.stdin, cfg, writer)
    except BrokenPipeError:
        _silence_stdout()
        raise typer.Exit(code=1)
    except OSError as exc:
        console.print(f"[bold red]Output error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc
