"""Command-line interface for TextForge."""

from typing import Optional

import typer
from rich.console import Console

from textforge import __version__
from textforge.clipboard import get_clipboard
from textforge.config import get_settings
from textforge.core.models import TransformMode, UnknownModeError, require_mode
from textforge.core.session import Session
from textforge.core.transformer import transform
from textforge.log import setup_logging
from textforge.shell import SessionShell, build_modes_table

app = typer.Typer(
    name="textforge",
    help="Transform text between cases, cleanups and statistics.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"TextForge v{__version__}")
        raise typer.Exit()


def parse_mode(value: Optional[str]) -> TransformMode:
    """Resolve a --mode value, falling back to the configured default."""
    try:
        return require_mode(value or get_settings().default_mode)
    except UnknownModeError as e:
        raise typer.BadParameter(str(e), param_hint="'--mode'")


def read_input(text: Optional[str]) -> str:
    """Get input text from the argument or, when absent or '-', from stdin."""
    if text is not None and text != "-":
        return text

    stream = typer.get_text_stream("stdin")
    if stream.isatty():
        raise typer.BadParameter(
            "No text given. Pass TEXT or pipe text on standard input.",
            param_hint="'TEXT'",
        )
    data = stream.read()
    # Drop the newline most shells append to piped text
    return data[:-1] if data.endswith("\n") else data


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Transform text between cases, cleanups and statistics.

    Examples:

        textforge transform "Hello World" --mode snakecase

        echo "some text" | textforge transform -m titlecase

        textforge modes

        textforge session --auto
    """


@app.command("transform")
def transform_command(
    text: Optional[str] = typer.Argument(
        None,
        help="Text to transform (reads standard input when omitted or '-')",
    ),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Transformation mode (default: uppercase). See 'textforge modes'.",
    ),
    copy: bool = typer.Option(
        False,
        "--copy",
        "-c",
        help="Also copy the result to the clipboard",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """Transform TEXT with a single mode and print the result."""
    setup_logging("DEBUG" if verbose else None)

    selected = parse_mode(mode)
    source = read_input(text)
    result = transform(source, selected)
    typer.echo(result)

    if copy:
        clipboard = get_clipboard()
        if clipboard is None:
            err_console.print("[yellow]Warning:[/yellow] No clipboard command available")
            raise typer.Exit(1)
        if not clipboard.copy(result):
            err_console.print("[yellow]Warning:[/yellow] Failed to copy to clipboard")
            raise typer.Exit(1)
        if verbose:
            err_console.print("[green]Copied to clipboard[/green]")


@app.command("modes")
def modes_command() -> None:
    """List the available transformation modes."""
    console.print(build_modes_table())


@app.command("session")
def session_command(
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Initially selected mode",
    ),
    auto: Optional[bool] = typer.Option(
        None,
        "--auto/--no-auto",
        help="Recompute the output on every input or mode change",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """Start an interactive editing session."""
    setup_logging("DEBUG" if verbose else None)

    session = Session(mode=parse_mode(mode), auto_apply=auto)
    shell = SessionShell(session, console=console, clipboard=get_clipboard())
    shell.run()


if __name__ == "__main__":
    app()
