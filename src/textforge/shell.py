"""Interactive shell for editing a TextForge session."""

from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from textforge.clipboard import ClipboardWriter
from textforge.core.models import MODE_CATALOG, TransformMode
from textforge.core.session import Session
from textforge.core.statistics import quick_counts


COMMAND_PREFIX = ":"
TRUE_WORDS = {"on", "true", "yes", "1"}
FALSE_WORDS = {"off", "false", "no", "0"}

HELP_TEXT = {
    "mode ID": "Select a transformation mode",
    "modes": "List available modes",
    "auto [on|off]": "Toggle auto-apply (recompute on every change)",
    "apply": "Transform the input and record it in history",
    "swap": "Use the output as the new input",
    "clear": "Clear input and output",
    "append TEXT": "Add a line to the input",
    "show": "Show the current mode, input and output",
    "history": "List recent transformations",
    "load N": "Select the mode of history entry N",
    "copy": "Copy the output to the clipboard",
    "help": "Show this help",
    "quit": "Leave the session",
}


def summary_line(text: str) -> str:
    """Build the 'N words · N chars' line shown under an editor panel."""
    words, chars = quick_counts(text)
    return f"{words:,} words · {chars:,} chars"


def build_modes_table(selected: Optional[TransformMode] = None) -> Table:
    """Build a table of the mode catalog, marking the selected mode."""
    table = Table(title="Transformations")
    table.add_column("", no_wrap=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Label")
    table.add_column("Description")

    for info in MODE_CATALOG:
        marker = "▶ " if info.mode is selected else ""
        table.add_row(
            info.icon,
            f"{marker}{info.id}",
            escape(info.label),
            escape(info.description),
        )
    return table


class SessionShell:
    """Line-oriented front end for a Session.

    Plain lines replace the input text. Lines starting with ':' are
    commands (see HELP_TEXT).
    """

    prompt = "forge> "

    def __init__(
        self,
        session: Session,
        console: Optional[Console] = None,
        clipboard: Optional[ClipboardWriter] = None,
    ) -> None:
        self.session = session
        self.console = console or Console()
        self.clipboard = clipboard
        self._commands: dict[str, Callable[[str], bool]] = {
            "mode": self._cmd_mode,
            "modes": self._cmd_modes,
            "auto": self._cmd_auto,
            "apply": self._cmd_apply,
            "swap": self._cmd_swap,
            "clear": self._cmd_clear,
            "append": self._cmd_append,
            "show": self._cmd_show,
            "history": self._cmd_history,
            "load": self._cmd_load,
            "copy": self._cmd_copy,
            "help": self._cmd_help,
            "quit": self._cmd_quit,
            "exit": self._cmd_quit,
        }

    def run(self) -> None:
        """Read and handle lines until quit or end of input."""
        self.console.print(
            "[bold]TextForge[/bold] - type text to set the input, "
            "[cyan]:help[/cyan] for commands"
        )
        self._print_mode()

        while True:
            try:
                line = self.console.input(self.prompt)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break
            if not self.handle(line):
                break

    def handle(self, line: str) -> bool:
        """Handle one line of input.

        Returns:
            False when the shell should exit, True otherwise
        """
        if not line.startswith(COMMAND_PREFIX):
            if not line.strip():
                return True
            self.session.set_input(line)
            self._after_input_change()
            return True

        name, _, argument = line[len(COMMAND_PREFIX):].strip().partition(" ")
        command = self._commands.get(name.lower())
        if command is None:
            self.console.print(
                f"[red]Unknown command:[/red] {escape(name)} "
                f"(type [cyan]:help[/cyan])"
            )
            return True
        return command(argument.strip())

    # -- rendering ---------------------------------------------------------

    def _print_mode(self) -> None:
        info = self.session.mode_info
        auto = "on" if self.session.auto_apply else "off"
        self.console.print(
            f"{info.icon} [bold]{escape(info.label)}[/bold] - "
            f"{escape(info.description)} [dim](auto-apply {auto})[/dim]"
        )

    def _print_panel(self, title: str, text: str) -> None:
        self.console.print(
            Panel(
                Text(text),
                title=title,
                subtitle=summary_line(text),
                title_align="left",
                subtitle_align="right",
            )
        )

    def _print_output(self) -> None:
        self._print_panel("Output", self.session.output_text)

    def _after_input_change(self) -> None:
        if self.session.auto_apply:
            self._print_output()
        else:
            self.console.print(
                f"[dim]Input set ({summary_line(self.session.input_text)}). "
                f"Type :apply to transform.[/dim]"
            )

    # -- commands ----------------------------------------------------------

    def _cmd_mode(self, argument: str) -> bool:
        if not argument:
            self._print_mode()
            return True
        if not self.session.set_mode(argument):
            self.console.print(f"[red]Unknown mode:[/red] {escape(argument)}")
            return True
        self._print_mode()
        if self.session.auto_apply:
            self._print_output()
        return True

    def _cmd_modes(self, argument: str) -> bool:
        self.console.print(build_modes_table(self.session.selected_mode))
        return True

    def _cmd_auto(self, argument: str) -> bool:
        value = argument.lower()
        if not value:
            enabled = not self.session.auto_apply
        elif value in TRUE_WORDS:
            enabled = True
        elif value in FALSE_WORDS:
            enabled = False
        else:
            self.console.print(f"[red]Usage:[/red] {escape(':auto [on|off]')}")
            return True

        self.session.set_auto_apply(enabled)
        self.console.print(f"Auto-apply {'on' if enabled else 'off'}")
        return True

    def _cmd_apply(self, argument: str) -> bool:
        if not self.session.input_text:
            self.console.print("[yellow]Nothing to transform:[/yellow] input is empty")
        self.session.apply()
        self._print_output()
        return True

    def _cmd_swap(self, argument: str) -> bool:
        self.session.swap()
        self._print_panel("Input", self.session.input_text)
        return True

    def _cmd_clear(self, argument: str) -> bool:
        self.session.clear()
        self.console.print("Cleared input and output")
        return True

    def _cmd_append(self, argument: str) -> bool:
        current = self.session.input_text
        self.session.set_input(f"{current}\n{argument}" if current else argument)
        self._after_input_change()
        return True

    def _cmd_show(self, argument: str) -> bool:
        self._print_mode()
        self._print_panel("Input", self.session.input_text)
        self._print_output()
        return True

    def _cmd_history(self, argument: str) -> bool:
        history = self.session.history
        if not history:
            self.console.print("[dim]No history yet[/dim]")
            return True

        table = Table(title=f"Recent Transformations ({len(history)})")
        table.add_column("#", justify="right")
        table.add_column("Mode", no_wrap=True)
        table.add_column("Input")
        table.add_column("Time", no_wrap=True)
        for index, entry in enumerate(history, start=1):
            table.add_row(
                str(index),
                f"{entry.info.icon} {escape(entry.info.label)}",
                escape(entry.input_preview),
                entry.applied_at,
            )
        self.console.print(table)
        return True

    def _cmd_load(self, argument: str) -> bool:
        history = self.session.history
        try:
            index = int(argument)
        except ValueError:
            self.console.print("[red]Usage:[/red] :load N")
            return True
        if not 1 <= index <= len(history):
            self.console.print(f"[red]No history entry {index}[/red]")
            return True

        self.session.load_mode(history[index - 1])
        self._print_mode()
        return True

    def _cmd_copy(self, argument: str) -> bool:
        output = self.session.output_text
        if not output:
            self.console.print("[yellow]Nothing to copy:[/yellow] output is empty")
            return True
        if self.clipboard is None:
            self.console.print("[yellow]Clipboard unavailable[/yellow]")
            return True

        if self.clipboard.copy(output):
            self.console.print("[green]Copied output to clipboard[/green]")
        else:
            self.console.print("[yellow]Copy failed[/yellow]")
        return True

    def _cmd_help(self, argument: str) -> bool:
        table = Table(show_header=False, box=None)
        for usage, description in HELP_TEXT.items():
            table.add_row(f"[cyan]{COMMAND_PREFIX}{escape(usage)}[/cyan]", description)
        self.console.print(table)
        return True

    def _cmd_quit(self, argument: str) -> bool:
        return False
