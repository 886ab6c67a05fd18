"""Output formatting utilities for the CLI."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

import questionary
from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from soapts.cli.common.tui_style import QUESTIONARY_STYLE_CONFIRM
from soapts.core.translator import coerce

_THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "err": "bold red",
        "title": "bold cyan",
        "meta": "dim",
    }
)

console = Console(theme=_THEME)


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI messages and tables."""

    def _q_try(self, fn, *args, **kwargs):
        """Call questionary prompts and drop unsupported kwargs on older versions."""
        try:
            return fn(*args, **kwargs)
        except TypeError:
            for k in ("pointer", "checked_icon", "unchecked_icon", "auto_enter"):
                kwargs.pop(k, None)
            return fn(*args, **kwargs)

    def _q(self, message: str) -> str:
        """Prefix Questionary prompts to be SOAPTS consistent."""
        return f"[SOAPTS] {message}"

    def info(self, msg: str) -> None:
        """Print an info message."""
        console.print(f"[title]›[/] {msg}")

    @contextmanager
    def status(self, msg: str):
        """Show a transient status spinner while work is in progress."""
        with console.status(msg, spinner="dots"):
            yield

    def success(self, msg: str) -> None:
        """Print a success message."""
        console.print(f"[ok]✓[/] {msg}")

    def warn(self, msg: str) -> None:
        """Print a warning message."""
        console.print(f"[warn]⚠[/] {msg}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[err]✗[/] {msg}")

    def header(self, title: str) -> None:
        """Print a header message."""
        console.print(f"[title]{title}[/]")

    def kv(self, items: Mapping[str, Any]) -> None:
        """Print key-value pairs."""
        for k, v in items.items():
            console.print(f"[meta]{k}[/]: {v}")

    def confirm(self, message: str, *, default: bool = False) -> bool:
        """
        Ask the user for confirmation using a standardized Questionary prompt.

        Args:
            message: Confirmation question shown to the user.
            default: Default answer if the user just presses enter.

        Returns:
            True if the user confirms, False otherwise.
        """
        # Questionary renders `instruction=...` inline next to the echoed answer.
        console.print("[meta]Use y/n then Enter[/]")

        prompt = self._q_try(
            questionary.confirm,
            self._q(message),
            default=default,
            style=QUESTIONARY_STYLE_CONFIRM,
            qmark="✦",
            auto_enter=False,
            pointer="❯",
        )
        return bool(prompt.ask())

    def messages_table(self, messages: Iterable[Any], title: str = "Messages") -> None:
        """
        Expects objects with .name and .fields (like soapts.core.schema.MessageSpec)
        """
        t = Table(title=title, show_lines=False)
        t.add_column("Message", style="ok", no_wrap=True)
        t.add_column("Fields")

        for m in messages:
            fields = ", ".join(
                f"{f.name}{'' if f.required else '?'}: {coerce(f.type)}"
                for f in m.fields
            )
            t.add_row(m.name, fields or "[meta]-[/]")

        console.print(t)

    def operations_table(
        self, operations: Iterable[Any], title: str = "Operations"
    ) -> None:
        """
        Expects objects with .name .input_message .output_message
        (e.g. soapts.core.schema.OperationSpec)
        """
        t = Table(title=title, show_lines=False)
        t.add_column("Operation", style="ok", no_wrap=True)
        t.add_column("Input", style="meta")
        t.add_column("Output", style="meta")

        for op in operations:
            t.add_row(op.name, op.input_message, op.output_message)

        console.print(t)


out = Out()
