"""Exit handling utilities for the CLI."""

from typing import NoReturn

import typer
from rich.markup import escape

from soapts.cli.common.output import out


def ok_exit(msg: str | None = None) -> NoReturn:
    """Exit successfully with an optional informational message."""
    if msg:
        out.info(msg)
    raise typer.Exit(0)


def exit_from_exc(exc: Exception, *, message: str | None = None, code: int = 1) -> NoReturn:
    """
    Print an error message and exit with a given code, chaining the cause.

    Uses the exception text when no message is given. Exception text is
    escaped so paths and brackets are not read as Rich markup.
    """
    out.error(message or escape(str(exc)))
    raise typer.Exit(code) from exc
