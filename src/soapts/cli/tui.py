"""Terminal UI utilities for soapts."""

from __future__ import annotations

import questionary

from soapts.cli.common.tui_style import QUESTIONARY_STYLE_SELECT
from soapts.core.schema import OperationSpec

_MAX_OPERATION_NAME_WIDTH = 64


def _truncate(text: str, max_len: int) -> str:
    """Return text capped at max_len characters using an ASCII ellipsis."""
    if max_len <= 3 or len(text) <= max_len:
        return text[:max_len]
    return f"{text[: max_len - 3]}..."


def _operation_choice_title(op: OperationSpec, *, name_width: int) -> str:
    """Format one operation as `<name>  (<input> -> <output>)` with aligned messages."""
    short_name = _truncate(op.name, _MAX_OPERATION_NAME_WIDTH)
    return f"{short_name.ljust(name_width)}  ({op.input_message} -> {op.output_message})"


def select_operations(operations: list[OperationSpec]) -> list[OperationSpec]:
    """Display a checkbox prompt to select operations from a list.

    Args:
        operations: Operations declared by the service definition.

    Returns:
        The selected operations, or an empty list if none selected.
    """
    shown_names = [_truncate(op.name, _MAX_OPERATION_NAME_WIDTH) for op in operations]
    name_width = max((len(name) for name in shown_names), default=0)

    choices = [
        questionary.Choice(
            title=_operation_choice_title(op, name_width=name_width),
            value=op,
            checked=True,
        )
        for op in operations
    ]

    return (
        questionary.checkbox(
            "Select operations:",
            choices=choices,
            style=QUESTIONARY_STYLE_SELECT,
        ).ask()
        or []
    )
