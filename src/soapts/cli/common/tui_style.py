"""Questionary / prompt_toolkit styles for soapts prompts.

Both prompts share one muted base palette. The operation picker highlights
choices in the same green used for `ok` console output, and the overwrite
confirmation uses the `warn` yellow, since it guards a destructive write.
"""

from __future__ import annotations

from prompt_toolkit.styles import Style

_MUTED = "ansibrightblack"

_BASE = {
    "separator": _MUTED,
    "instruction": _MUTED,
    "disabled": _MUTED,
    "error": "bold ansired",
}


def _prompt_style(accent: str, **extra: str) -> Style:
    """Build a prompt style with `accent` on the question, answer and cursor."""
    rules = dict(_BASE)
    rules.update(
        {
            "question": "bold ansibrightcyan",
            "answer": f"bold {accent}",
            "pointer": f"bold {accent}",
            "highlighted": f"bold {accent}",
        }
    )
    rules.update(extra)
    return Style.from_dict(rules)


QUESTIONARY_STYLE_SELECT = _prompt_style(
    "ansibrightgreen",
    selected="ansibrightgreen",
    checkbox=_MUTED,
    **{"checkbox-selected": "bold ansibrightgreen"},
)

QUESTIONARY_STYLE_CONFIRM = _prompt_style("ansibrightyellow")
