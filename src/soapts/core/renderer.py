"""Rendering of abstract declarations into TypeScript source text."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Iterable

from soapts.core.declarations import (
    Declaration,
    FuncDecl,
    TypeDecl,
    TypeRef,
    is_identifier,
)


@dataclass(frozen=True)
class RenderOptions:
    """Formatting settings for generated TypeScript."""

    indent: str = "    "
    newline: str = "\n"


def render_type_ref(ref: TypeRef) -> str:
    """Render a type reference such as `Promise<GetQuoteResponse>`."""
    if not ref.args:
        return ref.name
    args = ", ".join(render_type_ref(a) for a in ref.args)
    return f"{ref.name}<{args}>"


def _property_name(name: str) -> str:
    """Quote property names that are not valid identifiers."""
    return name if is_identifier(name) else json.dumps(name)


def _modifiers(decl: Declaration) -> str:
    return "".join(f"{m.value} " for m in decl.modifiers)


def render_type_decl(decl: TypeDecl, options: RenderOptions) -> list[str]:
    """Render an interface declaration as lines."""
    lines = [f"{_modifiers(decl)}interface {decl.name} {{"]
    for member in decl.members:
        marker = "?" if member.optional else ""
        lines.append(
            f"{options.indent}{_property_name(member.name)}{marker}: "
            f"{render_type_ref(member.type)};"
        )
    lines.append("}")
    return lines


def render_func_decl(decl: FuncDecl) -> list[str]:
    """Render a body-less function signature as a single line."""
    params = ", ".join(f"{p.name}: {render_type_ref(p.type)}" for p in decl.params)
    return [
        f"{_modifiers(decl)}function {decl.name}({params}): "
        f"{render_type_ref(decl.returns)};"
    ]


def render(declarations: Iterable[Declaration], options: RenderOptions | None = None) -> str:
    """
    Render declarations to TypeScript source, one after another.

    Returns an empty string when there is nothing to render; otherwise the
    text ends with a single newline.
    """
    options = options or RenderOptions()
    lines: list[str] = []
    for decl in declarations:
        if isinstance(decl, TypeDecl):
            lines.extend(render_type_decl(decl, options))
        elif isinstance(decl, FuncDecl):
            lines.extend(render_func_decl(decl))
        else:
            raise TypeError(f"Unsupported declaration: {type(decl).__name__}")
    if not lines:
        return ""
    return options.newline.join(lines) + options.newline
