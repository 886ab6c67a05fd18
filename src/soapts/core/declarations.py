"""Neutral declaration model produced by the translator.

Declarations describe TypeScript interfaces and function signatures without
tying them to a particular printer. The renderer is the only consumer that
knows how they look as text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_identifier(name: str) -> bool:
    """Return True if name can be used unquoted as a TypeScript identifier."""
    return bool(_IDENTIFIER.match(name))


class Modifier(str, Enum):
    """Declaration modifiers, rendered in the order they are listed here."""

    EXPORT = "export"
    ASYNC = "async"


@dataclass(frozen=True)
class TypeRef:
    """Reference to a named type, optionally with type arguments."""

    name: str
    args: tuple[TypeRef, ...] = ()


@dataclass(frozen=True)
class PropertySignature:
    """One member of an interface."""

    name: str
    type: TypeRef
    optional: bool = False


@dataclass(frozen=True)
class Parameter:
    """One function parameter."""

    name: str
    type: TypeRef


@dataclass(frozen=True)
class TypeDecl:
    """An interface declaration with ordered members."""

    name: str
    members: tuple[PropertySignature, ...] = ()
    modifiers: tuple[Modifier, ...] = (Modifier.EXPORT,)


@dataclass(frozen=True)
class FuncDecl:
    """A function signature without a body."""

    name: str
    params: tuple[Parameter, ...]
    returns: TypeRef
    modifiers: tuple[Modifier, ...] = (Modifier.EXPORT, Modifier.ASYNC)


Declaration = Union[TypeDecl, FuncDecl]
