"""Translation of service definitions into abstract declarations.

This module maps messages to interface declarations and operations to async
function signatures. All functions are pure: the same input always yields
structurally identical declarations, which keeps generated output
reproducible across runs.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable

from soapts.core.declarations import (
    Declaration,
    FuncDecl,
    Parameter,
    PropertySignature,
    TypeDecl,
    TypeRef,
)
from soapts.core.errors import MessageLookupError
from soapts.core.schema import MessageSpec, PrimitiveType, ServiceDefinition

FALLBACK_TYPE = "String"
PROMISE_TYPE = "Promise"
INPUT_PARAMETER = "input"

PRIMITIVE_TYPES: dict[PrimitiveType, str] = {
    PrimitiveType.BOOLEAN: "Boolean",
    PrimitiveType.DOUBLE: "Number",
    PrimitiveType.FLOAT: "Number",
    PrimitiveType.INT: "Number",
    PrimitiveType.SHORT: "Number",
    PrimitiveType.SIGNED_INT: "Number",
    PrimitiveType.STRING: "String",
    PrimitiveType.UNSIGNED_INT: "Number",
    PrimitiveType.UNSIGNED_SHORT: "Number",
    PrimitiveType.DATE_TIME: "Date",
}


class BindingMode(str, Enum):
    """How operations find their input and output declarations."""

    NAME = "name"
    POSITIONAL = "positional"


def _local_name(qualified: str) -> str:
    """Strip a namespace prefix (`xsd:int` -> `int`)."""
    return qualified.rsplit(":", 1)[-1].strip()


def coerce(schema_type: str | PrimitiveType) -> str:
    """
    Return the TypeScript type name for a schema primitive.

    The namespace prefix is ignored, so `xsd:int`, `xs:int` and `int` are
    equivalent. Anything outside the primitive table, including complex
    types and empty strings, maps to `String`.
    """
    if isinstance(schema_type, PrimitiveType):
        return PRIMITIVE_TYPES[schema_type]
    try:
        primitive = PrimitiveType(_local_name(schema_type))
    except ValueError:
        return FALLBACK_TYPE
    return PRIMITIVE_TYPES[primitive]


def is_required(min_occurs: str | None) -> bool:
    """
    Derive whether a part is required from its `minOccurs` attribute.

    Absent means required (WSDL defaults minOccurs to 1). A present value is
    stripped and parsed as a number; only values greater than zero are
    required. Zero, negatives, empty or non-numeric text and NaN are optional.
    """
    if min_occurs is None:
        return True
    try:
        value = float(min_occurs.strip())
    except ValueError:
        return False
    if math.isnan(value):
        return False
    return value > 0


def build_type_declaration(message: MessageSpec) -> TypeDecl:
    """Build the exported interface declaration for a message."""
    members = tuple(
        PropertySignature(
            name=f.name,
            type=TypeRef(coerce(f.type)),
            optional=not f.required,
        )
        for f in message.fields
    )
    return TypeDecl(name=message.name, members=members)


def build_function_signature(
    name: str,
    input_decl: TypeDecl,
    output_decl: TypeDecl,
) -> FuncDecl:
    """
    Build an exported async function signature for an operation.

    The signature takes a single `input` parameter typed as the input
    interface and returns a Promise of the output interface. No body is
    generated.
    """
    return FuncDecl(
        name=name,
        params=(Parameter(name=INPUT_PARAMETER, type=TypeRef(input_decl.name)),),
        returns=TypeRef(PROMISE_TYPE, (TypeRef(output_decl.name),)),
    )


def _lookup(
    by_name: dict[str, TypeDecl], message_name: str, operation: str, role: str
) -> TypeDecl:
    """Find the declaration for a message referenced by an operation."""
    try:
        return by_name[message_name]
    except KeyError as exc:
        raise MessageLookupError(
            f"Operation '{operation}' references unknown {role} message "
            f"'{message_name}'."
        ) from exc


def _positional_pair(type_decls: list[TypeDecl]) -> tuple[TypeDecl, TypeDecl]:
    """Return the (first, second) declared messages used by legacy binding."""
    if len(type_decls) < 2:
        raise MessageLookupError(
            "Positional binding needs at least two messages, "
            f"found {len(type_decls)}."
        )
    return type_decls[0], type_decls[1]


def translate(
    definition: ServiceDefinition,
    *,
    binding: BindingMode = BindingMode.NAME,
    operations: Iterable[str] | None = None,
) -> list[Declaration]:
    """
    Translate a service definition into an ordered list of declarations.

    Interfaces for every message come first, in document order, followed by
    one function signature per operation.

    Args:
        definition: Verified service definition.
        binding: NAME matches each operation's declared message names;
                 POSITIONAL binds every operation to the first two messages.
        operations: Optional subset of operation names to emit. None emits all.

    Returns:
        Type declarations followed by function signatures.

    Raises:
        MessageLookupError: If an operation cannot be bound to its messages.
    """
    type_decls = [build_type_declaration(m) for m in definition.messages]
    by_name = {d.name: d for d in type_decls}
    wanted = set(operations) if operations is not None else None

    func_decls: list[FuncDecl] = []
    for op in definition.operations:
        if wanted is not None and op.name not in wanted:
            continue
        if binding is BindingMode.POSITIONAL:
            input_decl, output_decl = _positional_pair(type_decls)
        else:
            input_decl = _lookup(by_name, op.input_message, op.name, "input")
            output_decl = _lookup(by_name, op.output_message, op.name, "output")
        func_decls.append(build_function_signature(op.name, input_decl, output_decl))

    return [*type_decls, *func_decls]
