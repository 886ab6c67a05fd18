"""Core domain models for SOAP service definitions.

These models represent the parts of a WSDL document that soapts understands
in a simple, immutable form. They are intentionally free of XML parser types
and CLI concerns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PrimitiveType(str, Enum):
    """Schema primitive names that map onto a TypeScript type."""

    BOOLEAN = "boolean"
    DOUBLE = "double"
    FLOAT = "float"
    INT = "int"
    SHORT = "short"
    SIGNED_INT = "signedInt"
    STRING = "string"
    UNSIGNED_INT = "unsignedInt"
    UNSIGNED_SHORT = "unsignedShort"
    DATE_TIME = "dateTime"


@dataclass(frozen=True)
class FieldSpec:
    """
    One part of a message.

    Attributes:
        name: Field name as declared by the part.
        type: Schema type as written in the document (e.g. `xsd:float`).
        required: False only when the part declares a zero minimum occurrence.
    """

    name: str
    type: str
    required: bool = True


@dataclass(frozen=True)
class MessageSpec:
    """A named request or response payload with its fields in document order."""

    name: str
    fields: tuple[FieldSpec, ...] = ()


@dataclass(frozen=True)
class OperationSpec:
    """A callable service method referring to its input and output messages."""

    name: str
    input_message: str
    output_message: str


@dataclass(frozen=True)
class ServiceDefinition:
    """Verified content of a WSDL document: messages and first port type operations."""

    messages: tuple[MessageSpec, ...]
    operations: tuple[OperationSpec, ...] = ()

    def message_names(self) -> list[str]:
        """Return declared message names in document order."""
        return [m.name for m in self.messages]
