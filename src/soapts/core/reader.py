"""Reading WSDL documents into verified service definitions.

Reading happens in two steps. The document is first parsed with lxml into a
generic attributed tree, where every element maps child local names to lists
of child trees and keeps its attributes under a reserved key. The tree is then
checked and normalized into a ServiceDefinition, so nothing downstream has to
guess at its shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lxml import etree

from soapts.core.declarations import is_identifier
from soapts.core.errors import SchemaParseError, SchemaReadError, SchemaShapeError
from soapts.core.schema import FieldSpec, MessageSpec, OperationSpec, ServiceDefinition
from soapts.core.translator import is_required

Tree = dict[str, Any]


@dataclass(frozen=True)
class ReaderOptions:
    """Settings for reading and parsing a schema document."""

    attr_key: str = "meta"
    encoding: str = "utf-8"


def _local(name: str) -> str:
    """Return the local part of a Clark-notation tag or attribute name."""
    return etree.QName(name).localname


def element_to_tree(element: etree._Element, attr_key: str = "meta") -> Tree:
    """
    Convert an lxml element into a generic attributed tree.

    Child elements are grouped by local name into lists, in document order.
    Attributes are stored by local name under `attr_key`. Comments,
    processing instructions and text content are dropped.
    """
    tree: Tree = {}
    if element.attrib:
        tree[attr_key] = {_local(k): v for k, v in element.attrib.items()}
    for child in element:
        if not isinstance(child.tag, str):
            continue
        tree.setdefault(_local(child.tag), []).append(
            element_to_tree(child, attr_key)
        )
    return tree


def parse_document(text: str, options: ReaderOptions | None = None) -> Tree:
    """
    Parse XML text into an attributed tree keyed by the root's local name.

    Raises:
        SchemaParseError: If the text is not well-formed XML.
    """
    options = options or ReaderOptions()
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(text.encode(options.encoding), parser=parser)
    except etree.XMLSyntaxError as exc:
        raise SchemaParseError(f"Schema document is not well-formed XML: {exc}") from exc
    return {_local(root.tag): element_to_tree(root, options.attr_key)}


def read_document(path: str | Path, options: ReaderOptions | None = None) -> Tree:
    """
    Read a schema document from disk and parse it into an attributed tree.

    Raises:
        SchemaReadError: If the file is missing, unreadable or not valid text.
        SchemaParseError: If the content is not well-formed XML.
    """
    options = options or ReaderOptions()
    try:
        text = Path(path).read_text(encoding=options.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaReadError(f"Cannot read schema document '{path}': {exc}") from exc
    return parse_document(text, options)


def _attrs(node: Tree, attr_key: str) -> dict[str, str]:
    return node.get(attr_key) or {}


def _required_attr(node: Tree, attr_key: str, name: str, where: str) -> str:
    value = _attrs(node, attr_key).get(name)
    if not value:
        raise SchemaShapeError(f"{where} is missing the '{name}' attribute.")
    return value


def _declared_name(node: Tree, attr_key: str, where: str) -> str:
    """Return a message or operation name that is usable as a TypeScript identifier."""
    name = _required_attr(node, attr_key, "name", where)
    if not is_identifier(name):
        raise SchemaShapeError(f"{where} has a name that is not a valid identifier: '{name}'.")
    return name


def _message_ref(node: Tree, attr_key: str, where: str) -> str:
    """Return the referenced message name of an operation input/output."""
    attrs = _attrs(node, attr_key)
    ref = attrs.get("message") or attrs.get("name")
    if not ref:
        raise SchemaShapeError(f"{where} does not reference a message.")
    return ref.rsplit(":", 1)[-1]


def _normalize_message(node: Tree, attr_key: str, index: int) -> MessageSpec:
    name = _declared_name(node, attr_key, f"Message #{index + 1}")
    fields = []
    for part_index, part in enumerate(node.get("part", [])):
        attrs = _attrs(part, attr_key)
        part_name = _required_attr(
            part, attr_key, "name", f"Part #{part_index + 1} of message '{name}'"
        )
        fields.append(
            FieldSpec(
                name=part_name,
                type=attrs.get("type") or attrs.get("element") or "",
                required=is_required(attrs.get("minOccurs")),
            )
        )
    return MessageSpec(name=name, fields=tuple(fields))


def _normalize_operation(node: Tree, attr_key: str, index: int) -> OperationSpec:
    name = _declared_name(node, attr_key, f"Operation #{index + 1}")
    refs = []
    for role in ("input", "output"):
        children = node.get(role)
        if not children:
            raise SchemaShapeError(f"Operation '{name}' has no {role} element.")
        refs.append(_message_ref(children[0], attr_key, f"The {role} of operation '{name}'"))
    return OperationSpec(name=name, input_message=refs[0], output_message=refs[1])


def normalize_definition(
    tree: Tree, options: ReaderOptions | None = None
) -> ServiceDefinition:
    """
    Verify an attributed tree and convert it into a ServiceDefinition.

    Only the first port type is read. A port type without operations is
    valid and yields no operations.

    Raises:
        SchemaShapeError: If the root is not `definitions`, no messages or
                          port types are declared, a message name repeats,
                          a message or operation name is not an identifier,
                          or a message, part or operation is missing
                          required attributes.
    """
    options = options or ReaderOptions()
    attr_key = options.attr_key

    definitions = tree.get("definitions")
    if not isinstance(definitions, dict):
        roots = ", ".join(sorted(tree)) or "nothing"
        raise SchemaShapeError(f"Expected a 'definitions' root element, found {roots}.")

    message_nodes = definitions.get("message")
    if not message_nodes:
        raise SchemaShapeError("Schema document declares no messages.")

    messages = tuple(
        _normalize_message(node, attr_key, i) for i, node in enumerate(message_nodes)
    )
    seen: set[str] = set()
    for m in messages:
        if m.name in seen:
            raise SchemaShapeError(f"Message '{m.name}' is declared more than once.")
        seen.add(m.name)

    port_types = definitions.get("portType")
    if not port_types:
        raise SchemaShapeError("Schema document declares no port types.")
    operation_nodes = port_types[0].get("operation", [])
    operations = tuple(
        _normalize_operation(node, attr_key, i) for i, node in enumerate(operation_nodes)
    )

    return ServiceDefinition(messages=messages, operations=operations)


def load_definition(
    path: str | Path, options: ReaderOptions | None = None
) -> ServiceDefinition:
    """Read, parse and verify a WSDL document in one step."""
    return normalize_definition(read_document(path, options), options)
