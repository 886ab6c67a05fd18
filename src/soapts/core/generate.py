"""End-to-end generation pipeline.

Reading, translation, rendering and writing run strictly one after another.
Any failure aborts the run before the output file is touched, so a failed
generation never leaves partial output behind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from soapts.core.errors import OutputWriteError
from soapts.core.reader import ReaderOptions, load_definition
from soapts.core.renderer import RenderOptions, render
from soapts.core.schema import ServiceDefinition
from soapts.core.translator import BindingMode, translate

DEFAULT_OUTPUT = Path("soap-types.ts")


@dataclass(frozen=True)
class GenerateOptions:
    """Explicit configuration for one generation run."""

    binding: BindingMode = BindingMode.NAME
    reader: ReaderOptions = field(default_factory=ReaderOptions)
    render: RenderOptions = field(default_factory=RenderOptions)


@dataclass(frozen=True)
class GenerateResult:
    """Outcome of a generation run."""

    definition: ServiceDefinition
    text: str
    output: Path | None = None
    interfaces: int = 0
    functions: int = 0


def generate_text(
    definition: ServiceDefinition,
    options: GenerateOptions | None = None,
    *,
    operations: Iterable[str] | None = None,
) -> tuple[str, int, int]:
    """Translate and render a definition, returning (text, interfaces, functions)."""
    options = options or GenerateOptions()
    declarations = translate(definition, binding=options.binding, operations=operations)
    functions = len(declarations) - len(definition.messages)
    return render(declarations, options.render), len(definition.messages), functions


def write_output(text: str, output_path: str | Path) -> Path:
    """Write rendered text as UTF-8 and return the path written."""
    path = Path(output_path)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"Cannot write output '{path}': {exc}") from exc
    return path


def generate(
    input_path: str | Path,
    output_path: str | Path | None = DEFAULT_OUTPUT,
    options: GenerateOptions | None = None,
    *,
    operations: Iterable[str] | None = None,
) -> GenerateResult:
    """
    Generate TypeScript declarations for a WSDL document.

    Args:
        input_path: Path to the WSDL document.
        output_path: Where to write the text. None skips writing.
        options: Binding, reader and render settings.
        operations: Optional subset of operation names to emit.

    Returns:
        A GenerateResult with the rendered text and the written path.

    Raises:
        SoapTsError: On read, parse, shape or binding failures. The output
                     file is not written in that case.
    """
    options = options or GenerateOptions()
    definition = load_definition(input_path, options.reader)
    text, interfaces, functions = generate_text(
        definition, options, operations=operations
    )

    written = write_output(text, output_path) if output_path is not None else None

    return GenerateResult(
        definition=definition,
        text=text,
        output=written,
        interfaces=interfaces,
        functions=functions,
    )
