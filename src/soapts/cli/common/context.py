"""Application context management for the CLI."""

from dataclasses import dataclass
from pathlib import Path

from soapts.core.generate import GenerateOptions
from soapts.core.reader import ReaderOptions
from soapts.core.renderer import RenderOptions
from soapts.core.translator import BindingMode


@dataclass
class GenerateAppContext:
    """Application context holding the paths and options for one generate run."""

    wsdl: Path
    output: Path | None
    options: GenerateOptions


def build_generate_context(
    wsdl: Path,
    output: Path | None,
    *,
    binding: BindingMode = BindingMode.NAME,
    indent: int = 4,
) -> GenerateAppContext:
    """Build the generate context from CLI arguments.

    Args:
        wsdl: Path to the WSDL document.
        output: Target file, or None when printing to stdout.
        binding: Operation-to-message binding mode.
        indent: Number of spaces for interface members.

    Returns:
        GenerateAppContext: Context with explicit reader and render options.
    """
    options = GenerateOptions(
        binding=binding,
        reader=ReaderOptions(),
        render=RenderOptions(indent=" " * indent),
    )
    return GenerateAppContext(wsdl=wsdl, output=output, options=options)
