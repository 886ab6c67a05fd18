"""Common CLI options for the CLI."""

import typer

from soapts.core.generate import DEFAULT_OUTPUT
from soapts.core.translator import BindingMode

WsdlArg = typer.Argument(
    ...,
    help="Path to the WSDL service definition",
    show_default=False,
)

OutputOpt = typer.Option(
    DEFAULT_OUTPUT,
    "--output",
    "-o",
    help="File to write the generated TypeScript to",
)

BindingOpt = typer.Option(
    BindingMode.NAME,
    "--binding",
    "-b",
    help="Bind operations to messages by declared name, or to the first two messages (positional)",
    case_sensitive=False,
)

IndentOpt = typer.Option(
    4,
    "--indent",
    min=0,
    help="Number of spaces used to indent interface members",
)

StdoutOpt = typer.Option(
    False,
    "--stdout",
    help="Print the generated TypeScript instead of writing a file",
)

SelectOpt = typer.Option(
    False,
    "--select",
    "-s",
    help="Choose which operations to generate interactively",
)

ForceOpt = typer.Option(
    False,
    "--force",
    "-f",
    help="Overwrite the output file without asking",
)
