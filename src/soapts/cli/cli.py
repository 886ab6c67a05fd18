"""CLI application for SOAP to TypeScript declaration generation."""

import typer

from soapts.cli.commands.generate import generate
from soapts.cli.commands.inspect import inspect

app = typer.Typer(
    help="soapts - generate TypeScript declarations from WSDL service definitions",
    no_args_is_help=True,
)

app.command(help="Generate TypeScript declarations from a WSDL document.")(generate)
app.command(help="Show messages and operations of a WSDL document.")(inspect)


if __name__ == "__main__":
    app()
