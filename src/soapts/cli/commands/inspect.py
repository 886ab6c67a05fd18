"""Commands for inspecting WSDL documents."""

from pathlib import Path

from soapts.cli.common.exits import exit_from_exc
from soapts.cli.common.options import WsdlArg
from soapts.cli.common.output import out
from soapts.core.errors import SoapTsError
from soapts.core.reader import load_definition


def inspect(wsdl: Path = WsdlArg):
    """
    Show the messages and operations declared by a WSDL document.
    """
    try:
        with out.status("Reading service definition..."):
            definition = load_definition(wsdl)
    except SoapTsError as exc:
        exit_from_exc(exc)

    out.header(str(wsdl))
    out.messages_table(definition.messages)

    if not definition.operations:
        out.warn("No operations declared")
        return

    out.operations_table(definition.operations)
