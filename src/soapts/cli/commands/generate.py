"""Commands for generating TypeScript declarations from WSDL documents."""

from pathlib import Path

import typer

from soapts.cli.common.context import GenerateAppContext, build_generate_context
from soapts.cli.common.exits import exit_from_exc, ok_exit
from soapts.cli.common.options import (
    BindingOpt,
    ForceOpt,
    IndentOpt,
    OutputOpt,
    SelectOpt,
    StdoutOpt,
    WsdlArg,
)
from soapts.cli.common.output import out
from soapts.cli.tui import select_operations as tui_select_operations
from soapts.core.errors import SoapTsError
from soapts.core.generate import generate_text, write_output
from soapts.core.reader import load_definition
from soapts.core.translator import BindingMode


def generate(
    wsdl: Path = WsdlArg,
    output: Path = OutputOpt,
    binding: BindingMode = BindingOpt,
    indent: int = IndentOpt,
    stdout: bool = StdoutOpt,
    select: bool = SelectOpt,
    force: bool = ForceOpt,
):
    """
    Generate interfaces and async function signatures from a WSDL document.
    """
    appctx: GenerateAppContext = build_generate_context(
        wsdl, None if stdout else output, binding=binding, indent=indent
    )

    try:
        with out.status("Reading service definition..."):
            definition = load_definition(appctx.wsdl, appctx.options.reader)
    except SoapTsError as exc:
        exit_from_exc(exc)

    if not definition.operations:
        out.warn("No operations declared: only interfaces will be generated")

    operations = None
    if select and definition.operations:
        picked = tui_select_operations(list(definition.operations))
        operations = [op.name for op in picked]
        if not operations:
            out.warn("No operations selected: only interfaces will be generated")

    try:
        text, interfaces, functions = generate_text(
            definition, appctx.options, operations=operations
        )
    except SoapTsError as exc:
        exit_from_exc(exc)

    if appctx.output is None:
        typer.echo(text, nl=False)
        return

    if appctx.output.exists() and not force:
        if not out.confirm(f"Overwrite {appctx.output}?"):
            ok_exit("Cancelled")

    try:
        written = write_output(text, appctx.output)
    except SoapTsError as exc:
        exit_from_exc(exc)

    out.success(f"Generated {interfaces} interface(s) and {functions} function(s)")
    out.kv({"binding": binding.value, "output": written})
