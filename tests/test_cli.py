from pathlib import Path

from typer.testing import CliRunner

from soapts.cli.cli import app
from soapts.cli.common.output import Out
from soapts.core.schema import OperationSpec

runner = CliRunner()


def test_generate_stdout_prints_declarations(quote_wsdl: Path):
    result = runner.invoke(app, ["generate", str(quote_wsdl), "--stdout"])

    assert result.exit_code == 0
    assert "export interface GetQuoteRequest {" in result.output
    assert "export async function GetQuote(input: GetQuoteRequest)" in result.output


def test_generate_writes_output_file(quote_wsdl: Path, tmp_path: Path):
    target = tmp_path / "types.ts"

    result = runner.invoke(
        app, ["generate", str(quote_wsdl), "-o", str(target), "--indent", "2"]
    )

    assert result.exit_code == 0
    assert "Generated 2 interface(s)" in result.output
    assert "  symbol: String;" in target.read_text(encoding="utf-8")


def test_generate_positional_binding_option(quote_wsdl: Path):
    result = runner.invoke(
        app, ["generate", str(quote_wsdl), "--stdout", "--binding", "positional"]
    )

    assert result.exit_code == 0
    assert "Promise<GetQuoteResponse>" in result.output


def test_generate_shape_failure_exits_1_without_output(
    no_messages_wsdl: Path, tmp_path: Path
):
    target = tmp_path / "out.ts"

    result = runner.invoke(app, ["generate", str(no_messages_wsdl), "-o", str(target)])

    assert result.exit_code == 1
    assert "no messages" in result.output
    assert not target.exists()


def test_generate_missing_input_exits_1(tmp_path: Path):
    result = runner.invoke(app, ["generate", str(tmp_path / "nope.wsdl"), "--stdout"])

    assert result.exit_code == 1
    assert "Cannot read schema document" in result.output


def test_generate_warns_when_no_operations(no_operations_wsdl: Path):
    result = runner.invoke(app, ["generate", str(no_operations_wsdl), "--stdout"])

    assert result.exit_code == 0
    assert "No operations declared" in result.output
    assert "function" not in result.output


def test_generate_declined_overwrite_keeps_file(
    quote_wsdl: Path, tmp_path: Path, monkeypatch
):
    target = tmp_path / "types.ts"
    target.write_text("// keep\n", encoding="utf-8")
    monkeypatch.setattr(Out, "confirm", lambda self, message, default=False: False)

    result = runner.invoke(app, ["generate", str(quote_wsdl), "-o", str(target)])

    assert result.exit_code == 0
    assert "Cancelled" in result.output
    assert target.read_text(encoding="utf-8") == "// keep\n"


def test_generate_force_overwrites_without_prompt(
    quote_wsdl: Path, tmp_path: Path, monkeypatch
):
    target = tmp_path / "types.ts"
    target.write_text("// old\n", encoding="utf-8")

    def _fail(self, message, default=False):
        raise AssertionError("confirm should not be called")

    monkeypatch.setattr(Out, "confirm", _fail)

    result = runner.invoke(app, ["generate", str(quote_wsdl), "-o", str(target), "-f"])

    assert result.exit_code == 0
    assert target.read_text(encoding="utf-8").startswith("export interface")


def test_generate_select_limits_operations(quote_wsdl: Path, monkeypatch):
    picked: list[list[OperationSpec]] = []

    def _select(operations):
        picked.append(operations)
        return []

    monkeypatch.setattr("soapts.cli.commands.generate.tui_select_operations", _select)

    result = runner.invoke(app, ["generate", str(quote_wsdl), "--stdout", "--select"])

    assert result.exit_code == 0
    assert [op.name for op in picked[0]] == ["GetQuote"]
    assert "No operations selected" in result.output
    assert "function" not in result.output


def test_inspect_lists_messages_and_operations(quote_wsdl: Path):
    result = runner.invoke(app, ["inspect", str(quote_wsdl)])

    assert result.exit_code == 0
    assert "GetQuoteRequest" in result.output
    assert "price?: Number" in result.output
    assert "GetQuote" in result.output
