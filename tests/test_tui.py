from soapts.cli.common.tui_style import QUESTIONARY_STYLE_CONFIRM, QUESTIONARY_STYLE_SELECT
from soapts.cli.tui import _MAX_OPERATION_NAME_WIDTH, _operation_choice_title, _truncate
from soapts.core.schema import OperationSpec


def test_operation_choice_title_aligns_message_column():
    first = _operation_choice_title(OperationSpec("GetQuote", "Req", "Resp"), name_width=12)
    second = _operation_choice_title(OperationSpec("Ping", "PingIn", "PingOut"), name_width=12)

    assert first.startswith("GetQuote")
    assert second.startswith("Ping")
    assert first.index("(") == second.index("(")
    assert first.endswith("(Req -> Resp)")


def test_operation_choice_title_truncates_long_names():
    long_name = "x" * (_MAX_OPERATION_NAME_WIDTH + 10)
    rendered = _operation_choice_title(
        OperationSpec(long_name, "In", "Out"),
        name_width=_MAX_OPERATION_NAME_WIDTH,
    )

    assert "..." in rendered
    assert "(In -> Out)" in rendered
    assert _truncate(long_name, _MAX_OPERATION_NAME_WIDTH).endswith("...")


def test_prompt_styles_use_ok_and_warn_accents():
    select_rules = dict(QUESTIONARY_STYLE_SELECT.style_rules)
    confirm_rules = dict(QUESTIONARY_STYLE_CONFIRM.style_rules)

    assert select_rules["checkbox-selected"] == "bold ansibrightgreen"
    assert confirm_rules["answer"] == "bold ansibrightyellow"
    assert "checkbox" not in confirm_rules
    assert select_rules["instruction"] == confirm_rules["instruction"]
