from formquery.form_model import FormControl, FormOption
from formquery.resolve import Pair, option_value, resolve


def test_text_value_defaults_to_empty() -> None:
    assert resolve(FormControl(tag="input", name="q")) == [Pair("q", "")]


def test_checkbox_and_radio_default_to_on() -> None:
    assert resolve(FormControl(tag="input", name="c", type="checkbox", checked=True)) == [Pair("c", "on")]
    assert resolve(FormControl(tag="input", name="r", type="radio", checked=True)) == [Pair("r", "on")]
    assert resolve(FormControl(tag="input", name="c", type="checkbox", value="")) == []


def test_every_checked_radio_contributes() -> None:
    radios = [
        FormControl(tag="input", name="r", type="radio", value="a", checked=True),
        FormControl(tag="input", name="r", type="radio", value="b", checked=True),
    ]
    assert [pair for radio in radios for pair in resolve(radio)] == [Pair("r", "a"), Pair("r", "b")]


def test_single_select_takes_first_selected_option() -> None:
    select = FormControl(
        tag="select",
        name="s",
        options=(
            FormOption(value="a"),
            FormOption(value="b", selected=True),
            FormOption(value="c", selected=True),
        ),
    )
    assert resolve(select) == [Pair("s", "b")]


def test_single_select_skips_disabled_options() -> None:
    select = FormControl(
        tag="select",
        name="s",
        options=(FormOption(value="a", disabled=True), FormOption(value="b")),
    )
    assert resolve(select) == [Pair("s", "b")]
    assert resolve(FormControl(tag="select", name="s")) == []


def test_single_select_with_disabled_selection_submits_nothing() -> None:
    select = FormControl(
        tag="select",
        name="s",
        options=(FormOption(value="a"), FormOption(value="b", selected=True, disabled=True)),
    )
    assert resolve(select) == []


def test_multiple_select_skips_disabled_options() -> None:
    select = FormControl(
        tag="select",
        name="m",
        multiple=True,
        options=(
            FormOption(value="a", selected=True),
            FormOption(value="b", selected=True, disabled=True),
            FormOption(text="Label", selected=True),
        ),
    )
    assert resolve(select) == [Pair("m", "a"), Pair("m", "Label")]


def test_option_value_prefers_attribute_over_text() -> None:
    assert option_value(FormOption(value="", text="Empty")) == ""
    assert option_value(FormOption(text="Label")) == "Label"


def test_hidden_charset_field_reports_charset() -> None:
    control = FormControl(tag="input", name="_CHARSET_", type="hidden")
    assert resolve(control) == [Pair("_CHARSET_", "UTF-8")]
    assert resolve(control, charset="iso-8859-1") == [Pair("_CHARSET_", "iso-8859-1")]


def test_button_resolves_only_as_trigger() -> None:
    button = FormControl(tag="button", name="go")
    assert resolve(button) == []
    assert resolve(button, button) == [Pair("go", "")]
