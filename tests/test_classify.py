import pytest

from formquery.classify import ControlKind, classify, control_kind, control_type, is_submit_button
from formquery.form_model import FormControl


@pytest.mark.parametrize(
    ("control", "kind"),
    [
        (FormControl(tag="input", name="a"), ControlKind.TEXT),
        (FormControl(tag="input", name="a", type=" EMAIL "), ControlKind.TEXT),
        (FormControl(tag="input", name="a", type="made-up"), ControlKind.TEXT),
        (FormControl(tag="textarea", name="a"), ControlKind.TEXT),
        (FormControl(tag="input", name="a", type="checkbox"), ControlKind.CHECKBOX),
        (FormControl(tag="input", name="a", type="Radio"), ControlKind.RADIO),
        (FormControl(tag="select", name="a"), ControlKind.SELECT_SINGLE),
        (FormControl(tag="select", name="a", multiple=True), ControlKind.SELECT_MULTIPLE),
        (FormControl(tag="input", name="a", type="submit"), ControlKind.BUTTON),
        (FormControl(tag="input", name="a", type="reset"), ControlKind.BUTTON),
        (FormControl(tag="button", name="a"), ControlKind.BUTTON),
        (FormControl(tag="input", name="a", type="image"), ControlKind.IGNORED),
        (FormControl(tag="input", name="a", type="file"), ControlKind.IGNORED),
        (FormControl(tag="div", name="a"), ControlKind.IGNORED),
    ],
)
def test_control_kind(control: FormControl, kind: ControlKind) -> None:
    assert control_kind(control) == kind


def test_button_type_defaults_to_submit() -> None:
    assert control_type(FormControl(tag="button")) == "submit"
    assert control_type(FormControl(tag="button", type="bogus")) == "submit"
    assert control_type(FormControl(tag="button", type="reset")) == "reset"
    assert is_submit_button(FormControl(tag="button", type="bogus"))
    assert not is_submit_button(FormControl(tag="input", type="button"))


def test_unnamed_or_disabled_controls_do_not_contribute() -> None:
    assert not classify(FormControl(tag="input")).contributes
    assert not classify(FormControl(tag="input", name="")).contributes
    assert not classify(FormControl(tag="input", name="a", disabled=True)).contributes
    assert classify(FormControl(tag="input", name="a")).contributes


def test_buttons_contribute_only_as_trigger() -> None:
    first = FormControl(tag="input", name="commit", type="submit", value="One")
    second = FormControl(tag="input", name="commit", type="submit", value="One")
    assert not classify(first).contributes
    assert classify(first, first).contributes
    assert not classify(second, first).contributes
