"""Turn one control into the (name, value) pairs it submits."""

from __future__ import annotations

from typing import List, NamedTuple, Optional

from .classify import ControlKind, classify, control_type
from .form_model import FormControl, FormOption


class Pair(NamedTuple):
    name: str
    value: str


def option_value(option: FormOption) -> str:
    # An option without a value attribute submits its label.
    return option.text if option.value is None else option.value


def _selected_option(control: FormControl) -> Optional[FormOption]:
    for option in control.options:
        if option.selected:
            return None if option.disabled else option
    enabled = [option for option in control.options if not option.disabled]
    return enabled[0] if enabled else None


def _text_value(control: FormControl, charset: str) -> str:
    if control_type(control) == "hidden" and (control.name or "").lower() == "_charset_":
        return charset
    return control.value or ""


def resolve(
    control: FormControl,
    trigger: Optional[FormControl] = None,
    *,
    charset: str = "UTF-8",
) -> List[Pair]:
    """Pairs contributed by ``control``, possibly none.

    ``trigger`` is the resolved submitter; any other button yields nothing.
    """
    classification = classify(control, trigger)
    if not classification.contributes:
        return []
    kind = classification.kind
    name = control.name or ""

    if kind in (ControlKind.CHECKBOX, ControlKind.RADIO):
        if not control.checked:
            return []
        return [Pair(name, "on" if control.value is None else control.value)]
    if kind is ControlKind.SELECT_SINGLE:
        option = _selected_option(control)
        return [] if option is None else [Pair(name, option_value(option))]
    if kind is ControlKind.SELECT_MULTIPLE:
        return [
            Pair(name, option_value(option))
            for option in control.options
            if option.selected and not option.disabled
        ]
    if kind is ControlKind.BUTTON:
        return [Pair(name, control.value or "")]
    return [Pair(name, _text_value(control, charset))]


__all__ = ["Pair", "option_value", "resolve"]
