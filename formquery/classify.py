"""Sort controls into the kinds the serializer treats differently."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .form_model import FormControl


class ControlKind(str, Enum):
    TEXT = "text"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    SELECT_SINGLE = "select-single"
    SELECT_MULTIPLE = "select-multiple"
    BUTTON = "button"
    IGNORED = "ignored"


@dataclass(frozen=True)
class Classification:
    kind: ControlKind
    contributes: bool


LISTED_TAGS = {"input", "select", "textarea", "button"}
BUTTON_INPUT_TYPES = {"submit", "reset", "button"}
# image inputs only submit coordinates, file inputs need multipart.
IGNORED_INPUT_TYPES = {"image", "file"}


def control_type(control: FormControl) -> str:
    """Normalized ``type`` of a control, applying the HTML defaults."""
    tag = (control.tag or "").lower()
    raw = (control.type or "").strip().lower()
    if tag == "button":
        return raw if raw in {"reset", "button"} else "submit"
    if tag == "input":
        return raw or "text"
    return tag


def is_submit_button(control: FormControl) -> bool:
    tag = (control.tag or "").lower()
    return tag in {"input", "button"} and control_type(control) == "submit"


def control_kind(control: FormControl) -> ControlKind:
    tag = (control.tag or "").lower()
    if tag not in LISTED_TAGS:
        return ControlKind.IGNORED
    if tag == "select":
        return ControlKind.SELECT_MULTIPLE if control.multiple else ControlKind.SELECT_SINGLE
    if tag == "textarea":
        return ControlKind.TEXT
    kind = control_type(control)
    if tag == "button" or kind in BUTTON_INPUT_TYPES:
        return ControlKind.BUTTON
    if kind == "checkbox":
        return ControlKind.CHECKBOX
    if kind == "radio":
        return ControlKind.RADIO
    if kind in IGNORED_INPUT_TYPES:
        return ControlKind.IGNORED
    return ControlKind.TEXT


def classify(control: FormControl, trigger: Optional[FormControl] = None) -> Classification:
    """Classify ``control``; ``trigger`` is the already resolved submitter.

    Button-like controls contribute only when they are that submitter.
    Checked and selected state is left to the value resolver.
    """
    kind = control_kind(control)
    if kind is ControlKind.IGNORED or not control.name or control.disabled:
        return Classification(kind, False)
    if kind is ControlKind.BUTTON:
        return Classification(kind, trigger is not None and control is trigger)
    return Classification(kind, True)


__all__ = [
    "Classification",
    "ControlKind",
    "classify",
    "control_kind",
    "control_type",
    "is_submit_button",
]
