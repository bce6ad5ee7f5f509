"""Read-only view of a form's controls, independent of the host document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Sequence, Tuple


@dataclass(frozen=True)
class FormOption:
    """One ``<option>`` of a select.

    ``value`` is ``None`` when the option carries no ``value`` attribute;
    ``text`` is the option label with whitespace collapsed.
    """

    value: Optional[str] = None
    text: str = ""
    selected: bool = False
    disabled: bool = False


@dataclass(frozen=True, eq=False)
class FormControl:
    """A single form control as seen by the serializer.

    Controls compare by identity: two buttons with the same name and value
    are still different candidates for the triggering element.
    """

    tag: str
    name: Optional[str] = None
    type: Optional[str] = None
    value: Optional[str] = None
    checked: bool = False
    disabled: bool = False
    multiple: bool = False
    options: Tuple[FormOption, ...] = ()
    node: Any = field(default=None, repr=False)


class FormModel(Protocol):
    def controls(self, execution_context: Any = None) -> Sequence[FormControl]:
        """Return the form's controls in tree order."""
        ...


@dataclass
class StaticFormModel:
    """FormModel over a fixed list of controls."""

    items: Sequence[FormControl] = ()

    def controls(self, execution_context: Any = None) -> Sequence[FormControl]:
        return tuple(self.items)


def matches(control: FormControl, element: Any) -> bool:
    if element is None:
        return False
    if control is element:
        return True
    if control.node is None:
        return False
    if isinstance(element, FormControl):
        return element.node is control.node
    return control.node is element


__all__ = ["FormControl", "FormModel", "FormOption", "StaticFormModel", "matches"]
