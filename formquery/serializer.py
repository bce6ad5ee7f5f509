"""Serialize a form into an application/x-www-form-urlencoded query string.

The walk is a single pass over the form's controls in tree order. Each
control contributes zero or more (name, value) pairs; names are kept as
opaque strings, so bracket notation such as ``user[tags][]`` is encoded
character by character and never interpreted.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Iterable, List, Optional

from bs4 import Tag

from .form_model import FormModel
from .io_utils import warn
from .percent import encode
from .resolve import Pair, resolve
from .settings import SerializationContext
from .soup_model import SoupFormModel
from .trigger import resolve_trigger


def as_form_model(form: Any) -> Optional[FormModel]:
    if form is None:
        return None
    if isinstance(form, Tag):
        return SoupFormModel(form)
    if callable(getattr(form, "controls", None)):
        return form
    warn(f"Cannot read form controls from {type(form).__name__}; treating it as no form.")
    return None


def _context(context: Optional[SerializationContext], element: Any) -> SerializationContext:
    context = context or SerializationContext()
    if element is not None:
        context = dataclasses.replace(context, triggering_element=element)
    return context


def form_pairs(
    form: Any,
    context: Optional[SerializationContext] = None,
    *,
    element: Any = None,
) -> List[Pair]:
    """Ordered, un-encoded pairs the form submits."""
    model = as_form_model(form)
    if model is None:
        return []
    context = _context(context, element)
    controls = list(model.controls(context.execution_context))
    trigger = resolve_trigger(
        controls,
        context.triggering_element,
        fall_back_to_default=context.settings.foreign_trigger_uses_default_submitter,
    )
    pairs: List[Pair] = []
    for control in controls:
        pairs.extend(resolve(control, trigger, charset=context.settings.charset))
    return pairs


def encode_pairs(pairs: Iterable[Pair], charset: str = "UTF-8") -> str:
    return "&".join(f"{encode(name, charset)}={encode(value, charset)}" for name, value in pairs)


def serialize_form(
    form: Any,
    context: Optional[SerializationContext] = None,
    *,
    element: Any = None,
) -> str:
    """Query string for ``form``; empty when the form is missing or submits nothing.

    ``element`` is a shortcut for ``context.triggering_element`` and may be
    a FormControl or the BeautifulSoup tag it was read from.
    """
    context = _context(context, element)
    return encode_pairs(form_pairs(form, context), context.settings.charset)


__all__ = ["as_form_model", "encode_pairs", "form_pairs", "serialize_form"]
