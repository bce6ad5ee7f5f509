"""FormModel backed by a BeautifulSoup tree."""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Optional, Sequence

from bs4 import BeautifulSoup, Tag

from .classify import LISTED_TAGS
from .form_model import FormControl, FormOption

WHITESPACE_RE = re.compile(r"\s+")
NEWLINE_RE = re.compile(r"\r\n?")


def _normalize_text(text: str) -> str:
    return WHITESPACE_RE.sub(" ", text).strip()


def _document_of(tag: Tag) -> Tag:
    node = tag
    while node.parent is not None:
        node = node.parent
    return node


def _is_inside(tag: Tag, ancestor: Tag) -> bool:
    return any(parent is ancestor for parent in tag.parents)


def _owner_form(tag: Tag, document: Tag) -> Optional[Tag]:
    form_id = tag.get("form")
    if form_id is not None:
        target = document.find(attrs={"id": form_id})
        if isinstance(target, Tag) and target.name == "form":
            return target
        return None
    return tag.find_parent("form")


def _is_disabled(tag: Tag) -> bool:
    if tag.has_attr("disabled"):
        return True
    for fieldset in tag.find_parents("fieldset"):
        if not fieldset.has_attr("disabled"):
            continue
        legend = fieldset.find("legend", recursive=False)
        if isinstance(legend, Tag) and _is_inside(tag, legend):
            continue
        return True
    return False


def _textarea_value(tag: Tag) -> str:
    text = NEWLINE_RE.sub("\n", tag.get_text())
    return text[1:] if text.startswith("\n") else text


def _options(select: Tag) -> tuple[FormOption, ...]:
    options: List[FormOption] = []
    for option in select.find_all("option"):
        if not isinstance(option, Tag):
            continue
        group = option.parent
        disabled = option.has_attr("disabled") or (
            isinstance(group, Tag) and group.name == "optgroup" and group.has_attr("disabled")
        )
        options.append(
            FormOption(
                value=option.get("value"),
                text=_normalize_text(option.get_text()),
                selected=option.has_attr("selected"),
                disabled=disabled,
            )
        )
    return tuple(options)


def control_from_tag(tag: Tag) -> FormControl:
    name = tag.name.lower()
    if name == "textarea":
        value: Optional[str] = _textarea_value(tag)
    elif name == "select":
        value = None
    else:
        value = tag.get("value")
    return FormControl(
        tag=name,
        name=tag.get("name"),
        type=tag.get("type"),
        value=value,
        checked=tag.has_attr("checked"),
        disabled=_is_disabled(tag),
        multiple=tag.has_attr("multiple"),
        options=_options(tag) if name == "select" else (),
        node=tag,
    )


class SoupFormModel:
    """Lists the controls of ``root`` in document order.

    For a ``<form>`` root, controls elsewhere in the document that point at
    it through ``form="id"`` are included and controls pointing away are
    not. Any other root lists every control below it.
    """

    def __init__(self, root: Tag) -> None:
        self.root = root

    @classmethod
    def from_html(cls, html: str, selector: str = "form") -> Optional["SoupFormModel"]:
        soup = BeautifulSoup(html, "html.parser")
        root = soup.select_one(selector)
        return cls(root) if isinstance(root, Tag) else None

    def _candidate_tags(self) -> Iterable[Tag]:
        if self.root.name == "form":
            document = _document_of(self.root)
            for element in document.descendants:
                if isinstance(element, Tag) and element.name in LISTED_TAGS:
                    if _owner_form(element, document) is self.root:
                        yield element
            return
        for element in self.root.descendants:
            if isinstance(element, Tag) and element.name in LISTED_TAGS:
                yield element

    def controls(self, execution_context: Any = None) -> Sequence[FormControl]:
        return tuple(
            control_from_tag(tag)
            for tag in self._candidate_tags()
            if tag.find_parent("datalist") is None
        )


__all__ = ["SoupFormModel", "control_from_tag"]
