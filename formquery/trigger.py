"""Pick the one submit control, if any, whose pair is submitted."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from .classify import is_submit_button
from .form_model import FormControl, matches


def submit_candidates(controls: Iterable[FormControl]) -> List[FormControl]:
    """Named, enabled submit controls in tree order."""
    return [c for c in controls if is_submit_button(c) and c.name and not c.disabled]


def resolve_trigger(
    controls: Iterable[FormControl],
    explicit_trigger: Any = None,
    *,
    fall_back_to_default: bool = False,
) -> Optional[FormControl]:
    """Return the submitter for this serialization.

    Without ``explicit_trigger`` the first candidate wins. A trigger that is
    one of the candidates wins outright. Any other trigger (a checkbox, a
    nameless submit, a node outside the form) means no button is submitted,
    unless ``fall_back_to_default`` asks for the first candidate instead.
    """
    candidates = submit_candidates(controls)
    if explicit_trigger is not None:
        for candidate in candidates:
            if matches(candidate, explicit_trigger):
                return candidate
        if not fall_back_to_default:
            return None
    return candidates[0] if candidates else None


__all__ = ["resolve_trigger", "submit_candidates"]
