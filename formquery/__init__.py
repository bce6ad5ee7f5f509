"""Serialize HTML form controls into a URL-encoded query string."""

from .classify import Classification, ControlKind, classify
from .form_model import FormControl, FormModel, FormOption, StaticFormModel
from .percent import encode
from .resolve import Pair, resolve
from .serializer import encode_pairs, form_pairs, serialize_form
from .settings import SerializationContext, SerializeSettings
from .soup_model import SoupFormModel
from .trigger import resolve_trigger

__version__ = "0.1.0"

__all__ = [
    "Classification",
    "ControlKind",
    "FormControl",
    "FormModel",
    "FormOption",
    "Pair",
    "SerializationContext",
    "SerializeSettings",
    "SoupFormModel",
    "StaticFormModel",
    "classify",
    "encode",
    "encode_pairs",
    "form_pairs",
    "resolve",
    "resolve_trigger",
    "serialize_form",
]
