"""Command-line interface for formquery."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml
from bs4 import BeautifulSoup, Tag
from pydantic import ValidationError

from .io_utils import stable_json_dumps, warn
from .resolve import Pair
from .serializer import encode_pairs, form_pairs
from .settings import SerializationContext, SerializeSettings


def _load_settings(path: Optional[str]) -> SerializeSettings:
    if not path:
        return SerializeSettings()
    config_path = Path(path)
    data: Any = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"{config_path} must contain a mapping of settings.")
    try:
        return SerializeSettings.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid settings in {config_path}: {exc}") from exc


def _collect_pairs(args: argparse.Namespace) -> tuple[list[Pair], SerializeSettings]:
    input_path = Path(args.input)
    if not input_path.exists():
        raise FileNotFoundError(f"Input HTML not found: {input_path}")
    settings = _load_settings(args.config)

    soup = BeautifulSoup(input_path.read_text(encoding="utf-8"), "html.parser")
    form = soup.select_one(args.form)
    if not isinstance(form, Tag):
        warn(f"No element matches {args.form!r} in {input_path}")
        return [], settings

    trigger = None
    if args.trigger:
        trigger = soup.select_one(args.trigger)
        if trigger is None:
            warn(f"No element matches trigger {args.trigger!r} in {input_path}")

    context = SerializationContext(triggering_element=trigger, settings=settings)
    return form_pairs(form, context), settings


def _handle_serialize(args: argparse.Namespace) -> None:
    pairs, settings = _collect_pairs(args)
    print(encode_pairs(pairs, settings.charset))


def _handle_pairs(args: argparse.Namespace) -> None:
    pairs, _ = _collect_pairs(args)
    sys.stdout.write(stable_json_dumps([list(pair) for pair in pairs]))


def _add_form_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the HTML document containing the form.",
    )
    parser.add_argument(
        "--form",
        default="form",
        help="CSS selector for the form (or any element) to serialize.",
    )
    parser.add_argument(
        "--trigger",
        help="CSS selector for the element that triggered the submission.",
    )
    parser.add_argument(
        "--config",
        help="Optional YAML file with serialization settings.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="formquery", description="Serialize HTML forms into query strings."
    )
    subparsers = parser.add_subparsers(dest="command")

    serialize_parser = subparsers.add_parser(
        "serialize",
        help="Print the URL-encoded query string a form submits.",
        description="Serialize a form from an HTML file.",
    )
    _add_form_arguments(serialize_parser)
    serialize_parser.set_defaults(func=_handle_serialize)

    pairs_parser = subparsers.add_parser(
        "pairs",
        help="Print the submitted (name, value) pairs as JSON.",
        description="List the un-encoded pairs a form submits, in order.",
    )
    _add_form_arguments(pairs_parser)
    pairs_parser.set_defaults(func=_handle_pairs)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main(sys.argv[1:])
