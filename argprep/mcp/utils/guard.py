# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 argprep authors
#

import json

from functools import wraps
from inspect import get_annotations
from typing import Annotated, Any, Callable

from fastmcp.utilities.types import is_class_member_of_type
from pydantic import BeforeValidator, ValidationInfo

from ..preprocess import is_number_schema, parse_clean_number
from ..schema import from_annotation
from ..settings import SETTINGS


def argument_guard(fn: Callable[..., Any]) -> Callable[..., Any]:
    """
    Make a potential mcp.tool tolerant of clients which send arguments as strings.

    Some clients stringify numbers, others (Claude Code, notably) JSON-encode
    lists and objects. This decorator rewrites the annotations of each argument
    that doesn't already accept strings, so that the JSON schema advertised for
    the tool also allows a string, and so that a string is turned back into the
    intended type before validation:

    - number arguments accept clean numeric strings (see parse_clean_number);
      anything else is handed on as-is, for the validator to reject;
    - other arguments are loaded as JSON.

    The implementation keeps seeing the originally-intended types.
    """
    guarded = {
        name: _guard(typ) if name != "return" else typ
        for name, typ in get_annotations(fn).items()
    }

    @wraps(fn)
    def wrapped(*args: Any, **kwargs: Any) -> Any:
        return fn(*args, **kwargs)

    wrapped.__annotations__ = guarded
    return wrapped


def _guard(typ: Any) -> Any:
    # If a string is a legitimate argument type, nothing we can/should do.
    if is_class_member_of_type(typ, str):
        return typ

    # Integer-ness is decided when the tool is defined, while switching
    # coercion on and off applies on each call.
    if is_number_schema(from_annotation(typ, integers=SETTINGS.coerce_integers)):
        validator: Callable[..., Any] = _maybe_parse_number
    else:
        validator = _maybe_load_json

    # The BeforeValidator also advertises the str type in the json schema used
    # to validate the tool call in the mcp SDK. It runs first, so subsequent
    # validators still catch values of the wrong type.
    return Annotated[typ, BeforeValidator(validator, typ | str)]


def _maybe_parse_number(value: Any) -> Any:
    if isinstance(value, str) and SETTINGS.coerce_numbers:
        number = parse_clean_number(value)
        if number is not None:
            return number
    return value


def _maybe_load_json(value: Any, info: ValidationInfo) -> Any:
    if isinstance(value, str):
        try:
            value = json.loads(value) if value else None
        except json.JSONDecodeError:
            pass

    if isinstance(value, str):
        raise ValueError(
            f"Field {info.field_name}, if a string, must be a non-string encoded as JSON."
        )

    return value
