# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 argprep authors
#

"""
Conversion of string-encoded numbers in tool arguments, ahead of validation.

Some MCP clients send every argument as a string. Before the arguments are
validated, string values of fields declared as numbers are turned into actual
numbers, as long as the string is exactly how that number would be written
anyway. Anything else is left for the validator to judge.
"""

import math

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from fastmcp.utilities.logging import get_logger

from .schema import (
    ArgumentSchema,
    DefaultSchema,
    NullableSchema,
    NumberSchema,
    ObjectSchema,
    OptionalSchema,
    as_argument_schema,
)


logger = get_logger("argprep.preprocess")

# decimal point positions written without an exponent: 1e-7 < |x| < 1e21
_FIXED_POINT_RANGE = range(-5, 22)


def preprocess_arguments(args: Any, schema: Any, *, integers: bool = True) -> Any:
    """
    Convert string values of number fields in `args` to numbers.

    Args:
        args: Raw tool arguments, usually a dict
        schema: An ArgumentSchema, a pydantic model class or a JSON Schema
        integers: Whether integer-typed fields count as number fields

    Returns:
        A shallow copy of `args` with clean numeric strings converted, or `args`
        itself if it's not a mapping.
    """
    if not isinstance(args, Mapping):
        return args

    processed = dict(args)
    argument_schema = as_argument_schema(schema, integers=integers)
    for field in extract_number_fields(argument_schema):
        value = processed.get(field)
        if not isinstance(value, str):
            continue

        number = parse_clean_number(value)
        if number is not None:
            logger.debug(f"Converted argument {field!r} from {value!r} to {number!r}")
            processed[field] = number

    return processed


def extract_number_fields(schema: ArgumentSchema) -> frozenset[str]:
    """Names of the top-level fields of an object schema which hold numbers."""
    if not isinstance(schema, ObjectSchema):
        return frozenset()
    return frozenset(name for name, field in schema.fields.items() if is_number_schema(field))


def is_number_schema(schema: ArgumentSchema) -> bool:
    """Whether a schema is a number, possibly optional, defaulted or nullable."""
    if isinstance(schema, NumberSchema):
        return True
    if isinstance(schema, (OptionalSchema, DefaultSchema, NullableSchema)):
        return is_number_schema(schema.inner)
    return False


def parse_clean_number(text: str) -> int | float | None:
    """
    Parse text holding a number written in its canonical form.

    Surrounding whitespace is ignored, but otherwise the text must read exactly
    as number_text() writes the parsed number: "42", "-1.5", "0.00001" and
    "1e-7" parse, while "042", "1.50", "1e3", "+7" or "1_000" don't. Values
    written without a fraction or exponent are returned as int.
    """
    stripped = text.strip()
    try:
        number = float(stripped)
    except ValueError:
        return None

    if not math.isfinite(number):
        return None

    canonical = number_text(number)
    if canonical != stripped:
        return None
    if "." in canonical or "e" in canonical:
        return number
    return int(canonical)


def number_text(number: float) -> str:
    """
    Write a finite float the way JavaScript's Number.prototype.toString does.

    The shortest round-tripping digits are used (as for repr), in fixed
    notation from 1e-7 (exclusive) up to 1e21 (exclusive) and in exponent
    notation, without zero padding, outside that range.
    """
    if number == 0:
        return "0"
    if number < 0:
        return "-" + number_text(-number)

    _, digit_tuple, exponent = Decimal(repr(number)).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    # the decimal point sits after the first `point` digits
    point = exponent + len(digits)

    if point not in _FIXED_POINT_RANGE:
        mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        return f"{mantissa}e{point - 1:+d}"
    if point >= len(digits):
        return digits + "0" * (point - len(digits))
    if point > 0:
        return f"{digits[:point]}.{digits[point:]}"
    return "0." + "0" * -point + digits
