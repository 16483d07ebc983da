# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 argprep authors
#

"""
Argument schema shapes understood by the preprocessor, and adapters from native
schema descriptions (type annotations, pydantic models, JSON Schema).

Adapters never fail: anything they can't make sense of becomes OtherSchema.
"""

from collections.abc import Mapping
from types import NoneType, UnionType
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field


class _Schema(BaseModel):
    model_config = ConfigDict(frozen=True)


class NumberSchema(_Schema):
    """A numeric value."""

    kind: Literal["number"] = "number"


class ObjectSchema(_Schema):
    """An object with named fields."""

    kind: Literal["object"] = "object"
    fields: dict[str, "ArgumentSchema"] = Field(default_factory=dict)


class OptionalSchema(_Schema):
    """A value which may be absent."""

    kind: Literal["optional"] = "optional"
    inner: "ArgumentSchema"


class DefaultSchema(_Schema):
    """A value which has a default when absent."""

    kind: Literal["default"] = "default"
    inner: "ArgumentSchema"


class NullableSchema(_Schema):
    """A value which may be null."""

    kind: Literal["nullable"] = "nullable"
    inner: "ArgumentSchema"


class OtherSchema(_Schema):
    """Anything else."""

    kind: Literal["other"] = "other"


ArgumentSchema = Annotated[
    NumberSchema | ObjectSchema | OptionalSchema | DefaultSchema | NullableSchema | OtherSchema,
    Field(discriminator="kind"),
]

SCHEMA_TYPES = (
    NumberSchema,
    ObjectSchema,
    OptionalSchema,
    DefaultSchema,
    NullableSchema,
    OtherSchema,
)

for _model in SCHEMA_TYPES:
    _model.model_rebuild()


def as_argument_schema(obj: Any, integers: bool = True) -> ArgumentSchema:
    """Translate any supported schema description into an ArgumentSchema."""
    if isinstance(obj, SCHEMA_TYPES):
        return obj
    if isinstance(obj, type) and issubclass(obj, BaseModel):
        return from_model(obj, integers=integers)
    if isinstance(obj, Mapping):
        return from_json_schema(obj, integers=integers)
    return OtherSchema()


def from_annotation(annotation: Any, integers: bool = True) -> ArgumentSchema:
    """
    Translate a Python type annotation.

    `X | None` (or `Optional[X]`) is nullable, `Annotated` metadata is ignored.
    `bool` is never a number, even though it's an `int` subclass.
    """
    origin = get_origin(annotation)
    if origin is Annotated:
        return from_annotation(get_args(annotation)[0], integers=integers)

    if origin is Union or origin is UnionType:
        members = [arg for arg in get_args(annotation) if arg is not NoneType]
        if len(members) == 1 and len(get_args(annotation)) == 2:
            return NullableSchema(inner=from_annotation(members[0], integers=integers))
        return OtherSchema()

    if annotation is float or (integers and annotation is int):
        return NumberSchema()
    return OtherSchema()


def from_model(model: type[BaseModel], integers: bool = True) -> ObjectSchema:
    """Translate the top-level fields of a pydantic model."""
    fields: dict[str, ArgumentSchema] = {}
    for name, info in model.model_fields.items():
        field_schema = from_annotation(info.annotation, integers=integers)
        if not info.is_required():
            field_schema = DefaultSchema(inner=field_schema)
        fields[info.alias or name] = field_schema
    return ObjectSchema(fields=fields)


def from_json_schema(schema: Any, integers: bool = True) -> ArgumentSchema:
    """
    Translate a JSON Schema, such as the inputSchema of an MCP tool.

    References aren't resolved, so `$ref` properties are never numbers.
    """
    if not isinstance(schema, Mapping):
        return OtherSchema()

    for key in ("anyOf", "oneOf"):
        if key in schema:
            return _nullable_branches(schema[key], integers)

    typ = schema.get("type")
    if isinstance(typ, list):
        # e.g. ["number", "null"]
        branches = [{**schema, "type": item} for item in typ]
        return _nullable_branches(branches, integers)

    if typ == "number" or (integers and typ == "integer"):
        return NumberSchema()
    if typ == "object" or (typ is None and "properties" in schema):
        return _object_schema(schema, integers)
    return OtherSchema()


def _nullable_branches(branches: Any, integers: bool) -> ArgumentSchema:
    if not isinstance(branches, list):
        return OtherSchema()

    non_null = [
        branch
        for branch in branches
        if not (isinstance(branch, Mapping) and branch.get("type") == "null")
    ]
    if len(non_null) == 1 and len(branches) == 2:
        return NullableSchema(inner=from_json_schema(non_null[0], integers=integers))
    return OtherSchema()


def _object_schema(schema: Mapping[str, Any], integers: bool) -> ArgumentSchema:
    properties = schema.get("properties") or {}
    required = schema.get("required") or []
    if not isinstance(properties, Mapping) or not isinstance(required, list):
        return OtherSchema()

    fields: dict[str, ArgumentSchema] = {}
    for name, prop in properties.items():
        field_schema = from_json_schema(prop, integers=integers)
        if isinstance(prop, Mapping) and "default" in prop:
            field_schema = DefaultSchema(inner=field_schema)
        if name not in required:
            field_schema = OptionalSchema(inner=field_schema)
        fields[str(name)] = field_schema
    return ObjectSchema(fields=fields)
