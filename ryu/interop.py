"""
Pydantic interop for ryu.

Provides to_pydantic(), which compiles an object schema into a Pydantic model
so tools that work on static types can reuse a ryu schema's structure.
"""

from __future__ import annotations

from typing import Any

from pydantic import create_model

from .composites import ArraySchema, ObjectSchema
from .core import OptionalSchema, Schema
from .primitives import BooleanSchema, NumberSchema, StringSchema


def to_pydantic(name: str, schema: ObjectSchema) -> type:
    """
    Compile an object schema to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: Object schema built with ryu.object()

    Returns:
        A Pydantic BaseModel subclass. Nested objects become nested models
        named `{name}_{field}`; optional fields default to None.

    Only field types are carried over; constraints such as min()/email()
    stay with the ryu schema.

    Usage:
        User = to_pydantic("User", ryu.object({
            "name": ryu.string(),
            "email": ryu.email().optional(),
        }))
        user = User(name="Alice")
    """
    if not isinstance(schema, ObjectSchema):
        raise TypeError("Schema must be an object schema")

    fields: dict[str, Any] = {}

    for key, child in schema.shape.items():
        fields[key] = _extract_pydantic_field(child, f"{name}_{key}")

    return create_model(name, **fields)


def _extract_pydantic_field(schema: Schema[Any], name: str) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from a schema."""
    match schema:
        case OptionalSchema(inner=inner):
            field_type, _ = _extract_pydantic_field(inner, name)
            return (field_type | None, None)
        case StringSchema():
            return (str, ...)
        case NumberSchema():
            return (int | float, ...)
        case BooleanSchema():
            return (bool, ...)
        case ObjectSchema():
            return (to_pydantic(name, schema), ...)
        case ArraySchema(element=None):
            return (list[Any], ...)
        case ArraySchema(element=element):
            item_type, _ = _extract_pydantic_field(element, name)
            return (list[item_type], ...)  # type: ignore[valid-type]

    return (Any, ...)
