"""
Builder functions for ryu schemas.

These are the public entry points; each returns a fresh schema node.

Usage:
    import ryu

    user = ryu.object({
        "name": ryu.string().min(3),
        "email": ryu.email(),
        "age": ryu.number().positive().optional(),
        "tags": ryu.array(ryu.string()),
    })
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .composites import ArraySchema, ObjectSchema
from .core import Schema
from .primitives import BooleanSchema, NumberSchema, StringSchema


def string() -> StringSchema:
    return StringSchema()


def number() -> NumberSchema:
    return NumberSchema()


def boolean() -> BooleanSchema:
    return BooleanSchema()


def email(message: str | None = None) -> StringSchema:
    """String schema preconfigured with email()."""
    return StringSchema().email(message)


def url(message: str | None = None) -> StringSchema:
    """String schema preconfigured with url()."""
    return StringSchema().url(message)


def object(  # noqa: A001
    shape: Mapping[str, Schema[Any]], message: str | None = None
) -> ObjectSchema:
    """
    Schema for a mapping with the given fields.

    Usage:
        object({"id": number(), "name": string()})
        object({"id": number()}, "Payload must be a JSON object").strict()
    """
    if message is None:
        return ObjectSchema(shape)
    return ObjectSchema(shape, message)


def array(element: Schema[Any] | None = None, message: str | None = None) -> ArraySchema:
    """
    Schema for a list whose items all match `element`.

    Usage:
        array(number())
        array(string(), "Tags must be a list").min(1)
    """
    if message is None:
        return ArraySchema(element)
    return ArraySchema(element, message)
