"""
Ryu - composable runtime schemas with path-qualified errors.

Usage:
    import ryu

    schema = ryu.object({
        "name": ryu.string().min(3),
        "age": ryu.number().positive(),
        "email": ryu.email().optional(),
        "tags": ryu.array(ryu.string()),
    })

    data = schema.parse(payload)          # raises ryu.ValidationError
    result = schema.safe_parse(payload)   # Ok(data) or Err(error)
"""

from .builders import array, boolean, email, number, object, string, url
from .composites import ArraySchema, ObjectSchema
from .context import get_max_depth, is_strict, validation_context
from .core import Check, OptionalSchema, Schema
from .errors import ConfigurationError, ErrorCode, ValidationError
from .interop import to_pydantic
from .primitives import BooleanSchema, NumberSchema, StringSchema
from .types import Err, Ok, SafeParseResult

__all__ = [
    # Builders
    "string",
    "number",
    "boolean",
    "object",
    "array",
    "email",
    "url",
    # Schemas
    "Schema",
    "OptionalSchema",
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "ObjectSchema",
    "ArraySchema",
    "Check",
    # Results and errors
    "Ok",
    "Err",
    "SafeParseResult",
    "ValidationError",
    "ConfigurationError",
    "ErrorCode",
    # Configuration
    "validation_context",
    "is_strict",
    "get_max_depth",
    # Interop
    "to_pydantic",
]
