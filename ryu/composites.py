"""
Composite schemas: objects and arrays.

Both recurse into child schemas, extending the path with the field name or
element index. The first child failure aborts the whole parse.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from .context import get_max_depth, is_strict
from .core import Check, Schema, resolve_message
from .errors import ValidationError
from .types import Path

logger = logging.getLogger(__name__)


def _guard_depth(path: Path) -> None:
    """Refuse to descend past the configured maximum nesting depth."""
    max_depth = get_max_depth()
    if len(path) >= max_depth:
        logger.debug("Depth limit %d reached at %s", max_depth, path)
        raise ValidationError(f"Maximum nesting depth of {max_depth} exceeded", path)


@dataclass(frozen=True, slots=True)
class ObjectSchema(Schema[dict[str, Any]]):
    """
    Validator for mappings with a fixed set of declared fields.

    Fields are validated in declaration order. Keys missing from the input
    are parsed as None, so only optional() fields may be absent. Undeclared
    keys are ignored unless strict() or validation_context(strict=True).
    """

    shape: Mapping[str, Schema[Any]]
    message: str = "Expected object"
    reject_unknown: bool = field(default=False, kw_only=True)
    unknown_message: str | None = field(default=None, kw_only=True)

    def __post_init__(self) -> None:
        if not isinstance(self.shape, Mapping):
            raise TypeError(f"Shape must be a mapping, got {type(self.shape).__name__}")
        for key, schema in self.shape.items():
            if not isinstance(key, str):
                raise TypeError(f"Field names must be str, got {key!r}")
            if not isinstance(schema, Schema):
                raise TypeError(
                    f"Field '{key}' must be a schema, got {type(schema).__name__}"
                )
        # Freeze a private copy so later edits to the caller's dict do not leak in
        object.__setattr__(self, "shape", MappingProxyType(dict(self.shape)))

    def strict(self, message: str | None = None) -> ObjectSchema:
        """Return a copy that rejects keys not declared in the shape."""
        return replace(self, reject_unknown=True, unknown_message=message)

    def _parse(self, value: Any, path: Path) -> dict[str, Any]:
        if not isinstance(value, Mapping):
            raise ValidationError(self.message, path)
        _guard_depth(path)

        result: dict[str, Any] = {}
        for key, schema in self.shape.items():
            field_path = (*path, key)
            try:
                result[key] = schema.parse(value.get(key), field_path)
            except ValidationError as err:
                err.attach_path(field_path)
                raise

        if self.reject_unknown or is_strict():
            for key in value:
                if key not in self.shape:
                    message = resolve_message(
                        self.unknown_message, f"Unrecognized key: {key}"
                    )
                    raise ValidationError(message, (*path, key))

        return result


@dataclass(frozen=True, slots=True)
class ArraySchema(Schema[list[Any]]):
    """
    Validator for lists (and tuples) whose items all match one schema.

    The result is always a new list of the validated items in input order.
    """

    element: Schema[Any] | None = None
    message: str = "Expected array"

    def __post_init__(self) -> None:
        if self.element is not None and not isinstance(self.element, Schema):
            raise TypeError(
                f"Array element must be a schema, got {type(self.element).__name__}"
            )

    def min(self, n: int, message: str | None = None) -> ArraySchema:
        """Require at least `n` items."""
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ValueError(f"min() expects a non-negative int, got {n!r}")
        return self._chain(
            Check(
                "min",
                n,
                resolve_message(message, f"Array must contain at least {n} items"),
                lambda items: len(items) >= n,
            )
        )

    def max(self, n: int, message: str | None = None) -> ArraySchema:
        """Allow at most `n` items."""
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ValueError(f"max() expects a non-negative int, got {n!r}")
        return self._chain(
            Check(
                "max",
                n,
                resolve_message(message, f"Array must contain at most {n} items"),
                lambda items: len(items) <= n,
            )
        )

    def _parse(self, value: Any, path: Path) -> list[Any]:
        if not isinstance(value, (list, tuple)):
            raise ValidationError(self.message, path)
        self._run_checks(value, path)

        if self.element is None:
            return list(value)
        _guard_depth(path)

        result = []
        for i, item in enumerate(value):
            item_path = (*path, i)
            try:
                result.append(self.element.parse(item, item_path))
            except ValidationError as err:
                err.attach_path(item_path)
                raise
        return result
