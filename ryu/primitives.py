"""
Primitive schemas: strings, numbers and booleans.

Each primitive checks the value's type first, then runs its checks in the
order they were chained. Mutually exclusive chain methods are rejected with a
ConfigurationError as soon as the second one is called.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any

from .core import ROOT_PRIMITIVE_PATH, Check, Schema, resolve_message
from .errors import ValidationError
from .types import Path

EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9._%+-]+@(?:[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?\.)+[A-Za-z]{2,}$"
)
URL_PATTERN = re.compile(
    r"^(?:[A-Za-z][A-Za-z0-9+.-]*://)?"  # scheme
    r"(?:localhost|(?:[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?\.)+[A-Za-z]{2,})"  # host
    r"(?::\d{1,5})?"  # port
    r"(?:/[^\s?#]*)?"  # path
    r"(?:\?[^\s#]*)?"  # query
    r"(?:#\S*)?$"
)


def _check_size(n: Any, method: str) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{method}() expects an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{method}() expects a non-negative length, got {n}")


def _check_bound(n: Any, method: str) -> None:
    if isinstance(n, bool) or not isinstance(n, (int, float)) or math.isnan(n):
        raise TypeError(f"{method}() expects a number, got {n!r}")


@dataclass(frozen=True, slots=True)
class StringSchema(Schema[str]):
    """
    String validator.

    Usage:
        string().min(3).max(20)
        string().length(6, "PIN must have 6 digits")
        string().starts_with("https://").includes("example")
    """

    root_path = ROOT_PRIMITIVE_PATH

    def min(self, n: int, message: str | None = None) -> StringSchema:
        """Require at least `n` characters."""
        _check_size(n, "min")
        return self._chain(
            Check(
                "min",
                n,
                resolve_message(message, f"String must have {n} characters"),
                lambda s: len(s) >= n,
            ),
            family="range",
            conflict="Cannot use min() when a fixed length() has already been set.",
        )

    def max(self, n: int, message: str | None = None) -> StringSchema:
        """Allow at most `n` characters."""
        _check_size(n, "max")
        return self._chain(
            Check(
                "max",
                n,
                resolve_message(message, f"String must be less than {n} characters"),
                lambda s: len(s) <= n,
            ),
            family="range",
            conflict="Cannot use max() when a fixed length() has already been set.",
        )

    def length(self, n: int, message: str | None = None) -> StringSchema:
        """Require exactly `n` characters. Exclusive with min()/max()."""
        _check_size(n, "length")
        return self._chain(
            Check(
                "length",
                n,
                resolve_message(message, f"String must contain {n} characters"),
                lambda s: len(s) == n,
            ),
            family="length",
            conflict="Cannot use length() when min() or max() has already been set.",
        )

    def includes(self, substring: str, message: str | None = None) -> StringSchema:
        return self._chain(
            Check(
                "includes",
                substring,
                resolve_message(message, f"String must include {substring}"),
                lambda s: substring in s,
            )
        )

    def starts_with(self, prefix: str, message: str | None = None) -> StringSchema:
        return self._chain(
            Check(
                "starts_with",
                prefix,
                resolve_message(message, f"String must start with {prefix}"),
                lambda s: s.startswith(prefix),
            )
        )

    def ends_with(self, suffix: str, message: str | None = None) -> StringSchema:
        return self._chain(
            Check(
                "ends_with",
                suffix,
                resolve_message(message, f"String must end with {suffix}"),
                lambda s: s.endswith(suffix),
            )
        )

    def email(self, message: str | None = None) -> StringSchema:
        """Require an address of the form local@domain.tld."""
        return self._chain(
            Check(
                "email",
                EMAIL_PATTERN.pattern,
                resolve_message(message, "Invalid email"),
                lambda s: EMAIL_PATTERN.fullmatch(s) is not None,
            )
        )

    def url(self, message: str | None = None) -> StringSchema:
        """Require a URL: optional scheme, dotted host, optional path and query."""
        return self._chain(
            Check(
                "url",
                URL_PATTERN.pattern,
                resolve_message(message, "Invalid URL"),
                lambda s: URL_PATTERN.fullmatch(s) is not None,
            )
        )

    def _parse(self, value: Any, path: Path) -> str:
        if not isinstance(value, str):
            raise ValidationError("Expected string", path)
        self._run_checks(value, path)
        return value


@dataclass(frozen=True, slots=True)
class NumberSchema(Schema[int | float]):
    """
    Number validator. Accepts int and float; bool and NaN are rejected.

    positive() passes only for values > 0 and negative() only for values < 0,
    so 0 satisfies neither.
    """

    root_path = ROOT_PRIMITIVE_PATH

    def min(self, n: int | float, message: str | None = None) -> NumberSchema:
        _check_bound(n, "min")
        return self._chain(
            Check(
                "min",
                n,
                resolve_message(message, f"Too small (min {n})"),
                lambda x: x >= n,
            )
        )

    def max(self, n: int | float, message: str | None = None) -> NumberSchema:
        _check_bound(n, "max")
        return self._chain(
            Check(
                "max",
                n,
                resolve_message(message, f"Too large (max {n})"),
                lambda x: x <= n,
            )
        )

    def positive(self, message: str | None = None) -> NumberSchema:
        return self._chain(
            Check(
                "positive",
                True,
                resolve_message(message, "Should be positive"),
                lambda x: x > 0,
            ),
            family="positive",
            conflict="Cannot use positive() when negative() is already set",
        )

    def negative(self, message: str | None = None) -> NumberSchema:
        return self._chain(
            Check(
                "negative",
                True,
                resolve_message(message, "Should be negative"),
                lambda x: x < 0,
            ),
            family="negative",
            conflict="Cannot use negative() when positive() is already set",
        )

    def _parse(self, value: Any, path: Path) -> int | float:
        if (
            isinstance(value, bool)
            or not isinstance(value, (int, float))
            or (isinstance(value, float) and math.isnan(value))
        ):
            raise ValidationError("Expected number", path)
        self._run_checks(value, path)
        return value


@dataclass(frozen=True, slots=True)
class BooleanSchema(Schema[bool]):
    """Boolean validator with optional true()/false() pinning."""

    root_path = ROOT_PRIMITIVE_PATH

    def true(self, message: str | None = None) -> BooleanSchema:
        return self._chain(
            Check(
                "true",
                True,
                resolve_message(message, "Should be true"),
                lambda b: b is True,
            ),
            family="true",
            conflict="Cannot use true() when false() is already set",
        )

    def false(self, message: str | None = None) -> BooleanSchema:
        return self._chain(
            Check(
                "false",
                False,
                resolve_message(message, "Should be false"),
                lambda b: b is False,
            ),
            family="false",
            conflict="Cannot use false() when true() is already set",
        )

    def _parse(self, value: Any, path: Path) -> bool:
        if not isinstance(value, bool):
            raise ValidationError("Expected boolean", path)
        self._run_checks(value, path)
        return value
