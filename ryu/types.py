"""
Type definitions for ryu.

Provides the safe-parse result types (Ok/Err) and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from .errors import ValidationError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful parse carrying the validated value."""

    data: T

    @property
    def success(self) -> bool:
        return True

    @property
    def error(self) -> None:
        return None

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err:
    """Failed parse carrying the ValidationError."""

    error: ValidationError

    @property
    def success(self) -> bool:
        return False

    @property
    def data(self) -> None:
        return None

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


# Type aliases
SafeParseResult = Ok[T] | Err
CheckFn = Callable[[Any], bool]
Path = tuple[str | int, ...]
