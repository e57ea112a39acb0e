"""
Core schema classes for ryu.

Provides the Check record, the Schema base contract (parse / safe_parse /
optional) and the OptionalSchema wrapper.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, Generic, TypeVar

from .errors import ConfigurationError, ValidationError
from .types import CheckFn, Err, Ok, Path, SafeParseResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Synthetic path used when a bare primitive is parsed at the root
ROOT_PRIMITIVE_PATH: Path = ("value",)


def resolve_message(message: str | None, default: str) -> str:
    """Use the caller's message when given (even ""), else the default."""
    return default if message is None else message


@dataclass(frozen=True, slots=True)
class Check:
    """
    A single named constraint.

    `value` is the activation value given to the chain method (e.g. 3 for
    `.min(3)`) and is kept for introspection only; `predicate` decides.
    """

    name: str
    value: Any
    message: str
    predicate: CheckFn

    def __call__(self, data: Any, path: Path) -> None:
        if not self.predicate(data):
            raise ValidationError(self.message, path)


@dataclass(frozen=True, slots=True)
class Schema(ABC, Generic[T]):
    """
    Immutable schema node.

    Chain methods never mutate the receiver: each returns a new node with the
    refined configuration, so a schema can be shared freely once built.
    `state` tags the active mutually-exclusive constraint family, if any.
    """

    checks: tuple[Check, ...] = field(default=(), kw_only=True)
    state: str | None = field(default=None, kw_only=True)

    root_path: ClassVar[Path] = ()

    @abstractmethod
    def _parse(self, value: Any, path: Path) -> T:
        """Validate `value` found at `path`; raise ValidationError on failure."""

    def parse(self, value: Any, path: Path | None = None) -> T:
        """
        Validate a value.

        Returns:
            The validated value

        Raises:
            ValidationError: on the first failure, with its path attached
        """
        path = self.root_path if path is None else tuple(path)
        try:
            return self._parse(value, path)
        except ValidationError as err:
            err.attach_path(path)
            raise

    def safe_parse(self, value: Any) -> SafeParseResult[T]:
        """
        Validate a value without raising.

        Returns:
            Ok(data) if validation passes
            Err(error) if validation fails
        """
        try:
            data = self.parse(value)
        except ValidationError as err:
            error = err
        except Exception as e:
            error = ValidationError(str(e) or type(e).__name__, self.root_path)
            error.__cause__ = e
        else:
            return Ok(data)

        error.capture_stack()
        logger.debug(
            "%s rejected input at %s: %s",
            type(self).__name__,
            error.path,
            error.message,
        )
        return Err(error)

    def __call__(self, value: Any) -> SafeParseResult[T]:
        return self.safe_parse(value)

    @property
    def is_optional(self) -> bool:
        return False

    def optional(self) -> OptionalSchema[T]:
        """Return a view of this schema that also accepts None."""
        return OptionalSchema(self)

    def _chain(
        self,
        check: Check,
        family: str | None = None,
        conflict: str | None = None,
    ):
        """
        Return a copy of this schema with `check` attached.

        A check with the same name replaces the earlier one in place. When
        `family` is given and a different family is already active, raise
        ConfigurationError with the `conflict` message.
        """
        if family is not None and self.state not in (None, family):
            raise ConfigurationError(
                conflict or f"Cannot combine {family} with {self.state}"
            )

        checks = list(self.checks)
        for i, existing in enumerate(checks):
            if existing.name == check.name:
                checks[i] = check
                break
        else:
            checks.append(check)

        return replace(self, checks=tuple(checks), state=family or self.state)

    def _run_checks(self, value: Any, path: Path) -> None:
        for check in self.checks:
            check(value, path)


@dataclass(frozen=True, slots=True)
class OptionalSchema(Schema[T | None]):
    """Wrapper that short-circuits None to a successful None result."""

    inner: Schema[T]

    def __post_init__(self) -> None:
        if not isinstance(self.inner, Schema):
            raise TypeError(
                f"optional() requires a schema, got {type(self.inner).__name__}"
            )

    @property
    def root_path(self) -> Path:  # type: ignore[override]
        return self.inner.root_path

    @property
    def is_optional(self) -> bool:
        return True

    def optional(self) -> OptionalSchema[T]:
        return self

    def __getattr__(self, name: str) -> Any:
        """
        Forward chain methods to the inner schema and re-wrap the result,
        so `string().optional().min(3)` stays optional.
        """
        if name.startswith("_") or name == "inner":
            raise AttributeError(name)
        attr = getattr(self.inner, name)
        if not callable(attr):
            return attr

        def chained(*args: Any, **kwargs: Any) -> Any:
            result = attr(*args, **kwargs)
            if isinstance(result, Schema):
                return result.optional()
            return result

        return chained

    def _parse(self, value: Any, path: Path) -> T | None:
        if value is None:
            return None
        return self.inner.parse(value, path)
