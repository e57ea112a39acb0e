"""
Context manager for validation configuration (strict objects, depth limit).
"""

from contextlib import contextmanager
from contextvars import ContextVar

DEFAULT_MAX_DEPTH = 128

# Context variables for validation settings
_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=False)
_max_depth: ContextVar[int] = ContextVar("max_depth", default=DEFAULT_MAX_DEPTH)


def is_strict() -> bool:
    """Check if strict object validation is currently enabled."""
    return _strict_mode.get()


def get_max_depth() -> int:
    """Maximum nesting depth composite schemas will descend into."""
    return _max_depth.get()


@contextmanager
def validation_context(*, strict: bool = False, max_depth: int = DEFAULT_MAX_DEPTH):
    """
    Context manager for validation configuration.

    Args:
        strict: If True, every object schema parsed inside the context rejects
               keys that are not declared in its shape, as if `.strict()` had
               been called on it.
        max_depth: Maximum nesting depth of objects/arrays in the input.
                   Deeper payloads fail with a code-1 ValidationError instead
                   of exhausting the interpreter stack.

    Example:
        from ryu import object, string, validation_context

        user = object({"name": string()})

        # Normal: unknown keys are ignored
        user.parse({"name": "Ryu", "admin": True})

        # Strict: unknown keys fail
        with validation_context(strict=True):
            user.parse({"name": "Ryu", "admin": True})  # ValidationError!
    """
    if max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}")

    strict_token = _strict_mode.set(strict)
    depth_token = _max_depth.set(max_depth)
    try:
        yield
    finally:
        _max_depth.reset(depth_token)
        _strict_mode.reset(strict_token)
