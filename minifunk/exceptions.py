from typing import Any, Iterable


class InvalidArgumentError(ValueError):
    """a required argument is missing or out of range. raised before any element is touched."""
    pass


def require_callable(func: Any, name: str) -> None:
    """guard for capability arguments (predicate, mapper, action, ...)"""
    if func is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if not callable(func):
        raise InvalidArgumentError(f"{name} must be callable, got {type(func).__name__}")


def require_iterable(source: Any, name: str = "source") -> Iterable:
    if source is None:
        raise InvalidArgumentError(f"{name} must not be None")
    try:
        iter(source)
    except TypeError:
        raise InvalidArgumentError(f"{name} must be iterable, got {type(source).__name__}") from None
    return source


def require_bound(value: Any, name: str) -> int:
    """guard for size bounds: a non-negative int, bools excluded"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must not be negative, got {value}")
    return value
