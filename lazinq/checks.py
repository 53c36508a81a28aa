"""
argument checks shared by every operator. they run eagerly, at the moment an
operator is called, so a malformed pipeline fails while it is being built.
"""
import inspect
import numbers
from collections.abc import Iterable as _IterableABC
from typing import Any

from .exceptions import (
    MissingArgumentError, InvalidTypeError, ArgumentOutOfRangeError
)


def is_iterable(value: Any) -> bool:
    return isinstance(value, _IterableABC)


def is_generator_function(value: Any) -> bool:
    """true for `def f(): ... yield ...` style factories (bound methods included)"""
    return inspect.isgeneratorfunction(value)


def check_not_none(name: str, value: Any, operation: str) -> None:
    if value is None:
        raise MissingArgumentError(f"argument '{name}' must not be None in '{operation}'.")


def check_callable(name: str, value: Any, operation: str) -> None:
    check_not_none(name, value, operation)
    if not callable(value):
        raise InvalidTypeError(
            f"argument '{name}' must be callable in '{operation}', got {type(value).__name__}.")


def check_optional_callable(name: str, value: Any, operation: str) -> None:
    if value is not None:
        check_callable(name, value, operation)


def check_iterable(name: str, value: Any, operation: str) -> None:
    check_not_none(name, value, operation)
    if not is_iterable(value):
        raise InvalidTypeError(
            f"argument '{name}' must be iterable in '{operation}', got {type(value).__name__}.")


def check_count(name: str, value: Any, operation: str) -> None:
    """non-negative integer (numpy integers included), bools rejected"""
    check_not_none(name, value, operation)
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidTypeError(
            f"argument '{name}' must be an integer in '{operation}', got {type(value).__name__}.")
    if value < 0:
        raise ArgumentOutOfRangeError(f"argument '{name}' must not be negative in '{operation}', got {value}.")


def check_optional_count(name: str, value: Any, operation: str) -> None:
    if value is not None:
        check_count(name, value, operation)
