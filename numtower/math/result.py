"""
Two-variant result container for fallible parse/convert operations.

``Ok`` carries a value, ``Err`` carries the ``NumericError`` that explains
why there is no value. Nothing in this module raises except ``unwrap``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from ..core.errors import NumericError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_error(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Result[U]:
        return Ok(fn(self.value))

    def match(self, on_ok: Callable[[T], U], on_error: Callable[[NumericError], U]) -> U:
        return on_ok(self.value)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err:
    """Failed result."""

    error: NumericError

    def is_ok(self) -> bool:
        return False

    def is_error(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Raise the carried error."""
        raise self.error

    def unwrap_or(self, default: Any) -> Any:
        return default

    def map(self, fn: Callable[[Any], Any]) -> Err:
        return self

    def match(self, on_ok: Callable[[Any], U], on_error: Callable[[NumericError], U]) -> U:
        return on_error(self.error)

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Err({type(self.error).__name__}: {self.error.message})"


Result = Union[Ok[T], Err]
