"""Explicit success/failure results for rendering operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class RenderingFailed(RuntimeError):
    """Raised by :meth:`Result.unwrap` on a failed result."""


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a rendering operation.

    Either ``value`` is set (success) or ``reason`` is set (failure). Build
    instances with :meth:`success` and :meth:`failure`.

    Attributes
    ----------
    value
        Produced image or bytes on success.
    reason
        Human-readable description of what failed.
    """

    value: Optional[T] = None
    reason: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, reason: str) -> "Result[T]":
        if not reason:
            raise ValueError("a failed result needs a reason")
        return cls(reason=reason)

    @property
    def ok(self) -> bool:
        return self.reason is None

    def __bool__(self) -> bool:
        return self.ok

    def then(self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Chain another operation; failures pass through untouched."""

        if not self.ok:
            return Result.failure(self.reason)
        return func(self.value)

    def unwrap(self) -> T:
        """Return the value or raise :class:`RenderingFailed`."""

        if not self.ok:
            raise RenderingFailed(self.reason)
        return self.value
