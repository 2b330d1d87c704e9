# doc_service_client/result.py
"""
Explicit success/error values for client calls.

The client raises DocServiceError. Code that prefers to branch on a value
instead of catching can wrap any call with Result.capture:

    result = Result.capture(client.store_text, "hello")
    if result.ok:
        print(result.value)
    else:
        print(result.error.message)

Only DocServiceError is captured; anything else is a bug and propagates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from doc_service_client.exceptions import DocServiceError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or the DocServiceError that prevented it."""

    value: Optional[T] = None
    error: Optional[DocServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: DocServiceError) -> "Result[T]":
        return cls(error=error)

    @classmethod
    def capture(cls, func: Callable[..., T], *args: Any, **kwargs: Any) -> "Result[T]":
        """Call ``func`` and capture its outcome."""
        try:
            return cls.success(func(*args, **kwargs))
        except DocServiceError as e:
            return cls.failure(e)


__all__ = ["Result"]
