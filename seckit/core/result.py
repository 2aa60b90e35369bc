"""
Result values and the error taxonomy shared by every seckit component.

Fallible operations return a :class:`Result` instead of raising, so callers
must look at ``is_error`` before using the value.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Classification attached to every failed :class:`Result`."""

    INVALID_ARGUMENT = "InvalidArgument"
    DATA_LOSS = "DataLoss"
    INTERNAL = "Internal"


@dataclass(frozen=True)
class Failure:
    """An error kind plus a short, deterministic message."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"


class SecKitError(Exception):
    """Raised by :meth:`Result.unwrap` when the result holds a failure."""

    def __init__(self, failure: Failure) -> None:
        super().__init__(str(failure))
        self.kind = failure.kind
        self.failure = failure


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a :class:`Failure`, never both."""

    value: Optional[T] = None
    error: Optional[Failure] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(error=Failure(kind, message))

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Error kind, or None for a successful result."""
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        """
        Return the value or raise.

        Raises:
            SecKitError: If the result holds a failure.
        """
        if self.error is not None:
            raise SecKitError(self.error)
        return self.value  # type: ignore[return-value]
