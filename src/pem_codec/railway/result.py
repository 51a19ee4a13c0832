"""
Result monad — the railway every PEM decode step runs on.

A Result[T] is either Success(value: T) or Failure(error: PemFailure).
Decode steps return Result instead of raising. Errors propagate through
the failure track via .flat_map() short-circuiting:

    ┌───────────┐   flat_map    ┌───────────┐   flat_map    ┌──────────┐
    │ begin tag │──Success──────│  end tag  │──Success──────│  base64  │──→ Result[Pem]
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Failure                   │ Failure                   │ Failure
          └───────────────────────────┴───────────────────────────┴──→ Result[Pem]
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pem_codec.railway.failure import PemErrorKind, PemFailure

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class Result(Generic[T]):
    """
    Railway-Oriented Programming Result monad.

    Two possible states:
      - Success(value: T)  — the happy path
      - Failure(error: PemFailure) — the error track

    Usage:
        >>> Result.success(b"\\x01").map(len).value()
        1

        >>> result = Result.failure(PemErrorKind.MISSING_DATA, "no data")
        >>> result.map(len).is_failure()
        True
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def value(self) -> T:
        """
        Extract the success value. Raises ValueError if called on a Failure.

        Prefer .either() or match/case for safe access.
        """
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise ValueError(f"Cannot get value from a Failure: {err}")
        raise TypeError("unreachable")  # pragma: no cover

    def error(self) -> PemFailure:
        """Extract the failure. Raises ValueError if called on a Success."""
        match self:
            case Failure(err):
                return err
            case Success(v):
                raise ValueError(f"Cannot get error from a Success: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Core Transformations ────────────────────────

    def either(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[PemFailure], R],
    ) -> R:
        """
        Apply one of two functions depending on the state.

            result.either(
                on_success=lambda pem: pem.tag,
                on_failure=lambda err: f"Error: {err.message}",
            )
        """
        match self:
            case Success(v):
                return on_success(v)
            case Failure(err):
                return on_failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map(self, mapper: Callable[[T], U]) -> Result[U]:
        """Transform the success value. Short-circuits on failure."""
        match self:
            case Success(v):
                return Success(mapper(v))
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def flat_map(self, mapper: Callable[[T], Result[U]]) -> Result[U]:
        """
        Chain a Result-returning function. Short-circuits on failure.

        This is the operator that connects the decode steps:

            begin_tag(match).flat_map(lambda tag: end_tag(match, tag))
        """
        match self:
            case Success(v):
                return mapper(v)
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def ensure(
        self,
        predicate: Callable[[T], bool],
        error: PemFailure | PemErrorKind,
        message: str = "",
    ) -> Result[T]:
        """
        Validate the success value against a condition.

        Accepts either a ready PemFailure or a kind + message.

            Result.success(tag).ensure(bool, PemErrorKind.MISSING_BEGIN_TAG, "empty tag")
        """
        if isinstance(error, PemErrorKind):
            error = PemFailure.create(error, message)

        return self.flat_map(
            lambda v: Result.success(v) if predicate(v) else Result.failure_from(error)
        )

    # ──────────────────────── Side Effects ────────────────────────

    def peek_failure(self, action: Callable[[PemFailure], Any]) -> Result[T]:
        """Execute a side effect on failure without altering the Result."""
        match self:
            case Failure(err):
                action(err)
        return self

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: T) -> Result[T]:
        return Success(value)

    @staticmethod
    def failure_from(error: PemFailure) -> Result[T]:
        return Failure(error)

    @staticmethod
    def failure(
        kind: PemErrorKind,
        message: str,
        exception: BaseException | None = None,
    ) -> Result[T]:
        """
        Create a failed Result with kind, message and optional cause.

            Result.failure(PemErrorKind.MALFORMED_FRAMING, "no PEM block found")
            Result.failure(PemErrorKind.INVALID_DATA, "bad base64", ex)
        """
        return Failure(PemFailure.create(kind, message, exception))

    @staticmethod
    def from_computation(
        computation: Callable[[], T],
        kind: PemErrorKind,
        message: str,
        catch: type[Exception] | tuple[type[Exception], ...] = Exception,
    ) -> Result[T]:
        """
        Create a Result from a computation that may raise.

        Only exceptions matching `catch` are moved onto the failure track;
        anything else propagates.

            Result.from_computation(
                lambda: raw.decode("utf-8"),
                PemErrorKind.NOT_UTF8,
                "tag is not valid UTF-8",
                catch=UnicodeDecodeError,
            )
        """
        try:
            return Result.success(computation())
        except catch as e:
            return Result.failure(kind, f"{message}: {e}", e)

    @staticmethod
    def from_optional(value: T | None, kind: PemErrorKind, message: str) -> Result[T]:
        """Create a Result from a value that may be None (e.g. an absent regex group)."""
        if value is not None:
            return Result.success(value)
        return Result.failure(kind, message)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """`if result: ...` succeeds only on Success."""
        return self.is_success()

    def __repr__(self) -> str:
        match self:
            case Success(v):
                return f"Success({v!r})"
            case Failure(err):
                return f"Failure({err.kind.value}: {err.message!r})"
        raise TypeError("unreachable")  # pragma: no cover

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        match (self, other):
            case (Success(a), Success(b)):
                return a == b
            case (Failure(a), Failure(b)):
                return a == b
            case _:
                return False


@dataclass(frozen=True, slots=True)
class Success(Result[T]):
    """The success track — wraps a value of type T."""

    _value: T

    def __init__(self, value: T) -> None:
        if value is None:
            raise TypeError("Success value must not be None")
        object.__setattr__(self, "_value", value)

    def __repr__(self) -> str:
        return f"Success({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Success):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Success", self._value))


# Enable structural pattern matching: case Success(value)
Success.__match_args__ = ("_value",)


@dataclass(frozen=True, slots=True)
class Failure(Result[T]):
    """The failure track — wraps a PemFailure."""

    _error: PemFailure

    def __init__(self, error: PemFailure) -> None:
        if error is None:
            raise TypeError("Failure error must not be None")
        object.__setattr__(self, "_error", error)

    def __repr__(self) -> str:
        return f"Failure({self._error.kind.value}: {self._error.message!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Failure):
            return self._error == other._error
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Failure", self._error))


# Enable structural pattern matching: case Failure(error)
Failure.__match_args__ = ("_error",)
