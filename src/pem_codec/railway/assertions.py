"""
Test assertions for Result values.

Expressive assert helpers that produce clear failure messages:

    from pem_codec.railway import PemErrorKind, ResultAssertions

    def test_parse_certificate():
        pem = ResultAssertions.assert_success(parse(SAMPLE))
        assert pem.tag == "CERTIFICATE"

    def test_mismatched_tags():
        failure = ResultAssertions.assert_failure(parse(BAD), PemErrorKind.MISMATCHED_TAGS)
        assert failure.tags == ("A", "B")
"""

from __future__ import annotations

from typing import Any, TypeVar

from pem_codec.railway.failure import PemErrorKind, PemFailure
from pem_codec.railway.result import Result

T = TypeVar("T")


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[T], message: str = "") -> T:
        """
        Assert the Result is a Success and return the value.

            pem = ResultAssertions.assert_success(parse(text))
        """
        context = f" — {message}" if message else ""
        assert result.is_success(), (
            f"Expected Success but got Failure({result.error()}){context}"
        )
        return result.value()

    @staticmethod
    def assert_failure(
        result: Result[T],
        expected_kind: PemErrorKind | None = None,
        message: str = "",
    ) -> PemFailure:
        """
        Assert the Result is a Failure, optionally checking its kind.

            failure = ResultAssertions.assert_failure(result, PemErrorKind.INVALID_DATA)
        """
        context = f" — {message}" if message else ""
        assert result.is_failure(), (
            f"Expected Failure but got Success({result.value()!r}){context}"
        )
        error = result.error()
        if expected_kind is not None:
            assert error.kind == expected_kind, (
                f"Expected failure kind {expected_kind.value} "
                f"but got {error.kind.value}: {error.message!r}{context}"
            )
        return error

    @staticmethod
    def assert_failure_message_contains(result: Result[T], substring: str) -> None:
        """Assert that the failure message contains the given substring (case-insensitive)."""
        error = ResultAssertions.assert_failure(result)
        assert substring.lower() in error.message.lower(), (
            f"Expected failure message to contain {substring!r} "
            f"but message was: {error.message!r}"
        )

    @staticmethod
    def assert_success_value(result: Result[T], expected_value: Any) -> None:
        """Assert the Result is a Success with the specific value."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )
