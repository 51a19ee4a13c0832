"""
Failure description — structured error information for the failure track.

Every way a PEM block can be rejected is one member of PemErrorKind.
PemFailure carries the kind plus the diagnostics that go with it:
the underlying exception for NOT_UTF8 / INVALID_DATA and the tag pair
for MISMATCHED_TAGS.

Enum + frozen dataclass gives a closed set of kinds with __eq__,
__hash__ and __repr__ for free.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from enum import Enum, unique


@unique
class PemErrorKind(Enum):
    """
    Closed set of reasons a PEM block fails to decode.

    Only MALFORMED_FRAMING is specific to single-block parsing; all other
    kinds come from validating one matched block.
    """

    MALFORMED_FRAMING = "MALFORMED_FRAMING"
    """No -----BEGIN ...----- / -----END ...----- pair anywhere in the input."""

    MISSING_BEGIN_TAG = "MISSING_BEGIN_TAG"
    """BEGIN tag absent or empty."""

    MISSING_END_TAG = "MISSING_END_TAG"
    """END tag absent or empty."""

    MISMATCHED_TAGS = "MISMATCHED_TAGS"
    """BEGIN and END tags both present but not equal."""

    MISSING_DATA = "MISSING_DATA"
    """Data region absent."""

    NOT_UTF8 = "NOT_UTF8"
    """A captured region is not valid UTF-8."""

    INVALID_DATA = "INVALID_DATA"
    """The cleaned data region is not valid padded base64."""


@dataclass(frozen=True, slots=True)
class PemFailure:
    """
    Immutable failure descriptor: kind, message, optional cause and tag pair.

    >>> failure = PemFailure.mismatched_tags("A", "B")
    >>> failure.kind
    <PemErrorKind.MISMATCHED_TAGS: 'MISMATCHED_TAGS'>
    >>> failure.message
    'mismatching BEGIN ("A") and END ("B") tags'
    """

    kind: PemErrorKind
    message: str
    exception: BaseException | None = field(default=None, repr=False, compare=False)
    begin_tag: str | None = None
    end_tag: str | None = None

    @staticmethod
    def create(
        kind: PemErrorKind,
        message: str,
        exception: BaseException | None = None,
    ) -> PemFailure:
        return PemFailure(kind=kind, message=message, exception=exception)

    @staticmethod
    def mismatched_tags(begin_tag: str, end_tag: str) -> PemFailure:
        """Build the MISMATCHED_TAGS failure, keeping both tags for diagnostics."""
        return PemFailure(
            kind=PemErrorKind.MISMATCHED_TAGS,
            message=f'mismatching BEGIN ("{begin_tag}") and END ("{end_tag}") tags',
            begin_tag=begin_tag,
            end_tag=end_tag,
        )

    @property
    def tags(self) -> tuple[str, str] | None:
        """The (begin, end) tag pair of a MISMATCHED_TAGS failure, else None."""
        if self.begin_tag is None or self.end_tag is None:
            return None
        return self.begin_tag, self.end_tag

    def full_stack_trace(self) -> str:
        """Message followed by the formatted cause, if there is one."""
        if self.exception is None:
            return self.message
        tb = "".join(
            traceback.format_exception(
                type(self.exception), self.exception, self.exception.__traceback__
            )
        )
        return f"{self.message}\n{tb}"

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"
