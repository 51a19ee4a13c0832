"""
Domain models — immutable values flowing through the PEM codec.

  Pem           — one decoded (or to-be-encoded) tagged binary section
  FramingMatch  — raw captures of one candidate BEGIN/END block
  EncodeConfig  — line layout used when serializing

All models are frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Pem:
    """
    A tagged binary section, e.g. tag="CERTIFICATE" and the DER bytes.

    A Pem returned by the decoder always has a non-empty tag that matched
    between its BEGIN and END lines. `contents` may be empty and is never
    interpreted.
    """

    tag: str
    contents: bytes = b""

    def __repr__(self) -> str:
        return f"Pem(tag={self.tag!r}, contents=<{len(self.contents)} bytes>)"


@dataclass(frozen=True, slots=True)
class FramingMatch:
    """
    Captures of one `-----BEGIN x----- ... -----END y-----` occurrence.

    Slices reference the original input; a capture is None when its group
    did not participate in the match. `start`/`end` are byte offsets of the
    whole occurrence, trailing whitespace included.
    """

    begin: bytes | None
    data: bytes | None
    end_tag: bytes | None
    start: int
    end: int


class LineEnding(Enum):
    """Line terminator used by the encoder."""

    CRLF = "\r\n"
    LF = "\n"


@dataclass(frozen=True, slots=True)
class EncodeConfig:
    """
    Encoder layout. The defaults give the canonical form: CRLF endings and
    64-character base64 lines.
    """

    line_ending: LineEnding = LineEnding.CRLF
    line_wrap: int = 64

    def __post_init__(self) -> None:
        if self.line_wrap < 4 or self.line_wrap % 4:
            raise ValueError(
                f"line_wrap must be a positive multiple of 4, got {self.line_wrap}"
            )
