"""
Ports — Protocol-based interfaces for the codec's collaborators.

The core needs base64 transport and UTF-8 validation but does not
implement them. Each port is a Protocol (structural typing), so any
object with the right methods satisfies it:

  Domain ← Ports (protocols) ← Adapters (implementations)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pem_codec.domain.models import LineEnding
from pem_codec.railway.result import Result


@runtime_checkable
class Base64Transport(Protocol):
    """
    Port: standard-alphabet base64 with padding.

    decode() must return Result.failure(INVALID_DATA, ...) for any
    malformed input (invalid character, bad padding, wrong length).
    encode() wraps its output into lines of `line_wrap` characters
    joined by `line_ending`.
    """

    def decode(self, text: str) -> Result[bytes]: ...

    def encode(self, data: bytes, line_wrap: int, line_ending: LineEnding) -> str: ...


@runtime_checkable
class TextDecoder(Protocol):
    """
    Port: turn raw captured bytes into text.

    Returns Result.failure(NOT_UTF8, ...) when the bytes are not valid UTF-8.
    """

    def decode(self, raw: bytes) -> Result[str]: ...
