"""
Section decoder — turns one FramingMatch into a Pem or a typed failure.

The steps are chained on the railway and short-circuit in this order:

  begin tag (present, UTF-8, non-empty)
    → end tag (present, UTF-8, non-empty)
      → tags equal
        → data region (present, UTF-8)
          → strip "\\n" and " "
            → base64 decode
              → Pem(tag, contents)

Only newlines and spaces are stripped here. Any other whitespace is left
for the transport to reject.
"""

from __future__ import annotations

from pem_codec.adapters.base64_transport import StandardBase64Transport
from pem_codec.adapters.text_decoder import Utf8TextDecoder
from pem_codec.domain.models import FramingMatch, Pem
from pem_codec.domain.ports import Base64Transport, TextDecoder
from pem_codec.railway import PemErrorKind, PemFailure
from pem_codec.railway.result import Result

DEFAULT_TRANSPORT: Base64Transport = StandardBase64Transport()
DEFAULT_TEXT_DECODER: TextDecoder = Utf8TextDecoder()


def _tag(
    raw: bytes | None,
    kind: PemErrorKind,
    label: str,
    text_decoder: TextDecoder,
) -> Result[str]:
    return (
        Result.from_optional(raw, kind, f"{label} tag is missing")
        .flat_map(text_decoder.decode)
        .ensure(bool, kind, f"{label} tag is empty")
    )


def _matching_end_tag(tag: str, end_tag: str) -> Result[str]:
    if tag != end_tag:
        return Result.failure_from(PemFailure.mismatched_tags(tag, end_tag))
    return Result.success(tag)


def _strip_data(data: str) -> str:
    return data.replace("\n", "").replace(" ", "")


def _contents(
    match: FramingMatch,
    transport: Base64Transport,
    text_decoder: TextDecoder,
) -> Result[bytes]:
    return (
        Result.from_optional(match.data, PemErrorKind.MISSING_DATA, "data region is missing")
        .flat_map(text_decoder.decode)
        .map(_strip_data)
        .flat_map(transport.decode)
    )


def decode_section(
    match: FramingMatch,
    transport: Base64Transport = DEFAULT_TRANSPORT,
    text_decoder: TextDecoder = DEFAULT_TEXT_DECODER,
) -> Result[Pem]:
    """
    Validate one framed block and decode its payload.

    Returns Result[Pem] on success, or the first failure among
    MISSING_BEGIN_TAG, NOT_UTF8, MISSING_END_TAG, MISMATCHED_TAGS,
    MISSING_DATA and INVALID_DATA.
    """
    return (
        _tag(match.begin, PemErrorKind.MISSING_BEGIN_TAG, "BEGIN", text_decoder)
        .flat_map(
            lambda tag: _tag(match.end_tag, PemErrorKind.MISSING_END_TAG, "END", text_decoder)
            .flat_map(lambda end_tag: _matching_end_tag(tag, end_tag))
        )
        .flat_map(
            lambda tag: _contents(match, transport, text_decoder)
            .map(lambda contents: Pem(tag=tag, contents=contents))
        )
    )
