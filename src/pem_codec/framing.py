"""
Framing matcher — locates `-----BEGIN x----- ... -----END y-----` blocks.

A forward scanner over bytes, equivalent to the lazy pattern

    (?s)-----BEGIN (?P<begin>.*?)-----\\s*(?P<data>.*?)-----END (?P<end>.*?)-----\\s*

  - both tags and the data region are shortest matches, and the data
    region spans lines
  - whitespace after the BEGIN line and after each END line is consumed
  - matches are non-overlapping, scanned left to right

Every search moves forward from the previous one, so scanning is linear
in the input size. Once a BEGIN line finds no END line after it, no later
BEGIN line can either, and the scan stops.

The matcher only frames. Tag presence, tag equality and base64 validity
are checked per match by the section decoder.
"""

from __future__ import annotations

from collections.abc import Iterator

from pem_codec.domain.models import FramingMatch

BEGIN_MARKER = b"-----BEGIN "
END_MARKER = b"-----END "
DASHES = b"-----"

# ASCII whitespace, the set a bytes-mode \s matches.
_WHITESPACE = frozenset(b" \t\n\r\f\v")

type PemInput = str | bytes


def as_bytes(data: PemInput) -> bytes:
    """
    Text input is framed as its UTF-8 encoding.

    Lone surrogates are passed through as their raw bytes, so they surface
    later as NOT_UTF8 instead of raising here.
    """
    if isinstance(data, str):
        return data.encode("utf-8", errors="surrogatepass")
    return bytes(data)


def _skip_whitespace(buf: bytes, pos: int) -> int:
    while pos < len(buf) and buf[pos] in _WHITESPACE:
        pos += 1
    return pos


def _match_at(buf: bytes, pos: int) -> FramingMatch | None:
    """Return the first block starting at or after `pos`, or None when no block remains."""
    start = buf.find(BEGIN_MARKER, pos)
    if start < 0:
        return None

    begin_from = start + len(BEGIN_MARKER)
    begin_to = buf.find(DASHES, begin_from)
    if begin_to < 0:
        return None

    data_from = _skip_whitespace(buf, begin_to + len(DASHES))
    data_to = buf.find(END_MARKER, data_from)
    if data_to < 0:
        return None

    end_from = data_to + len(END_MARKER)
    end_to = buf.find(DASHES, end_from)
    if end_to < 0:
        return None

    return FramingMatch(
        begin=buf[begin_from:begin_to],
        data=buf[data_from:data_to],
        end_tag=buf[end_from:end_to],
        start=start,
        end=_skip_whitespace(buf, end_to + len(DASHES)),
    )


def find_first(data: PemInput) -> FramingMatch | None:
    """Return the first BEGIN/END occurrence in `data`, or None if there is none."""
    return _match_at(as_bytes(data), 0)


def find_all(data: PemInput) -> Iterator[FramingMatch]:
    """Lazily yield every non-overlapping BEGIN/END occurrence, left to right."""
    buf = as_bytes(data)
    pos = 0
    while (match := _match_at(buf, pos)) is not None:
        yield match
        pos = match.end
