"""
Section encoder — serializes a Pem into its textual block.

Canonical output (default EncodeConfig):

    -----BEGIN <tag>-----\\r\\n
    <base64, 64 characters per line, CRLF between lines>\\r\\n
    -----END <tag>-----\\r\\n

Empty contents give an empty data line. The tag is written verbatim.
Encoding has no failure path.
"""

from __future__ import annotations

from collections.abc import Iterable

from pem_codec.adapters.base64_transport import StandardBase64Transport
from pem_codec.domain.models import EncodeConfig, Pem
from pem_codec.domain.ports import Base64Transport

DEFAULT_ENCODE_CONFIG = EncodeConfig()
DEFAULT_TRANSPORT: Base64Transport = StandardBase64Transport()


def encode(
    pem: Pem,
    config: EncodeConfig = DEFAULT_ENCODE_CONFIG,
    transport: Base64Transport = DEFAULT_TRANSPORT,
) -> str:
    """Encode one Pem into a BEGIN/END block terminated by a line ending."""
    eol = config.line_ending.value
    contents = ""
    if pem.contents:
        contents = transport.encode(pem.contents, config.line_wrap, config.line_ending)

    return (
        f"-----BEGIN {pem.tag}-----{eol}"
        f"{contents}{eol}"
        f"-----END {pem.tag}-----{eol}"
    )


def encode_many(
    pems: Iterable[Pem],
    config: EncodeConfig = DEFAULT_ENCODE_CONFIG,
    transport: Base64Transport = DEFAULT_TRANSPORT,
) -> str:
    """Encode each Pem in order; blocks are separated by one blank line."""
    return config.line_ending.value.join(encode(pem, config, transport) for pem in pems)
