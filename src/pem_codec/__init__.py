"""
pem_codec — parse and encode PEM-encoded data.

PEM wraps base64-encoded binary between `-----BEGIN <tag>-----` and
`-----END <tag>-----` lines. This package frames, validates and decodes
such blocks, and serializes them back in canonical CRLF form.

    from pem_codec import parse, parse_many

    pem = parse(open("key.pem", "rb").read()).value()
    chain = parse_many(bundle_text)

Failures travel on a Railway-Oriented Result instead of exceptions.
"""

from pem_codec.codec import encode, encode_many, parse, parse_many
from pem_codec.domain.models import EncodeConfig, LineEnding, Pem
from pem_codec.railway import PemErrorKind, PemFailure, Result

__all__ = [
    "EncodeConfig",
    "LineEnding",
    "Pem",
    "PemErrorKind",
    "PemFailure",
    "Result",
    "encode",
    "encode_many",
    "parse",
    "parse_many",
]

__version__ = "0.1.0"
