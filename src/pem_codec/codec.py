"""
Codec — the public parse/encode operations.

  parse(input)       → Result[Pem]   first block only, every failure surfaced
  parse_many(input)  → list[Pem]     every block that decodes, in order
  encode(pem)        → str
  encode_many(pems)  → str

parse_many is best-effort by contract: a block that fails to decode is
dropped and scanning continues with the rest of the input.
"""

from __future__ import annotations

import structlog

from pem_codec.decoder import decode_section
from pem_codec.domain.models import Pem
from pem_codec.encoder import encode, encode_many
from pem_codec.framing import PemInput, find_all, find_first
from pem_codec.railway import PemErrorKind
from pem_codec.railway.result import Result

log = structlog.get_logger()

__all__ = ["encode", "encode_many", "parse", "parse_many"]


def parse(data: PemInput) -> Result[Pem]:
    """
    Parse the first PEM block found in `data`.

    Returns Result.failure(MALFORMED_FRAMING) when no BEGIN/END pair exists;
    otherwise the decoder's result for that block, unchanged.
    """
    return Result.from_optional(
        find_first(data),
        PemErrorKind.MALFORMED_FRAMING,
        "No -----BEGIN/-----END framing found",
    ).flat_map(decode_section)


def parse_many(data: PemInput) -> list[Pem]:
    """Parse every PEM block in `data`, silently skipping blocks that fail to decode."""
    pems: list[Pem] = []
    for match in find_all(data):
        result = decode_section(match).peek_failure(
            lambda err, offset=match.start: log.debug(
                "pem.block_skipped", offset=offset, kind=err.kind.value, reason=err.message
            )
        )
        if result:
            pems.append(result.value())
    return pems
