"""
Base64 transport adapter — standard alphabet, padding required.

Adapter layer — implements the Base64Transport port on top of the
standard library `base64` module.

Decoding is strict (`validate=True`): any byte outside the alphabet, bad
padding or a truncated final quantum is a failure. The only characters
skipped are CR line breaks, which the decoder never strips itself.
Encoding wraps the output into fixed-width lines.
"""

from __future__ import annotations

import base64
import binascii

from pem_codec.domain.models import LineEnding
from pem_codec.railway import PemErrorKind
from pem_codec.railway.result import Result


class StandardBase64Transport:
    """
    Implements the Base64Transport port.

    All decoding errors are caught at this adapter boundary via
    Result.from_computation().
    """

    def decode(self, text: str) -> Result[bytes]:
        return Result.from_computation(
            lambda: base64.b64decode(text.replace("\r", ""), validate=True),
            PemErrorKind.INVALID_DATA,
            "Data region is not valid base64",
            catch=(binascii.Error, ValueError),
        )

    def encode(self, data: bytes, line_wrap: int, line_ending: LineEnding) -> str:
        encoded = base64.b64encode(data).decode("ascii")
        lines = [encoded[i : i + line_wrap] for i in range(0, len(encoded), line_wrap)]
        return line_ending.value.join(lines)
