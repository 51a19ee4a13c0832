"""UTF-8 text decoder adapter — implements the TextDecoder port."""

from __future__ import annotations

from pem_codec.railway import PemErrorKind
from pem_codec.railway.result import Result


class Utf8TextDecoder:
    """Strict UTF-8: any invalid sequence becomes a NOT_UTF8 failure."""

    def decode(self, raw: bytes) -> Result[str]:
        return Result.from_computation(
            lambda: raw.decode("utf-8"),
            PemErrorKind.NOT_UTF8,
            "Captured region is not valid UTF-8",
            catch=UnicodeDecodeError,
        )
