"""
Railway-Oriented Programming primitives for the PEM codec.

Explicit, composable error handling — decode steps return Result
instead of raising:

    from pem_codec.railway import PemErrorKind, Result

    def non_empty(tag: str) -> Result[str]:
        if not tag:
            return Result.failure(PemErrorKind.MISSING_BEGIN_TAG, "BEGIN tag is empty")
        return Result.success(tag)
"""

from pem_codec.railway.assertions import ResultAssertions
from pem_codec.railway.failure import PemErrorKind, PemFailure
from pem_codec.railway.result import Failure, Result, Success

__all__ = [
    "Result",
    "Success",
    "Failure",
    "PemErrorKind",
    "PemFailure",
    "ResultAssertions",
]
