"""
Shared test fixtures and sample data for the pem-codec test suite.

SAMPLE is a two-block document in canonical form (CRLF line endings,
64-character base64 lines, one blank line between blocks), so it must
survive parse_many → encode_many byte for byte.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

CRLF = "\r\n"

RSA_PRIVATE_KEY_LINES = [
    "MIIBPQIBAAJBAOsfi5AGYhdRs/x6q5H7kScxA0Kzzqe6WI6gf6+tc6IvKQJo5rQc",
    "dWWSQ0nRGt2hOPDO+35NKhQEjBQxPh/v7n0CAwEAAQJBAOGaBAyuw0ICyENy5NsO",
    "2gkT00AWTSzM9Zns0HedY31yEabkuFvrMCHjscEF7u3Y6PB7An3IzooBHchsFDei",
    "AAECIQD/JahddzR5K3A6rzTidmAf1PBtqi7296EnWv8WvpfAAQIhAOvowIXZI4Un",
    "DXjgZ9ekuUjZN+GUQRAVlkEEohGLVy59AiEA90VtqDdQuWWpvJX0cM08V10tLXrT",
    "TTGsEtITid1ogAECIQDAaFl90ZgS5cMrL3wCeatVKzVUmuJmB/VAmlLFFGzK0QIh",
    "ANJGc7AFk4fyFD/OezhwGHbWmo/S+bfeAiIh2Ss2FxKJ",
]

RSA_PUBLIC_KEY_LINES = [
    "MIIBOgIBAAJBAMIeCnn9G/7g2Z6J+qHOE2XCLLuPoh5NHTO2Fm+PbzBvafBo0oYo",
    "QVVy7frzxmOqx6iIZBxTyfAQqBPO3Br59BMCAwEAAQJAX+PjHPuxdqiwF6blTkS0",
    "RFI1MrnzRbCmOkM6tgVO0cd6r5Z4bDGLusH9yjI9iI84gPRjK0AzymXFmBGuREHI",
    "sQIhAPKf4pp+Prvutgq2ayygleZChBr1DC4XnnufBNtaswyvAiEAzNGVKgNvzuhk",
    "ijoUXIDruJQEGFGvZTsi1D2RehXiT90CIQC4HOQUYKCydB7oWi1SHDokFW2yFyo6",
    "/+lf3fgNjPI6OQIgUPmTFXciXxT1msh3gFLf3qt2Kv8wbr9Ad9SXjULVpGkCIB+g",
    "RzHX0lkJl9Stshd/7Gbt65/QYq+v+xvAeT0CoyIg",
]


def block(tag: str, lines: list[str], eol: str = CRLF, end_tag: str | None = None) -> str:
    """Build one PEM block from base64 lines."""
    end_tag = tag if end_tag is None else end_tag
    body = "".join(f"{line}{eol}" for line in lines)
    return f"-----BEGIN {tag}-----{eol}{body}-----END {end_tag}-----{eol}"


SAMPLE = CRLF.join(
    [
        block("RSA PRIVATE KEY", RSA_PRIVATE_KEY_LINES),
        block("RSA PUBLIC KEY", RSA_PUBLIC_KEY_LINES),
    ]
)

# The public key body with LF endings, for tests that build malformed variants.
PUBLIC_KEY_BODY = "\n".join(RSA_PUBLIC_KEY_LINES)


@pytest.fixture()
def sample() -> str:
    """Return the canonical two-block sample document."""
    return SAMPLE


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo any structlog configuration a test (or the CLI) applied."""
    yield
    structlog.reset_defaults()
