"""PDF download with a size ceiling and naive text-operator extraction.

Only literal, uncompressed content streams are readable: text is pulled from
``(...) Tj`` and ``[...] TJ`` operators inside ``BT ... ET`` blocks. Flate
compressed, encrypted or image-only PDFs yield no text.
"""

import re

import httpx

from link_summarizer.extraction.errors import (
    ExceedsMaxSizeError,
    NoExtractableTextError,
    UnexpectedStatusError,
)
from link_summarizer.extraction.fetch import open_response, read_limited
from link_summarizer.extraction.html import normalize_whitespace
from link_summarizer.models.content import ExtractedContent, LinkInfo, LinkType

MAX_PDF_SIZE_BYTES = 10 * 1024 * 1024  # 10MB

TITLE_PATTERN = re.compile(rb"/Title\s*\(([^)]+)\)")
TEXT_OBJECT_PATTERN = re.compile(rb"BT\s([\s\S]*?)ET")
SHOW_TEXT_PATTERN = re.compile(rb"\(([^)]*)\)\s*Tj")
SHOW_TEXT_ARRAY_PATTERN = re.compile(rb"\[([^\]]*)\]\s*TJ")
STRING_LITERAL_PATTERN = re.compile(rb"\(([^)]*)\)")

# Applied in order; the backslash escape goes last
_PDF_ESCAPES = (
    ("\\n", "\n"),
    ("\\r", "\r"),
    ("\\t", "\t"),
    ("\\(", "("),
    ("\\)", ")"),
    ("\\\\", "\\"),
)


def extract_pdf_title(data: bytes) -> str:
    """Return the first ``/Title (...)`` value in the raw PDF bytes, or ""."""
    m = TITLE_PATTERN.search(data)
    if not m:
        return ""
    return _decode_bytes(m.group(1)).strip()


def extract_pdf_text(data: bytes) -> str:
    """Extract text from every BT...ET block, one block per line."""
    texts = []
    for block in TEXT_OBJECT_PATTERN.finditer(data):
        text = _extract_text_operators(block.group(1))
        if text:
            texts.append(text)
    return normalize_whitespace("\n".join(texts)).strip()


def _extract_text_operators(block: bytes) -> str:
    # All Tj strings first, then all TJ arrays; kerning numbers inside arrays are skipped
    parts = [
        decode_pdf_string(_decode_bytes(m.group(1)))
        for m in SHOW_TEXT_PATTERN.finditer(block)
    ]
    for array in SHOW_TEXT_ARRAY_PATTERN.finditer(block):
        parts.extend(
            decode_pdf_string(_decode_bytes(m.group(1)))
            for m in STRING_LITERAL_PATTERN.finditer(array.group(1))
        )
    return "".join(parts)


def decode_pdf_string(s: str) -> str:
    r"""Decode the basic PDF string escapes: \n \r \t \( \) \\."""
    for escape, char in _PDF_ESCAPES:
        s = s.replace(escape, char)
    return s


def _decode_bytes(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


class PDFExtractor:
    """Downloads a PDF (max 10MB) and extracts its literal text."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def extract(self, url: str) -> ExtractedContent:
        """Download and extract text content from a PDF URL.

        Size is enforced twice: against Content-Length before reading, and
        against the bytes actually read (at most the ceiling plus one byte),
        since the header may be missing or wrong.

        Raises:
            UnexpectedStatusError: Any status other than 200.
            ExceedsMaxSizeError: Declared or actual size above MAX_PDF_SIZE_BYTES.
            NoExtractableTextError: No text operators found.
        """
        async with open_response(self._client, url) as response:
            if response.status_code != httpx.codes.OK:
                raise UnexpectedStatusError(response.status_code, url, subject="PDF")

            declared = _content_length(response)
            if declared is not None and declared > MAX_PDF_SIZE_BYTES:
                raise ExceedsMaxSizeError(
                    f"PDF exceeds maximum size of 10MB (size: {declared} bytes)",
                    limit=MAX_PDF_SIZE_BYTES,
                )

            data = await read_limited(response, MAX_PDF_SIZE_BYTES + 1)

        if len(data) > MAX_PDF_SIZE_BYTES:
            raise ExceedsMaxSizeError(
                f"PDF exceeds maximum size of 10MB (size: >{MAX_PDF_SIZE_BYTES} bytes)",
                limit=MAX_PDF_SIZE_BYTES,
            )

        text = extract_pdf_text(data)
        if not text:
            raise NoExtractableTextError(
                "could not extract text from PDF (possibly image-based or encrypted)"
            )

        return ExtractedContent(
            link_info=LinkInfo(
                url=url,
                link_type=LinkType.PDF,
                title=extract_pdf_title(data) or None,
            ),
            content=text,
        )


def _content_length(response: httpx.Response) -> int | None:
    """Declared body size, or None when the header is absent or unparseable."""
    try:
        return int(response.headers["content-length"])
    except (KeyError, ValueError):
        return None
