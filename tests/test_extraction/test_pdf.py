"""Tests for PDF download limits and text-operator extraction."""

import httpx
import pytest

from link_summarizer.extraction.errors import (
    ExceedsMaxSizeError,
    NoContentError,
    NoExtractableTextError,
    UnexpectedStatusError,
)
from link_summarizer.extraction.pdf import (
    MAX_PDF_SIZE_BYTES,
    PDFExtractor,
    decode_pdf_string,
    extract_pdf_text,
    extract_pdf_title,
)
from link_summarizer.models.content import LinkType

PDF_URL = "https://example.com/test.pdf"


def build_simple_pdf(text: str) -> bytes:
    """Minimal uncompressed PDF with one text object and an Info title."""
    return (
        "%PDF-1.4\n"
        "1 0 obj <</Type /Catalog /Pages 2 0 R>> endobj\n"
        "2 0 obj <</Type /Pages /Kids [3 0 R] /Count 1>> endobj\n"
        "3 0 obj <</Type /Page /Parent 2 0 R /MediaBox [0 0 612 792]\n"
        "/Contents 4 0 R /Resources <</Font <</F1 5 0 R>>>>>> endobj\n"
        "4 0 obj <</Length 44>>\n"
        "stream\n"
        f"BT /F1 12 Tf 100 700 Td ({text}) Tj ET\n"
        "endstream endobj\n"
        "5 0 obj <</Type /Font /Subtype /Type1 /BaseFont /Helvetica>> endobj\n"
        "/Title (Test PDF Document)\n"
        "xref\n0 6\n"
        "trailer <</Size 6 /Root 1 0 R /Info <</Title (Test PDF Document)>>>>\n"
        "startxref\n0\n%%EOF"
    ).encode()


def _pdf_client(response: httpx.Response) -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        return response

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_extract_basic_pdf():
    response = httpx.Response(
        200,
        headers={"Content-Type": "application/pdf"},
        content=build_simple_pdf("Hello World from PDF"),
    )
    async with _pdf_client(response) as client:
        result = await PDFExtractor(client).extract(PDF_URL)

    assert result.link_info.link_type == LinkType.PDF
    assert result.link_info.title == "Test PDF Document"
    assert result.content == "Hello World from PDF"


@pytest.mark.asyncio
async def test_declared_size_too_large():
    """Content-Length above the ceiling fails before the body is read."""
    response = httpx.Response(
        200,
        headers={"Content-Length": str(MAX_PDF_SIZE_BYTES + 1)},
        content=b"%PDF-1.4",
    )
    async with _pdf_client(response) as client:
        with pytest.raises(ExceedsMaxSizeError, match="exceeds maximum size") as exc_info:
            await PDFExtractor(client).extract(PDF_URL)

    assert exc_info.value.limit == MAX_PDF_SIZE_BYTES


@pytest.mark.asyncio
async def test_actual_size_too_large_without_content_length():
    """A chunked body with no Content-Length is still capped."""

    async def chunks():
        chunk = b"BT (x) Tj ET " * (1024 * 1024 // 13 + 1)
        for _ in range(11):
            yield chunk

    async with _pdf_client(httpx.Response(200, content=chunks())) as client:
        with pytest.raises(ExceedsMaxSizeError, match="exceeds maximum size"):
            await PDFExtractor(client).extract(PDF_URL)


@pytest.mark.asyncio
async def test_actual_size_too_large_with_wrong_content_length():
    body = build_simple_pdf("Hello") + b" " * MAX_PDF_SIZE_BYTES
    response = httpx.Response(200, headers={"Content-Length": "100"}, content=body)
    async with _pdf_client(response) as client:
        with pytest.raises(ExceedsMaxSizeError):
            await PDFExtractor(client).extract(PDF_URL)


@pytest.mark.asyncio
async def test_exactly_max_size_is_allowed():
    pdf = build_simple_pdf("Edge")
    body = pdf + b" " * (MAX_PDF_SIZE_BYTES - len(pdf))
    async with _pdf_client(httpx.Response(200, content=body)) as client:
        result = await PDFExtractor(client).extract(PDF_URL)

    assert result.content == "Edge"


@pytest.mark.asyncio
async def test_server_error():
    async with _pdf_client(httpx.Response(500)) as client:
        with pytest.raises(UnexpectedStatusError, match="unexpected status") as exc_info:
            await PDFExtractor(client).extract(PDF_URL)

    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_no_extractable_text():
    async with _pdf_client(httpx.Response(200, content=b"%PDF-1.4\n%%EOF")) as client:
        with pytest.raises(NoExtractableTextError, match="could not extract text"):
            await PDFExtractor(client).extract(PDF_URL)


def test_no_extractable_text_is_no_content():
    assert issubclass(NoExtractableTextError, NoContentError)


def test_extract_text_simple_tj():
    assert extract_pdf_text(b"BT (Hello World) Tj ET") == "Hello World"


def test_extract_text_tj_array_skips_kerning():
    assert extract_pdf_text(b"BT [(Hello) -100 ( World)] TJ ET") == "Hello World"


def test_extract_text_no_text_blocks():
    assert extract_pdf_text(b"%PDF-1.4 some binary data") == ""


def test_extract_text_escaped_newline():
    assert extract_pdf_text(rb"BT (Hello\nWorld) Tj ET") == "Hello\nWorld"


def test_extract_text_blocks_join_with_newline():
    assert extract_pdf_text(b"BT (One) Tj ET\nBT (Two) Tj ET") == "One\nTwo"


def test_extract_text_strings_before_arrays():
    """Within a block, Tj strings are collected before TJ arrays."""
    assert extract_pdf_text(b"BT (A) Tj [(B)] TJ (C) Tj ET") == "ACB"


def test_extract_title():
    assert extract_pdf_title(b"/Title (My Document)") == "My Document"


def test_extract_title_missing():
    assert extract_pdf_title(b"%PDF-1.4") == ""


def test_decode_newline():
    assert decode_pdf_string("Hello\\nWorld") == "Hello\nWorld"


def test_decode_parens():
    assert decode_pdf_string("Open \\(paren\\)") == "Open (paren)"


def test_decode_backslash():
    assert decode_pdf_string("Back\\\\slash") == "Back\\slash"


def test_decode_no_escapes():
    assert decode_pdf_string("No escapes") == "No escapes"
