"""Outbound HTTP helpers shared by all extractors.

Extractors receive an injected ``httpx.AsyncClient``; timeout, redirect and
pooling policy belong to whoever built that client. These helpers only map
httpx failures onto the extraction error taxonomy.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from link_summarizer.extraction.errors import (
    NetworkError,
    RequestConstructionError,
    ResponseReadError,
)

USER_AGENT = "Mozilla/5.0 (compatible; LinkSummarizer/1.0)"


@asynccontextmanager
async def open_response(
    client: httpx.AsyncClient,
    url: str,
    headers: dict[str, str] | None = None,
) -> AsyncIterator[httpx.Response]:
    """Send a GET request and yield the streaming response, closing it on exit.

    The body is not read; callers check the status first and then use
    read_body() or read_limited().

    Raises:
        RequestConstructionError: URL cannot be turned into a request.
        NetworkError: Connection, TLS, timeout or redirect failure.
    """
    request_headers = {"User-Agent": USER_AGENT}
    if headers:
        request_headers.update(headers)

    try:
        request = client.build_request("GET", url, headers=request_headers)
    except httpx.InvalidURL as exc:
        raise RequestConstructionError(f"creating request for {url}: {exc}") from exc

    try:
        response = await client.send(request, stream=True)
    except httpx.UnsupportedProtocol as exc:
        raise RequestConstructionError(f"creating request for {url}: {exc}") from exc
    except httpx.HTTPError as exc:
        raise NetworkError(f"fetching {url}: {exc}") from exc

    try:
        yield response
    finally:
        await response.aclose()


async def read_body(response: httpx.Response) -> bytes:
    """Read the full response body (no size cap)."""
    try:
        return await response.aread()
    except httpx.HTTPError as exc:
        raise ResponseReadError(f"reading response body: {exc}") from exc


async def read_text(response: httpx.Response) -> str:
    """Read the full response body and decode it using the response charset."""
    await read_body(response)
    return response.text


async def read_limited(response: httpx.Response, limit: int) -> bytes:
    """Read at most ``limit`` bytes of the body.

    Stops pulling from the stream as soon as the cap is reached, so a caller
    that passes ``ceiling + 1`` can tell an oversized body apart by its length.
    """
    data = bytearray()
    try:
        async for chunk in response.aiter_bytes():
            data.extend(chunk)
            if len(data) >= limit:
                break
    except httpx.HTTPError as exc:
        raise ResponseReadError(f"reading response body: {exc}") from exc
    return bytes(data[:limit])
