"""FastAPI application: link type detection and content extraction endpoints."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from link_summarizer.config import get_settings
from link_summarizer.extraction import (
    ExtractionError,
    Extractor,
    InvalidURLError,
    build_extractors,
    detect_link_type,
    extract_content,
)
from link_summarizer.logging_config import configure_logging
from link_summarizer.models.content import LinkInfo, LinkType

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging, load config and open the shared HTTP client."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings

    async with httpx.AsyncClient(
        follow_redirects=True,
        timeout=settings.http_timeout_seconds,
    ) as client:
        app.state.extractors = build_extractors(client)
        yield


app = FastAPI(
    title="Link Summarizer",
    lifespan=lifespan,
)


class URLRequest(BaseModel):
    """Request body shared by /api/detect and /api/extract."""

    url: str | None = None


class DetectResponse(BaseModel):
    link_info: LinkInfo


class ExtractResponse(BaseModel):
    link_info: LinkInfo
    content: str


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON or wrongly typed fields are a 400, not FastAPI's default 422."""
    logger.warning(
        "Invalid request body",
        extra={"handler": request.url.path, "error": str(exc.errors())},
    )
    return error_response(400, "invalid request body")


def get_extractors(request: Request) -> dict[LinkType, Extractor]:
    """Extractor table built by the lifespan."""
    return request.app.state.extractors


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "link-summarizer",
        "version": "0.1.0",
    }


@app.post("/api/detect", response_model=DetectResponse, response_model_exclude_none=True)
async def detect_endpoint(body: URLRequest):
    """Classify a URL by host and path. No network access."""
    if not body.url:
        logger.warning("Empty url", extra={"handler": "detect"})
        return error_response(400, "url is required")

    try:
        link_type = detect_link_type(body.url)
    except InvalidURLError as exc:
        logger.warning(
            "Invalid URL",
            extra={"handler": "detect", "url": body.url, "error": str(exc)},
        )
        return error_response(400, f"invalid URL: {exc}")

    logger.debug(
        "Detected link type",
        extra={"handler": "detect", "url": body.url, "link_type": link_type.value},
    )
    return DetectResponse(link_info=LinkInfo(url=body.url, link_type=link_type))


@app.post("/api/extract", response_model=ExtractResponse, response_model_exclude_none=True)
async def extract_endpoint(
    body: URLRequest,
    extractors: dict[LinkType, Extractor] = Depends(get_extractors),
):
    """Fetch a URL and return its plain-text content with link metadata.

    URL parse failures are the caller's fault (400); everything that goes
    wrong after detection, including fetch and parse failures, is a 500.
    """
    if not body.url:
        logger.warning("Empty url", extra={"handler": "extract"})
        return error_response(400, "url is required")

    try:
        link_type = detect_link_type(body.url)
    except InvalidURLError as exc:
        logger.warning(
            "Invalid URL",
            extra={"handler": "extract", "url": body.url, "error": str(exc)},
        )
        return error_response(400, f"invalid URL: {exc}")

    settings = get_settings()
    try:
        result = await extract_content(
            body.url,
            extractors,
            link_type=link_type,
            timeout_seconds=settings.extraction_timeout_seconds,
        )
    except ExtractionError as exc:
        logger.error(
            "Extraction failed",
            extra={
                "handler": "extract",
                "url": body.url,
                "link_type": link_type.value,
                "error": str(exc),
            },
        )
        return error_response(500, f"extraction failed: {exc}")

    logger.info(
        "Extracted content",
        extra={"handler": "extract", "url": body.url, "link_type": link_type.value},
    )
    return ExtractResponse(link_info=result.link_info, content=result.content)
