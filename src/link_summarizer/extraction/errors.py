"""Exception hierarchy for URL detection and content extraction.

Every failure an extractor can produce is an ExtractionError subclass, raised
with the underlying cause chained (``raise ... from exc``). Degraded-but-usable
results (paywall truncation, YouTube metadata fallback) are not errors.
"""


class ExtractionError(Exception):
    """Base class for detection and extraction failures."""


class InvalidURLError(ExtractionError):
    """URL could not be parsed, or no video ID could be resolved from it."""


class NotYouTubeURLError(InvalidURLError):
    """URL host is neither youtube.com nor youtu.be."""


class RequestConstructionError(ExtractionError):
    """Outbound request could not be built (malformed URL or scheme)."""


class NetworkError(ExtractionError):
    """Transport-level failure reaching the remote host."""


class UnexpectedStatusError(ExtractionError):
    """Remote host answered with a status no more specific error covers."""

    def __init__(self, status_code: int, url: str, subject: str = "URL") -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"unexpected status {status_code} for {subject} {url}")


class PrivateOrProtectedError(ExtractionError):
    """Tweet page answered 401/403: the account is private or protected."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"tweet is private or protected (status: {status_code})")


class ExceedsMaxSizeError(ExtractionError):
    """Response body is larger than the allowed ceiling."""

    def __init__(self, message: str, limit: int) -> None:
        self.limit = limit
        super().__init__(message)


class NoContentError(ExtractionError):
    """Response parsed fine but yielded no usable text."""


class NoExtractableTextError(NoContentError):
    """PDF has no literal text operators (image-based, encrypted, or compressed)."""


class ResponseReadError(ExtractionError):
    """Body streaming failed after a successful status line."""


class ExtractionTimeoutError(ExtractionError):
    """Extraction did not finish within the pipeline deadline."""
