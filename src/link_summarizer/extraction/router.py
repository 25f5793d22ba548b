"""URL link type detection by hostname and path patterns."""

import re
from urllib.parse import urlsplit

from link_summarizer.extraction.errors import InvalidURLError
from link_summarizer.models.content import LinkType

YOUTUBE_HOSTS = ("youtube.com", "youtu.be")
TWITTER_HOSTS = ("twitter.com", "x.com")
NEWSLETTER_HOSTS = ("substack.com", "medium.com", "beehiiv.com", "buttondown.email")

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def detect_link_type(url: str) -> LinkType:
    """Classify a URL. Unknown URLs default to ARTICLE.

    Checks run in priority order (YouTube, Twitter/X, PDF, newsletter), so a
    youtube.com URL ending in .pdf is still YOUTUBE. No network access.

    Raises:
        InvalidURLError: URL cannot be parsed.
    """
    if _CONTROL_CHARS.search(url):
        raise InvalidURLError(f"invalid control character in URL {url!r}")
    if url.startswith(":"):
        raise InvalidURLError(f"parsing URL {url!r}: missing protocol scheme")
    try:
        parsed = urlsplit(url)
        host = (parsed.hostname or "").lower()
    except ValueError as exc:
        raise InvalidURLError(f"parsing URL {url!r}: {exc}") from exc
    port = _raw_port(parsed.netloc)
    if port and not (port.isascii() and port.isdigit()):
        raise InvalidURLError(f"parsing URL {url!r}: invalid port {':' + port!r} after host")
    path = parsed.path.lower()

    if _host_contains(host, YOUTUBE_HOSTS):
        return LinkType.YOUTUBE
    if _host_contains(host, TWITTER_HOSTS):
        return LinkType.TWITTER
    if path.endswith(".pdf"):
        return LinkType.PDF
    if _host_contains(host, NEWSLETTER_HOSTS):
        return LinkType.NEWSLETTER
    return LinkType.ARTICLE


def _raw_port(netloc: str) -> str:
    """Raw port text after the host, or "" when the URL has none."""
    hostport = netloc.rpartition("@")[2]
    if hostport.startswith("["):
        hostport = hostport.partition("]")[2]
    _, sep, port = hostport.rpartition(":")
    return port if sep else ""


def _host_contains(host: str, candidates: tuple[str, ...]) -> bool:
    return any(candidate in host for candidate in candidates)
