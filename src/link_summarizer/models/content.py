"""Link type enum and extracted content models."""

from enum import Enum

from pydantic import BaseModel


class LinkType(str, Enum):
    """Content format of a submitted URL."""

    ARTICLE = "article"
    YOUTUBE = "youtube"
    PDF = "pdf"
    TWITTER = "twitter"
    NEWSLETTER = "newsletter"
    UNKNOWN = "unknown"


class LinkInfo(BaseModel):
    """Metadata about a link. url is always the original input, never the redirect target."""

    url: str
    link_type: LinkType
    title: str | None = None
    author: str | None = None
    date: str | None = None  # Reserved, no extractor fills it yet


class ExtractedContent(BaseModel):
    """Plain-text content extracted from a URL plus its link metadata."""

    link_info: LinkInfo
    content: str  # Tag-free, whitespace-normalized text
