"""YouTube watch-page scraping and caption payload parsing.

Everything here pattern-matches JSON blobs embedded in YouTube's HTML and is
tied to the current page shape. When YouTube changes it, this module is the
only one that needs updating.
"""

import html as html_lib
import re
from dataclasses import dataclass, field

from pydantic import BaseModel, ValidationError

OG_TITLE_PATTERN = re.compile(r'<meta\s+property="og:title"\s+content="([^"]*)"')
CHANNEL_PATTERN = re.compile(r'"ownerChannelName":"([^"]*)"')
DESCRIPTION_PATTERN = re.compile(r'"shortDescription":"((?:[^"\\]|\\.)*)"')
CAPTION_TRACKS_PATTERN = re.compile(r'"captionTracks":\[(\{[^\]]*\})\]')
BASE_URL_PATTERN = re.compile(r'"baseUrl":"([^"]*)"')
XML_TEXT_PATTERN = re.compile(r"<text[^>]*>([^<]*)</text>")


class TranscriptParseError(ValueError):
    """Caption payload is not JSON3, or contains no text segments."""


@dataclass
class VideoMetadata:
    """Video fields scraped from the watch page. Missing fields are ""."""

    title: str = ""
    channel: str = ""
    description: str = ""


@dataclass
class WatchPage:
    """Everything the extractor needs from one watch page."""

    metadata: VideoMetadata = field(default_factory=VideoMetadata)
    captions_url: str | None = None


def parse_watch_page(page_html: str) -> WatchPage:
    """Scrape metadata and the first caption track URL from a watch page."""
    return WatchPage(
        metadata=extract_video_metadata(page_html),
        captions_url=extract_captions_url(page_html),
    )


def extract_video_metadata(page_html: str) -> VideoMetadata:
    """Extract og:title, ownerChannelName and shortDescription."""
    meta = VideoMetadata()

    m = OG_TITLE_PATTERN.search(page_html)
    if m:
        meta.title = m.group(1)

    m = CHANNEL_PATTERN.search(page_html)
    if m:
        meta.channel = m.group(1)

    m = DESCRIPTION_PATTERN.search(page_html)
    if m:
        # Newline and quote first, backslash last, so "\\n" is not unescaped twice
        desc = m.group(1).replace("\\n", "\n").replace('\\"', '"')
        meta.description = desc.replace("\\\\", "\\")

    return meta


def extract_captions_url(page_html: str) -> str | None:
    """Return the first caption track's baseUrl with ``\\u0026`` unescaped, or None."""
    tracks = CAPTION_TRACKS_PATTERN.search(page_html)
    if not tracks:
        return None
    m = BASE_URL_PATTERN.search(tracks.group(1))
    if not m:
        return None
    return m.group(1).replace("\\u0026", "&")


def build_metadata_content(meta: VideoMetadata) -> str:
    """Assemble summarizable text from metadata when no transcript is available."""
    parts = []
    if meta.title:
        parts.append(f"Title: {meta.title}")
    if meta.channel:
        parts.append(f"Channel: {meta.channel}")
    if meta.description:
        parts.append(f"Description:\n{meta.description}")

    if not parts:
        return "No content available for this video."
    return "\n\n".join(parts)


class _Json3Segment(BaseModel):
    utf8: str | None = None


class _Json3Event(BaseModel):
    segs: list[_Json3Segment | None] | None = None


class _Json3Transcript(BaseModel):
    events: list[_Json3Event | None] | None = None


def parse_json3_transcript(data: bytes | str) -> str:
    """Join the non-blank ``events[].segs[].utf8`` texts with single spaces.

    Raises:
        TranscriptParseError: Payload is not JSON3, or has no text.
    """
    try:
        transcript = _Json3Transcript.model_validate_json(data)
    except ValidationError as exc:
        raise TranscriptParseError(f"parsing json3: {exc}") from exc

    lines = [
        text
        for event in transcript.events or []
        if event is not None
        for seg in event.segs or []
        if seg is not None
        if (text := (seg.utf8 or "").strip())
    ]
    if not lines:
        raise TranscriptParseError("no transcript content found")
    return " ".join(lines)


def parse_xml_transcript(xml: str) -> str:
    """Lenient scan of ``<text ...>...</text>`` nodes in the XML caption format."""
    lines = []
    for m in XML_TEXT_PATTERN.finditer(xml):
        text = html_lib.unescape(m.group(1).strip())
        if text:
            lines.append(text)
    return " ".join(lines)
