"""String-scan HTML helpers: title, boilerplate removal, tag stripping, meta tags.

These are deliberately not an HTML parser. Matching is non-nesting and
first-match-wins, and a ``<`` inside an attribute value will confuse
strip_tags(). Extractor output depends on exactly this behavior.
"""

import functools
import re
import string

BOILERPLATE_TAGS = ("script", "style", "nav", "header", "footer")

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _lower(s: str) -> str:
    # ASCII-only lowercasing keeps offsets aligned with the original string
    return s.translate(_ASCII_LOWER)


def extract_title(html: str) -> str:
    """Return the trimmed text of the first <title> element, or "" if absent."""
    start = html.find("<title")
    if start == -1:
        return ""
    tag_end = html.find(">", start)
    if tag_end == -1:
        return ""
    end = html.find("</title>", tag_end + 1)
    if end == -1:
        return ""
    return html[tag_end + 1 : end].strip()


def remove_blocks(html: str, tag: str) -> str:
    """Remove every ``<tag ...>...</tag>`` block, case-insensitively.

    Stops at the first opening tag without a closing tag; that block and
    everything after it are left in place.
    """
    open_tag = f"<{tag}"
    close_tag = f"</{tag}>"
    result = html
    while True:
        lowered = _lower(result)
        start = lowered.find(open_tag)
        if start == -1:
            break
        end = lowered.find(close_tag, start)
        if end == -1:
            break
        result = result[:start] + result[end + len(close_tag) :]
    return result


def extract_main_content(html: str) -> str:
    """Generic article-body algorithm: drop boilerplate, isolate <body>, strip tags.

    Without a <body> tag the whole block-stripped document is used. With an
    opening <body> but no </body>, everything after the opening tag is used.
    """
    content = html
    for tag in BOILERPLATE_TAGS:
        content = remove_blocks(content, tag)

    lowered = _lower(content)
    body_open = lowered.find("<body")
    if body_open != -1:
        tag_end = content.find(">", body_open)
        if tag_end != -1:
            body_start = tag_end + 1
            body_end = lowered.find("</body>", body_start)
            if body_end != -1:
                content = content[body_start:body_end]
            else:
                content = content[body_start:]

    return normalize_whitespace(strip_tags(content)).strip()


def strip_tags(html: str) -> str:
    """Drop everything from each ``<`` up to the next ``>``; keep other text verbatim."""
    kept = []
    in_tag = False
    for ch in html:
        if ch == "<":
            in_tag = True
        elif ch == ">":
            in_tag = False
        elif not in_tag:
            kept.append(ch)
    return "".join(kept)


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs within each line and drop lines left empty."""
    lines = (" ".join(line.split()) for line in text.split("\n"))
    return "\n".join(line for line in lines if line)


def extract_block(html: str, open_pattern: str, close_tag: str) -> str:
    """Return the raw HTML between ``open_pattern``'s tag and the next ``close_tag``.

    The scan does not track nesting: a same-name tag inside the container
    ends the block at its own closing tag.
    """
    lowered = _lower(html)
    start = lowered.find(_lower(open_pattern))
    if start == -1:
        return ""
    tag_end = html.find(">", start)
    if tag_end == -1:
        return ""
    content_start = tag_end + 1
    end = lowered.find(_lower(close_tag), content_start)
    if end == -1:
        return ""
    return html[content_start:end]


@functools.lru_cache(maxsize=64)
def _meta_patterns(prop: str) -> tuple[re.Pattern[str], ...]:
    quoted = re.escape(prop)
    return (
        re.compile(rf'<meta\s+property="{quoted}"\s+content="([^"]*)"'),
        re.compile(rf'<meta\s+content="([^"]*)"\s+property="{quoted}"'),
        re.compile(rf'<meta\s+name="{quoted}"\s+content="([^"]*)"'),
    )


def extract_og_meta(html: str, prop: str) -> str:
    """Return the entity-decoded content of a meta tag, or "".

    Tries ``property=X content=Y``, then ``content=Y property=X``, then
    ``name=X content=Y``; the first pattern that matches anywhere wins.
    """
    for pattern in _meta_patterns(prop):
        m = pattern.search(html)
        if m:
            return decode_html_entities(m.group(1))
    return ""


_ENTITIES = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&apos;", "'"),
)


def decode_html_entities(text: str) -> str:
    """Decode the handful of entities that show up in meta tag values."""
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text
