"""Tests for YouTube watch-page scraping and caption payload parsing."""

import pytest

from link_summarizer.extraction.youtube_page import (
    TranscriptParseError,
    VideoMetadata,
    build_metadata_content,
    extract_captions_url,
    extract_video_metadata,
    parse_json3_transcript,
    parse_watch_page,
    parse_xml_transcript,
)

WATCH_PAGE = r"""<html>
<head><meta property="og:title" content="Test Video Title"></head>
<body><script>var ytInitialPlayerResponse = {"ownerChannelName":"Test Channel","shortDescription":"This is a test video about Go concurrency.\nLearn more at example.com","captionTracks":[{"baseUrl":"https://www.youtube.com/api/timedtext?v=abc\u0026lang=en","name":{"simpleText":"English"}}]}</script></body>
</html>"""


def test_extract_video_metadata():
    meta = extract_video_metadata(WATCH_PAGE)
    assert meta.title == "Test Video Title"
    assert meta.channel == "Test Channel"
    assert meta.description == (
        "This is a test video about Go concurrency.\nLearn more at example.com"
    )


def test_description_unescapes_quotes_and_backslashes():
    page = r'"shortDescription":"Say \"hi\" to C:\\path"'
    assert extract_video_metadata(page).description == 'Say "hi" to C:\\path'


def test_description_newline_is_unescaped_before_backslash():
    page = r'"shortDescription":"a\\nb"'
    assert extract_video_metadata(page).description == "a\\\nb"


def test_metadata_missing_fields_are_empty():
    meta = extract_video_metadata("<html></html>")
    assert meta == VideoMetadata()


def test_extract_captions_url_unescapes_ampersand():
    assert extract_captions_url(WATCH_PAGE) == (
        "https://www.youtube.com/api/timedtext?v=abc&lang=en"
    )


def test_extract_captions_url_first_track_wins():
    page = (
        '"captionTracks":[{"baseUrl":"https://example.com/first"},'
        '{"baseUrl":"https://example.com/second"}]'
    )
    assert extract_captions_url(page) == "https://example.com/first"


def test_extract_captions_url_missing():
    assert extract_captions_url("<html><body>no captions here</body></html>") is None


def test_parse_watch_page():
    page = parse_watch_page(WATCH_PAGE)
    assert page.metadata.title == "Test Video Title"
    assert page.captions_url is not None


def test_build_metadata_content_full():
    meta = VideoMetadata(title="My Video", channel="My Channel", description="A great video")
    assert build_metadata_content(meta) == (
        "Title: My Video\n\nChannel: My Channel\n\nDescription:\nA great video"
    )


def test_build_metadata_content_no_description():
    meta = VideoMetadata(title="My Video", channel="My Channel")
    assert build_metadata_content(meta) == "Title: My Video\n\nChannel: My Channel"


def test_build_metadata_content_empty():
    assert build_metadata_content(VideoMetadata()) == "No content available for this video."


def test_parse_json3_transcript():
    data = b'{"events":[{"segs":[{"utf8":"Hello "}]},{"segs":[{"utf8":"world"}]},{"segs":[{"utf8":"\\n"}]}]}'
    assert parse_json3_transcript(data) == "Hello world"


def test_parse_json3_skips_events_without_segments():
    data = '{"events":[{"tStartMs":0},{"segs":[{"utf8":"only"}, {}]}]}'
    assert parse_json3_transcript(data) == "only"


def test_parse_json3_skips_null_entries():
    data = b'{"events":[null,{"segs":[null,{"utf8":"hi"}]}]}'
    assert parse_json3_transcript(data) == "hi"


def test_parse_json3_invalid_json():
    with pytest.raises(TranscriptParseError):
        parse_json3_transcript(b"<transcript></transcript>")


def test_parse_json3_no_text():
    with pytest.raises(TranscriptParseError, match="no transcript content"):
        parse_json3_transcript(b'{"events":[]}')


def test_parse_xml_transcript():
    xml = (
        '<transcript><text start="0" dur="5">Hello</text>'
        '<text start="5" dur="3">world &amp; friends</text></transcript>'
    )
    assert parse_xml_transcript(xml) == "Hello world & friends"


def test_parse_xml_transcript_numeric_entities():
    xml = "<transcript><text>it&#39;s</text><text>  </text><text>fine</text></transcript>"
    assert parse_xml_transcript(xml) == "it's fine"


def test_parse_xml_transcript_no_nodes():
    assert parse_xml_transcript("") == ""
