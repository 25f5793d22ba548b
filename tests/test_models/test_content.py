"""Tests for link and classification models."""

import pytest
from pydantic import ValidationError

from link_summarizer.models import (
    ClassificationResult,
    ContentCategory,
    ExtractedContent,
    LinkInfo,
    LinkType,
)


def test_link_type_values():
    assert {t.value for t in LinkType} == {
        "article",
        "youtube",
        "pdf",
        "twitter",
        "newsletter",
        "unknown",
    }


def test_link_type_is_str():
    assert LinkType.PDF == "pdf"


def test_link_info_optional_fields_default_none():
    info = LinkInfo(url="https://example.com", link_type=LinkType.ARTICLE)
    assert info.title is None
    assert info.author is None
    assert info.date is None


def test_link_info_json_omits_empty_fields():
    info = LinkInfo(url="https://example.com", link_type=LinkType.ARTICLE, title="T")
    assert info.model_dump(mode="json", exclude_none=True) == {
        "url": "https://example.com",
        "link_type": "article",
        "title": "T",
    }


def test_link_info_rejects_unknown_link_type():
    with pytest.raises(ValidationError):
        LinkInfo(url="https://example.com", link_type="podcast")


def test_extracted_content_serialization():
    content = ExtractedContent(
        link_info=LinkInfo(url="https://youtu.be/x", link_type=LinkType.YOUTUBE, author="Chan"),
        content="Hello world",
    )
    data = content.model_dump(mode="json", exclude_none=True)
    assert data == {
        "link_info": {"url": "https://youtu.be/x", "link_type": "youtube", "author": "Chan"},
        "content": "Hello world",
    }


def test_content_category_has_six_values():
    assert [c.value for c in ContentCategory] == [
        "원리소개",
        "사용기",
        "생각정리",
        "기술소개",
        "튜토리얼",
        "뉴스/분석",
    ]


def test_classification_result_parses_full_reply():
    result = ClassificationResult.model_validate_json(
        '{"primary":"원리소개","confidence":0.92,"secondary":"기술소개","secondary_confidence":0.45}'
    )
    assert result.primary == ContentCategory.PRINCIPLE
    assert result.confidence == 0.92
    assert result.secondary == ContentCategory.TECH_INTRO
    assert result.secondary_confidence == 0.45


def test_classification_result_secondary_optional():
    result = ClassificationResult.model_validate_json('{"primary":"튜토리얼","confidence":0.95}')
    assert result.secondary is None
    assert result.secondary_confidence is None


def test_classification_result_confidence_defaults_to_zero():
    result = ClassificationResult.model_validate_json('{"primary":"사용기"}')
    assert result.primary == ContentCategory.REVIEW
    assert result.confidence == 0.0


def test_classification_result_unknown_secondary_dropped():
    result = ClassificationResult(primary="뉴스/분석", confidence=0.7, secondary="something else")
    assert result.secondary is None


def test_classification_result_empty_secondary_dropped():
    result = ClassificationResult(primary="사용기", confidence=0.8, secondary="")
    assert result.secondary is None


def test_classification_result_invalid_primary():
    with pytest.raises(ValidationError):
        ClassificationResult(primary="unknown", confidence=0.9)
