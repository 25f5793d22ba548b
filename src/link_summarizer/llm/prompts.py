"""Prompt templates for LLM content classification."""

from link_summarizer.models.classification import ContentCategory

# Content beyond this many characters is cut and marked with "..."
MAX_PROMPT_CONTENT_CHARS = 4000

_CATEGORY_DESCRIPTIONS = {
    ContentCategory.PRINCIPLE: (
        "Explains a principle, concept, or how something works "
        '(e.g., "How TCP works", "양자컴퓨팅 원리")'
    ),
    ContentCategory.REVIEW: (
        "Product/tool/service usage review or experience "
        '(e.g., "M4 MacBook Pro 한달 사용기", "Cursor IDE 리뷰")'
    ),
    ContentCategory.OPINION: (
        "Opinion, essay, or philosophical reflection "
        '(e.g., "AI가 개발자를 대체할까", "스타트업 문화에 대한 단상")'
    ),
    ContentCategory.TECH_INTRO: (
        "Introduction of a new technology/tool/framework "
        '(e.g., "Introducing Bun 1.0", "Go 1.22 새 기능")'
    ),
    ContentCategory.TUTORIAL: (
        "Step-by-step guide or how-to "
        '(e.g., "React에서 상태관리 구현하기", "Docker 입문")'
    ),
    ContentCategory.NEWS: (
        "Industry news and trend analysis "
        '(e.g., "2024 AI 트렌드 리포트", "OpenAI DevDay 정리")'
    ),
}

_CLASSIFICATION_TEMPLATE = """\
You are a content classifier. Classify the following content into exactly one of these categories:

{categories}

Respond ONLY with a JSON object in this exact format:
{{"primary": "<category>", "confidence": <0.0-1.0>, "secondary": "<category>", "secondary_confidence": <0.0-1.0>}}

Content to classify:
---
{content}
---"""


def truncate_content(content: str, max_chars: int = MAX_PROMPT_CONTENT_CHARS) -> str:
    """Cut ``content`` to ``max_chars`` characters, appending "..." when cut."""
    if len(content) <= max_chars:
        return content
    return content[:max_chars] + "..."


def build_classification_prompt(content: str) -> str:
    """Build the classification prompt listing every category with examples.

    Args:
        content: Extracted text to classify. Truncated to 4000 characters.

    Returns:
        Prompt asking for a JSON object with primary/secondary categories.
    """
    categories = "\n".join(
        f"{i}. {category.value} - {_CATEGORY_DESCRIPTIONS[category]}"
        for i, category in enumerate(ContentCategory, start=1)
    )
    return _CLASSIFICATION_TEMPLATE.format(
        categories=categories,
        content=truncate_content(content),
    )
