"""Paywall indicator detection with a fixed phrase list."""

import functools
from pathlib import Path

import yaml

_CONFIG_PATH = Path(__file__).resolve().parent / "paywall_phrases.yaml"

PAYWALL_NOTICE = (
    "\n\n---\n[Note: This content may be partially extracted due to paywall restrictions]"
)


@functools.lru_cache
def load_paywall_phrases() -> tuple[str, ...]:
    """Load lowercased paywall indicator phrases from YAML. Result is cached."""
    with open(_CONFIG_PATH, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return tuple(phrase.lower() for phrase in data.get("phrases", []))


def is_paywalled(html: str) -> bool:
    """Check whether the page text contains any paywall indicator phrase."""
    lowered = html.lower()
    return any(phrase in lowered for phrase in load_paywall_phrases())
