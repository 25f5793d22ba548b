"""Provider-agnostic LLM completion interface.

Concrete provider adapters (Claude, Gemini, OpenAI, ...) live outside this
package; anything with an async ``complete(prompt) -> str`` works.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CompletionClient(Protocol):
    """Single-turn text completion."""

    async def complete(self, prompt: str) -> str:
        """Send ``prompt`` and return the model's raw text reply."""
        ...
