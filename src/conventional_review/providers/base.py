# src/conventional_review/providers/base.py
from abc import ABC, abstractmethod
from conventional_review.models.review import RawToolCall


class LLMProvider(ABC):
    @abstractmethod
    async def request(self, prompt: str, model: str) -> list[RawToolCall]:
        """Send prompt to the model and return its raw tool calls (possibly none)."""
        pass
