# src/conventional_review/providers/openai.py
import logging
import openai
from openai import AsyncOpenAI
from .base import LLMProvider
from conventional_review.errors import ModelRequestFailed
from conventional_review.models.review import RawToolCall
from conventional_review.review.tools import REVIEW_COMMENT_TOOL


logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    def __init__(self, api_key: str, base_url: str | None = None, tools: list[dict] | None = None):
        self.api_key = api_key
        self.tools = tools or [REVIEW_COMMENT_TOOL]
        # One call per file, failures are fatal
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)

    async def request(self, prompt: str, model: str) -> list[RawToolCall]:
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                tools=self.tools,
                tool_choice="auto",
            )
        except openai.OpenAIError as e:
            raise ModelRequestFailed(f"{model} request failed: {e}") from e

        if not response.choices:
            logger.warning(f"{model} returned no choices")
            return []

        tool_calls = response.choices[0].message.tool_calls or []
        logger.info(f"{model} returned {len(tool_calls)} tool calls")

        return [
            RawToolCall(name=call.function.name, arguments=call.function.arguments or "")
            for call in tool_calls
            if call.type == "function"
        ]
