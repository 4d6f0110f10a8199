# src/conventional_review/main.py
import asyncio
import logging
import sys
from functools import lru_cache
from pathlib import Path
from pydantic import ValidationError

from conventional_review.config import Settings
from conventional_review.context import load_pull_request_context
from conventional_review.errors import ConfigurationError, ReviewError
from conventional_review.platforms.github import GitHubClient
from conventional_review.providers.base import LLMProvider
from conventional_review.providers.openai import OpenAIProvider
from conventional_review.review.engine import EngineReviewResult, ReviewEngine
from conventional_review.review.prompts import load_prompt_template


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid action inputs: {e}") from e


def get_provider(settings: Settings) -> LLMProvider:
    """Get LLM provider based on settings."""
    return OpenAIProvider(api_key=settings.openai_api_key, base_url=settings.openai_base_url)


def read_conventions(path: str | None) -> str:
    """Read the conventions file, empty when none is configured."""
    if not path:
        return ""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Could not read conventions file {path}: {e}") from e


async def run(settings: Settings | None = None) -> EngineReviewResult:
    """Review the pull request described by the Actions environment."""
    settings = settings or get_settings()

    context = load_pull_request_context(settings.github_event_path)
    template = load_prompt_template(settings.prompt_template)

    engine = ReviewEngine(
        platform=GitHubClient(token=settings.github_token, api_url=settings.github_api_url),
        provider=get_provider(settings),
        template=template,
        model=settings.model,
        exclude_patterns=settings.exclude_patterns,
        conventions=read_conventions(settings.conventions_file),
        max_files=settings.max_files,
    )
    result = await engine.review_pull_request(context.details, context.diff_url)

    logger.info(
        f"Review completed: {result.files_reviewed} files, "
        f"{result.comments_count} comments posted, {result.dropped_count} dropped"
    )
    return result


def escape_workflow_data(message: str) -> str:
    """Escape a message for an Actions workflow command (::error::)."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def main() -> None:
    try:
        settings = get_settings()
        logging.basicConfig(level=settings.log_level)
        asyncio.run(run(settings))
    except ReviewError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Review failed: {e}")
        print(f"::error::{escape_workflow_data(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
