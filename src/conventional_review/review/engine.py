# src/conventional_review/review/engine.py
import logging
from dataclasses import dataclass
from conventional_review.models.diff import DiffFile
from conventional_review.models.github import PullRequestDetails
from conventional_review.models.review import PartialComment, ReviewComment
from conventional_review.platforms.base import GitPlatform
from conventional_review.providers.base import LLMProvider
from .parser import normalize_diff
from .prompts import PromptTemplate, build_review_prompt
from .reconciler import reconcile_tool_call
from .tools import REVIEW_COMMENT_TOOL_NAME


logger = logging.getLogger(__name__)


@dataclass
class EngineReviewResult:
    """Result of running review on a pull request."""
    files_reviewed: int
    comments_count: int
    dropped_count: int
    review_id: int | None


class ReviewEngine:
    def __init__(
        self,
        platform: GitPlatform,
        provider: LLMProvider,
        template: PromptTemplate,
        model: str = "gpt-4o",
        exclude_patterns: list[str] | None = None,
        conventions: str = "",
        max_files: int | None = None,
    ):
        self.platform = platform
        self.provider = provider
        self.template = template
        self.model = model
        self.exclude_patterns = exclude_patterns or []
        self.conventions = conventions
        self.max_files = max_files

    async def review_pull_request(self, details: PullRequestDetails, diff_url: str) -> EngineReviewResult:
        """Run AI review on a pull request and publish one review."""
        diff_text = await self.platform.get_diff(diff_url)
        files = []
        for diff_file in normalize_diff(diff_text, self.exclude_patterns):
            # rename-only and mode-only sections have nothing to comment on
            if not diff_file.changes:
                logger.debug(f"Skipping {diff_file.path}: no changed lines")
                continue
            files.append(diff_file)

        if self.max_files is not None and len(files) > self.max_files:
            logger.info(f"Reviewing the first {self.max_files} of {len(files)} files")
            files = files[: self.max_files]

        all_comments: list[ReviewComment] = []
        dropped = 0

        for diff_file in files:
            comments, file_dropped = await self.review_file(diff_file)
            all_comments.extend(comments)
            dropped += file_dropped

        review_id = None
        if all_comments:
            review_id = await self.platform.create_review(details, all_comments)
        else:
            logger.info("No comments to publish, skipping review")

        return EngineReviewResult(
            files_reviewed=len(files),
            comments_count=len(all_comments),
            dropped_count=dropped,
            review_id=review_id,
        )

    async def review_file(self, diff_file: DiffFile) -> tuple[list[ReviewComment], int]:
        """Review one file. Returns accepted comments and the number dropped."""
        prompt = build_review_prompt(diff_file, self.conventions, self.template)
        logger.debug(f"Prompt for {diff_file.path}:\n{prompt}")

        tool_calls = await self.provider.request(prompt, self.model)

        comments = []
        dropped = 0
        for call in tool_calls:
            if call.name != REVIEW_COMMENT_TOOL_NAME:
                logger.warning(f"Ignoring call to unknown tool {call.name!r}")
                dropped += 1
                continue

            result = reconcile_tool_call(call, diff_file.path)
            if isinstance(result, PartialComment):
                logger.warning(
                    f"Dropping comment on {diff_file.path}: missing {', '.join(result.missing_fields)} "
                    f"in {call.arguments!r}"
                )
                dropped += 1
                continue

            if not diff_file.has_line(result.line, result.side):
                logger.warning(
                    f"Dropping comment on {diff_file.path}:{result.line} ({result.side.value}): "
                    "line is not part of the diff"
                )
                dropped += 1
                continue

            comments.append(result)

        logger.info(f"{diff_file.path}: {len(comments)} comments, {dropped} dropped")
        return comments, dropped
