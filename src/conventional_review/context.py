# src/conventional_review/context.py
import json
import logging
from pathlib import Path
from pydantic import ValidationError
from conventional_review.errors import ConfigurationError
from conventional_review.models.github import GitHubEvent, PullRequestContext, PullRequestDetails


logger = logging.getLogger(__name__)


def load_pull_request_context(event_path: str | None) -> PullRequestContext:
    """Resolve the pull request under review from the Actions event payload."""
    if not event_path:
        raise ConfigurationError("GITHUB_EVENT_PATH is not set")

    try:
        payload = json.loads(Path(event_path).read_text(encoding="utf-8"))
        event = GitHubEvent(**payload)
    except (OSError, json.JSONDecodeError, TypeError, ValidationError) as e:
        raise ConfigurationError(f"Invalid event payload {event_path}: {e}") from e

    if event.pull_request is None:
        raise ConfigurationError("Event is not a pull request event, no diff URL available")

    try:
        details = PullRequestDetails(
            owner=event.repository.owner.login,
            repo=event.repository.name,
            pull_number=event.pull_request.number,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid pull request in event payload: {e}") from e

    logger.info(f"Reviewing {details.owner}/{details.repo}#{details.pull_number}")
    return PullRequestContext(details=details, diff_url=event.pull_request.diff_url)
