# src/conventional_review/platforms/github.py
import logging
from typing import Any
import httpx
from .base import GitPlatform
from conventional_review.errors import DiffFetchFailed, PublishFailed
from conventional_review.models.github import PullRequestDetails
from conventional_review.models.review import ReviewComment


logger = logging.getLogger(__name__)


class GitHubClient(GitPlatform):
    def __init__(self, token: str, api_url: str = "https://api.github.com"):
        self.token = token
        self.api_url = api_url.rstrip("/")

    def _headers(self, accept: str = "application/vnd.github+json") -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": accept,
            "X-GitHub-Api-Version": "2022-11-28",
        }

    async def get_diff(self, diff_url: str) -> str:
        """Download the rendered unified diff of a pull request."""
        try:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                response = await client.get(
                    diff_url,
                    headers=self._headers(accept="application/vnd.github.diff"),
                    timeout=30.0,
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise DiffFetchFailed(f"Could not fetch diff {diff_url}: {e}") from e

        logger.info(f"Fetched diff: {len(response.text)} chars")
        return response.text

    async def create_review(
        self,
        details: PullRequestDetails,
        comments: list[ReviewComment],
    ) -> int:
        """Create one COMMENT review carrying all inline comments. Returns the review id."""
        payload: dict[str, Any] = {
            "event": "COMMENT",
            "comments": [
                {
                    "path": comment.path,
                    "line": comment.line,
                    "side": comment.side.value,
                    "body": comment.body,
                }
                for comment in comments
            ],
        }
        url = f"{self.api_url}/repos/{details.owner}/{details.repo}/pulls/{details.pull_number}/reviews"
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(url, headers=self._headers(), json=payload, timeout=30.0)
                response.raise_for_status()
            review_id = response.json()["id"]
        except (httpx.HTTPError, ValueError, KeyError) as e:
            raise PublishFailed(f"Could not create review on {details.owner}/{details.repo}#{details.pull_number}: {e!r}") from e

        logger.info(f"Created review {review_id} with {len(comments)} comments")
        return review_id
