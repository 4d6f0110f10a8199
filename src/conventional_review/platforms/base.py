from abc import ABC, abstractmethod
from conventional_review.models.github import PullRequestDetails
from conventional_review.models.review import ReviewComment


class GitPlatform(ABC):
    @abstractmethod
    async def get_diff(self, diff_url: str) -> str:
        pass

    @abstractmethod
    async def create_review(
        self,
        details: PullRequestDetails,
        comments: list[ReviewComment],
    ) -> int:
        pass
