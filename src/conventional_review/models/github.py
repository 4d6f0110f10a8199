from pydantic import BaseModel, ConfigDict, PositiveInt


class GitHubOwner(BaseModel):
    login: str


class GitHubRepository(BaseModel):
    name: str
    owner: GitHubOwner


class GitHubPullRequest(BaseModel):
    number: int
    diff_url: str


class GitHubEvent(BaseModel):
    """Subset of the Actions event payload (GITHUB_EVENT_PATH)."""
    repository: GitHubRepository
    pull_request: GitHubPullRequest | None = None


class PullRequestDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    pull_number: PositiveInt


class PullRequestContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    details: PullRequestDetails
    diff_url: str
