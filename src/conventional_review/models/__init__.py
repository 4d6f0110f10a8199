from .diff import Change, ChangeKind, Chunk, DiffFile
from .github import GitHubEvent, PullRequestContext, PullRequestDetails
from .review import PartialComment, RawToolCall, ReviewComment, Side

__all__ = [
    "Change",
    "ChangeKind",
    "Chunk",
    "DiffFile",
    "GitHubEvent",
    "PullRequestContext",
    "PullRequestDetails",
    "PartialComment",
    "RawToolCall",
    "ReviewComment",
    "Side",
]
