from .base import GitPlatform
from .github import GitHubClient

__all__ = ["GitPlatform", "GitHubClient"]
