"""Git platform adapters (base and implementations)."""

from prcheckout.adapters.base import GitPlatformAdapter, GitPlatformError
from prcheckout.adapters.github import GitHubAdapter, repository_from_remote_url

__all__ = ["GitPlatformAdapter", "GitPlatformError", "GitHubAdapter", "repository_from_remote_url"]
