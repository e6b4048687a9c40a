"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod

from prcheckout.models import PullRequestMetadata


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class GitPlatformAdapter(ABC):
    """Abstract interface for Git hosting platforms."""

    @abstractmethod
    def get_pr_checkout_info(self, repo: str, pr_number: int) -> PullRequestMetadata:
        """Fetch the PR metadata needed for a local checkout."""
        ...
