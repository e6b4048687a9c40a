"""Data models for pull requests (Pydantic)."""

from prcheckout.models.pr import PullRequestMetadata, PullRequestRef, RepositoryInfo

__all__ = ["PullRequestMetadata", "PullRequestRef", "RepositoryInfo"]
