"""Pull request metadata needed to check a PR out and push it back."""

from pydantic import BaseModel, ConfigDict, Field


class RepositoryInfo(BaseModel):
    """Repository a PR ref lives in."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str
    name_with_owner: str = Field(alias="nameWithOwner")


class PullRequestRef(BaseModel):
    """Branch of a PR (head or base) and its repository."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    repository: RepositoryInfo


class PullRequestMetadata(BaseModel):
    """Read-only snapshot of a pull request (GitHub GraphQL pullRequest
    node)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    state: str
    maintainer_can_modify: bool = Field(alias="maintainerCanModify")
    viewer_did_author: bool = Field(alias="viewerDidAuthor")
    head_ref_oid: str = Field(alias="headRefOid")
    head_ref: PullRequestRef = Field(alias="headRef")
    base_ref: PullRequestRef = Field(alias="baseRef")

    @property
    def full_head_ref(self) -> str:
        """owner/repo:branch of the PR head."""
        return f"{self.head_ref.repository.name_with_owner}:{self.head_ref.name}"
