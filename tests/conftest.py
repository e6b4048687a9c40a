"""Shared fixtures: fake git command layer and PR metadata."""

from pathlib import Path
from typing import Any, Callable, Iterator
from unittest.mock import Mock, patch

import pytest

from prcheckout.adapters import GitPlatformAdapter
from prcheckout.models import PullRequestMetadata
from prcheckout.services.git import GitRunnerError


def make_pr(
    maintainer_can_modify: bool = True,
    viewer_did_author: bool = False,
    head_ref_name: str = "feature-x",
    head_ref_oid: str = "abc123",
    head_repo: str = "forkOwner/repo",
) -> PullRequestMetadata:
    """Build PR metadata the way the GraphQL API returns it."""
    return PullRequestMetadata.model_validate(
        {
            "state": "OPEN",
            "maintainerCanModify": maintainer_can_modify,
            "viewerDidAuthor": viewer_did_author,
            "headRefOid": head_ref_oid,
            "headRef": {
                "name": head_ref_name,
                "repository": {"url": f"https://github.com/{head_repo}", "nameWithOwner": head_repo},
            },
            "baseRef": {
                "name": "main",
                "repository": {"url": "https://github.com/upstream/repo", "nameWithOwner": "upstream/repo"},
            },
        }
    )


class FakeGit:
    """Stands in for _run_git: records argv, answers queries, fails on
    request."""

    def __init__(self, branch: str = "main", head: str = "0123abcd", dirty: bool = False) -> None:
        self.branch = branch
        self.head = head
        self.dirty = dirty
        self.calls: list[list[str]] = []
        self.fail_on: set[str] = set()
        self.raise_on: dict[str, BaseException] = {}

    def __call__(self, args: list[str], cwd: Path, log: Any = None, timeout: int = 60) -> str:
        self.calls.append(list(args))
        cmd = args[0]
        if " ".join(args) in self.raise_on:
            raise self.raise_on[" ".join(args)]
        if cmd in self.fail_on or " ".join(args) in self.fail_on:
            raise GitRunnerError(f"git {' '.join(args)}: failed")
        if cmd == "status":
            return " M file.py" if self.dirty else ""
        if cmd == "symbolic-ref":
            if not self.branch:
                raise GitRunnerError("not a symbolic ref")
            return self.branch
        if cmd == "rev-parse":
            return self.head
        if cmd == "remote":
            return "git@github.com:upstream/repo.git"
        return ""

    def mutations(self) -> list[list[str]]:
        """Calls that change the working tree or a remote."""
        return [c for c in self.calls if c[0] in ("fetch", "checkout", "push")]


@pytest.fixture
def fake_git() -> Iterator[FakeGit]:
    git = FakeGit()
    with (
        patch("prcheckout.services.git.state._run_git", git),
        patch("prcheckout.services.git.push_pull._run_git", git),
    ):
        yield git


@pytest.fixture
def pr_factory() -> Callable[..., PullRequestMetadata]:
    return make_pr


@pytest.fixture
def adapter() -> Mock:
    mock = Mock(spec=GitPlatformAdapter)
    mock.get_pr_checkout_info.return_value = make_pr()
    return mock
