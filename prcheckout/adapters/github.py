"""GitHub GraphQL adapter."""

import re
from typing import Any, Dict

import requests
from pydantic import ValidationError

from prcheckout.adapters.base import GitPlatformAdapter, GitPlatformError
from prcheckout.models import PullRequestMetadata

PR_CHECKOUT_QUERY = """
query($owner: String!, $name: String!, $number: Int!) {
  repository(owner: $owner, name: $name) {
    pullRequest(number: $number) {
      state
      maintainerCanModify
      viewerDidAuthor
      headRefOid
      headRef {
        name
        repository {
          url
          nameWithOwner
        }
      }
      baseRef {
        name
        repository {
          url
          nameWithOwner
        }
      }
    }
  }
}
"""

# https://github.com/owner/name(.git), git@github.com:owner/name(.git), ssh://git@github.com/owner/name
_REMOTE_URL_RE = re.compile(r"(?:[:/])(?P<owner>[^/:]+)/(?P<name>[^/]+?)(?:\.git)?/?$")


def repository_from_remote_url(url: str) -> str:
    """Return owner/name parsed from a GitHub remote URL.

    Raises:
        ValueError: If the URL does not end in owner/name.
    """
    match = _REMOTE_URL_RE.search(url.strip())
    if not match:
        raise ValueError(f"Cannot determine repository from remote URL: {url!r}")
    return f"{match.group('owner')}/{match.group('name')}"


def _split_repo(repo: str) -> tuple[str, str]:
    owner, sep, name = repo.partition("/")
    if not sep or not owner or not name or "/" in name:
        raise GitPlatformError(f"Repository must be owner/name, got {repo!r}")
    return owner, name


class GitHubAdapter(GitPlatformAdapter):
    """GitHub API implementation (GraphQL v4)."""

    def __init__(self, token: str, api_url: str = "https://api.github.com") -> None:
        self._api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"bearer {token}"
        self._session.headers["Accept"] = "application/json"

    def _graphql(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self._api_url}/graphql"
        try:
            resp = self._session.request("POST", url, json={"query": query, "variables": variables}, timeout=30)
        except requests.RequestException as e:
            raise GitPlatformError(f"GraphQL request failed: {e}") from e
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                payload = resp.json()
            except ValueError:
                payload = None
            if isinstance(payload, dict):
                msg = payload.get("message", msg)
            raise GitPlatformError(f"{resp.status_code}: {msg}")
        try:
            body = resp.json()
        except ValueError as e:
            raise GitPlatformError(f"Unexpected response from {url}: not JSON") from e
        if body is None:
            body = {}
        if not isinstance(body, dict):
            raise GitPlatformError(f"Unexpected response from {url}: {type(body).__name__} body")
        errors = body.get("errors")
        if errors:
            messages = "; ".join(str(e.get("message", e)) for e in errors if isinstance(e, dict)) or str(errors)
            raise GitPlatformError(f"GraphQL error: {messages}")
        data = body.get("data") or {}
        if not isinstance(data, dict):
            raise GitPlatformError(f"Unexpected response from {url}: data is {type(data).__name__}")
        return data

    def get_pr_checkout_info(self, repo: str, pr_number: int) -> PullRequestMetadata:
        owner, name = _split_repo(repo)
        data = self._graphql(PR_CHECKOUT_QUERY, {"owner": owner, "name": name, "number": pr_number})
        repository = data.get("repository") or {}
        if not isinstance(repository, dict):
            raise GitPlatformError(
                f"Unexpected response for PR #{pr_number}: repository is {type(repository).__name__}"
            )
        pr_data = repository.get("pullRequest")
        if pr_data is None:
            raise GitPlatformError(f"Not found: PR #{pr_number} in {repo}")
        try:
            return PullRequestMetadata.model_validate(pr_data)
        except ValidationError as e:
            raise GitPlatformError(f"Unexpected response for PR #{pr_number}: {e}") from e
