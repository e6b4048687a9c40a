"""Check out a pull request locally in a detached state.

The checkout refuses to run on a dirty working tree and, unless told
otherwise, on PRs that maintainers are not allowed to push to. The
returned CheckoutSession pushes the (possibly amended) HEAD back to the
PR branch or restores the branch that was checked out before.
"""

import logging
from pathlib import Path
from urllib.parse import quote, urlsplit, urlunsplit

from prcheckout.adapters import GitHubAdapter, GitPlatformAdapter, repository_from_remote_url
from prcheckout.errors import CheckoutErrorKind, PullRequestCheckoutError
from prcheckout.services.git import (
    checkout,
    checkout_detached,
    fetch_ref,
    get_current_branch_or_revision,
    get_remote_url,
    has_local_changes,
    push_head,
    redact_url,
)

logger = logging.getLogger("prcheckout.checkout")


def add_authentication_to_url(url: str, token: str) -> str:
    """Return url with token as its (percent-encoded) username; any password
    already in the url is kept."""
    parts = urlsplit(url)
    userinfo, _, host = parts.netloc.rpartition("@")
    _, sep, password = userinfo.partition(":")
    netloc = f"{quote(token, safe='')}{sep}{password}@{host}"
    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))


class CheckoutSession:
    """Handle on a checked out PR: push back to the PR branch or restore the
    previous local state."""

    def __init__(
        self,
        pr_number: int,
        previous_branch_or_revision: str,
        head_ref_url: str,
        head_ref_name: str,
        head_ref_oid: str,
        repo_dir: Path | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self.pr_number = pr_number
        self.previous_branch_or_revision = previous_branch_or_revision
        self.head_ref_url = head_ref_url
        self.head_ref_name = head_ref_name
        # Detached HEAD has no remote-tracking branch, so the expected ref and
        # SHA are spelled out: the push is rejected if the PR branch moved.
        self.force_with_lease_flag = f"--force-with-lease={head_ref_name}:{head_ref_oid}"
        self._repo_dir = repo_dir
        self._log = log

    def push_to_upstream(self) -> bool:
        """Push local HEAD to the PR branch on the PR's repository.

        Returns:
            True once the push succeeded.

        Raises:
            GitRunnerError: If the push fails (including a lease rejection).
        """
        push_head(
            self.head_ref_url,
            self.head_ref_name,
            self.force_with_lease_flag,
            repo_dir=self._repo_dir,
            log=self._log,
        )
        return True

    def reset_git_state(self) -> bool:
        """Force checkout the branch or revision that was checked out before
        the PR."""
        return checkout(self.previous_branch_or_revision, force=True, repo_dir=self._repo_dir, log=self._log)

    def push_command_hint(self) -> str:
        """Equivalent git push command, with the token redacted."""
        return f"git push {redact_url(self.head_ref_url)} HEAD:{self.head_ref_name} {self.force_with_lease_flag}"


def check_out_pull_request_locally(
    pr_number: int,
    github_token: str,
    allow_if_maintainer_cannot_modify: bool = False,
    *,
    adapter: GitPlatformAdapter | None = None,
    repository: str | None = None,
    remote: str = "origin",
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> CheckoutSession:
    """Check out the head commit of a PR with a detached HEAD.

    Args:
        pr_number: Pull request number.
        github_token: Token used for the API and embedded in the fetch/push URL.
        allow_if_maintainer_cannot_modify: Skip the maintainer-modify check.
        adapter: Platform adapter; a GitHubAdapter on github_token if None.
        repository: owner/name of the upstream repo; parsed from the URL of
            ``remote`` if None.
        remote: Remote to derive the repository from.
        repo_dir: Repository directory; uses cwd if None.
        log: Logger for git operations; module logger if None.

    Returns:
        CheckoutSession for pushing back or restoring the previous state.

    Raises:
        PullRequestCheckoutError: Working tree is dirty, or the PR cannot be
            pushed to. Nothing has been changed locally.
        GitPlatformError: The PR could not be fetched from the platform.
        GitRunnerError: A git command failed; a failed fetch or checkout is
            rolled back before re-raising.
        ValueError: pr_number is not positive, or the repository cannot be
            derived from the remote URL.
    """
    if pr_number < 1:
        raise ValueError(f"PR number must be positive, got {pr_number}")
    log = log or logger
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()

    # Checked before talking to the platform to fail fast.
    if has_local_changes(repo_dir=cwd, log=log):
        raise PullRequestCheckoutError(
            CheckoutErrorKind.UNEXPECTED_LOCAL_CHANGES,
            "Unable to checkout PR due to uncommitted changes.",
        )

    previous_branch_or_revision = get_current_branch_or_revision(repo_dir=cwd, log=log)

    if repository is None:
        repository = repository_from_remote_url(get_remote_url(remote, repo_dir=cwd, log=log))
    if adapter is None:
        adapter = GitHubAdapter(token=github_token)
    pr = adapter.get_pr_checkout_info(repository, pr_number)

    if not pr.maintainer_can_modify and not pr.viewer_did_author and not allow_if_maintainer_cannot_modify:
        raise PullRequestCheckoutError(
            CheckoutErrorKind.MAINTAINER_MODIFY_ACCESS,
            "PR is not set to allow maintainers to modify the PR",
        )

    head_ref_name = pr.head_ref.name
    head_ref_url = add_authentication_to_url(pr.head_ref.repository.url, github_token)

    try:
        log.info("Checking out PR #%s from %s", pr_number, pr.full_head_ref)
        fetch_ref(head_ref_url, head_ref_name, repo_dir=cwd, log=log)
        checkout_detached("FETCH_HEAD", repo_dir=cwd, log=log)
    except BaseException:
        log.warning("Checkout of PR #%s failed, restoring %s", pr_number, previous_branch_or_revision)
        checkout(previous_branch_or_revision, force=True, repo_dir=cwd, log=log)
        raise

    return CheckoutSession(
        pr_number=pr_number,
        previous_branch_or_revision=previous_branch_or_revision,
        head_ref_url=head_ref_url,
        head_ref_name=head_ref_name,
        head_ref_oid=pr.head_ref_oid,
        repo_dir=cwd,
        log=log,
    )
