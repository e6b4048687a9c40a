"""Inspect and restore the local working tree: local changes, current
branch, forced checkout."""

import logging
from pathlib import Path

from prcheckout.services.git._run import GitRunnerError, _run_git


def _cwd(repo_dir: Path | None) -> Path:
    return Path(repo_dir) if repo_dir is not None else Path.cwd()


def has_local_changes(repo_dir: Path | None = None, log: logging.Logger | None = None) -> bool:
    """Return True if tracked files have uncommitted (staged or unstaged)
    changes.

    Untracked files are ignored: they survive a checkout untouched.
    """
    out = _run_git(["status", "--porcelain", "--untracked-files=no"], cwd=_cwd(repo_dir), log=log)
    return bool(out)


def get_current_branch_or_revision(repo_dir: Path | None = None, log: logging.Logger | None = None) -> str:
    """Return the checked out branch name, or the HEAD commit SHA when HEAD
    is detached.

    Raises:
        GitRunnerError: If HEAD cannot be resolved (e.g. not a repository).
    """
    cwd = _cwd(repo_dir)
    try:
        branch = _run_git(["symbolic-ref", "--short", "-q", "HEAD"], cwd=cwd)
    except GitRunnerError:
        # symbolic-ref exits 1 on a detached HEAD
        branch = ""
    if branch:
        return branch
    return _run_git(["rev-parse", "HEAD"], cwd=cwd, log=log)


def checkout(
    branch_or_revision: str,
    force: bool = False,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> bool:
    """Checkout a branch or revision; return False instead of raising if git
    fails."""
    args = ["checkout", branch_or_revision]
    if force:
        args.append("--force")
    try:
        _run_git(args, cwd=_cwd(repo_dir), log=log)
    except GitRunnerError:
        return False
    if log:
        log.info("Checked out %s", branch_or_revision)
    return True


def get_remote_url(
    remote: str = "origin",
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> str:
    """Return the fetch URL configured for the given remote."""
    return _run_git(["remote", "get-url", remote], cwd=_cwd(repo_dir), log=log)
