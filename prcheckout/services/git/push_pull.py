"""Fetch from and push to an explicit repository URL."""

import logging
from pathlib import Path

from prcheckout.services.git._run import _run_git, redact_url

# fetch/push go over the network; allow more than local commands
NETWORK_TIMEOUT = 300


def fetch_ref(
    url: str,
    ref: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Run git fetch <url> <ref>; the result is left in FETCH_HEAD."""
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["fetch", url, ref], cwd=cwd, log=log, timeout=NETWORK_TIMEOUT)
    if log:
        log.info("Fetched %s from %s", ref, redact_url(url))


def checkout_detached(
    revision: str = "FETCH_HEAD",
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Checkout a revision with a detached HEAD (no local branch is touched)."""
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["checkout", "--detach", revision], cwd=cwd, log=log)
    if log:
        log.info("Checked out %s (detached)", revision)


def push_head(
    url: str,
    ref: str,
    force_with_lease_flag: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Push local HEAD to <ref> on <url>, guarded by a --force-with-lease
    flag.

    Raises:
        GitRunnerError: If the push is rejected (e.g. the remote ref moved).
    """
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["push", url, f"HEAD:{ref}", force_with_lease_flag], cwd=cwd, log=log, timeout=NETWORK_TIMEOUT)
    if log:
        log.info("Pushed HEAD to %s on %s", ref, redact_url(url))
