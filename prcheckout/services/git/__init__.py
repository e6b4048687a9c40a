"""Git operations: working tree state, fetch, detached checkout, push."""

from prcheckout.services.git._run import GitRunnerError, redact_url
from prcheckout.services.git.push_pull import checkout_detached, fetch_ref, push_head
from prcheckout.services.git.state import (
    checkout,
    get_current_branch_or_revision,
    get_remote_url,
    has_local_changes,
)

__all__ = [
    "GitRunnerError",
    "checkout",
    "checkout_detached",
    "fetch_ref",
    "get_current_branch_or_revision",
    "get_remote_url",
    "has_local_changes",
    "push_head",
    "redact_url",
]
