"""Errors raised by the PR checkout workflow before any git mutation."""

from enum import Enum


class CheckoutErrorKind(str, Enum):
    """Why a PR checkout was refused."""

    UNEXPECTED_LOCAL_CHANGES = "unexpected_local_changes"
    MAINTAINER_MODIFY_ACCESS = "maintainer_modify_access"


class PullRequestCheckoutError(Exception):
    """Checkout refused; ``kind`` tells callers which guard failed.

    Git and GitHub failures are not wrapped: they surface as
    GitRunnerError and GitPlatformError.
    """

    def __init__(self, kind: CheckoutErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
