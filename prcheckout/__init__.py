"""prcheckout - check out GitHub pull requests locally and push them back."""

from prcheckout.checkout import CheckoutSession, add_authentication_to_url, check_out_pull_request_locally
from prcheckout.errors import CheckoutErrorKind, PullRequestCheckoutError

__all__ = [
    "CheckoutErrorKind",
    "CheckoutSession",
    "PullRequestCheckoutError",
    "add_authentication_to_url",
    "check_out_pull_request_locally",
]
