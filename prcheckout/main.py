"""prcheckout entry point.

Usage: prcheckout checkout <pr-number> [--allow-if-maintainer-cannot-modify]
"""

import argparse
import sys
from pathlib import Path

from prcheckout.adapters import GitHubAdapter, GitPlatformError
from prcheckout.checkout import check_out_pull_request_locally
from prcheckout.config import load_config
from prcheckout.errors import CheckoutErrorKind, PullRequestCheckoutError
from prcheckout.logging import CheckoutLogging
from prcheckout.services.git import GitRunnerError


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI: global options plus the checkout subcommand."""
    argv = argv if argv is not None else sys.argv[1:]
    parser = argparse.ArgumentParser(
        prog="prcheckout",
        description="Check out a GitHub pull request locally with a detached HEAD",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    sub = parser.add_subparsers(dest="subcommand")
    checkout_parser = sub.add_parser("checkout", help="Check out a pull request")
    checkout_parser.add_argument("pr_number", type=_positive_int, help="Pull request number")
    checkout_parser.add_argument(
        "--allow-if-maintainer-cannot-modify",
        action="store_true",
        default=None,
        help="Check out even if maintainers cannot push to the PR branch",
    )
    checkout_parser.add_argument("--repo", default=None, help="Upstream repository owner/name")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load config, set up logging, run the checkout."""
    args = parse_args(argv)
    config = load_config(args.config)
    checkout_logging = CheckoutLogging(config.logging)
    checkout_logging.setup()
    log = checkout_logging.get_logger("prcheckout")

    if args.check:
        print("Config OK:", config.github.repository or f"(from remote {config.github.remote})")
        return 0

    if args.subcommand != "checkout":
        log.error("No command given; use: prcheckout checkout <pr-number>")
        return 2

    token = config.github_token_resolved
    if not token:
        log.error("GitHub token not configured (GITHUB_TOKEN or GITHUB_TOKEN_FILE)")
        return 2

    allow = args.allow_if_maintainer_cannot_modify
    if allow is None:
        allow = config.checkout.allow_if_maintainer_cannot_modify

    try:
        session = check_out_pull_request_locally(
            args.pr_number,
            token,
            allow,
            adapter=GitHubAdapter(token=token, api_url=config.github.api_url),
            repository=args.repo or config.github.repository,
            remote=config.github.remote,
            repo_dir=Path(config.checkout.repo_dir),
            log=log,
        )
    except PullRequestCheckoutError as e:
        log.error("%s", e)
        if e.kind is CheckoutErrorKind.MAINTAINER_MODIFY_ACCESS:
            log.error("Use --allow-if-maintainer-cannot-modify to check it out anyway")
        return 1
    except (GitPlatformError, GitRunnerError, ValueError) as e:
        log.error("Checkout of PR #%s failed: %s", args.pr_number, e)
        return 1

    print(f"Checked out the remote branch for pull request #{args.pr_number}")
    print("To push the checked out branch back to its PR, run (with *** replaced by your token):")
    print(f"  {session.push_command_hint()}")
    print(f"To go back to {session.previous_branch_or_revision}, run:")
    print(f"  git checkout {session.previous_branch_or_revision}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
