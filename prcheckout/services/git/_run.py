"""Internal helpers: run git commands, GitRunnerError."""

import logging
import re
import subprocess
from pathlib import Path

# user-info part of an https URL (the token); never printed
_URL_USERINFO_RE = re.compile(r"(https?://)[^@/\s]+@")

DEFAULT_TIMEOUT = 60


class GitRunnerError(Exception):
    """Raised when a git command fails."""

    pass


def redact_url(text: str) -> str:
    """Replace credentials embedded in URLs with ***."""
    return _URL_USERINFO_RE.sub(r"\1***@", text)


def _run_git(
    args: list[str],
    cwd: Path,
    log: logging.Logger | None = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> str:
    """Run git command and return its stripped stdout; raise GitRunnerError
    on non-zero exit."""
    cmd = ["git"] + args
    shown = redact_url(" ".join(args))
    try:
        result = subprocess.run(cmd, cwd=cwd, check=True, capture_output=True, text=True, timeout=timeout)
    except subprocess.CalledProcessError as e:
        err = redact_url((e.stderr or e.stdout or "").strip())
        if log:
            log.warning("Git %s failed: %s", shown, err)
        raise GitRunnerError(f"git {shown}: {err}") from e
    except subprocess.TimeoutExpired as e:
        raise GitRunnerError(f"git {shown}: timed out after {timeout}s") from e
    except FileNotFoundError as e:
        raise GitRunnerError("git not found") from e
    return (result.stdout or "").strip()
