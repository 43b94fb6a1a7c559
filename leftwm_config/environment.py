"""
Host environment probes used by the check command.

- Version banner: runs `leftwm -V` once and splits its output
- Session check: XDG_RUNTIME_DIR cross-referenced with loginctl on $PATH

Neither probe is fatal. A missing binary falls back to an unknown
version, and environment problems are reported but never fail a check.
"""

import logging
import os
import subprocess
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .defaults import current_search_path, is_program_in_path

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"
FALLBACK_VERSION = "0.3.0,"
VERSION_TIMEOUT = 5.0

RUNTIME_DIR_HELP = "See https://github.com/leftwm/leftwm/wiki/XDG_RUNTIME_DIR for more information."


@dataclass(frozen=True)
class VersionInfo:
    """Window manager version and git hash as reported by `leftwm -V`."""
    version: str
    git_hash: str


def parse_version_banner(output: str) -> VersionInfo:
    """
    Split the `leftwm -V` banner.

    The banner looks like `LeftWM 0.5.1, git 3b5e7f1`; the version is
    the second space-separated token (comma stripped) and the hash the
    fourth.

    Args:
        output: Raw stdout of `leftwm -V`

    Returns:
        VersionInfo, with fallbacks for missing tokens
    """
    tokens = output.strip().split(" ")
    version = (tokens[1] if len(tokens) > 1 else FALLBACK_VERSION).replace(",", "")
    git_hash = tokens[3] if len(tokens) > 3 else ""
    return VersionInfo(version=version, git_hash=git_hash or UNKNOWN)


def get_leftwm_version(timeout: float = VERSION_TIMEOUT) -> VersionInfo:
    """
    Ask the installed window manager for its version.

    Args:
        timeout: Seconds to wait for the child process

    Returns:
        VersionInfo; both fields are "unknown" if `leftwm` cannot be run
    """
    try:
        completed = subprocess.run(
            ["leftwm", "-V"],
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug(f"failed to run leftwm -V: {e}")
        return VersionInfo(version=UNKNOWN, git_hash=UNKNOWN)

    return parse_version_banner(completed.stdout)


class EnvironmentStatus(str, Enum):
    """Outcome of the session environment check."""
    OK = "ok"
    OK_RUNTIME_DIR = "ok_runtime_dir"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class EnvironmentReport:
    status: EnvironmentStatus
    message: str
    runtime_dir: Optional[str]
    loginctl: bool

    @property
    def ok(self) -> bool:
        return self.status in (EnvironmentStatus.OK, EnvironmentStatus.OK_RUNTIME_DIR)


def check_environment(runtime_dir: Optional[str], search_path: str) -> EnvironmentReport:
    """
    Check the session environment.

    We assume that loginctl on the search path means elogind/systemd is
    installed, and cross-reference that with XDG_RUNTIME_DIR.

    Args:
        runtime_dir: Value of XDG_RUNTIME_DIR, or None when unset
        search_path: Colon-separated search path

    Returns:
        EnvironmentReport describing the outcome
    """
    loginctl = is_program_in_path("loginctl", search_path)

    if runtime_dir is not None and loginctl:
        status, message = EnvironmentStatus.OK, "Environment OK"
    elif runtime_dir is not None:
        status, message = EnvironmentStatus.OK_RUNTIME_DIR, "Environment OK (has XDG_RUNTIME_DIR)"
    elif loginctl:
        status, message = (
            EnvironmentStatus.WARN,
            "Elogind/systemd installed but XDG_RUNTIME_DIR not set. "
            "This may be because elogind isn't started.",
        )
    else:
        status, message = (
            EnvironmentStatus.ERROR,
            "Elogind not installed/operating and no alternative XDG_RUNTIME_DIR is set. "
            + RUNTIME_DIR_HELP,
        )

    logger.debug(f"XDG_RUNTIME_DIR: {runtime_dir!r}, loginctl on path: {loginctl}")
    return EnvironmentReport(status=status, message=message, runtime_dir=runtime_dir, loginctl=loginctl)


def check_current_environment() -> EnvironmentReport:
    """Run check_environment() against this process's environment."""
    return check_environment(os.environ.get("XDG_RUNTIME_DIR"), current_search_path())
