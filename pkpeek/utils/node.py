"""Detection of the currently active Node.js version.

`pkpeek --current` restricts the nvm scan to whatever `node` resolves to on
PATH, which under nvm is the version selected by `nvm use`.
"""

import subprocess
from typing import Optional

from .constants import TIMEOUT_PREREQUISITE


def _run_command(cmd: list[str], timeout: int = TIMEOUT_PREREQUISITE) -> Optional[str]:
    """Run a command and return its stdout, or None on failure.

    Args:
        cmd: Command and arguments as a list
        timeout: Timeout in seconds

    Returns:
        stdout as string, or None if command failed
    """
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
        if result.returncode == 0:
            return result.stdout.strip()
        return None
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
        return None


def get_current_node_version() -> Optional[str]:
    """Return the active Node version as reported by `node --version`.

    Returns:
        Version string such as 'v20.10.0', or None if node is unavailable
    """
    output = _run_command(["node", "--version"])
    if not output:
        return None
    return output.splitlines()[0].strip()
