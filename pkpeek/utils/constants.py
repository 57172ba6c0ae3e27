"""Centralized constants for pkpeek.

Default locations of each package manager's global store, the environment
variables that override them, and timeouts for the few external commands
pkpeek runs.
"""

from pathlib import Path

# =============================================================================
# ENVIRONMENT OVERRIDES
# =============================================================================

ENV_NVM_DIR = "NVM_DIR"
ENV_PNPM_HOME = "PNPM_HOME"
ENV_YARN_HOME = "YARN_HOME"

# =============================================================================
# DEFAULT ROOTS (relative to $HOME)
# =============================================================================

DEFAULT_NVM_DIR = Path(".nvm")
DEFAULT_PNPM_HOME = Path(".local") / "share" / "pnpm"
DEFAULT_YARN_HOME = Path(".config") / "yarn"

# =============================================================================
# ON-DISK LAYOUT
# =============================================================================

# <nvm>/versions/node/<version>/lib/node_modules
NVM_VERSIONS_SUBPATH = Path("versions") / "node"
NVM_NODE_MODULES_SUBPATH = Path("lib") / "node_modules"

# <pnpm>/global/<layout>/node_modules
PNPM_GLOBAL_DIR = "global"

# <yarn>/global (package.json) + <yarn>/global/node_modules
YARN_GLOBAL_DIR = "global"

NODE_MODULES = "node_modules"
PACKAGE_JSON = "package.json"

# =============================================================================
# SUBPROCESS TIMEOUTS (in seconds)
# =============================================================================

# Used for: node --version
TIMEOUT_PREREQUISITE = 10
