"""Scanner modules for discovering globally installed Node.js packages.

Modules:
    manifest: Read and validate a single package.json
    directory: Scan a node_modules directory, including @scope folders
    nvm: Scan $NVM_DIR/versions/node/*/lib/node_modules
    pnpm: Scan the current $PNPM_HOME/global/<N>/node_modules layout
    yarn: Resolve the yarn global manifest's dependencies
"""

from . import manifest
from . import directory
from . import nvm
from . import pnpm
from . import yarn

__all__ = [
    "manifest",
    "directory",
    "nvm",
    "pnpm",
    "yarn",
]
