"""Run configuration for pkpeek.

A PeekConfig is built once at the entry point and passed by value into the
core. Package manager roots are resolved here, so the scanners never consult
the environment on their own during a run.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from .errors import ConfigurationError
from .scanners.manifest import normalize_version
from .scanners.nvm import get_nvm_path
from .scanners.pnpm import get_pnpm_path
from .scanners.yarn import get_yarn_path
from .utils.node import get_current_node_version


@dataclass(frozen=True)
class PeekConfig:
    """Immutable options for one discovery run.

    Attributes:
        current_only: Only the active Node version; pnpm and yarn are skipped
        version_prefix: Node version prefix to restrict the nvm scan to
        package_name: Case-insensitive substring to filter package names by
        duplicates_only: Keep only packages installed in more than one place
        include_yarn: Also scan the yarn global store
        nvm_path: nvm root directory
        pnpm_path: pnpm home directory
        yarn_path: yarn home directory
    """
    nvm_path: Path
    pnpm_path: Path
    yarn_path: Path
    current_only: bool = False
    version_prefix: Optional[str] = None
    package_name: Optional[str] = None
    duplicates_only: bool = False
    include_yarn: bool = False

    def __post_init__(self):
        if self.current_only and self.version_prefix:
            raise ConfigurationError(
                "cannot use both a node version prefix and the current version flag"
            )

    @classmethod
    def from_options(
        cls,
        current_only: bool = False,
        version_prefix: Optional[str] = None,
        package_name: Optional[str] = None,
        duplicates_only: bool = False,
        include_yarn: bool = False,
        nvm_path: Union[str, Path, None] = None,
        pnpm_path: Union[str, Path, None] = None,
        yarn_path: Union[str, Path, None] = None,
    ) -> "PeekConfig":
        """Build a config, resolving unset paths from the environment.

        Explicit paths win over $NVM_DIR, $PNPM_HOME and $YARN_HOME, which
        win over the defaults under the home directory.

        Raises:
            ConfigurationError: On conflicting options
        """
        return cls(
            nvm_path=Path(nvm_path).expanduser() if nvm_path else get_nvm_path(),
            pnpm_path=Path(pnpm_path).expanduser() if pnpm_path else get_pnpm_path(),
            yarn_path=Path(yarn_path).expanduser() if yarn_path else get_yarn_path(),
            current_only=current_only,
            version_prefix=version_prefix or None,
            package_name=package_name or None,
            duplicates_only=duplicates_only,
            include_yarn=include_yarn,
        )

    def resolve_version_filter(
        self,
        current_version: Optional[Callable[[], Optional[str]]] = None,
    ) -> Optional[str]:
        """Compute the normalized nvm version filter for this run.

        Args:
            current_version: Probe for the active Node version; defaults to
                running `node --version`

        Returns:
            The normalized prefix, or None to scan every version

        Raises:
            ConfigurationError: If current_only is set and no Node version
                can be detected
        """
        if self.current_only:
            probe = current_version or get_current_node_version
            version = probe()
            if not version:
                raise ConfigurationError(
                    "could not determine the current node version (is node on PATH?)"
                )
            return normalize_version(version)
        if self.version_prefix:
            return normalize_version(self.version_prefix)
        return None
