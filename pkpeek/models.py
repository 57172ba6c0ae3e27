"""Data model shared by the scanners, the aggregator and the output layer.

All structures are immutable and created fresh for each run.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PackageInfo:
    """A globally installed package as read from its package.json.

    Attributes:
        name: Package name, including the scope for scoped packages
        version: Version string exactly as found in the manifest
    """
    name: str
    version: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "version": self.version}


@dataclass(frozen=True)
class VersionGroup:
    """Packages installed globally for a single nvm-managed Node version.

    Attributes:
        version: Normalized Node version, never prefixed with 'v'
        packages: Packages found in that version's lib/node_modules
    """
    version: str
    packages: tuple[PackageInfo, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "packages": [pkg.to_dict() for pkg in self.packages],
            "count": len(self.packages),
        }


@dataclass(frozen=True)
class AggregatedResult:
    """Everything discovered in one run, handed to the output layer.

    Attributes:
        nvm_data: One group per selected Node version, in version order
        pnpm_data: Packages from the current pnpm global layout
        yarn_data: Packages from the yarn global manifest
        warnings: Messages for sources that were skipped or degraded
    """
    nvm_data: tuple[VersionGroup, ...] = ()
    pnpm_data: tuple[PackageInfo, ...] = ()
    yarn_data: tuple[PackageInfo, ...] = ()
    warnings: tuple[str, ...] = field(default=())

    def package_count(self) -> int:
        """Total number of package entries across all sources."""
        nvm_count = sum(len(group.packages) for group in self.nvm_data)
        return nvm_count + len(self.pnpm_data) + len(self.yarn_data)

    def is_empty(self) -> bool:
        return self.package_count() == 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON/YAML serialization."""
        return {
            "nvm": [group.to_dict() for group in self.nvm_data],
            "pnpm": [pkg.to_dict() for pkg in self.pnpm_data],
            "yarn": [pkg.to_dict() for pkg in self.yarn_data],
            "warnings": list(self.warnings),
        }
