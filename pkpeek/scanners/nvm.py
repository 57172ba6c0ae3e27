"""Extractor for packages installed globally under nvm-managed Node versions.

Layout:
    $NVM_DIR/versions/node/<version>/lib/node_modules/[@scope/]<pkg>/package.json

Version directories are normally named 'v22.0.0', but bare '22.0.0' names
are accepted as well.
"""

import asyncio
import os
from pathlib import Path
from typing import Optional, Sequence, Union

from ..errors import DirectoryNotFoundError, NoVersionsInstalledError, VersionNotFoundError
from ..models import VersionGroup
from ..utils.constants import (
    DEFAULT_NVM_DIR,
    ENV_NVM_DIR,
    NVM_NODE_MODULES_SUBPATH,
    NVM_VERSIONS_SUBPATH,
)
from .directory import list_directory, scan_package_directory
from .manifest import normalize_version


def get_nvm_path() -> Path:
    """Resolve the nvm root from $NVM_DIR, falling back to ~/.nvm."""
    env_value = os.environ.get(ENV_NVM_DIR)
    if env_value:
        return Path(env_value).expanduser()
    return Path.home() / DEFAULT_NVM_DIR


def _version_sort_key(dir_name: str) -> list[int]:
    return [int(x) for x in normalize_version(dir_name).split(".") if x.isascii() and x.isdigit()]


async def detect_node_versions(nvm_path: Path) -> list[str]:
    """List installed Node version directories, oldest first.

    Raises:
        DirectoryNotFoundError: If versions/node cannot be listed
        NoVersionsInstalledError: If it is empty
    """
    versions_path = nvm_path / NVM_VERSIONS_SUBPATH
    try:
        versions = await list_directory(versions_path)
    except OSError:
        raise DirectoryNotFoundError("nvm", versions_path, what="node versions directory")

    if not versions:
        raise NoVersionsInstalledError(versions_path)

    versions.sort(key=_version_sort_key)
    return versions


def filter_versions(detected_versions: Sequence[str], version_filter: Optional[str]) -> list[str]:
    """Select the version directories matching a version prefix.

    The prefix is compared against normalized names, so '22' and 'v22' both
    match the directory 'v22.4.1'. Matching directories keep their on-disk
    names.

    Raises:
        VersionNotFoundError: If the prefix matches nothing
    """
    if not version_filter:
        return list(detected_versions)

    prefix = normalize_version(version_filter)
    selected = [v for v in detected_versions if normalize_version(v).startswith(prefix)]

    if not selected:
        raise VersionNotFoundError(prefix, [normalize_version(v) for v in detected_versions])

    return selected


async def _extract_version(versions_path: Path, version_dir: str) -> VersionGroup:
    node_modules_path = versions_path / version_dir / NVM_NODE_MODULES_SUBPATH
    version = normalize_version(version_dir)
    try:
        entries = await list_directory(node_modules_path)
    except OSError:
        return VersionGroup(version=version)

    packages = await scan_package_directory(node_modules_path, entries)
    return VersionGroup(version=version, packages=tuple(packages))


async def extract_nvm(
    version_filter: Optional[str] = None,
    nvm_path: Union[str, Path, None] = None,
) -> list[VersionGroup]:
    """Extract globally installed packages for each nvm Node version.

    Args:
        version_filter: Optional version prefix ('22', '20.10')
        nvm_path: nvm root; defaults to $NVM_DIR or ~/.nvm

    Returns:
        One VersionGroup per selected version, in ascending version order.
        A version whose node_modules cannot be read yields an empty group.

    Raises:
        DirectoryNotFoundError, NoVersionsInstalledError, VersionNotFoundError
    """
    root = Path(nvm_path) if nvm_path is not None else get_nvm_path()
    detected = await detect_node_versions(root)
    selected = filter_versions(detected, version_filter)

    versions_path = root / NVM_VERSIONS_SUBPATH
    groups = await asyncio.gather(*(_extract_version(versions_path, v) for v in selected))
    return list(groups)
