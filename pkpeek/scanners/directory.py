"""Concurrent scanning of node_modules-style directories.

Layout handled:
    node_modules/<pkg>/package.json
    node_modules/@<scope>/<pkg>/package.json
"""

import asyncio
from pathlib import Path
from typing import Iterable, Union

import aiofiles.os

from ..models import PackageInfo
from ..utils.constants import PACKAGE_JSON
from .manifest import is_scope_entry, read_package_manifest


async def list_directory(path: Union[str, Path]) -> list[str]:
    """List a directory's entry names, sorted for deterministic output.

    Raises:
        OSError: If the path does not exist or is not a listable directory
    """
    return sorted(await aiofiles.os.listdir(path))


async def _read_single_package(parent: Path, entry: str) -> list[PackageInfo]:
    package_info = await read_package_manifest(parent / entry / PACKAGE_JSON)
    return [package_info] if package_info else []


async def _read_scoped_packages(node_modules_path: Path, scope: str) -> list[PackageInfo]:
    scope_path = node_modules_path / scope
    try:
        packages_in_scope = await list_directory(scope_path)
    except OSError:
        # A stray file named @something, or a scope removed mid-scan
        return []

    results = await asyncio.gather(
        *(_read_single_package(scope_path, name) for name in packages_in_scope)
    )
    return [pkg for batch in results for pkg in batch]


async def scan_package_directory(
    node_modules_path: Union[str, Path],
    entry_names: Iterable[str],
) -> list[PackageInfo]:
    """Read every package below a node_modules directory.

    Each entry is resolved concurrently: scope entries (@scope) are listed
    and their sub-packages read, other entries are read as a package
    directory. Entries without a valid package.json are dropped.

    Args:
        node_modules_path: Directory holding the entries
        entry_names: Names previously listed from that directory

    Returns:
        Packages found, sorted by name (case-insensitive)
    """
    base = Path(node_modules_path)
    results = await asyncio.gather(
        *(
            _read_scoped_packages(base, entry)
            if is_scope_entry(entry)
            else _read_single_package(base, entry)
            for entry in entry_names
        )
    )

    packages = [pkg for batch in results for pkg in batch]
    packages.sort(key=lambda pkg: pkg.name.lower())
    return packages
