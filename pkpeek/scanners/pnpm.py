"""Extractor for packages installed with `pnpm add -g`.

Layout:
    $PNPM_HOME/global/<N>/node_modules/[@scope/]<pkg>/package.json

pnpm keeps one numbered layout directory per store generation. Only the
highest number is in use; lower ones are leftovers from older pnpm releases.
"""

import asyncio
import os
from pathlib import Path
from typing import Union

import aiofiles.os

from ..errors import DirectoryNotFoundError, NoLayoutVersionsError
from ..models import PackageInfo
from ..utils.constants import DEFAULT_PNPM_HOME, ENV_PNPM_HOME, NODE_MODULES, PNPM_GLOBAL_DIR
from .directory import list_directory, scan_package_directory


def get_pnpm_path() -> Path:
    """Resolve the pnpm home from $PNPM_HOME, falling back to ~/.local/share/pnpm."""
    env_value = os.environ.get(ENV_PNPM_HOME)
    if env_value:
        return Path(env_value).expanduser()
    return Path.home() / DEFAULT_PNPM_HOME


async def detect_highest_layout_version(global_path: Path) -> int:
    """Find the current (highest) numeric layout directory.

    Raises:
        DirectoryNotFoundError: If the global directory cannot be listed
        NoLayoutVersionsError: If it has no purely numeric subdirectory
    """
    try:
        entries = await list_directory(global_path)
    except OSError:
        raise DirectoryNotFoundError("pnpm", global_path)

    candidates = [name for name in entries if name.isascii() and name.isdigit()]
    is_dir = await asyncio.gather(
        *(aiofiles.os.path.isdir(global_path / name) for name in candidates)
    )
    layout_versions = [int(name) for name, ok in zip(candidates, is_dir) if ok]

    if not layout_versions:
        raise NoLayoutVersionsError(global_path)

    return max(layout_versions)


async def extract_pnpm(pnpm_path: Union[str, Path, None] = None) -> list[PackageInfo]:
    """Extract packages from the current pnpm global layout.

    Args:
        pnpm_path: pnpm home; defaults to $PNPM_HOME or ~/.local/share/pnpm

    Returns:
        Packages found. Empty if the layout has no readable node_modules.

    Raises:
        DirectoryNotFoundError, NoLayoutVersionsError
    """
    root = Path(pnpm_path) if pnpm_path is not None else get_pnpm_path()
    global_path = root / PNPM_GLOBAL_DIR
    layout_version = await detect_highest_layout_version(global_path)

    node_modules_path = global_path / str(layout_version) / NODE_MODULES
    try:
        entries = await list_directory(node_modules_path)
    except OSError:
        return []

    return await scan_package_directory(node_modules_path, entries)
