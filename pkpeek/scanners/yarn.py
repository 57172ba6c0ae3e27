"""Extractor for packages installed with `yarn global add` (yarn classic).

Layout:
    $YARN_HOME/global/package.json        "dependencies": {name: range}
    $YARN_HOME/global/node_modules/[@scope/]<pkg>/package.json

Unlike nvm and pnpm, the set of packages comes from the global manifest
rather than a directory listing; node_modules also holds every transitive
dependency, which is not what the user installed.
"""

import asyncio
import json
import os
from pathlib import Path
from typing import Any, Union

import aiofiles
import aiofiles.os

from ..errors import DirectoryNotFoundError, ManifestFormatError
from ..models import PackageInfo
from ..utils.constants import (
    DEFAULT_YARN_HOME,
    ENV_YARN_HOME,
    NODE_MODULES,
    PACKAGE_JSON,
    YARN_GLOBAL_DIR,
)
from ..utils.path_safety import PathTraversalError, safe_join
from .manifest import is_scope_entry, read_package_manifest


def get_yarn_path() -> Path:
    """Resolve the yarn home from $YARN_HOME, falling back to ~/.config/yarn."""
    env_value = os.environ.get(ENV_YARN_HOME)
    if env_value:
        return Path(env_value).expanduser()
    return Path.home() / DEFAULT_YARN_HOME


def is_string_mapping(value: Any) -> bool:
    """Check that value is a flat {str: str} mapping."""
    if not isinstance(value, dict):
        return False
    return all(isinstance(k, str) and isinstance(v, str) for k, v in value.items())


def get_package_json_path(yarn_path: Path, package_name: str) -> Path:
    """Build the installed manifest path for a global dependency name.

    Raises:
        ManifestFormatError: If the name is malformed or escapes node_modules
    """
    base_path = yarn_path / YARN_GLOBAL_DIR / NODE_MODULES

    if is_scope_entry(package_name):
        scope, _, name = package_name.partition("/")
        if not name or "/" in name or scope == "@":
            raise ManifestFormatError("yarn", f"invalid scoped package name: {package_name}")
        parts = (scope, name)
    else:
        parts = (package_name,)

    try:
        return safe_join(base_path, *parts, PACKAGE_JSON)
    except PathTraversalError:
        raise ManifestFormatError("yarn", f"invalid package name: {package_name}")


async def _read_global_manifest(yarn_path: Path) -> str:
    global_path = yarn_path / YARN_GLOBAL_DIR
    manifest_path = global_path
    if await aiofiles.os.path.isdir(global_path):
        manifest_path = global_path / PACKAGE_JSON

    try:
        async with aiofiles.open(manifest_path, "r", encoding="utf-8") as f:
            return await f.read()
    except (OSError, UnicodeDecodeError):
        raise DirectoryNotFoundError("yarn", yarn_path)


async def extract_yarn(yarn_path: Union[str, Path, None] = None) -> list[PackageInfo]:
    """Extract packages listed in the yarn global manifest.

    Args:
        yarn_path: yarn home; defaults to $YARN_HOME or ~/.config/yarn

    Returns:
        Installed packages for each global dependency, in manifest order.
        Dependencies without a readable installed package.json are dropped.

    Raises:
        DirectoryNotFoundError: If the global manifest cannot be read
        ManifestFormatError: If it is not JSON or 'dependencies' is not a
            flat string mapping
    """
    root = Path(yarn_path) if yarn_path is not None else get_yarn_path()
    content = await _read_global_manifest(root)

    try:
        document = json.loads(content)
    except (ValueError, RecursionError) as e:
        raise ManifestFormatError("yarn", f"invalid JSON in yarn global manifest: {e}", root)

    if not isinstance(document, dict):
        raise ManifestFormatError("yarn", "invalid yarn global manifest: expected an object", root)

    dependencies = document.get("dependencies", {})
    if not is_string_mapping(dependencies):
        raise ManifestFormatError(
            "yarn", "invalid dependencies format: expected a mapping of name to version", root
        )

    package_paths = [get_package_json_path(root, name) for name in dependencies]
    results = await asyncio.gather(*(read_package_manifest(p) for p in package_paths))
    return [pkg for pkg in results if pkg is not None]
