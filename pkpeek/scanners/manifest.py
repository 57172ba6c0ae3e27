"""Reader for individual package.json manifests.

A global node_modules can hold hundreds of packages; one corrupt or
half-installed package must never abort a scan. Every failure here is
therefore reported as None rather than raised.
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

import aiofiles

from ..models import PackageInfo


def is_scope_entry(name: str) -> bool:
    """Check if a node_modules entry is an npm scope directory (@scope)."""
    return name.startswith("@")


def normalize_version(version: str) -> str:
    """Strip a single leading 'v' from a Node version string.

    Examples:
        >>> normalize_version("v22.0.0")
        '22.0.0'
        >>> normalize_version("20.10.0")
        '20.10.0'
    """
    if version.startswith("v"):
        return version[1:]
    return version


def decode_package_info(document: Any) -> Optional[PackageInfo]:
    """Decode a parsed manifest into a PackageInfo.

    Args:
        document: Result of json.loads() on a package.json

    Returns:
        PackageInfo if the document is an object with string 'name' and
        'version' fields, otherwise None
    """
    if not isinstance(document, dict):
        return None

    name = document.get("name")
    version = document.get("version")
    if isinstance(name, str) and isinstance(version, str):
        return PackageInfo(name=name, version=version)
    return None


async def read_package_manifest(path: Union[str, Path]) -> Optional[PackageInfo]:
    """Read a package.json and extract its name and version.

    Args:
        path: Path to a candidate package.json

    Returns:
        PackageInfo, or None if the file is missing, unreadable, not valid
        JSON or lacks string name/version fields
    """
    try:
        async with aiofiles.open(path, "r", encoding="utf-8") as f:
            content = await f.read()
    except (OSError, UnicodeDecodeError):
        return None

    try:
        document = json.loads(content)
    except (ValueError, RecursionError):
        # RecursionError: pathologically nested arrays or objects
        return None

    return decode_package_info(document)
