"""Path safety utilities for paths built from manifest data.

The yarn extractor turns dependency names read from a JSON file into
filesystem paths. A crafted name like "../../../etc" must not make pkpeek
read outside the global node_modules directory.
"""

from pathlib import Path
from typing import Union


class PathTraversalError(ValueError):
    """Raised when a path built from untrusted data escapes its base directory."""
    pass


def validate_relative_path(rel_path: Union[str, Path]) -> bool:
    """Check if a path is safe (no traversal sequences).

    A path is considered safe if:
    - It is not an absolute path
    - It does not contain ".." components

    Examples:
        >>> validate_relative_path("@types/node")
        True
        >>> validate_relative_path("../etc/passwd")
        False
        >>> validate_relative_path("/etc/passwd")
        False
    """
    path = Path(rel_path)

    if path.is_absolute():
        return False

    if ".." in path.parts:
        return False

    return True


def safe_join(base: Path, *parts: Union[str, Path]) -> Path:
    """Join path components below base with traversal protection.

    Unlike a resolve()-based check, symlinks are not followed: pnpm and yarn
    both link packages across directories, and those links are legitimate.

    Args:
        base: The directory the result must stay in
        parts: Relative components to append

    Returns:
        The joined path

    Raises:
        PathTraversalError: If any component is absolute or contains '..'

    Examples:
        >>> safe_join(Path("/tmp/nm"), "@types", "node", "package.json")
        PosixPath('/tmp/nm/@types/node/package.json')
    """
    dest = base
    for part in parts:
        if not str(part) or not validate_relative_path(part):
            raise PathTraversalError(f"Invalid relative path: {part!r}")
        dest = dest / part
    return dest
