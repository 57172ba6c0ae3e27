"""Utility modules for common operations.

Modules:
    constants: Default paths, environment variable names, timeouts
    path_safety: Traversal-safe joining of manifest-derived paths
    node: Detection of the active Node.js version
"""

from .path_safety import (
    PathTraversalError,
    safe_join,
    validate_relative_path,
)
from .node import get_current_node_version

__all__ = [
    # path_safety
    "PathTraversalError",
    "safe_join",
    "validate_relative_path",
    # node
    "get_current_node_version",
]
