"""Output generation for discovery results.

Modules:
    display: pretty and unix console rendering
    state: yaml and json export
"""

from .display import (
    display,
    print_error,
    print_warnings,
    render_pretty,
    render_unix,
)
from .state import (
    build_state,
    dump_state,
)

__all__ = [
    # display
    "display",
    "print_error",
    "print_warnings",
    "render_pretty",
    "render_unix",
    # state
    "build_state",
    "dump_state",
]
