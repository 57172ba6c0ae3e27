"""Discovery pipeline: run the extractors, merge and filter their results.

Modules:
    merge: Concurrent orchestration and aggregation (peek)
    filters: Name and duplicates filters
"""

from .filters import (
    apply_filters,
    count_package_names,
    filter_by_name,
    filter_duplicates,
)
from .merge import (
    aggregate,
    discover,
    peek,
)

__all__ = [
    # filters
    "apply_filters",
    "count_package_names",
    "filter_by_name",
    "filter_duplicates",
    # merge
    "aggregate",
    "discover",
    "peek",
]
