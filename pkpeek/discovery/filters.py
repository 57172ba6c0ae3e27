"""Filters applied to an AggregatedResult after discovery.

Both filters keep nvm groups that still have at least one package and drop
the rest; pnpm and yarn lists are filtered independently. Warnings are
carried through untouched.
"""

from collections import Counter
from dataclasses import replace
from typing import Callable, Optional

from ..models import AggregatedResult, PackageInfo, VersionGroup


def _filter_packages(
    result: AggregatedResult,
    keep: Callable[[PackageInfo], bool],
) -> AggregatedResult:
    nvm_data = []
    for group in result.nvm_data:
        packages = tuple(pkg for pkg in group.packages if keep(pkg))
        if packages:
            nvm_data.append(VersionGroup(version=group.version, packages=packages))

    return replace(
        result,
        nvm_data=tuple(nvm_data),
        pnpm_data=tuple(pkg for pkg in result.pnpm_data if keep(pkg)),
        yarn_data=tuple(pkg for pkg in result.yarn_data if keep(pkg)),
    )


def filter_by_name(result: AggregatedResult, needle: str) -> AggregatedResult:
    """Keep packages whose name contains needle (case-insensitive).

    Examples:
        'typescript' keeps 'TypeScript'; 'type' also keeps '@types/node'.
    """
    needle = needle.lower()
    return _filter_packages(result, lambda pkg: needle in pkg.name.lower())


def count_package_names(result: AggregatedResult) -> Counter:
    """Count each package name once per nvm group and once per other source."""
    counts: Counter = Counter()
    for group in result.nvm_data:
        counts.update(pkg.name for pkg in group.packages)
    counts.update(pkg.name for pkg in result.pnpm_data)
    counts.update(pkg.name for pkg in result.yarn_data)
    return counts


def filter_duplicates(result: AggregatedResult) -> AggregatedResult:
    """Keep packages whose name is installed in more than one place.

    The same name under two Node versions counts twice, as does a name
    present in both nvm and pnpm.
    """
    counts = count_package_names(result)
    duplicates = {name for name, count in counts.items() if count > 1}
    return _filter_packages(result, lambda pkg: pkg.name in duplicates)


def apply_filters(
    result: AggregatedResult,
    package_name: Optional[str] = None,
    duplicates_only: bool = False,
) -> AggregatedResult:
    """Apply the name filter, then the duplicates filter, when requested."""
    if package_name:
        result = filter_by_name(result, package_name)
    if duplicates_only:
        result = filter_duplicates(result)
    return result
