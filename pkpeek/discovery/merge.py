"""Discovery orchestration and result merging.

Runs the nvm, pnpm and (optionally) yarn extractors concurrently, merges
their output into one AggregatedResult and applies the requested filters.

A missing package manager is a normal environment fact, not an error of the
tool: any ExtractionError is downgraded to an empty source plus a warning.
Any other exception propagates.
"""

import asyncio
from typing import Awaitable, Iterable, Optional, Sequence, TypeVar

from ..config import PeekConfig
from ..errors import ExtractionError, VersionNotFoundError
from ..models import AggregatedResult, PackageInfo, VersionGroup
from ..scanners.nvm import extract_nvm
from ..scanners.pnpm import extract_pnpm
from ..scanners.yarn import extract_yarn
from .filters import apply_filters

T = TypeVar("T")


def aggregate(
    nvm_data: Iterable[VersionGroup],
    pnpm_data: Iterable[PackageInfo],
    yarn_data: Iterable[PackageInfo] = (),
    warnings: Iterable[str] = (),
) -> AggregatedResult:
    """Merge extractor outputs into a single result, nvm first."""
    return AggregatedResult(
        nvm_data=tuple(nvm_data),
        pnpm_data=tuple(pnpm_data),
        yarn_data=tuple(yarn_data),
        warnings=tuple(warnings),
    )


def describe_failure(source: str, error: ExtractionError) -> str:
    """Build the warning shown when a source is skipped.

    A version prefix with no match gets its own message (it lists the
    installed versions), everything else reads as a missing installation.
    """
    if isinstance(error, VersionNotFoundError):
        return str(error)
    return f"no {source} installation found: {error}"


async def _settle(source: str, extraction: Optional[Awaitable[Sequence[T]]]) -> tuple[list[T], Optional[str]]:
    """Await one extractor, converting an ExtractionError into a warning.

    Args:
        source: Source name for the warning
        extraction: Extractor coroutine, or None if the source is skipped

    Returns:
        (items, warning) where warning is None on success
    """
    if extraction is None:
        return [], None
    try:
        return list(await extraction), None
    except ExtractionError as e:
        return [], describe_failure(source, e)


async def discover(config: PeekConfig, version_filter: Optional[str] = None) -> AggregatedResult:
    """Run every enabled extractor concurrently and merge the results.

    Args:
        config: Run configuration
        version_filter: Normalized nvm version prefix, already resolved

    Returns:
        Unfiltered AggregatedResult, with one warning per failed source
    """
    skip_others = config.current_only
    pnpm_extraction = None if skip_others else extract_pnpm(config.pnpm_path)
    yarn_extraction = (
        extract_yarn(config.yarn_path) if config.include_yarn and not skip_others else None
    )

    (nvm_data, nvm_warning), (pnpm_data, pnpm_warning), (yarn_data, yarn_warning) = (
        await asyncio.gather(
            _settle("nvm", extract_nvm(version_filter, config.nvm_path)),
            _settle("pnpm", pnpm_extraction),
            _settle("yarn", yarn_extraction),
        )
    )

    warnings = [w for w in (nvm_warning, pnpm_warning, yarn_warning) if w]
    return aggregate(nvm_data, pnpm_data, yarn_data, warnings)


async def peek(config: PeekConfig, version_filter: Optional[str] = None) -> AggregatedResult:
    """Discover, merge and filter globally installed packages.

    Args:
        config: Run configuration
        version_filter: Node version prefix already resolved with
            PeekConfig.resolve_version_filter(), which may shell out to node
            and so runs before the event loop starts
    """
    result = await discover(config, version_filter)
    return apply_filters(
        result,
        package_name=config.package_name,
        duplicates_only=config.duplicates_only,
    )
