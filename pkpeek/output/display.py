"""Console rendering of an AggregatedResult.

Formats:
    pretty: grouped, aligned columns, optionally colored (rich)
    unix:   one tab-separated '<source>\t<name>\t<version>' row per package,
            where <source> is the Node version for nvm rows
"""

from typing import Optional, TextIO

from rich.console import Console
from rich.text import Text

from ..models import AggregatedResult, PackageInfo

FORMAT_PRETTY = "pretty"
FORMAT_UNIX = "unix"


def _sections(result: AggregatedResult) -> list[tuple[str, str, tuple[PackageInfo, ...]]]:
    """(heading, unix label, packages) for every non-empty source, in display order."""
    sections = [
        (f"Node {group.version}", group.version, group.packages)
        for group in result.nvm_data
    ]
    if result.pnpm_data:
        sections.append(("pnpm global", "pnpm", result.pnpm_data))
    if result.yarn_data:
        sections.append(("yarn global", "yarn", result.yarn_data))
    return sections


def render_pretty(result: AggregatedResult, console: Console) -> None:
    """Print each source as a heading followed by aligned name/version rows."""
    sections = _sections(result)
    name_lengths = [len(pkg.name) for _, _, packages in sections for pkg in packages]
    width = max(name_lengths, default=0) + 2

    for heading, _, packages in sections:
        console.print(Text(f"▸ {heading}", style="bold cyan"), soft_wrap=True)
        for pkg in packages:
            line = Text(f"    {pkg.name.ljust(width)}")
            line.append(pkg.version, style="dim")
            console.print(line, soft_wrap=True)


def render_unix(result: AggregatedResult, out: TextIO) -> None:
    """Write tab-separated rows, suitable for cut/awk/grep."""
    for _, label, packages in _sections(result):
        for pkg in packages:
            out.write(f"{label}\t{pkg.name}\t{pkg.version}\n")


def display(
    result: AggregatedResult,
    output_format: str = FORMAT_PRETTY,
    color: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Render a result to stdout (or the given console) in the chosen format."""
    if console is None:
        console = Console(no_color=not color, highlight=False)

    if output_format == FORMAT_UNIX:
        render_unix(result, console.file)
    else:
        render_pretty(result, console)


def print_warnings(warnings: list[str], console: Optional[Console] = None) -> None:
    """Report degraded sources on stderr."""
    if console is None:
        console = Console(stderr=True, highlight=False)
    for warning in warnings:
        console.print(Text(f"[pkpeek]: {warning}", style="yellow"), soft_wrap=True)


def print_error(message: str, console: Optional[Console] = None) -> None:
    if console is None:
        console = Console(stderr=True, highlight=False)
    console.print(Text(f"[pkpeek]: {message}", style="red"), soft_wrap=True)
