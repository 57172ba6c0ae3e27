"""Exception hierarchy for pkpeek.

Two families matter to callers:

    ConfigurationError: the run cannot start (conflicting options, no way to
        resolve the current Node version). Fatal, non-zero exit.
    ExtractionError: one package manager source could not be read. The
        aggregator downgrades these to an empty source plus a warning.

Individual unreadable package.json files never raise; the package reader
skips them.
"""

from pathlib import Path
from typing import Sequence, Union


class PkpeekError(Exception):
    """Base class for all pkpeek errors."""
    pass


class ConfigurationError(PkpeekError):
    """Raised when no usable configuration can be built."""
    pass


class ExtractionError(PkpeekError):
    """Raised by an extractor when its source cannot be read.

    Attributes:
        source: Package manager the error belongs to ('nvm', 'pnpm', 'yarn')
        path: Filesystem path involved, if any
    """

    source = "unknown"

    def __init__(self, message: str, path: Union[str, Path, None] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class DirectoryNotFoundError(ExtractionError):
    """A package manager root or store directory could not be accessed."""

    def __init__(self, source: str, path: Union[str, Path], what: str = "global directory"):
        self.source = source
        super().__init__(f"could not access {source} {what}: {path}", path)


class NoVersionsInstalledError(ExtractionError):
    """The nvm versions directory exists but is empty."""

    source = "nvm"

    def __init__(self, path: Union[str, Path]):
        super().__init__(f"could not find any node version installed at: {path}", path)


class NoLayoutVersionsError(ExtractionError):
    """The pnpm global directory holds no numeric layout directories."""

    source = "pnpm"

    def __init__(self, path: Union[str, Path]):
        super().__init__(
            f"no global layout versions found in pnpm global directory: {path}", path
        )


class VersionNotFoundError(ExtractionError):
    """A Node version prefix matched none of the installed versions."""

    source = "nvm"

    def __init__(self, prefix: str, detected_versions: Sequence[str]):
        self.prefix = prefix
        self.detected_versions = list(detected_versions)
        super().__init__(
            f"could not find version with prefix: {prefix}\n"
            f"detected versions: {', '.join(self.detected_versions)}"
        )


class ManifestFormatError(ExtractionError):
    """A global manifest exists but does not have the expected shape."""

    def __init__(self, source: str, message: str, path: Union[str, Path, None] = None):
        self.source = source
        super().__init__(message, path)
