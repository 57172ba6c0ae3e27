"""pkpeek command line entry point.

Usage:
    pkpeek [package-name] [-c | -n PREFIX] [-d] [-y] [-f FORMAT] [--no-color]

Examples:
    pkpeek                  every global package, per Node version, plus pnpm
    pkpeek eslint           only packages whose name contains 'eslint'
    pkpeek -n 22            only Node 22.x.x (pnpm is still listed)
    pkpeek -c               only the active Node version; pnpm/yarn skipped
    pkpeek -d -f unix       packages installed in more than one place, as TSV

Exit status is 1 only for configuration errors; a missing package manager
is reported as a warning on stderr.
"""

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from . import __version__
from .config import PeekConfig
from .discovery.merge import peek
from .errors import ConfigurationError
from .output.display import FORMAT_PRETTY, FORMAT_UNIX, display, print_error, print_warnings
from .output.state import FORMAT_JSON, FORMAT_YAML, dump_state

FORMATS = [FORMAT_PRETTY, FORMAT_UNIX, FORMAT_YAML, FORMAT_JSON]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pkpeek",
        description="Know your globally installed node packages",
        epilog="Path defaults: $NVM_DIR or ~/.nvm, $PNPM_HOME or ~/.local/share/pnpm, "
               "$YARN_HOME or ~/.config/yarn",
    )
    parser.add_argument("package_name", nargs="?", metavar="package-name",
                        help="search for packages matching this name (partial match supported)")

    version_group = parser.add_mutually_exclusive_group()
    version_group.add_argument("-c", "--current", action="store_true",
                               help="peek the currently active Node version (npm global packages only)")
    version_group.add_argument("-n", "--node-version", metavar="VERSION",
                               help='node version prefix to peek (e.g., "22" matches "22.x.x")')

    parser.add_argument("-d", "--duplicates", action="store_true",
                        help="only show packages installed in more than one place")
    parser.add_argument("-y", "--yarn", action="store_true",
                        help="also peek the yarn global store")
    parser.add_argument("-f", "--format", choices=FORMATS, default=FORMAT_PRETTY,
                        help="output format (default: pretty)")
    parser.add_argument("--no-color", dest="color", action="store_false",
                        help="disable colored output (only affects pretty format)")
    parser.add_argument("--nvm-dir", help="nvm root directory")
    parser.add_argument("--pnpm-home", help="pnpm home directory")
    parser.add_argument("--yarn-home", help="yarn home directory")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> PeekConfig:
    """Translate parsed arguments into a PeekConfig."""
    return PeekConfig.from_options(
        current_only=args.current,
        version_prefix=args.node_version,
        package_name=args.package_name,
        duplicates_only=args.duplicates,
        include_yarn=args.yarn,
        nvm_path=args.nvm_dir,
        pnpm_path=args.pnpm_home,
        yarn_path=args.yarn_home,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for pkpeek.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args)
        version_filter = config.resolve_version_filter()
    except ConfigurationError as e:
        print_error(str(e))
        return 1

    result = asyncio.run(peek(config, version_filter))

    print_warnings(list(result.warnings))

    if args.format in (FORMAT_YAML, FORMAT_JSON):
        sys.stdout.write(dump_state(result, args.format))
    else:
        display(result, output_format=args.format, color=args.color)
    return 0


if __name__ == "__main__":
    sys.exit(main())
