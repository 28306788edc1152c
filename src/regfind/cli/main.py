"""Command-line interface for regfind.

This module provides the command-line entry point: it parses arguments, builds
the run configuration, streams matching paths to stdout and maps failures and
signals to exit codes.

Signal Handling Notes:
    - SIGPIPE: Handled when the output pipe is closed (e.g., when piping to `head`)
    - SIGINT: Handled for clean exit on Ctrl+C
    In both cases the walk stops at the next entry.

Exit Codes:
    0: Successful completion, including runs that reported traversal warnings
    1: Fatal error (invalid regular expression, missing root, runtime failure)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE)

Example:
    # Find Rust sources below the current directory
    $ regfind '\\.rs$'

    # Search a given root, skipping anything under a "target" path
    $ regfind -r ~/src -i target 'Cargo\\.toml'
"""

import logging
import sys

from humanfriendly import format_timespan

from regfind.cli.argparser import create_parser
from regfind.cli.safe_writer import SafeWriter
from regfind.cli.signal_handler import setup_signal_handling, signal_handler
from regfind.config import FinderConfig
from regfind.exceptions import InvalidPatternError, TraversalError
from regfind.finder import Finder, FinderCounts
from regfind.types import MatchSubject


def format_counts(counts: FinderCounts) -> str:
    """Format the run counts into a human-readable string.

    Example:
        >>> print(format_counts(FinderCounts(directories=3, files=5, matched=2, elapsed=1.5)))
        Directories: 3
        Files: 5
        Symlinks: 0
        Pruned: 0
        Matched: 2
        Errors: 0
        Elapsed: 1.5 seconds
    """
    result = [
        f"Directories: {counts.directories}",
        f"Files: {counts.files}",
        f"Symlinks: {counts.symlinks}",
        f"Pruned: {counts.pruned}",
        f"Matched: {counts.matched}",
        f"Errors: {counts.errors}",
        f"Elapsed: {format_timespan(counts.elapsed)}",
    ]
    return "\n".join(result)


def print_warning(error: TraversalError) -> None:
    print(f"Warning: {error}", file=sys.stderr)


def main() -> None:
    """Main entry point for the regfind command-line interface."""
    setup_signal_handling()

    # argparse exits with 2 on syntax errors and 0 for --help/--version
    args = create_parser().parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = FinderConfig.create(
            args.pattern,
            root=args.root,
            ignore=args.ignore,
            match_subject=MatchSubject.PATH if args.full_path else MatchSubject.NAME,
            follow_symlinks=args.follow_symlinks,
            respect_gitignore=args.gitignore,
            threads=args.threads,
        )
        finder = Finder(config, on_error=print_warning, should_stop=signal_handler.interrupted)

        with SafeWriter(sys.stdout.fileno()) as safe_writer:
            try:
                counts = finder.run(safe_writer.write)

                if args.summary == "stdout":
                    safe_writer.write(format_counts(counts) + "\n")
                elif args.summary == "stderr":
                    print(format_counts(counts), file=sys.stderr)

            except BrokenPipeError:
                pass

    except InvalidPatternError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        print("Patterns use Python regular expression syntax (see 'pydoc re').", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
