"""Command-line argument parsing for regfind.

This module defines the command-line interface for regfind, handling argument
parsing and validation.
"""

import argparse

from regfind import __version__
from regfind.traversal.parallel_walker import DEFAULT_PARALLEL_THREADS


def positive_int(value: str) -> int:
    """Argument type accepting integers greater than zero.

    Raises:
        argparse.ArgumentTypeError: If the value is not a positive integer.
    """
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with regfind's options.
    """
    description = """
    regfind: find files and directories whose name matches a regular expression.

    The tree below the root is walked recursively. Hidden entries (names starting
    with a dot) and dependency or version-control directories (names containing
    .git, node_modules or venv) are skipped together with everything inside them.
    Every remaining entry whose base name matches PATTERN is printed, one path per
    line. Problems reading individual entries are reported on stderr and do not
    stop the search.
    """

    epilog = f"""
    Examples:
      # Find Python files below the current directory
      regfind '\\.py$'

      # Search another directory
      regfind -r /path/to/project 'test_.*'

      # Match against the full path instead of the base name
      regfind -p 'src/.*\\.rs$'

      # Skip every path containing "build"
      regfind -i build '\\.o$'

      # Also honor .gitignore files, using {DEFAULT_PARALLEL_THREADS} threads
      regfind -g -j {DEFAULT_PARALLEL_THREADS} '\\.log$'

      # Print a summary of the walk to stderr
      regfind -s stderr 'README'
    """

    parser = argparse.ArgumentParser(
        prog="regfind",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"regfind {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "pattern",
        metavar="PATTERN",
        help="Regular expression searched for in each entry's base name (or full path with -p).",
    )
    parser.add_argument(
        "-r",
        "--root",
        metavar="DIR",
        help="Directory to search. Defaults to the current working directory.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="REGEX",
        default="",
        help="Regular expression matched against the full path; matching entries are not printed.",
    )
    parser.add_argument(
        "-p",
        "--full-path",
        action="store_true",
        help="Match PATTERN against the full path instead of the base name.",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Descend into symbolically linked directories. Symlink loops are reported and skipped.",
    )
    parser.add_argument(
        "-g",
        "--gitignore",
        action="store_true",
        help="Also skip entries matched by .gitignore files found in the searched tree.",
    )
    parser.add_argument(
        "-j",
        "--threads",
        type=positive_int,
        default=1,
        metavar="N",
        help="Number of threads walking the tree (default: 1). With more than one, output order varies.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print a summary of the walk. Valid destinations: stderr, stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debugging information to stderr.",
    )

    return parser
