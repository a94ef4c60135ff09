"""A very tiny CLI.

Invoke using e.g. ``python -m pymat3 version``, or pipe a matrix in::

    echo "1 1 -2 -3 -2 5 -6 4 4" | python -m pymat3 inverse

"""

import sys
import argparse

import pymat3
from pymat3.utils import logger
from pymat3.utils.serialize import load


COMMANDS = ("help", "version", "det", "inverse", "transpose", "info")


def info(m):
    """Get a textual summary of the structural properties of a matrix."""
    lines = [
        f"determinant: {m.determinant()!r}",
        f"trace: {m.trace()!r}",
        f"identity: {m.is_identity()}",
        f"symmetric: {m.is_symmetric()}",
        f"antisymmetric: {m.is_antisymmetric()}",
        f"invertible: {m.is_invertible()}",
        f"orthogonal: {m.is_orthogonal()}",
    ]
    return "\n".join(lines)


def main(argv=None, stdin=None):
    # Get argv so we can massage it
    if argv is None:
        argv = sys.argv[1:]
    if stdin is None:
        stdin = sys.stdin

    # Defaults and aliases
    if not argv:
        argv = ["help"]
    if argv == ["--version"]:
        argv = ["version"]

    # Let the rest to argparse

    parser = argparse.ArgumentParser(
        prog="pymat3",
        description="The (very basic) pymat3 CLI",
        epilog="Matrix commands read 9 values from stdin, in row-major order.",
    )

    parser.add_argument(
        "command",
        action="store",
        help="The command to run: " + ", ".join(repr(c) for c in COMMANDS),
    )

    args = parser.parse_args(argv)
    command = args.command.lower()

    if command == "help":
        parser.print_help()
        return 0
    elif command == "version":
        print("pymat3 v" + pymat3.__version__)
        return 0
    elif command not in COMMANDS:
        print(f"Invalid command '{command}'")
        return 2

    try:
        m = load(stdin)
    except ValueError as err:
        logger.error(f"Could not read matrix: {err}")
        return 1

    if command == "det":
        print(repr(m.determinant()))
    elif command == "transpose":
        print(m.transpose(), end="")
    elif command == "info":
        print(info(m))
    elif command == "inverse":
        try:
            print(m.inverse(), end="")
        except pymat3.NotInvertible as err:
            logger.error(str(err))
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
