"""
Text format for a Matrix3: the 9 scalars in row-major order, one matrix row
per line and the values separated by spaces. Reading accepts any whitespace
between the values, so the output of ``dumps`` reads back into an equal
matrix.
"""

import logging

from ..linalg.matrix3 import Matrix3


logger = logging.getLogger("pymat3")


def dumps(matrix: Matrix3) -> str:
    """Format a matrix as 3 lines of 3 space-separated values."""
    return "".join(" ".join(repr(x) for x in row) + "\n" for row in matrix.rows())


def dump(matrix: Matrix3, stream) -> None:
    """Write a matrix to a text stream."""
    text = dumps(matrix)
    stream.write(text)
    logger.debug(f"Wrote matrix ({len(text)} chars)")


def loads(text: str) -> Matrix3:
    """Parse a matrix from the first 9 whitespace-separated values in text.

    Values beyond the ninth are ignored. A malformed value raises the
    ``ValueError`` from ``float()``, and fewer than 9 values raise a
    ``ValueError`` as well.
    """
    tokens = text.split()
    if len(tokens) < 9:
        raise ValueError(f"expected 9 values for a 3x3 matrix, got {len(tokens)}")
    if len(tokens) > 9:
        logger.debug(f"Ignoring {len(tokens) - 9} values after the 9th")
    return Matrix3(*(float(t) for t in tokens[:9]))


def load(stream) -> Matrix3:
    """Read a matrix from a text stream."""
    return loads(stream.read())
