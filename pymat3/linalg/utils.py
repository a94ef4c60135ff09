from numbers import Integral

from .errors import OutOfRange


__all__ = ["MACHINE_EPSILON"]


MACHINE_EPSILON = (
    7.0 / 3 - 4.0 / 3 - 1
)  # the difference between 1 and the smallest floating point number greater than 1


def _check_index(key) -> int:
    """Validate a (row, col) key and return the flat row-major offset."""
    try:
        row, col = key
    except (TypeError, ValueError):
        raise OutOfRange(f"expected a (row, col) pair, got {key!r}") from None
    for i in (row, col):
        # bool is an int subclass, but m[True, 0] is almost certainly a bug
        if not isinstance(i, Integral) or isinstance(i, bool) or not 0 <= i < 3:
            raise OutOfRange(f"index ({row!r}, {col!r}) out of bounds")
    return int(3 * row + col)
