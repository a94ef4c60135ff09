__all__ = ["Matrix3Error", "OutOfRange", "DivideByZero", "NotInvertible"]


class Matrix3Error(Exception):
    """Base class for errors raised by Matrix3 operations."""


class OutOfRange(Matrix3Error, IndexError):
    """A row or column index is outside [0, 3)."""


class DivideByZero(Matrix3Error, ZeroDivisionError):
    """A matrix was divided by a scalar that is exactly zero."""


class NotInvertible(Matrix3Error, ValueError):
    """The inverse was requested of a matrix whose determinant is zero."""
