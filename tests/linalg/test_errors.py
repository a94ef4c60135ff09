import pytest

import pymat3
from pymat3.linalg import (
    Matrix3,
    Matrix3Error,
    OutOfRange,
    DivideByZero,
    NotInvertible,
)


def test_error_hierarchy():
    assert issubclass(OutOfRange, Matrix3Error)
    assert issubclass(OutOfRange, IndexError)
    assert issubclass(DivideByZero, Matrix3Error)
    assert issubclass(DivideByZero, ZeroDivisionError)
    assert issubclass(NotInvertible, Matrix3Error)
    assert issubclass(NotInvertible, ValueError)


def test_errors_in_root_namespace():
    assert pymat3.Matrix3 is Matrix3
    assert pymat3.OutOfRange is OutOfRange
    assert pymat3.DivideByZero is DivideByZero
    assert pymat3.NotInvertible is NotInvertible


def test_common_base_class():
    m = Matrix3()
    for func in (lambda: m[3, 3], lambda: m / 0, m.inverse):
        with pytest.raises(Matrix3Error):
            func()


def test_error_messages():
    with pytest.raises(OutOfRange, match=r"\(0, 3\)"):
        Matrix3()[0, 3]
    with pytest.raises(NotInvertible, match="determinant is zero"):
        Matrix3().inverse()
