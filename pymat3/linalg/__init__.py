# flake8: noqa

"""
Linear Algebra Routines

.. currentmodule:: pymat3.linalg

.. autosummary::
    :toctree: linalg/

    Matrix3
    errors.Matrix3Error
    errors.OutOfRange
    errors.DivideByZero
    errors.NotInvertible

"""

from .utils import *
from .errors import *
from .matrix3 import *

__all__ = utils.__all__ + errors.__all__ + matrix3.__all__
