from numbers import Real

import numpy as np

from .errors import DivideByZero, NotInvertible
from .utils import MACHINE_EPSILON, _check_index


__all__ = ["Matrix3"]


class Matrix3:
    """A 3x3 matrix of float64 scalars.

    The scalars are kept in ``elements``, a flat list in row-major order, so
    ``m[row, col]`` is ``m.elements[3 * row + col]``. A new Matrix3 is the
    zero matrix.

    Note that ``*`` between two matrices is the element-wise (Hadamard)
    product. Use ``@`` for the row-by-column product.

    The predicates ``is_identity``, ``is_symmetric``, ``is_antisymmetric``
    (and therefore ``is_orthogonal``) compare with exact floating point
    equality. A matrix that is the identity up to rounding error is not
    reported as the identity.

    Instances have no internal locking. Sharing one instance between
    threads requires the caller to serialize access.
    """

    # Make numpy defer to our reflected operators, e.g. np.float64(2) * m
    __array_ufunc__ = None

    def __init__(
        self,
        n11: float = 0.0,
        n12: float = 0.0,
        n13: float = 0.0,
        n21: float = 0.0,
        n22: float = 0.0,
        n23: float = 0.0,
        n31: float = 0.0,
        n32: float = 0.0,
        n33: float = 0.0,
    ) -> None:
        self.elements = [
            float(n11),
            float(n12),
            float(n13),
            float(n21),
            float(n22),
            float(n23),
            float(n31),
            float(n32),
            float(n33),
        ]

    def __repr__(self) -> str:
        return f"Matrix3({', '.join(repr(x) for x in self.elements)})"

    def __str__(self) -> str:
        from ..utils.serialize import dumps

        return dumps(self)

    def set(
        self,
        n11: float,
        n12: float,
        n13: float,
        n21: float,
        n22: float,
        n23: float,
        n31: float,
        n32: float,
        n33: float,
    ) -> "Matrix3":
        te = self.elements

        te[0] = float(n11)
        te[1] = float(n12)
        te[2] = float(n13)
        te[3] = float(n21)
        te[4] = float(n22)
        te[5] = float(n23)
        te[6] = float(n31)
        te[7] = float(n32)
        te[8] = float(n33)

        return self

    def identity(self) -> "Matrix3":
        self.set(1, 0, 0, 0, 1, 0, 0, 0, 1)
        return self

    def clone(self) -> "Matrix3":
        return Matrix3(*self.elements)

    def copy(self, m: "Matrix3") -> "Matrix3":
        self.elements[:] = m.elements
        return self

    def __copy__(self) -> "Matrix3":
        return self.clone()

    def __deepcopy__(self, memo) -> "Matrix3":
        return self.clone()

    def from_array(self, array) -> "Matrix3":
        """Set the elements from 9 values, flat or nested 3x3, in row-major order."""
        values = np.asarray(array, dtype=np.float64).ravel()
        if values.size != 9:
            raise ValueError(f"expected 9 values, got {values.size}")
        self.elements[:] = values.tolist()
        return self

    @classmethod
    def from_numpy(cls, array) -> "Matrix3":
        return cls().from_array(array)

    def to_array(self) -> list:
        return list(self.elements)

    def to_numpy(self) -> np.ndarray:
        return np.array(self.elements, dtype=np.float64).reshape(3, 3)

    def rows(self) -> tuple:
        te = self.elements
        return (tuple(te[0:3]), tuple(te[3:6]), tuple(te[6:9]))

    # Element access

    def get(self, row: int, col: int) -> float:
        return self.elements[_check_index((row, col))]

    def __getitem__(self, key) -> float:
        return self.elements[_check_index(key)]

    def __setitem__(self, key, value: float) -> None:
        self.elements[_check_index(key)] = float(value)

    # Structural queries

    def determinant(self) -> float:
        te = self.elements

        n11, n12, n13 = te[0], te[1], te[2]
        n21, n22, n23 = te[3], te[4], te[5]
        n31, n32, n33 = te[6], te[7], te[8]

        # cofactor expansion along the first row
        return (
            n11 * (n22 * n33 - n32 * n23)
            - n12 * (n21 * n33 - n31 * n23)
            + n13 * (n21 * n32 - n31 * n22)
        )

    def trace(self) -> float:
        te = self.elements
        return te[0] + te[4] + te[8]

    def is_identity(self) -> bool:
        te = self.elements
        for i in range(9):
            expected = 1.0 if i % 4 == 0 else 0.0
            if te[i] != expected:
                return False
        return True

    def is_symmetric(self) -> bool:
        te = self.elements
        return te[1] == te[3] and te[2] == te[6] and te[5] == te[7]

    def is_antisymmetric(self) -> bool:
        # Only the off-diagonal pairs are compared, the diagonal is not
        # required to be zero.
        te = self.elements
        return te[1] == -te[3] and te[2] == -te[6] and te[5] == -te[7]

    def is_invertible(self) -> bool:
        return abs(self.determinant()) > MACHINE_EPSILON

    def is_singular(self) -> bool:
        return not self.is_invertible()

    def is_orthogonal(self) -> bool:
        """Whether the element-wise product with the transpose is the identity.

        This uses ``*`` (the Hadamard product), so it is not the mathematical
        notion of orthogonality. E.g. a 90 degree rotation is not reported
        as orthogonal, while any diagonal matrix of +1 and -1 entries is.
        """
        return (self * self.transpose()).is_identity()

    def __bool__(self) -> bool:
        return self.is_invertible()

    def __call__(self) -> float:
        return self.determinant()

    def transpose(self) -> "Matrix3":
        te = self.elements
        return Matrix3(te[0], te[3], te[6], te[1], te[4], te[7], te[2], te[5], te[8])

    def inverse(self) -> "Matrix3":
        te = self.elements

        n11, n12, n13 = te[0], te[1], te[2]
        n21, n22, n23 = te[3], te[4], te[5]
        n31, n32, n33 = te[6], te[7], te[8]

        det = self.determinant()
        if det == 0:
            raise NotInvertible("matrix determinant is zero, cannot invert")

        adjoint = Matrix3(
            n22 * n33 - n32 * n23,
            n13 * n32 - n12 * n33,
            n12 * n23 - n13 * n22,
            n23 * n31 - n21 * n33,
            n11 * n33 - n13 * n31,
            n21 * n13 - n11 * n23,
            n21 * n32 - n31 * n22,
            n31 * n12 - n11 * n32,
            n11 * n22 - n21 * n12,
        )

        adjoint *= 1 / det
        return adjoint

    def multiply_matrices(self, a: "Matrix3", b: "Matrix3") -> "Matrix3":
        """Set this matrix to the row-by-column product a x b."""
        ae = a.elements
        be = b.elements
        te = self.elements

        a11, a12, a13 = ae[0], ae[1], ae[2]
        a21, a22, a23 = ae[3], ae[4], ae[5]
        a31, a32, a33 = ae[6], ae[7], ae[8]

        b11, b12, b13 = be[0], be[1], be[2]
        b21, b22, b23 = be[3], be[4], be[5]
        b31, b32, b33 = be[6], be[7], be[8]

        te[0] = a11 * b11 + a12 * b21 + a13 * b31
        te[1] = a11 * b12 + a12 * b22 + a13 * b32
        te[2] = a11 * b13 + a12 * b23 + a13 * b33

        te[3] = a21 * b11 + a22 * b21 + a23 * b31
        te[4] = a21 * b12 + a22 * b22 + a23 * b32
        te[5] = a21 * b13 + a22 * b23 + a23 * b33

        te[6] = a31 * b11 + a32 * b21 + a33 * b31
        te[7] = a31 * b12 + a32 * b22 + a33 * b32
        te[8] = a31 * b13 + a32 * b23 + a33 * b33

        return self

    def __matmul__(self, other: "Matrix3") -> "Matrix3":
        if not isinstance(other, Matrix3):
            return NotImplemented
        return Matrix3().multiply_matrices(self, other)

    # Comparison

    def equals(self, matrix: "Matrix3") -> bool:
        te = self.elements
        me = matrix.elements
        for i in range(9):
            if te[i] != me[i]:
                return False
        return True

    def almost_equals(self, matrix: "Matrix3", tolerance: float = 1e-9) -> bool:
        return all(
            abs(x - y) <= tolerance for x, y in zip(self.elements, matrix.elements)
        )

    def __eq__(self, other: "Matrix3") -> bool:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self.equals(other)

    # Mutable, so not hashable
    __hash__ = None

    # In-place arithmetic

    def __iadd__(self, other) -> "Matrix3":
        te = self.elements
        if isinstance(other, Matrix3):
            me = other.elements
            for i in range(9):
                te[i] += me[i]
        elif isinstance(other, Real):
            x = float(other)
            for i in range(9):
                te[i] += x
        else:
            return NotImplemented
        return self

    def __isub__(self, other) -> "Matrix3":
        if isinstance(other, Matrix3):
            te = self.elements
            me = other.elements
            for i in range(9):
                te[i] -= me[i]
            return self
        elif isinstance(other, Real):
            return self.__iadd__(-float(other))
        return NotImplemented

    def __imul__(self, other) -> "Matrix3":
        te = self.elements
        if isinstance(other, Matrix3):
            # element-wise, not the matrix product
            me = other.elements
            for i in range(9):
                te[i] *= me[i]
        elif isinstance(other, Real):
            x = float(other)
            for i in range(9):
                te[i] *= x
        else:
            return NotImplemented
        return self

    def __itruediv__(self, other) -> "Matrix3":
        """Divide every element by a scalar, in place.

        This multiplies by ``1 / other``. For a subnormal divisor that
        reciprocal overflows to inf, so nonzero elements become inf and
        zero elements become nan.
        """
        if not isinstance(other, Real):
            return NotImplemented
        if other == 0:
            raise DivideByZero("division of a matrix by zero")
        return self.__imul__(1 / float(other))

    # Binary arithmetic, the receiver is left untouched

    def __add__(self, other) -> "Matrix3":
        return self.clone().__iadd__(other)

    def __sub__(self, other) -> "Matrix3":
        return self.clone().__isub__(other)

    def __mul__(self, other) -> "Matrix3":
        return self.clone().__imul__(other)

    def __truediv__(self, other) -> "Matrix3":
        return self.clone().__itruediv__(other)

    __radd__ = __add__
    __rmul__ = __mul__

    # Unary

    def __neg__(self) -> "Matrix3":
        return Matrix3(*(-x for x in self.elements))

    def __pos__(self) -> "Matrix3":
        return self.clone()

    def pre_increment(self) -> "Matrix3":
        self += 1
        return self

    def post_increment(self) -> "Matrix3":
        snapshot = self.clone()
        self.pre_increment()
        return snapshot

    def pre_decrement(self) -> "Matrix3":
        self -= 1
        return self

    def post_decrement(self) -> "Matrix3":
        snapshot = self.clone()
        self.pre_decrement()
        return snapshot
