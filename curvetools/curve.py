from enum import Enum, unique
from typing import Optional

from curvetools.errors import DomainMismatch
from curvetools.field import AbstractField, PrimeField
from curvetools.point import Affine, INFINITY, Point

__all__ = ['Curve', 'Secp256k1', 'TestCurve', 'CURVE', 'curves', 'curve_from_name']


class Curve:
    """The short Weierstrass curve y^2 = x^3 + ax + b over an arbitrary field

    Singular curves are refused. In characteristic 2 every curve of this form is singular,
    in characteristic 3 the discriminant reduces to a^3 and still decides it.
    """

    def __init__(self, field: AbstractField, a, b, name: str):
        self.field = field
        self._a = field(a)
        self._b = field(b)
        self.name = name

        if field(2) == field.zero:
            raise DomainMismatch(f"Curve {name} is singular in characteristic 2")

        discriminant = field(4) * self._a * self._a * self._a + field(27) * self._b * self._b
        if discriminant == field.zero:
            raise DomainMismatch(f"Curve {name} is singular over {field!r}")

    def a(self):
        return self._a

    def b(self):
        return self._b

    @property
    def infinity(self) -> Point:
        return Point(INFINITY, self)

    def f(self, x):
        """Compute x^3 + ax + b in the curve's field"""
        x = self.field(x)
        return x * x * x + self._a * x + self._b

    def on(self, point) -> bool:
        coord = point.coord if isinstance(point, Point) else point
        if coord is INFINITY:
            return True
        x, y = coord
        return y * y == self.f(x)

    __contains__ = on

    def point(self, x, y) -> Optional[Point]:
        return Point.new(Affine(self.field(x), self.field(y)), self)

    def lift_x(self, x) -> Optional[Point]:
        """The point with abscissa x and even ordinate, None if x^3 + ax + b is not a square"""
        if not isinstance(self.field, PrimeField):
            raise TypeError(f"Square roots are only available over prime fields, not {self.field!r}")
        x = self.field(x)
        y = self.f(x).sqrt()
        if y is None:
            return None
        if y.value & 1:
            y = -y
        return Point(Affine(x, y), self)

    def point_add(self, P1: Point, P2: Point) -> Point:
        """https://en.wikipedia.org/wiki/Elliptic_curve_point_multiplication#Point_addition"""
        if P1.is_inf():
            return P2
        if P2.is_inf():
            return P1

        x1, y1 = P1.coord
        x2, y2 = P2.coord

        if x1 == x2 and y1 != y2:
            return self.infinity

        if x1 == x2:
            if y1 == self.field.zero:  # vertical tangent
                return self.infinity
            lam = (self.field(3) * x1 * x1 + self._a) / (self.field(2) * y1)
        else:
            lam = (y2 - y1) / (x2 - x1)

        rx = lam * lam - x1 - x2
        ry = lam * (x1 - rx) - y1
        return Point(Affine(rx, ry), self)

    def __eq__(self, other):
        if not isinstance(other, Curve):
            return NotImplemented
        return (type(self) is type(other) and self.name == other.name and self.field == other.field
                and self._a == other._a and self._b == other._b)

    def __hash__(self):
        return hash((type(self).__name__, self.name, self.field))

    def __repr__(self):
        return f"{self.__class__.__name__}(y^2 = x^3 + {self._a}x + {self._b} over {self.field!r})"


class Secp256k1(Curve):
    A = 0
    B = 7

    def __init__(self, field: AbstractField):
        super().__init__(field, self.A, self.B, name='secp256k1')


class TestCurve(Curve):
    A = 5
    B = 7

    __test__ = False  # keep pytest from collecting it

    def __init__(self, field: AbstractField):
        super().__init__(field, self.A, self.B, name='test')


@unique
class CURVE(Enum):
    SECP256K1 = 'secp256k1'
    TEST = 'test'


curves = {
    CURVE.SECP256K1: Secp256k1,
    CURVE.TEST: TestCurve
}


def curve_from_name(name, field: AbstractField) -> Curve:
    try:
        key = CURVE(name)
    except ValueError:
        raise ValueError(f"Unknown curve {name!r}, expected one of {[c.value for c in CURVE]}") from None
    return curves[key](field)
