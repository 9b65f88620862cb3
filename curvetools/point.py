from collections import namedtuple
from typing import Optional

from curvetools.errors import DomainMismatch, NotOnCurve

__all__ = ['Affine', 'INFINITY', 'Point']


Affine = namedtuple('Affine', ['x', 'y'])


class _Infinity:
    """Coordinate of the point at infinity O"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'INFINITY'


INFINITY = _Infinity()


class Point:

    def __init__(self, coord, curve):
        if coord is not INFINITY:
            coord = Affine(*coord)
            if coord.x not in curve.field or coord.y not in curve.field:
                raise DomainMismatch(f"Coordinates {coord} are not elements of {curve.field!r}")
        if not curve.on(coord):
            raise NotOnCurve(f"Point {coord} not in curve {curve.name}")
        self.coord = coord
        self.curve = curve

    @classmethod
    def new(cls, coord, curve) -> Optional['Point']:
        """The point with coordinate coord, or None if it is not on the curve"""
        try:
            return cls(coord, curve)
        except NotOnCurve:
            return None

    @property
    def x(self):
        return None if self.coord is INFINITY else self.coord.x

    @property
    def y(self):
        return None if self.coord is INFINITY else self.coord.y

    def is_finite(self) -> bool:
        return self.x is not None and self.y is not None

    def is_inf(self) -> bool:
        return self.coord is INFINITY

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        if self.curve != other.curve:
            raise DomainMismatch('Cannot add points on different curves')
        return self.curve.point_add(self, other)

    def __neg__(self):
        if self.is_inf():
            return self
        return Point(Affine(self.x, -self.y), self.curve)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self + (-other)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.curve == other.curve and self.coord == other.coord

    def __hash__(self):
        return hash((self.coord, self.curve))

    def __repr__(self):
        if self.is_inf():
            return f"Point(INFINITY, {self.curve.name})"
        return f"Point({self.x}, {self.y}, {self.curve.name})"
