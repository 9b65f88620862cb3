"""
Prime field arithmetic and elliptic curve point addition over short Weierstrass curves.
"""

from curvetools.errors import CurveError, DivisionByZero, DomainMismatch, NotOnCurve
from curvetools.number_theory_stuff import rem_euclid, legendre, modsqrt
from curvetools.field import AbstractField, PrimeField, Fp
from curvetools.point import Affine, INFINITY, Point
from curvetools.curve import Curve, Secp256k1, TestCurve, CURVE, curves, curve_from_name

__all__ = [
    'CurveError', 'DivisionByZero', 'DomainMismatch', 'NotOnCurve',
    'rem_euclid', 'legendre', 'modsqrt',
    'AbstractField', 'PrimeField', 'Fp',
    'Affine', 'INFINITY', 'Point',
    'Curve', 'Secp256k1', 'TestCurve', 'CURVE', 'curves', 'curve_from_name',
]

__version__ = "0.1"
