"""Standard secp256k1 domain parameters (SEC 2, section 2.4.1)"""

from curvetools.curve import Secp256k1
from curvetools.field import PrimeField
from curvetools.point import Affine, Point

__all__ = ['P', 'N', 'G', 'FIELD', 'CURVE', 'GENERATOR']

P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
assert P == 2 ** 256 - 2 ** 32 - 977

# Generator
G = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798, 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

# Order
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

FIELD = PrimeField(P)

CURVE = Secp256k1(FIELD)

GENERATOR = Point(Affine(FIELD(G[0]), FIELD(G[1])), CURVE)
