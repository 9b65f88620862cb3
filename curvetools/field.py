from abc import ABC, abstractmethod
from typing import Optional

from curvetools.errors import DivisionByZero, DomainMismatch
from curvetools.number_theory_stuff import rem_euclid, legendre, modsqrt

__all__ = ['AbstractField', 'PrimeField', 'Fp']


class AbstractField(ABC):
    """What a curve needs to know about the field its coordinates live in"""

    @abstractmethod
    def element(self, k):
        """Coerce the Python number k into an element of this field"""

    @abstractmethod
    def __contains__(self, element) -> bool:
        ...

    def __call__(self, k):
        return self.element(k)

    @property
    def zero(self):
        return self.element(0)

    @property
    def one(self):
        return self.element(1)


class PrimeField(AbstractField):
    """The finite field of integers modulo the prime P. Primality is not checked."""

    def __init__(self, P: int):
        if not isinstance(P, int) or P < 2:
            raise ValueError(f"Field modulus must be an integer greater than 1, got {P!r}")
        self.P = P

    def element(self, k) -> 'Fp':
        if isinstance(k, Fp):
            if k.P != self.P:
                raise DomainMismatch(f"{k!r} is not an element of {self!r}")
            return k
        return Fp.from_signed(k, self.P)

    def new(self, v: int) -> 'Fp':
        return Fp(v, self.P)

    def try_new(self, v: int) -> Optional['Fp']:
        return Fp.try_new(v, self.P)

    def from_signed(self, k: int) -> 'Fp':
        return Fp.from_signed(k, self.P)

    @property
    def order(self) -> int:
        return self.P

    def __contains__(self, element) -> bool:
        return isinstance(element, Fp) and element.P == self.P

    def __eq__(self, other):
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self.P == other.P

    def __hash__(self):
        return hash(('PrimeField', self.P))

    def __repr__(self):
        return f"F_{self.P}"


class Fp:
    """An element of F_P, stored as its canonical representative 0 <= value < P"""

    def __init__(self, value: int, P: int):
        if not isinstance(value, int) or not isinstance(P, int):
            raise TypeError(f"Field elements are built from integers, got {value!r} mod {P!r}")
        if P < 2:
            raise ValueError(f"Field modulus must be greater than 1, got {P}")
        if value < 0:
            raise ValueError(f"Negative value {value}, use Fp.from_signed")
        self.value = value % P
        self.P = P

    @classmethod
    def try_new(cls, value: int, P: int) -> Optional['Fp']:
        """Strict constructor: None unless 0 <= value < P"""
        if not 0 <= value < P:
            return None
        return cls(value, P)

    @classmethod
    def from_signed(cls, k: int, P: int) -> 'Fp':
        if not isinstance(k, int):
            raise TypeError(f"Expected an integer, got {k!r}")
        return cls(rem_euclid(k, P), P)

    @property
    def field(self) -> PrimeField:
        return PrimeField(self.P)

    def _coerce(self, other) -> 'Fp':
        if isinstance(other, Fp):
            if other.P != self.P:
                raise DomainMismatch(f"Cannot operate on elements of F_{self.P} and F_{other.P}")
            return other
        if isinstance(other, int):
            return Fp.from_signed(other, self.P)
        return NotImplemented

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return Fp((self.value + other.value) % self.P, self.P)

    __radd__ = __add__

    def __neg__(self):
        if self.value == 0:
            return self
        return Fp(self.P - self.value, self.P)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return Fp((self.value + (-other).value) % self.P, self.P)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return Fp((self.value * other.value) % self.P, self.P)

    __rmul__ = __mul__

    def __pow__(self, exponent: int):
        """Exponents are taken modulo P - 1 (Fermat), so negative ones are allowed"""
        if not isinstance(exponent, int):
            return NotImplemented
        e = rem_euclid(exponent, self.P - 1)
        return Fp(pow(self.value, e, self.P), self.P)

    def inverse(self) -> 'Fp':
        if self.value == 0:
            raise DivisionByZero(f"0 has no inverse in F_{self.P}")
        return self ** (self.P - 2)

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self * other.inverse()

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other / self

    def is_square(self) -> bool:
        return self.value == 0 or legendre(self.value, self.P) != -1

    def sqrt(self) -> Optional['Fp']:
        """A square root of this element or None for a non-residue. The other root is its negation."""
        if not self.is_square():
            return None
        return Fp(modsqrt(self.value, self.P), self.P)

    def __eq__(self, other):
        if not isinstance(other, Fp):
            return NotImplemented
        return self.P == other.P and self.value == other.value

    def __hash__(self):
        return hash((self.value, self.P))

    def __int__(self):
        return self.value

    def __bool__(self):
        return self.value != 0

    def __repr__(self):
        return f"Fp({self.value}, {self.P})"

    def __str__(self):
        return str(self.value)
