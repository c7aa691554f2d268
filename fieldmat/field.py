"""Implementation of finite fields used as matrix scalars."""

from abc import ABC, abstractmethod
from numbers import Integral

from sympy import isprime
import numpy as np
import galois


# Order of the scalar field of BLS12-381.
BLS12_381_R = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001


class Field(ABC):
    """Base class for a finite field whose elements are represented as ints.

    Attributes
    ----------
    order : int
        Number of elements in the field.
    zero : int
        Additive identity.
    one : int
        Multiplicative identity.

    Methods
    -------
    add(a, b), sub(a, b), mul(a, b), neg(a)
        Field arithmetic.
    inverse(a) -> int | None
        Multiplicative inverse, or None if a is zero.
    """

    zero = 0
    one = 1

    @abstractmethod
    def element(self, value: Integral) -> int:
        """Coerce an integer into the field."""

    @abstractmethod
    def add(self, a: int, b: int) -> int:
        """Add two elements in the field."""

    @abstractmethod
    def sub(self, a: int, b: int) -> int:
        """Subtract two elements in the field."""

    @abstractmethod
    def mul(self, a: int, b: int) -> int:
        """Multiply two elements in the field."""

    @abstractmethod
    def inverse(self, a: int) -> int | None:
        """Multiplicative inverse of a, or None if a has none."""

    def neg(self, a: int) -> int:
        """Additive inverse of a."""
        return self.sub(self.zero, a)

    def div(self, a: int, b: int) -> int:
        """Divide two elements in the field."""
        inv = self.inverse(b)
        if inv is None:
            raise ZeroDivisionError(f"{b} has no inverse in {self!r}")
        return self.mul(a, inv)

    def vector(self, values) -> list[int]:
        """Coerce a sequence or 1D integer array into a vector of field elements."""
        if isinstance(values, np.ndarray):
            if values.ndim != 1:
                raise ValueError(f"Expected a 1D array, got {values.ndim}D")
            values = values.tolist()
        return [self.element(v) for v in values]

    def matrix(self, values) -> list[list[int]]:
        """Coerce nested sequences or a 2D integer array into a matrix of field elements."""
        if isinstance(values, np.ndarray):
            if values.ndim != 2:
                raise ValueError(f"Expected a 2D array, got {values.ndim}D")
            values = values.tolist()
        return [self.vector(row) for row in values]


class PrimeField(Field):
    """A finite field of prime order p."""

    def __init__(self, p: int):
        """Initialise a finite field of order p."""

        if not isinstance(p, Integral):
            raise TypeError("p must be an integer")
        if not isprime(p):
            raise ValueError("p must be a prime number")

        self.p = int(p)
        self.order = self.p

    @classmethod
    def bls12_381(cls):
        """The scalar field of the BLS12-381 curve."""
        return cls(BLS12_381_R)

    def __repr__(self):
        """Canonical string representation of PrimeField."""
        return f"PrimeField({self.p})"

    def __eq__(self, other):
        """Check if two PrimeField instances are equal."""
        if isinstance(other, PrimeField):
            return self.p == other.p
        return False

    def __hash__(self):
        return hash(("PrimeField", self.p))

    def element(self, value: Integral) -> int:
        if not isinstance(value, Integral):
            raise TypeError(f"Field elements must be integers, got {type(value).__name__}")
        return int(value) % self.p

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.p

    def sub(self, a: int, b: int) -> int:
        return (a - b) % self.p

    def mul(self, a: int, b: int) -> int:
        return (a * b) % self.p

    def inverse(self, a: int) -> int | None:
        if a % self.p == 0:
            return None
        return pow(a, -1, self.p)


class GaloisField(Field):
    """A finite field of prime power order, backed by galois.

    Parameters
    ----------
    order : int
        Order of the field, p**n for a prime p.
    """

    def __init__(self, order: int):
        if not isinstance(order, Integral):
            raise TypeError("order must be an integer")

        self.GF = galois.GF(int(order))
        self.order = int(order)
        self.characteristic = self.GF.characteristic

    def __repr__(self):
        """Canonical string representation of GaloisField."""
        return f"GaloisField({self.order})"

    def __eq__(self, other):
        """Check if two GaloisField instances are equal."""
        if isinstance(other, GaloisField):
            return self.order == other.order
        return False

    def __hash__(self):
        return hash(("GaloisField", self.order))

    def element(self, value: Integral) -> int:
        if not isinstance(value, Integral):
            raise TypeError(f"Field elements must be integers, got {type(value).__name__}")
        if not 0 <= value < self.order:
            raise ValueError(f"{value} is not an element of {self!r}")
        return int(value)

    def add(self, a: int, b: int) -> int:
        return int(self.GF(a) + self.GF(b))

    def sub(self, a: int, b: int) -> int:
        return int(self.GF(a) - self.GF(b))

    def mul(self, a: int, b: int) -> int:
        return int(self.GF(a) * self.GF(b))

    def inverse(self, a: int) -> int | None:
        if a == 0:
            return None
        return int(self.GF(a) ** -1)
