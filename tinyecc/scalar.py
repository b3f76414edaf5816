"""
Copyright (c) 2020, the tinyecc developers
See LICENSE for details

Integers modulo a curve's group order.
"""

from tinyecc import EccError, GroupMismatchError
from tinyecc.util.encode import ByteArray


class Scalar:
    """
    Scalar is an integer k reduced modulo the group order r. The invariant
    0 <= k < r holds after construction and after every operation. Scalars
    with different moduli can not be combined.
    """

    __slots__ = ("k", "r")

    def __init__(self, k, r):
        """
        Args:
            k (int): The value. Reduced with floored modulo, so negative
                values land on their positive residue.
            r (int): The group order.
        """
        if r <= 0:
            raise EccError("scalar modulus must be positive, got %d" % r)
        self.k = k % r
        self.r = r

    def _red(self, k):
        return Scalar(k, self.r)

    def _other(self, other):
        if isinstance(other, Scalar):
            if other.r != self.r:
                raise GroupMismatchError("elements of different groups")
            return other.k
        if isinstance(other, int):
            return other
        return None

    def add(self, other):
        """
        add returns self + other mod r.
        """
        v = self._other(other)
        if v is None:
            raise TypeError("cannot add %s to a Scalar" % type(other).__name__)
        return self._red(self.k + v)

    def sub(self, other):
        """
        sub returns self - other mod r.
        """
        v = self._other(other)
        if v is None:
            raise TypeError("cannot subtract %s from a Scalar" % type(other).__name__)
        return self._red(self.k - v)

    def mul(self, other):
        """
        mul returns self * other mod r.
        """
        v = self._other(other)
        if v is None:
            raise TypeError("cannot multiply a Scalar by %s" % type(other).__name__)
        return self._red(self.k * v)

    def neg(self):
        """
        neg returns -self mod r.
        """
        return self._red(-self.k)

    def inverse(self):
        """
        inverse returns the multiplicative inverse mod r. The group order of
        every bundled curve is prime.
        """
        if self.k == 0:
            raise ZeroDivisionError("zero scalar has no inverse")
        return self._red(pow(self.k, -1, self.r))

    def __add__(self, other):
        if self._other(other) is None:
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if self._other(other) is None:
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other):
        v = self._other(other)
        if v is None:
            return NotImplemented
        return self._red(v - self.k)

    def __mul__(self, other):
        # Scalar * Point is commutative with Point * Scalar and always runs
        # the point's multiplication routine.
        from tinyecc.ellipticcurve import Point

        if isinstance(other, Point):
            return other.mul(self)
        if self._other(other) is None:
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other):
        if self._other(other) is None:
            return NotImplemented
        return self.mul(other)

    def __neg__(self):
        return self.neg()

    def __eq__(self, other):
        if not isinstance(other, Scalar):
            return NotImplemented
        return self.r == other.r and self.k == other.k

    def __hash__(self):
        return hash((self.k, self.r))

    def __int__(self):
        return self.k

    def __bytes__(self):
        return self.bytes().bytes()

    def __repr__(self):
        return "Scalar(%d)" % self.k

    def __str__(self):
        return str(self.k)

    def isZero(self):
        return self.k == 0

    def bitLen(self):
        """
        bitLen is the number of significant bits in k, without leading zeros.
        """
        return self.k.bit_length()

    def bytes(self):
        """
        bytes is the big-endian encoding of k, padded to the byte length of
        the group order.

        Returns:
            ByteArray: The encoded scalar.
        """
        return ByteArray(self.k, length=(self.r.bit_length() + 7) // 8)

    def iterLR(self):
        """
        iterLR yields the bits of k from the most significant to the least
        significant. The sequence has exactly bitLen() items, so a zero scalar
        yields nothing. Each call returns a new, independent generator.

        Returns:
            generator(bool): The bits.
        """
        k = self.k
        for i in range(k.bit_length() - 1, -1, -1):
            yield (k >> i) & 1 == 1

    def iterRL(self):
        """
        iterRL yields the bits of k from the least significant to the most
        significant, bitLen() items in total.

        Returns:
            generator(bool): The bits.
        """
        k = self.k
        for i in range(k.bit_length()):
            yield (k >> i) & 1 == 1
