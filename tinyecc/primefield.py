"""
Copyright (c) 2020, the tinyecc developers
See LICENSE for details

Arithmetic in prime fields GF(p) on top of Python integers.

FieldElt values are immutable. Every arithmetic result is a new element with
its value reduced into [0, p). Mixing an element with a plain int maps the int
into the element's field first; mixing elements of two different fields is
an error rather than a silent coercion.

References:
  [RFC9380]: Hashing to Elliptic Curves, section 4.1 (sgn0)
    https://www.rfc-editor.org/rfc/rfc9380

  [HAC]: Handbook of Applied Cryptography (Menezes, van Oorschot, Vanstone),
    algorithm 3.34 (Tonelli-Shanks)
"""

from tinyecc import EccError, FieldMismatchError, NonResidueError
from tinyecc.util.encode import ByteArray, decodeBA, intFromBytes


def parseInt(s):
    """
    parseInt parses a decimal or 0x-prefixed hexadecimal numeral with an
    optional sign. Parameter tables are written with both.

    Args:
        s (str or int): The numeral. Integers are returned unchanged.

    Returns:
        int: The parsed value.
    """
    if isinstance(s, int):
        return s
    s = s.strip().replace("_", "")
    neg = s.startswith("-")
    if s[:1] in "+-":
        s = s[1:]
    if s.lower().startswith("0x"):
        v = int(s[2:], 16)
    else:
        v = int(s, 10)
    return -v if neg else v


class PrimeField:
    """
    PrimeField is the field of integers modulo an odd prime p. The primality
    of p is not tested, parameter tables are trusted.
    """

    def __init__(self, p):
        if p < 3 or p % 2 == 0:
            raise EccError("prime field modulus must be an odd prime, got %d" % p)
        self.p = p
        self.byteSize = (p.bit_length() + 7) // 8

    def modulus(self):
        """
        The field characteristic p.
        """
        return self.p

    def sizeBytes(self):
        """
        sizeBytes is the length of a serialized field element, ceil(log256(p)).
        """
        return self.byteSize

    def zero(self):
        return FieldElt(self, 0)

    def one(self):
        return FieldElt(self, 1)

    def elt(self, i):
        """
        elt maps the integer into the field. Negative integers are reduced to
        their positive residue.

        Args:
            i (int or FieldElt): The value.

        Returns:
            FieldElt: The field element.
        """
        if isinstance(i, FieldElt):
            if i.f != self:
                raise FieldMismatchError("element belongs to a different field")
            return i
        return FieldElt(self, i)

    def fromString(self, s):
        """
        fromString parses a decimal or hexadecimal numeral into the field.
        """
        return FieldElt(self, parseInt(s))

    def fromBytes(self, b):
        """
        fromBytes decodes a big-endian integer into the field. The value must
        already be canonical, i.e. less than p.

        Args:
            b (bytes-like): The encoded element.

        Returns:
            FieldElt: The field element.
        """
        v = intFromBytes(decodeBA(b))
        if v >= self.p:
            raise EccError("encoded value is not less than the field modulus")
        return FieldElt(self, v)

    def __eq__(self, other):
        return isinstance(other, PrimeField) and other.p == self.p

    def __hash__(self):
        return hash(self.p)

    def __repr__(self):
        return "PrimeField(%s)" % hex(self.p)


class FieldElt:
    """
    FieldElt is an element of a PrimeField.
    """

    __slots__ = ("f", "n")

    def __init__(self, f, n):
        self.f = f
        self.n = n % f.p

    def _coerce(self, other):
        if isinstance(other, FieldElt):
            if other.f != self.f:
                raise FieldMismatchError(
                    "arithmetic between elements of %r and %r" % (self.f, other.f)
                )
            return other.n
        if isinstance(other, int):
            return other
        return None

    def __add__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return FieldElt(self.f, self.n + v)

    __radd__ = __add__

    def __sub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return FieldElt(self.f, self.n - v)

    def __rsub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return FieldElt(self.f, v - self.n)

    def __mul__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return FieldElt(self.f, self.n * v)

    __rmul__ = __mul__

    def __truediv__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self * FieldElt(self.f, v).inverse()

    def __rtruediv__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return FieldElt(self.f, v) * self.inverse()

    def __neg__(self):
        return FieldElt(self.f, -self.n)

    def __pow__(self, e):
        if not isinstance(e, int):
            return NotImplemented
        if e < 0:
            return self.inverse() ** -e
        return FieldElt(self.f, pow(self.n, e, self.f.p))

    def __eq__(self, other):
        if isinstance(other, FieldElt):
            return other.f == self.f and other.n == self.n
        if isinstance(other, int):
            return other % self.f.p == self.n
        return NotImplemented

    def __hash__(self):
        return hash((self.f.p, self.n))

    def __int__(self):
        return self.n

    def __bool__(self):
        return self.n != 0

    def __repr__(self):
        return "FieldElt(%s)" % hex(self.n)

    def __str__(self):
        return hex(self.n)

    def isZero(self):
        return self.n == 0

    def int(self):
        """The canonical representative in [0, p)."""
        return self.n

    def bytes(self):
        """
        bytes is the fixed-width big-endian encoding of the element.

        Returns:
            ByteArray: sizeBytes() bytes.
        """
        return ByteArray(self.n, length=self.f.byteSize)

    def inverse(self):
        """
        inverse finds the modular multiplicative inverse.

        Raises:
            ZeroDivisionError: zero has no inverse.
        """
        if self.n == 0:
            raise ZeroDivisionError("zero has no inverse in %r" % self.f)
        return FieldElt(self.f, pow(self.n, self.f.p - 2, self.f.p))

    def isSquare(self):
        """
        isSquare applies Euler's criterion. Zero counts as a square.
        """
        if self.n == 0:
            return True
        return pow(self.n, (self.f.p - 1) // 2, self.f.p) == 1

    def sgn0(self):
        """
        sgn0 is the parity of the canonical representative, see [RFC9380]
        section 4.1. It is the sign bit used by compressed point encodings.

        Returns:
            int: 0 or 1.
        """
        return self.n & 1

    def sqrt(self):
        """
        sqrt returns a square root of the element. The root is not
        canonicalized, negate it based on sgn0 where a particular one is
        needed.

        Raises:
            NonResidueError: the element is not a quadratic residue.
        """
        p = self.f.p
        a = self.n
        if a == 0:
            return self
        if not self.isSquare():
            raise NonResidueError("%s is not a square modulo %s" % (hex(a), hex(p)))
        if p % 4 == 3:
            r = pow(a, (p + 1) // 4, p)
        elif p % 8 == 5:
            # a^((p+3)/8) squares to either a or -a. In the latter case,
            # multiply by sqrt(-1) = 2^((p-1)/4), since 2 is a non-residue.
            r = pow(a, (p + 3) // 8, p)
            if r * r % p != a:
                r = r * pow(2, (p - 1) // 4, p) % p
        else:
            r = tonelliShanks(a, p)
        if r * r % p != a:
            raise NonResidueError("no square root found for %s" % hex(a))
        return FieldElt(self.f, r)


def tonelliShanks(a, p):
    """
    tonelliShanks is algorithm 3.34 from [HAC]. a must be a non-zero quadratic
    residue modulo the odd prime p.

    Args:
        a (int): The residue.
        p (int): The modulus.

    Returns:
        int: A square root of a.
    """
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1
    # Find any non-residue.
    z = 2
    while pow(z, (p - 1) // 2, p) != p - 1:
        z += 1
    m, c, t, r = s, pow(z, q, p), pow(a, q, p), pow(a, (q + 1) // 2, p)
    while t != 1:
        i, t2 = 0, t
        while t2 != 1:
            t2 = t2 * t2 % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m, c = i, b * b % p
        t = t * c % p
        r = r * b % p
    return r
