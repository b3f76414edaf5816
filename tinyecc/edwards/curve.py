"""
Copyright (c) 2020, the tinyecc developers
See LICENSE for details

Twisted Edwards curves a*x^2 + y^2 = 1 + d*x^2*y^2.

References:
  [RFC8032] Edwards-Curve Digital Signature Algorithm (EdDSA)
    https://www.rfc-editor.org/rfc/rfc8032

  [BBJLP08] Twisted Edwards Curves (Bernstein, Birkner, Joye, Lange, Peters)
    https://eprint.iacr.org/2008/013
"""

from dataclasses import dataclass
from typing import ClassVar

from tinyecc import CurveParamsError
from tinyecc.ellipticcurve import EllipticCurve, readTable

from .point import Point


@dataclass(frozen=True)
class Params:
    """
    Params is a parameter table for a twisted Edwards curve.
    """

    model: ClassVar[str] = "edwards"

    name: str
    p: str
    a: str
    d: str
    r: str
    h: str
    gx: str
    gy: str


class Curve(EllipticCurve):
    """
    Curve is a twisted Edwards curve over a prime field. Points use the
    projective equation (a*X^2 + Y^2)*Z^2 = Z^4 + d*X^2*Y^2 with Z != 0.
    """

    model = "edwards"
    pointClass = Point

    def __init__(self, f, a, d, r, h, gx, gy, name=""):
        """
        Args:
            f (PrimeField): The base field.
            a (int or FieldElt): The coefficient of x^2.
            d (int or FieldElt): The coefficient of x^2*y^2.
            r (int): The prime group order.
            h (int): The cofactor.
            gx (int or FieldElt): The generator's x coordinate.
            gy (int or FieldElt): The generator's y coordinate.
            name (str): optional. A name for diagnostics.
        """
        self._a = f.elt(a)
        self._d = f.elt(d)
        if self._a.isZero() or self._d.isZero() or self._a == self._d:
            raise CurveParamsError("singular curve, need a != d and both non-zero")
        # The addition law is complete only for square a and non-square d
        # [BBJLP08].
        if not self._a.isSquare() or self._d.isSquare():
            raise CurveParamsError("incomplete curve, need a square and d non-square")
        super().__init__(f, r, h, f.elt(gx), f.elt(gy), name)

    @property
    def a(self):
        return self._a

    @property
    def d(self):
        return self._d

    @classmethod
    def fromParams(cls, params):
        """
        fromParams builds the curve described by a parameter table.

        Args:
            params (Params): The table.

        Returns:
            Curve: The curve.
        """
        f, (a, d, r, h, gx, gy) = readTable(params, "a", "d", "r", "h", "gx", "gy")
        return cls(f, a, d, r, h, gx, gy, name=params.name)

    def coefficients(self):
        return (self.a, self.d)

    def identityCoordinates(self):
        return self.f.zero(), self.f.one(), self.f.one()

    def equation(self, x, y, z):
        if z.isZero():
            return False
        xx, yy, zz = x * x, y * y, z * z
        return (self.a * xx + yy) * zz == zz * zz + self.d * xx * yy

    def isIdentity(self, p):
        return p.x.isZero() and p.y == p.z

    def solveY2(self, x):
        xx = x * x
        return (1 - self.a * xx) / (1 - self.d * xx)

    def __str__(self):
        return "Twisted Edwards Curve ax^2+y^2=1+dx^2y^2\na: %s\nd: %s" % (
            self.a,
            self.d,
        )
