"""
Copyright (c) 2020, the tinyecc developers
See LICENSE for details

Montgomery curves b*y^2 = x^3 + a*x^2 + x.

References:
  [RFC7748] Elliptic Curves for Security
    https://www.rfc-editor.org/rfc/rfc7748
"""

from dataclasses import dataclass
from typing import ClassVar

from tinyecc import CurveParamsError
from tinyecc.ellipticcurve import EllipticCurve, readTable

from .point import Point


@dataclass(frozen=True)
class Params:
    """
    Params is a parameter table for a Montgomery curve. s is carried along
    with the table but plays no part in the arithmetic.
    """

    model: ClassVar[str] = "montgomery"

    name: str
    p: str
    a: str
    b: str
    s: str
    r: str
    h: str
    gx: str
    gy: str


class Curve(EllipticCurve):
    """
    Curve is a Montgomery curve over a prime field. Points use the projective
    equation b*Y^2*Z = X^3 + a*X^2*Z + X*Z^2.
    """

    model = "montgomery"
    pointClass = Point

    def __init__(self, f, a, b, r, h, gx, gy, s=0, name=""):
        """
        Args:
            f (PrimeField): The base field.
            a (int or FieldElt): The quadratic coefficient.
            b (int or FieldElt): The coefficient of y^2.
            r (int): The prime group order.
            h (int): The cofactor.
            gx (int or FieldElt): The generator's x coordinate.
            gy (int or FieldElt): The generator's y coordinate.
            s (int or FieldElt): optional. Metadata kept with the curve.
            name (str): optional. A name for diagnostics.
        """
        self._a = f.elt(a)
        self._b = f.elt(b)
        self._s = f.elt(s)
        if self._b.isZero() or (self._a * self._a - 4).isZero():
            raise CurveParamsError("singular curve, b = 0 or a^2 = 4")
        super().__init__(f, r, h, f.elt(gx), f.elt(gy), name)

    @property
    def a(self):
        return self._a

    @property
    def b(self):
        return self._b

    @property
    def s(self):
        return self._s

    @classmethod
    def fromParams(cls, params):
        """
        fromParams builds the curve described by a parameter table.

        Args:
            params (Params): The table.

        Returns:
            Curve: The curve.
        """
        f, (a, b, s, r, h, gx, gy) = readTable(
            params, "a", "b", "s", "r", "h", "gx", "gy"
        )
        return cls(f, a, b, r, h, gx, gy, s=s, name=params.name)

    def coefficients(self):
        return (self.a, self.b)

    def identityCoordinates(self):
        return self.f.zero(), self.f.one(), self.f.zero()

    def equation(self, x, y, z):
        return self.b * y * y * z == x * x * x + self.a * x * x * z + x * z * z

    def isIdentity(self, p):
        return p.z.isZero()

    def solveY2(self, x):
        return (x * x * x + self.a * x * x + x) / self.b

    def __str__(self):
        return "Montgomery Curve by^2=x^3+ax^2+x\na: %s\nb: %s" % (self.a, self.b)
