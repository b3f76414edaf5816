"""
Copyright (c) 2020, the tinyecc developers
See LICENSE for details

Short Weierstrass curves y^2 = x^3 + a*x + b.

References:
  [SEC2] Recommended Elliptic Curve Domain Parameters
    https://www.secg.org/sec2-v2.pdf

  [FIPS186] Digital Signature Standard, appendix D
    https://doi.org/10.6028/NIST.FIPS.186-4
"""

from dataclasses import dataclass
from typing import ClassVar

from tinyecc import CurveParamsError
from tinyecc.ellipticcurve import EllipticCurve, readTable

from .point import Point


@dataclass(frozen=True)
class Params:
    """
    Params is a parameter table for a short Weierstrass curve. All values are
    decimal or 0x-prefixed hexadecimal numerals.
    """

    model: ClassVar[str] = "weierstrass"

    name: str
    p: str
    a: str
    b: str
    r: str
    h: str
    gx: str
    gy: str


class Curve(EllipticCurve):
    """
    Curve is a short Weierstrass curve over a prime field. Points use the
    homogeneous projective equation Y^2*Z = X^3 + a*X*Z^2 + b*Z^3.
    """

    model = "weierstrass"
    pointClass = Point

    def __init__(self, f, a, b, r, h, gx, gy, name=""):
        """
        Args:
            f (PrimeField): The base field.
            a (int or FieldElt): The linear coefficient.
            b (int or FieldElt): The constant coefficient.
            r (int): The prime group order.
            h (int): The cofactor.
            gx (int or FieldElt): The generator's x coordinate.
            gy (int or FieldElt): The generator's y coordinate.
            name (str): optional. A name for diagnostics.
        """
        self._a = f.elt(a)
        self._b = f.elt(b)
        if (4 * self._a ** 3 + 27 * self._b ** 2).isZero():
            raise CurveParamsError("singular curve, 4a^3 + 27b^2 = 0")
        super().__init__(f, r, h, f.elt(gx), f.elt(gy), name)

    @property
    def a(self):
        return self._a

    @property
    def b(self):
        return self._b

    @classmethod
    def fromParams(cls, params):
        """
        fromParams builds the curve described by a parameter table.

        Args:
            params (Params): The table.

        Returns:
            Curve: The curve.
        """
        f, (a, b, r, h, gx, gy) = readTable(params, "a", "b", "r", "h", "gx", "gy")
        return cls(f, a, b, r, h, gx, gy, name=params.name)

    def coefficients(self):
        return (self.a, self.b)

    def identityCoordinates(self):
        return self.f.zero(), self.f.one(), self.f.zero()

    def equation(self, x, y, z):
        zz = z * z
        return y * y * z == x * x * x + self.a * x * zz + self.b * zz * z

    def isIdentity(self, p):
        # The only valid point with Z = 0 is (0:Y:0).
        return p.z.isZero()

    def solveY2(self, x):
        return x * x * x + self.a * x + self.b

    def __str__(self):
        return "Weierstrass Curve y^2=x^3+ax+b\na: %s\nb: %s" % (self.a, self.b)
