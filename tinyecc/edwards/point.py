"""
Copyright (c) 2020, the tinyecc developers
See LICENSE for details

Group law for twisted Edwards curves in homogeneous projective coordinates,
from the Explicit-Formulas Database:
  http://hyperelliptic.org/EFD/g1p/auto-twisted-projective.html
"""

from tinyecc import ellipticcurve


class Point(ellipticcurve.Point):
    """
    Point on a twisted Edwards curve. The identity is (0:1:1). The addition
    formula is complete when a is a square and d is not, so doubling uses it
    too.
    """

    __slots__ = ()

    def _neg(self):
        return self.curve.newPoint(-self.x, self.y, self.z)

    def _add(self, other):
        # add-2008-bbjlp, 10M + 1S + 1*a + 1*d.
        x1, y1, z1 = self.x, self.y, self.z
        x2, y2, z2 = other.x, other.y, other.z
        # fmt: off
        a = z1 * z2                 # A = Z1*Z2
        b = a * a                   # B = A^2
        c = x1 * x2                 # C = X1*X2
        d = y1 * y2                 # D = Y1*Y2
        e = self.curve.d * c * d    # E = d*C*D
        f = b - e                   # F = B-E
        g = b + e                   # G = B+E
        x3 = a * f * ((x1 + y1) * (x2 + y2) - c - d)  # X3 = A*F*((X1+Y1)*(X2+Y2)-C-D)
        y3 = a * g * (d - self.curve.a * c)  # Y3 = A*G*(D-a*C)
        z3 = f * g                  # Z3 = F*G
        # fmt: on
        return self.curve.newPoint(x3, y3, z3)

    def _double(self):
        return self._add(self)
