"""
Copyright (c) 2020, the tinyecc developers
See LICENSE for details

Group law for short Weierstrass curves in homogeneous projective coordinates.
The formulas are from the Explicit-Formulas Database:
  http://hyperelliptic.org/EFD/g1p/auto-shortw-projective.html
"""

from tinyecc import ellipticcurve


class Point(ellipticcurve.Point):
    """
    Point on a short Weierstrass curve. The identity is (0:1:0).
    """

    __slots__ = ()

    def _neg(self):
        return self.curve.newPoint(self.x, -self.y, self.z)

    def _add(self, other):
        """
        _add adds two points that are not the identity.
        """
        # add-1998-cmo-2, 12M + 2S.
        x1, y1, z1 = self.x, self.y, self.z
        x2, y2, z2 = other.x, other.y, other.z
        # fmt: off
        y1z2 = y1 * z2              # Y1Z2 = Y1*Z2
        x1z2 = x1 * z2              # X1Z2 = X1*Z2
        z1z2 = z1 * z2              # Z1Z2 = Z1*Z2
        u = y2 * z1 - y1z2          # u = Y2*Z1-Y1Z2
        v = x2 * z1 - x1z2          # v = X2*Z1-X1Z2
        # fmt: on
        if v.isZero():
            # Equal x coordinates. The points are either equal, which needs
            # the tangent, or opposite, which sum to the identity.
            if u.isZero():
                return self._double()
            return self.curve.identity()
        # fmt: off
        uu = u * u                  # uu = u^2
        vv = v * v                  # vv = v^2
        vvv = v * vv                # vvv = v*vv
        r = vv * x1z2               # R = vv*X1Z2
        a = uu * z1z2 - vvv - 2 * r  # A = uu*Z1Z2-vvv-2*R
        x3 = v * a                  # X3 = v*A
        y3 = u * (r - a) - vvv * y1z2  # Y3 = u*(R-A)-vvv*Y1Z2
        z3 = vvv * z1z2             # Z3 = vvv*Z1Z2
        # fmt: on
        return self.curve.newPoint(x3, y3, z3)

    def _double(self):
        """
        _double doubles a point that is not the identity.
        """
        x1, y1, z1 = self.x, self.y, self.z
        if y1.isZero():
            # Points of order two have a vertical tangent.
            return self.curve.identity()
        # dbl-2007-bl, 5M + 6S + 1*a.
        # fmt: off
        xx = x1 * x1                # XX = X1^2
        zz = z1 * z1                # ZZ = Z1^2
        w = self.curve.a * zz + 3 * xx  # w = a*ZZ+3*XX
        s = 2 * y1 * z1             # s = 2*Y1*Z1
        ss = s * s                  # ss = s^2
        sss = s * ss                # sss = s*ss
        r = y1 * s                  # R = Y1*s
        rr = r * r                  # RR = R^2
        b = (x1 + r) ** 2 - xx - rr  # B = (X1+R)^2-XX-RR
        h = w * w - 2 * b           # h = w^2-2*B
        x3 = h * s                  # X3 = h*s
        y3 = w * (b - h) - 2 * rr   # Y3 = w*(B-h)-2*RR
        z3 = sss                    # Z3 = sss
        # fmt: on
        return self.curve.newPoint(x3, y3, z3)
