"""
Copyright (c) 2020, the tinyecc developers
See LICENSE for details

Group law for Montgomery curves b*y^2 = x^3 + a*x^2 + x in homogeneous
projective coordinates.

The formulas come from the affine chord and tangent rule

  x3 = b*l^2 - a - x1 - x2
  y3 = l*(x1 - x3) - y1

with l = (y2 - y1) / (x2 - x1) for addition and
l = (3*x1^2 + 2*a*x1 + 1) / (2*b*y1) for doubling, with the denominators
cleared in the same way as the short Weierstrass add-1998-cmo-2 and
dbl-2007-bl formulas.
"""

from tinyecc import ellipticcurve


class Point(ellipticcurve.Point):
    """
    Point on a Montgomery curve, with full (x, y) coordinates. The identity is
    (0:1:0).
    """

    __slots__ = ()

    def _neg(self):
        return self.curve.newPoint(self.x, -self.y, self.z)

    def _add(self, other):
        """
        _add adds two points that are not the identity.
        """
        a, b = self.curve.a, self.curve.b
        x1, y1, z1 = self.x, self.y, self.z
        x2, y2, z2 = other.x, other.y, other.z
        # fmt: off
        y1z2 = y1 * z2              # Y1Z2 = Y1*Z2
        x1z2 = x1 * z2              # X1Z2 = X1*Z2
        z1z2 = z1 * z2              # Z1Z2 = Z1*Z2
        u = y2 * z1 - y1z2          # u = Y2*Z1-Y1Z2, l = u/v
        v = x2 * z1 - x1z2          # v = X2*Z1-X1Z2
        # fmt: on
        if v.isZero():
            if u.isZero():
                return self._double()
            return self.curve.identity()
        # fmt: off
        uu = u * u                  # uu = u^2
        vv = v * v                  # vv = v^2
        vvv = v * vv                # vvv = v*vv
        r = vv * x1z2               # R = vv*X1Z2
        t = (b * uu - a * vv) * z1z2 - vvv - 2 * r  # A = (b*uu-a*vv)*Z1Z2-vvv-2*R
        x3 = v * t                  # X3 = v*A
        y3 = u * (r - t) - vvv * y1z2  # Y3 = u*(R-A)-vvv*Y1Z2
        z3 = vvv * z1z2             # Z3 = vvv*Z1Z2
        # fmt: on
        return self.curve.newPoint(x3, y3, z3)

    def _double(self):
        """
        _double doubles a point that is not the identity.
        """
        a, b = self.curve.a, self.curve.b
        x1, y1, z1 = self.x, self.y, self.z
        if y1.isZero():
            # (0, 0) and any other point of order two.
            return self.curve.identity()
        # fmt: off
        xx = x1 * x1                # XX = X1^2
        zz = z1 * z1                # ZZ = Z1^2
        w = 3 * xx + 2 * a * x1 * z1 + zz  # w = 3*XX+2*a*X1*Z1+ZZ, l = w/s
        s = 2 * b * y1 * z1         # s = 2*b*Y1*Z1
        ss = s * s                  # ss = s^2
        sss = s * ss                # sss = s*ss
        t = 2 * b * x1 * y1 * s     # B = 2*b*X1*Y1*s
        h = b * w * w - a * ss - 2 * t  # h = b*w^2-a*ss-2*B
        x3 = h * s                  # X3 = h*s
        y3 = w * (t - h) - 2 * b * y1 * y1 * ss  # Y3 = w*(B-h)-2*b*Y1^2*ss
        z3 = sss                    # Z3 = sss
        # fmt: on
        return self.curve.newPoint(x3, y3, z3)
