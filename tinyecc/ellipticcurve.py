"""
Copyright (c) 2020, the tinyecc developers
See LICENSE for details

The contract shared by every curve model, and the point type built on it.

Points are stored in homogeneous projective coordinates (X:Y:Z), with the
affine point being (X/Z, Y/Z). Points are only ever created by a curve's
newPoint, which checks the curve equation, so every Point in existence is on
its curve.

Points serialize with the tagged format of [SEC1] section 2.3.3:

  Identity:
    <0x00>
  Compressed:
    <0x02 | sgn0(y)><X coordinate>
  Uncompressed:
    <0x04><X coordinate><Y coordinate>

Coordinates are big-endian and exactly sizeBytes() of the field long. The
identity has only the single byte encoding, even on models where it has affine
coordinates.

References:
  [SEC1] Elliptic Curve Cryptography
    https://www.secg.org/sec1-v2.pdf
"""

from tinyecc import (
    CurveParamsError,
    DecodeError,
    EccError,
    GroupMismatchError,
    InvalidCoordinateError,
    InvalidLengthError,
    InvalidPointError,
    InvalidTagError,
    NonResidueError,
)
from tinyecc import rando
from tinyecc.primefield import PrimeField, parseInt
from tinyecc.scalar import Scalar
from tinyecc.util import helpers
from tinyecc.util.encode import ByteArray, decodeBA, intFromBytes


TAG_IDENTITY = 0x00
TAG_COMPRESSED = 0x02  # 0x02 | sgn0(y), then the x coordinate
TAG_UNCOMPRESSED = 0x04  # 0x04, then the x and y coordinates

log = helpers.getLogger("ECC")


def readTable(params, *keys):
    """
    readTable parses the numerals of a curve parameter table.

    Args:
        params (dataclass): The table. Must have a "p" attribute.
        *keys (str): The attribute names to parse as integers.

    Returns:
        PrimeField: The field built from p.
        list(int): The parsed values, in the order of keys.

    Raises:
        CurveParamsError: A value is missing or malformed, or the group order
            or cofactor is not positive.
    """
    try:
        f = PrimeField(parseInt(params.p))
        vals = [parseInt(getattr(params, k)) for k in keys]
    except (AttributeError, TypeError, ValueError, EccError) as e:
        raise CurveParamsError(
            "malformed parameter table %r: %s" % (getattr(params, "name", ""), e)
        ) from e
    for k, v in zip(keys, vals):
        if k in ("r", "h") and v <= 0:
            raise CurveParamsError("%s must be positive, got %d" % (k, v))
    return f, vals


class EllipticCurve:
    """
    EllipticCurve is the capability set of every curve model. Subclasses
    provide the curve equation, the identity test, the y^2 recovery used by
    point decompression and the point class implementing the group law.
    """

    model = ""
    pointClass = None

    def __init__(self, f, r, h, gx, gy, name=""):
        """
        Args:
            f (PrimeField): The base field.
            r (int): The prime order of the generator's subgroup.
            h (int): The cofactor.
            gx (FieldElt): Affine x coordinate of the generator.
            gy (FieldElt): Affine y coordinate of the generator.
            name (str): optional. A name for diagnostics.
        """
        self._f = f
        self._r = r
        self._h = h
        self._gx = gx
        self._gy = gy
        self.name = name
        self._identity = self.trustedPoint(*self.identityCoordinates())
        self._generator = self.trustedPoint(gx, gy, f.one())

    # Read-only, the curve is shared by every user of its table.

    @property
    def f(self):
        return self._f

    @property
    def r(self):
        return self._r

    @property
    def h(self):
        return self._h

    @property
    def gx(self):
        return self._gx

    @property
    def gy(self):
        return self._gy

    def coefficients(self):
        """
        coefficients are the model's equation coefficients, which together
        with the field define equality between curves.

        Returns:
            tuple(FieldElt): The coefficients.
        """
        raise NotImplementedError

    def identityCoordinates(self):
        """
        identityCoordinates is the projective representation of the neutral
        element for the model.

        Returns:
            tuple(FieldElt): (X, Y, Z).
        """
        raise NotImplementedError

    def equation(self, x, y, z):
        """
        equation evaluates the projective curve equation.

        Returns:
            bool: True if (x:y:z) satisfies the equation.
        """
        raise NotImplementedError

    def isIdentity(self, p):
        raise NotImplementedError

    def solveY2(self, x):
        """
        solveY2 computes y^2 for the affine x coordinate from the curve
        equation.

        Returns:
            FieldElt: y^2.
        """
        raise NotImplementedError

    def newPoint(self, x, y, z=None):
        """
        newPoint creates a point from its coordinates after checking it is on
        the curve.

        Args:
            x (FieldElt or int): X coordinate.
            y (FieldElt or int): Y coordinate.
            z (FieldElt or int): optional. Z coordinate, default 1 which makes
                (x, y) affine.

        Returns:
            Point: The point.

        Raises:
            InvalidPointError: The coordinates do not satisfy the equation.
        """
        f = self.f
        z = f.one() if z is None else f.elt(z)
        pt = self.pointClass(self, f.elt(x), f.elt(y), z)
        if not self.isOnCurve(pt):
            raise InvalidPointError("not valid point on %s" % self.describe())
        return pt

    def trustedPoint(self, x, y, z):
        """
        trustedPoint creates a point from coordinates that come from a
        parameter table rather than from outside input. A failure indicates a
        broken table and raises CurveParamsError.
        """
        try:
            return self.newPoint(x, y, z)
        except InvalidPointError as e:
            raise CurveParamsError(
                "%s: parameter table point is not on the curve" % self.describe()
            ) from e

    def newScalar(self, k):
        """
        newScalar reduces k modulo the group order.

        Args:
            k (int or Scalar): The integer. A Scalar must already belong to
                this curve's group.

        Returns:
            Scalar: The scalar.
        """
        if isinstance(k, Scalar):
            if k.r != self.r:
                raise GroupMismatchError("scalar belongs to a different group")
            return k
        return Scalar(int(k), self.r)

    def identity(self):
        return self._identity

    def isOnCurve(self, p):
        """
        isOnCurve checks that the point belongs to this curve and satisfies its
        equation. The all-zero triple is not a projective point.
        """
        if p.curve != self:
            return False
        if p.x.isZero() and p.y.isZero() and p.z.isZero():
            return False
        return self.equation(p.x, p.y, p.z)

    def getOrder(self):
        return self.r

    def getCofactor(self):
        return self.h

    def getGenerator(self):
        return self._generator

    def getField(self):
        return self.f

    def randomScalar(self):
        """
        randomScalar returns a uniformly random non-zero scalar.
        """
        return rando.randScalar(self)

    def randomPoint(self):
        """
        randomPoint returns a random multiple of the generator.
        """
        return self._generator.mul(self.randomScalar())

    def encode(self, p, compress):
        """
        encode serializes the point in the tagged format described at the top
        of this module.

        Args:
            p (Point): The point. Must belong to this curve.
            compress (bool): Whether to omit the y coordinate.

        Returns:
            ByteArray: The encoding.
        """
        if p.curve != self:
            raise GroupMismatchError("point belongs to a different curve")
        if self.isIdentity(p):
            return ByteArray(bytearray([TAG_IDENTITY]))
        x, y = p.toAffine()
        if compress:
            return ByteArray(bytearray([TAG_COMPRESSED | y.sgn0()])) + x.bytes()
        return ByteArray(bytearray([TAG_UNCOMPRESSED])) + x.bytes() + y.bytes()

    def decode(self, buf):
        """
        decode parses a point encoded with encode. The checks are run in a
        fixed order (length, coordinate range, tag, curve membership) and the
        first failure is raised.

        Args:
            buf (bytes-like or str): The encoding. Strings are hex.

        Returns:
            Point: The decoded point.

        Raises:
            InvalidLengthError, InvalidCoordinateError, InvalidTagError,
            InvalidPointError: all subclasses of DecodeError.
        """
        try:
            return self._decode(decodeBA(buf))
        except DecodeError as e:
            log.debug("%s: point decoding failed: %s", self.describe(), e)
            raise

    def _decode(self, b):
        size = self.f.sizeBytes()
        bLen = len(b)
        if bLen not in (1, size + 1, 2 * size + 1):
            raise InvalidLengthError("wrong input buffer size %d" % bLen)
        tag = b[0]
        p = self.f.modulus()
        xVal = intFromBytes(b[1 : size + 1])
        if xVal >= p:
            raise InvalidCoordinateError("invalid x coordinate")

        if tag == TAG_IDENTITY:
            if bLen != 1:
                raise InvalidLengthError(
                    "point at infinity should just be a single zero byte"
                )
            return self.identity()

        if tag == TAG_UNCOMPRESSED:
            if bLen != 2 * size + 1:
                raise InvalidLengthError(
                    "invalid length %d for uncompressed point" % bLen
                )
            yVal = intFromBytes(b[size + 1 :])
            if yVal >= p:
                raise InvalidCoordinateError("invalid y coordinate")
            return self._affinePoint(xVal, yVal)

        if tag in (TAG_COMPRESSED, TAG_COMPRESSED | 1):
            if bLen != size + 1:
                raise InvalidLengthError(
                    "invalid length %d for compressed point" % bLen
                )
            x = self.f.elt(xVal)
            try:
                y = self.solveY2(x).sqrt()
            except (NonResidueError, ZeroDivisionError) as e:
                raise InvalidPointError("no point with x coordinate %s" % x) from e
            if y.sgn0() != tag & 1:
                y = -y
            return self._affinePoint(x, y)

        raise InvalidTagError("invalid tag 0x%02x" % tag)

    def _affinePoint(self, x, y):
        # The Edwards identity has affine coordinates, but its only encoding is
        # the single zero byte.
        pt = self.newPoint(x, y)
        if self.isIdentity(pt):
            raise InvalidPointError("the identity must be encoded as 0x00")
        return pt

    def describe(self):
        return self.name or "%s curve" % self.model

    def __eq__(self, other):
        if not isinstance(other, EllipticCurve):
            return NotImplemented
        return (
            self.model == other.model
            and self.f == other.f
            and self.coefficients() == other.coefficients()
        )

    def __hash__(self):
        return hash((self.model, self.f, self.coefficients()))

    def __repr__(self):
        return "<%s>" % self.describe()


class Point:
    """
    Point is a point on an EllipticCurve. Points are immutable, every
    operation returns a new Point. Subclasses implement _add, _double and
    _neg with the model's projective formulas.
    """

    __slots__ = ("_curve", "_x", "_y", "_z")

    def __init__(self, curve, x, y, z):
        """
        Use EllipticCurve.newPoint instead, which validates the coordinates.
        """
        self._curve = curve
        self._x = x
        self._y = y
        self._z = z

    @property
    def curve(self):
        return self._curve

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def z(self):
        return self._z

    def _add(self, other):
        raise NotImplementedError

    def _double(self):
        raise NotImplementedError

    def _neg(self):
        raise NotImplementedError

    def _checkCurve(self, other):
        if not isinstance(other, Point) or other.curve != self.curve:
            raise GroupMismatchError("points belong to different curves")

    def isIdentity(self):
        return self.curve.isIdentity(self)

    def add(self, other):
        """
        add returns self + other. The identity is neutral, adding it returns
        the other operand unchanged.
        """
        self._checkCurve(other)
        if self.isIdentity():
            return other
        if other.isIdentity():
            return self
        return self._add(other)

    def double(self):
        """
        double returns 2 * self.
        """
        if self.isIdentity():
            return self
        return self._double()

    def neg(self):
        """
        neg returns the additive inverse.
        """
        return self._neg()

    def sub(self, other):
        """
        sub returns self - other.
        """
        self._checkCurve(other)
        return self.add(other.neg())

    def mul(self, k):
        """
        mul returns k * self.

        Args:
            k (Scalar or int): The multiplier. A Scalar must be reduced by the
                order of this point's curve. An int is reduced first.

        Returns:
            Point: The product.
        """
        if isinstance(k, Scalar):
            if k.r != self.curve.r:
                raise GroupMismatchError("scalar and point belong to different groups")
        elif isinstance(k, int):
            k = self.curve.newScalar(k)
        else:
            raise TypeError("cannot multiply a point by %s" % type(k).__name__)
        return self.ladder(k.iterLR())

    def ladder(self, bits):
        """
        ladder is the Montgomery ladder over the bits, most significant first.
        Each bit costs one addition and one doubling whatever its value, and
        R1 - R0 == self holds after every step.

        Args:
            bits (iterable(bool)): The multiplier's bits, MSB first.

        Returns:
            Point: The product.
        """
        r0, r1 = self.curve.identity(), self
        for bit in bits:
            if bit:
                r0, r1 = r0.add(r1), r1.double()
            else:
                r0, r1 = r0.double(), r0.add(r1)
        return r0

    def mulInt(self, n):
        """
        mulInt multiplies by the non-negative integer n without reducing it
        modulo the group order. Needed for cofactor and subgroup checks.
        """
        if n < 0:
            return self.neg().mulInt(-n)
        return self.ladder((n >> i) & 1 == 1 for i in range(n.bit_length() - 1, -1, -1))

    def clearCofactor(self):
        """
        clearCofactor maps the point into the prime order subgroup.
        """
        return self.mulInt(self.curve.h)

    def isTorsionFree(self):
        """
        isTorsionFree is True for points in the subgroup generated by the
        generator.
        """
        return self.mulInt(self.curve.r).isIdentity()

    def toAffine(self):
        """
        toAffine converts to affine coordinates.

        Returns:
            tuple(FieldElt): (x, y).
        """
        if self.z.isZero():
            raise EccError("the point at infinity has no affine coordinates")
        zInv = self.z.inverse()
        return self.x * zInv, self.y * zInv

    def encode(self, compress=False):
        return self.curve.encode(self, compress)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        if other.curve != self.curve:
            return False
        # Projective coordinates are equivalent up to a scale factor.
        return (
            self.x * other.z == other.x * self.z
            and self.y * other.z == other.y * self.z
        )

    __hash__ = None

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.sub(other)

    def __neg__(self):
        return self.neg()

    def __mul__(self, k):
        if not isinstance(k, (Scalar, int)):
            return NotImplemented
        return self.mul(k)

    __rmul__ = __mul__

    def __repr__(self):
        return "%s(%s:%s:%s)" % (type(self).__name__, self.x, self.y, self.z)
