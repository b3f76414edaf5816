"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The tinyecc developers
See LICENSE for details

References:
  [NSA]: Suite B Implementer's Guide to FIPS 186-3,
    A.2.1 Key Pair Generation Using Extra Random Bits
"""

import os

from tinyecc import EccError
from tinyecc.util.encode import intFromBytes


MinSeedBytes = 16  # 128 bits
MaxSeedBytes = 128  # 1024 bits

# Extra random bits beyond the size of the group order, which make the bias
# of the modular reduction negligible.
ExtraSeedBytes = 8


def checkSeedLength(length):
    """
    Check that seed length is correct.

    Args:
        length int: the seed length to be checked.

    Raises:
        EccError if length is not between MinSeedBytes and MaxSeedBytes
        included.
    """
    if length < MinSeedBytes or length > MaxSeedBytes:
        raise EccError(f"Invalid seed length {length}")


def generateSeed(length=MaxSeedBytes):
    """
    Generate a cryptographically-strong random seed.

    Returns:
        bytes: a random bytes object of the given length.

    Raises:
        EccError if length is not between MinSeedBytes and MaxSeedBytes
        included.
    """
    checkSeedLength(length)
    return os.urandom(length)


def randScalar(curve):
    """
    randScalar returns a random non-zero scalar for the curve, following the
    procedure from [NSA] A.2.1, which reduces a seed 64 bits longer than the
    order modulo (r - 1) and adds one.

    Args:
        curve (EllipticCurve): The curve.

    Returns:
        Scalar: A scalar in [1, r).
    """
    r = curve.getOrder()
    if r < 2:
        raise EccError("group order %d has no non-zero scalars" % r)
    length = max((r.bit_length() + 7) // 8 + ExtraSeedBytes, MinSeedBytes)
    k = intFromBytes(generateSeed(length))
    return curve.newScalar(k % (r - 1) + 1)
