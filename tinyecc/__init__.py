"""
Copyright (c) 2020, the tinyecc developers
See LICENSE for details
"""


class EccError(Exception):
    pass


class DecodeError(EccError):
    """
    Base class for failures parsing an externally supplied point encoding.
    """

    pass


class InvalidLengthError(DecodeError):
    pass


class InvalidCoordinateError(DecodeError):
    pass


class InvalidTagError(DecodeError):
    pass


class InvalidPointError(DecodeError):
    """
    The coordinates do not satisfy the curve equation. Raised by every point
    constructor, so it also reaches callers building points from their own
    coordinates.
    """

    pass


class GroupMismatchError(EccError):
    pass


class FieldMismatchError(EccError):
    pass


class NonResidueError(EccError):
    pass


class CurveParamsError(EccError):
    """
    A curve parameter table is inconsistent, e.g. its generator is not on the
    curve. This is a programming error, not bad input.
    """

    pass


class UnknownCurveError(EccError):
    pass


def version():
    """
    The installed version of the tinyecc distribution.

    Returns:
        str: The version string, or "0.0.0" when running from a source tree
            that was never installed.
    """
    from importlib import metadata

    try:
        return metadata.version("tinyecc")
    except metadata.PackageNotFoundError:
        return "0.0.0"
