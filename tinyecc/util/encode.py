"""
Copyright (c) 2020, Brian Stafford
Copyright (c) 2020, the tinyecc developers
See LICENSE for details

Byte buffer helpers used by the point and scalar codecs.
"""

from tinyecc import EccError


def intToBytes(i, length=None):
    """
    Encodes a non-negative integer to big-endian bytes.

    Args:
        i (int): The integer.
        length (int): optional. Left-pad the result with zeros to this many
            bytes. An integer that does not fit raises EccError.

    Returns:
        bytearray: The encoded integer.
    """
    if i < 0:
        raise EccError("cannot encode negative integer %d" % i)
    minLen = (i.bit_length() + 7) // 8
    if length is None:
        length = max(minLen, 1)
    elif minLen > length:
        raise EccError("integer needs %d bytes, only %d allowed" % (minLen, length))
    return bytearray(i.to_bytes(length, byteorder="big"))


def intFromBytes(b):
    """
    Decodes a big-endian unsigned integer.

    Args:
        b (bytes-like): The encoded integer.

    Returns:
        int: The decoded integer.
    """
    return int.from_bytes(b, "big")


def decodeBA(b, copy=False):
    """
    Decode into a bytearray.

    Args:
        b (str, bytes-like, ByteArray, int, list(int)): The value to decode to
            a bytearray. Strings are interpreted as hexadecimal. Integers are
            minimally encoded to an unsigned integer.

    Returns:
        bytearray: The decoded bytes.
    """
    if isinstance(b, ByteArray):
        return bytearray(b.b) if copy else b.b
    if isinstance(b, bytearray):
        return bytearray(b) if copy else b
    if isinstance(b, bytes):
        return bytearray(b)
    if isinstance(b, int):
        return intToBytes(b)
    if isinstance(b, str):
        return bytearray.fromhex(b)
    if hasattr(b, "__iter__"):
        return bytearray(b)
    raise TypeError("decodeBA: unknown type %s" % type(b))


class ByteArray:
    """
    ByteArray is a thin bytearray manager. Inputs of various types are decoded
    on the fly, so comparisons and concatenation work with bytes, hex strings
    and integers alike. An integer argument results in the shortest big-endian
    representation of that integer. Use the `length` keyword to get a
    zero-padded value of fixed width, which is how field elements are
    serialized.
    """

    def __init__(self, b=b"", copy=True, length=None):
        if length is not None and isinstance(b, int):
            self.b = intToBytes(b, length=length)
        elif length is not None:
            raw = decodeBA(b)
            if len(raw) > length:
                raise EccError("%d bytes do not fit in %d" % (len(raw), length))
            self.b = bytearray(length - len(raw)) + raw
        else:
            self.b = decodeBA(b, copy=copy)

    def __eq__(self, a):
        try:
            return bytearray.__eq__(self.b, decodeBA(a))
        except (TypeError, ValueError, EccError):
            return False

    def __ne__(self, a):
        return not self.__eq__(a)

    def __repr__(self):
        return "ByteArray(" + self.hex() + ")"

    def __len__(self):
        return len(self.b)

    def __add__(self, a):
        """Append the bytes and return a new ByteArray."""
        return ByteArray(self.b + decodeBA(a))

    def __getitem__(self, k):
        if isinstance(k, slice):
            return ByteArray(self.b[k.start : k.stop : k.step], copy=False)
        return self.b[k]

    def __iter__(self):
        return iter(self.b)

    def __bytes__(self):
        return bytes(self.b)

    def __hash__(self):
        """Enables ByteArray to be a dict key."""
        return hash(bytes(self.b))

    def hex(self):
        """
        A hexadecimal string representation of the bytes.

        Returns:
            str: The hex bytes.
        """
        return self.b.hex()

    def int(self):
        """The bytes as a big-endian integer."""
        return intFromBytes(self.b)

    def bytes(self):
        """The bytes as Python `bytes`."""
        return bytes(self.b)
