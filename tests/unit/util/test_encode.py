"""
Copyright (c) 2019-2020, the tinyecc developers
See LICENSE for details
"""

import pytest

from tinyecc import EccError
from tinyecc.util.encode import ByteArray, decodeBA, intFromBytes, intToBytes


class TestEncode:
    def test_ByteArray(self):
        makeA = lambda: ByteArray([0, 0, 255])
        makeB = lambda: ByteArray([0, 255, 0])
        zero = ByteArray([0, 0, 0])

        zero2 = ByteArray(zero)
        assert zero.b is not zero2.b
        assert zero == zero2

        zero2 = ByteArray(zero, copy=False)
        assert zero.b is zero2.b

        assert makeA() != makeB()
        assert not (makeA() == None)  # noqa
        assert makeA() != None  # noqa
        assert makeA() == "0000ff"
        assert makeA() == b"\x00\x00\xff"

        a = makeA()
        assert a[2] == 255
        assert isinstance(a[1:], ByteArray)
        assert a[1:] == bytearray([0, 255])

        assert makeA() + makeB() == "0000ff00ff00"
        assert len(makeA() + "ff") == 4
        assert makeA().int() == 255
        assert bytes(makeA()) == b"\x00\x00\xff"
        assert makeA().bytes() == b"\x00\x00\xff"
        assert makeA().hex() == "0000ff"
        assert repr(makeA()) == "ByteArray(0000ff)"
        assert list(makeA()) == [0, 0, 255]

        d = {makeA(): 1}
        assert d[ByteArray("0000ff")] == 1

    def test_length(self):
        assert ByteArray(1, length=4) == "00000001"
        assert ByteArray("ff", length=3) == "0000ff"
        assert ByteArray(0, length=2) == "0000"
        with pytest.raises(EccError):
            ByteArray(0x10000, length=2)
        with pytest.raises(EccError):
            ByteArray("ffffff", length=2)

    def test_ints(self):
        assert intToBytes(0) == bytearray([0])
        assert intToBytes(256) == bytearray([1, 0])
        assert intToBytes(1, length=3) == bytearray([0, 0, 1])
        with pytest.raises(EccError):
            intToBytes(-1)
        with pytest.raises(EccError):
            intToBytes(256, length=1)
        assert intFromBytes(b"") == 0
        assert intFromBytes(b"\x01\x00") == 256

    def test_decodeBA(self):
        assert decodeBA("0102") == bytearray([1, 2])
        assert decodeBA(b"\x01\x02") == bytearray([1, 2])
        assert decodeBA([1, 2]) == bytearray([1, 2])
        assert decodeBA(258) == bytearray([1, 2])
        ba = bytearray([1])
        assert decodeBA(ba) is ba
        assert decodeBA(ba, copy=True) is not ba
        with pytest.raises(TypeError):
            decodeBA(1.5)
