"""
Copyright (c) 2020, the tinyecc developers
See LICENSE for details
"""

import pytest

from tinyecc import CurveParamsError, InvalidPointError
from tinyecc import instances, weierstrass
from tinyecc.primefield import PrimeField
from tinyecc.util.encode import ByteArray


def fromHex(curve, x, y):
    return curve.newPoint(int(x, 16), int(y, 16))


@pytest.fixture
def secp256k1():
    return instances.SECP256K1.get()


def test_multiples(secp256k1):
    curve = secp256k1
    g = curve.getGenerator()
    g2 = fromHex(
        curve,
        "c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5",
        "1ae168fea63dc339a3c58419466ceaeef7f632653266d0e1236431a950cfe52a",
    )
    g3 = fromHex(
        curve,
        "f9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9",
        "388f7b0f632de8140fe337e62a37f3566500a99934c2231b6cb9fd7584b8e672",
    )
    assert g.double() == g2
    assert g + g == g2
    assert g * 2 == g2
    assert g2 + g == g3
    assert g * 3 == g3
    assert g3 - g == g2


def test_add(secp256k1):
    curve = secp256k1
    p1 = fromHex(
        curve,
        "34f9460f0e4f08393d192b3c5133a6ba099aa0ad9fd54ebccfacdfa239ff49c6",
        "0b71ea9bd730fd8923f6d25a7a91e7dd7728a960686cb5a901bb419e0f2ca232",
    )
    p2 = fromHex(
        curve,
        "d74bf844b0862475103d96a611cf2d898447e288d34b360bc885cb8ce7c00575",
        "131c670d414c4546b88ac3ff664611b1c38ceb1c21d76369d7a7a0969d61d97d",
    )
    negP1 = fromHex(
        curve,
        "34f9460f0e4f08393d192b3c5133a6ba099aa0ad9fd54ebccfacdfa239ff49c6",
        "f48e156428cf0276dc092da5856e182288d7569f97934a56fe44be60f0d359fd",
    )
    tests = [
        # Different x values.
        (
            p1,
            p2,
            "fd5b88c21d3143518d522cd2796f3d726793c88b3e05636bc829448e053fed69",
            "21cf4f6a5be5ff6380234c50424a970b1f7e718f5eb58f68198c108d642a137f",
        ),
        # Same point.
        (
            p1,
            p1,
            "59477d88ae64a104dbb8d31ec4ce2d91b2fe50fa628fb6a064e22582196b365b",
            "938dc8c0f13d1e75c987cb1a220501bd614b0d3dd9eb5c639847e1240216e3b6",
        ),
    ]
    for a, b, x, y in tests:
        assert a + b == fromHex(curve, x, y)
    # Same x, opposite y.
    assert (p1 + negP1).isIdentity()
    assert -p1 == negP1


def test_scalarMult(secp256k1):
    curve = secp256k1
    tests = [
        (
            "AA5E28D6A97A2479A65527F7290311A3624D4CC0FA1578598EE3C2613BF99522",
            "34F9460F0E4F08393D192B3C5133A6BA099AA0AD9FD54EBCCFACDFA239FF49C6",
            "B71EA9BD730FD8923F6D25A7A91E7DD7728A960686CB5A901BB419E0F2CA232",
        ),
        (
            "7E2B897B8CEBC6361663AD410835639826D590F393D90A9538881735256DFAE3",
            "D74BF844B0862475103D96A611CF2D898447E288D34B360BC885CB8CE7C00575",
            "131C670D414C4546B88AC3FF664611B1C38CEB1C21D76369D7A7A0969D61D97D",
        ),
        (
            "6461E6DF0FE7DFD05329F41BF771B86578143D4DD1F7866FB4CA7E97C5FA945D",
            "E8AECC370AEDD953483719A116711963CE201AC3EB21D3F3257BB48668C6A72F",
            "C25CAF2F0EBA1DDB2F0F3F47866299EF907867B7D27E95B3873BF98397B24EE1",
        ),
        (
            "376A3A2CDCD12581EFFF13EE4AD44C4044B8A0524C42422A7E1E181E4DEECCEC",
            "14890E61FCD4B0BD92E5B36C81372CA6FED471EF3AA60A3E415EE4FE987DABA1",
            "297B858D9F752AB42D3BCA67EE0EB6DCD1C2B7B0DBE23397E66ADC272263F982",
        ),
    ]
    g = curve.getGenerator()
    for k, x, y in tests:
        assert g * curve.newScalar(int(k, 16)) == fromHex(curve, x, y)

    # From btcd issue #709.
    p = fromHex(
        curve,
        "000000000000000000000000000000000000000000000000000000000000002c",
        "420e7a99bba18a9d3952597510fd2b6728cfeafc21a4e73951091d4d8ddbe94e",
    )
    k = int("a2e8ba2e8ba2e8ba2e8ba2e8ba2e8ba219b51835b55cc30ebfe2f6599bc56f58", 16)
    assert p * k == fromHex(
        curve,
        "a2112dcdfbcd10ae1133a358de7b82db68e0a3eb4b492cc8268d1e7118c98788",
        "27fc7463b7bb3c5f98ecf2c84a6272bb1681ed553d92c69f2dfe25a9f9fd3836",
    )


def test_p256():
    curve = instances.P256.get()
    g2 = fromHex(
        curve,
        "7cf27b188d034f7e8a52380304b51ac3c08969e277f21b35a60b48fc47669978",
        "07775510db8ed040293d9ac69f7430dbba7dade63ce982299e04b79d227873d1",
    )
    assert curve.getGenerator().double() == g2
    assert curve.a == -3


def test_sec1(secp256k1):
    """
    The encodings are the SEC1 public key formats.
    """
    curve = secp256k1
    g = curve.getGenerator()
    assert g.encode() == ByteArray(
        "04"
        "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
        "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
    )
    assert g.encode(compress=True) == ByteArray(
        "02" "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    )
    assert (-g).encode(compress=True)[0] == 0x03


def test_projective(secp256k1):
    curve = secp256k1
    o = curve.identity()
    assert o.x == 0 and o.y == 1 and o.z == 0
    # Any (0:Y:0) is the identity.
    assert curve.newPoint(0, 5, 0) == o
    assert curve.newPoint(0, 5, 0).isIdentity()
    with pytest.raises(InvalidPointError):
        curve.newPoint(1, 5, 0)


def test_readOnly(secp256k1):
    with pytest.raises(AttributeError):
        secp256k1.a = 1
    with pytest.raises(AttributeError):
        secp256k1.b = 1
    assert secp256k1.b == 7


def test_fromParams():
    params = instances.P256.params
    curve = weierstrass.Curve.fromParams(params)
    assert curve == instances.P256.get()
    assert curve is not instances.P256.get()
    assert curve.name == "P-256"
    assert str(curve).startswith("Weierstrass Curve y^2=x^3+ax+b\na: 0x")
    assert "\nb: 0x5ac635d8" in str(curve)

    # The generator must be on the curve.
    bad = weierstrass.Params(**{**params.__dict__, "gy": "1"})
    with pytest.raises(CurveParamsError):
        weierstrass.Curve.fromParams(bad)
    # Malformed numerals.
    bad = weierstrass.Params(**{**params.__dict__, "b": "0xnope"})
    with pytest.raises(CurveParamsError):
        weierstrass.Curve.fromParams(bad)
    # Non-positive order.
    bad = weierstrass.Params(**{**params.__dict__, "r": "0"})
    with pytest.raises(CurveParamsError):
        weierstrass.Curve.fromParams(bad)
    # Even modulus.
    bad = weierstrass.Params(**{**params.__dict__, "p": "0x10"})
    with pytest.raises(CurveParamsError):
        weierstrass.Curve.fromParams(bad)


def test_singular():
    with pytest.raises(CurveParamsError):
        weierstrass.Curve(PrimeField(13), 0, 0, 7, 1, 0, 0)
