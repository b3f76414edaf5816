"""
Copyright (c) 2020, the tinyecc developers
See LICENSE for details

Parameter tables for the named curves, and a registry to look them up.

References:
  [FIPS186] Digital Signature Standard, appendix D
    https://doi.org/10.6028/NIST.FIPS.186-4

  [SEC2] Recommended Elliptic Curve Domain Parameters
    https://www.secg.org/sec2-v2.pdf

  [RFC7748] Elliptic Curves for Security
    https://www.rfc-editor.org/rfc/rfc7748

  [RFC8032] Edwards-Curve Digital Signature Algorithm (EdDSA)
    https://www.rfc-editor.org/rfc/rfc8032
"""

import functools

from tinyecc import CurveParamsError, UnknownCurveError
from tinyecc import edwards, montgomery, weierstrass
from tinyecc.util import helpers


log = helpers.getLogger("INSTANCES")

"""
Models maps a model name, as used in table files, to the curve class and its
parameter table class.
"""
Models = {
    weierstrass.Params.model: (weierstrass.Curve, weierstrass.Params),
    montgomery.Params.model: (montgomery.Curve, montgomery.Params),
    edwards.Params.model: (edwards.Curve, edwards.Params),
}


@functools.lru_cache(maxsize=None)
def _materialize(params):
    curveClass, _ = Models[params.model]
    return curveClass.fromParams(params)


class CurveID:
    """
    CurveID identifies a curve by its parameter table. The curve is built the
    first time get is called and shared afterwards.
    """

    def __init__(self, params):
        """
        Args:
            params (Params): A parameter table of any of the curve models.
        """
        if getattr(params, "model", None) not in Models:
            raise CurveParamsError("unknown curve model for %r" % (params,))
        self.params = params

    @property
    def name(self):
        return self.params.name

    def get(self):
        """
        Get the curve.

        Returns:
            EllipticCurve: The curve.
        """
        return _materialize(self.params)

    def __eq__(self, other):
        return isinstance(other, CurveID) and other.params == self.params

    def __hash__(self):
        return hash(self.params)

    def __repr__(self):
        return "CurveID(%s)" % self.params.name


P256 = CurveID(
    weierstrass.Params(
        name="P-256",
        p="0xffffffff00000001000000000000000000000000ffffffffffffffffffffffff",
        a="-3",
        b="41058363725152142129326129780047268409114441015993725554835256314039467401291",
        r="0xffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551",
        h="1",
        gx="0x6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296",
        gy="0x4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5",
    )
)

P384 = CurveID(
    weierstrass.Params(
        name="P-384",
        p="0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffeffffffff0000000000000000ffffffff",
        a="-3",
        b="27580193559959705877849011840389048093056905856361568521428707301988689241309860865136260764883745107765439761230575",
        r="0xffffffffffffffffffffffffffffffffffffffffffffffffc7634d81f4372ddf581a0db248b0a77aecec196accc52973",
        h="1",
        gx="0xaa87ca22be8b05378eb1c71ef320ad746e1d3b628ba79b9859f741e082542a385502f25dbf55296c3a545e3872760ab7",
        gy="0x3617de4a96262c6f5d9e98bf9292dc29f8f41dbd289a147ce9da3113b5f0b8c00a60b1ce1d7e819d7a431d7c90ea0e5f",
    )
)

P521 = CurveID(
    weierstrass.Params(
        name="P-521",
        p="0x1ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff",
        a="-3",
        b="1093849038073734274511112390766805569936207598951683748994586394495953116150735016013708737573759623248592132296706313309438452531591012912142327488478985984",
        r="6864797660130609714981900799081393217269435300143305409394463459185543183397655394245057746333217197532963996371363321113864768612440380340372808892707005449",
        h="1",
        gx="2661740802050217063228768716723360960729859168756973147706671368418802944996427808491545080627771902352094241225065558662157113545570916814161637315895999846",
        gy="3757180025770020463545507224491183603594455134769762486694567779615544477440556316691234405012945539562144444537289428522585666729196580810124344277578376784",
    )
)

SECP256K1 = CurveID(
    weierstrass.Params(
        name="secp256k1",
        p="0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F",
        a="0",
        b="7",
        r="0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141",
        h="1",
        gx="0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798",
        gy="0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8",
    )
)

CURVE25519 = CurveID(
    montgomery.Params(
        name="Curve25519",
        p="0x7fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffed",
        a="486662",
        b="1",
        s="1",
        r="0x1000000000000000000000000000000014def9dea2f79cd65812631a5cf5d3ed",
        h="8",
        gx="9",
        gy="0x20ae19a1b8a086b4e01edd2c7748d14c923d4d7e6d7c61b229e9c5a27eced3d9",
    )
)

CURVE448 = CurveID(
    montgomery.Params(
        name="Curve448",
        p="0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffeffffffffffffffffffffffffffffffffffffffffffffffffffffffff",
        a="156326",
        b="1",
        s="1",
        r="181709681073901722637330951972001133588410340171829515070372549795146003961539585716195755291692375963310293709091662304773755859649779",
        h="4",
        gx="5",
        gy="0x7d235d1295f5b1f66c98ab6e58326fcecbae5d34f55545d060f75dc28df3f6edb8027e2346430d211312c4b150677af76fd7223d457b5b1a",
    )
)

EDWARDS25519 = CurveID(
    edwards.Params(
        name="Edwards25519",
        p="0x7fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffed",
        a="-1",
        d="0x52036cee2b6ffe738cc740797779e89800700a4d4141d8ab75eb4dca135978a3",
        r="0x1000000000000000000000000000000014def9dea2f79cd65812631a5cf5d3ed",
        h="8",
        gx="0x216936D3CD6E53FEC0A4E231FDD6DC5C692CC7609525A7B2C9562D608F25D51A",
        gy="0x6666666666666666666666666666666666666666666666666666666666666658",
    )
)

EDWARDS448 = CurveID(
    edwards.Params(
        name="Edwards448",
        p="0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffeffffffffffffffffffffffffffffffffffffffffffffffffffffffff",
        a="1",
        d="-39081",
        r="181709681073901722637330951972001133588410340171829515070372549795146003961539585716195755291692375963310293709091662304773755859649779",
        h="4",
        gx="0x4f1970c66bed0ded221d15a622bf36da9e146570470f1767ea6de324a3d3a46412ae1af72ab66511433b80e18b00938e2626a82bc70cc05e",
        gy="0x693f46716eb6bc248876203756c9c7624bea73736ca3984087789c1e05a0c2d73ad3ff1ce67c39c4fdbd132c4ed7c8ad9808795bf230fa14",
    )
)


def normalizeName(name):
    """
    Lower-case the name and drop separators, so that "P-256", "p256" and
    "P_256" are the same curve.

    Args:
        name (str): The raw curve name.

    Returns:
        str: The normalized name.
    """
    return name.lower().replace("-", "").replace("_", "")


the_curves = {}


def registerParams(params):
    """
    Register a parameter table under its name. A table already registered
    under the same name is replaced.

    Args:
        params (Params): The table.

    Returns:
        CurveID: The registered curve.
    """
    curveID = params if isinstance(params, CurveID) else CurveID(params)
    key = normalizeName(curveID.name)
    if key in the_curves and the_curves[key] != curveID:
        log.warning(f"replacing curve parameters for {curveID.name}")
    the_curves[key] = curveID
    return curveID


for _curveID in (
    P256,
    P384,
    P521,
    SECP256K1,
    CURVE25519,
    CURVE448,
    EDWARDS25519,
    EDWARDS448,
):
    registerParams(_curveID)


def getCurveID(name):
    """
    Get the registered curve by name.

    Args:
        name (str): The curve name. Case and separators are ignored.

    Returns:
        CurveID: The curve.
    """
    try:
        return the_curves[normalizeName(name)]
    except KeyError:
        raise UnknownCurveError(f"unrecognized curve name {name}")


def getCurve(name):
    """
    Get the curve for the registered name.

    Args:
        name (str): The curve name. Case and separators are ignored.

    Returns:
        EllipticCurve: The curve.
    """
    return getCurveID(name).get()


def parseParams(obj):
    """
    Build a parameter table from its JSON form. The "model" key selects the
    table type. Numbers may be given as JSON integers or as numeral strings.

    Args:
        obj (dict): The decoded JSON object.

    Returns:
        Params: The parameter table.
    """
    if not isinstance(obj, dict):
        raise CurveParamsError(
            f"curve table must be an object, got {type(obj).__name__}"
        )
    obj = dict(obj)
    model = obj.pop("model", None)
    if model not in Models:
        raise CurveParamsError(f"unknown curve model {model!r}")
    _, paramsClass = Models[model]
    try:
        return paramsClass(**{k: str(v) for k, v in obj.items()})
    except TypeError as e:
        raise CurveParamsError(f"malformed {model} curve table: {e}")


def loadParamsFile(path):
    """
    Load a JSON file holding a list of curve tables and register each of
    them. Every curve is built once, so an inconsistent table is reported
    here rather than at first use.

    Args:
        path (str): The file path.

    Returns:
        list(CurveID): The registered curves.
    """
    tables = helpers.loadJSON(path)
    if isinstance(tables, dict):
        tables = [tables]
    curveIDs = []
    for obj in tables:
        curveID = CurveID(parseParams(obj))
        curveID.get()
        curveIDs.append(registerParams(curveID))
    log.info(f"loaded {len(curveIDs)} curve tables from {path}")
    return curveIDs
