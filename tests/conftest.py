"""
Copyright (c) 2019, the tinyecc developers
See LICENSE for details
"""

import random

import pytest

from tinyecc import instances
from tinyecc.util import helpers


# Seed initialization is delegated to tests.
# random.seed(0)


@pytest.fixture
def randBytes():
    def _randBytes(low=0, high=50):
        return bytes(random.randint(0, 255) for _ in range(random.randint(low, high)))

    return _randBytes


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()


AllCurves = (
    instances.P256,
    instances.P384,
    instances.P521,
    instances.SECP256K1,
    instances.CURVE25519,
    instances.CURVE448,
    instances.EDWARDS25519,
    instances.EDWARDS448,
)


@pytest.fixture(params=AllCurves, ids=lambda curveID: curveID.name)
def anyCurve(request):
    return request.param.get()
