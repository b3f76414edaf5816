from .curve import Curve, Params  # noqa: F401
from .point import Point  # noqa: F401
