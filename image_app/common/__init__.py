from .constants import *
from .utils import normalise_protocol, parse_dimension, preview


_MANUAL_EXPORTS = {
    "normalise_protocol",
    "parse_dimension",
    "preview",
}

_UPPER_CASE_EXPORTS = {
    name
    for name in globals()
    if name.isupper() and not name.startswith("_")
}

__all__ = sorted(_MANUAL_EXPORTS | _UPPER_CASE_EXPORTS)
