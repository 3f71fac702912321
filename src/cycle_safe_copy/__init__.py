"""Public package surface for the cycle-safe-copy project."""

from .classify import Kind, classify
from .compare import first_difference, same_topology_copy
from .copy_arguments import copy_arguments
from .deep_copy import copy_into, deep_copy
from .errors import UnsupportedValueError
from .version import __version__
from .visited_cache import VisitedCache

__all__ = [
    "Kind",
    "UnsupportedValueError",
    "VisitedCache",
    "__version__",
    "classify",
    "copy_arguments",
    "copy_into",
    "deep_copy",
    "first_difference",
    "same_topology_copy",
]
