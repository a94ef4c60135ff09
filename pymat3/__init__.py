"""A fixed-size 3x3 matrix value type."""

# ruff: noqa: F401, F403

from ._version import __version__, version_info
from . import utils

from .linalg import *
from .utils import logger
from .utils.serialize import dump, dumps, load, loads
