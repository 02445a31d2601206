from .exceptions import *  # NOQA
from .pagination import *  # NOQA
from .types import *  # NOQA
