# -*- coding: utf-8 -*-
# (c) Nelen & Schuurmans

from .base.application.paginated_collection import *  # NOQA
from .base.domain.exceptions import *  # NOQA
from .base.domain.pagination import *  # NOQA
from .base.domain.types import *  # NOQA

# fmt: off
__version__ = '0.0.1.dev0'
# fmt: on
