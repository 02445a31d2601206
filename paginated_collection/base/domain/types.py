# (c) Nelen & Schuurmans

from typing import Any
from typing import Union

from pydantic import StrictFloat
from pydantic import StrictInt

__all__ = ["Json", "Number", "PageToken"]


Json = dict[str, Any]
# an integer offset, a cursor string, an opaque key: whatever the backend uses
PageToken = Any
# bool is not a number here
Number = Union[StrictInt, StrictFloat]
