# (c) Nelen & Schuurmans

from typing import Any

from pydantic import ValidationError
from pydantic_core import ErrorDetails

__all__ = [
    "BadRequest",
    "ContractViolation",
    "FetchRoutineRequired",
]


class FetchRoutineRequired(TypeError):
    def __init__(self, msg: str = "fetch routine required"):
        super().__init__(msg)


class BadRequest(Exception):
    def __init__(self, err_or_msg: ValidationError | str, loc: tuple[str, ...] = ()):
        self._internal_error = err_or_msg
        self.loc = loc
        super().__init__(err_or_msg)

    def errors(self) -> list[ErrorDetails]:
        if isinstance(self._internal_error, ValidationError):
            return self._internal_error.errors()
        return [
            ErrorDetails(
                type="value_error",
                msg=self._internal_error,
                loc=self.loc,
                input=None,
            )
        ]

    def __str__(self) -> str:
        error = self._internal_error
        if isinstance(error, ValidationError):
            details = error.errors()[0]
            loc = "'" + ",".join([str(x) for x in details["loc"]]) + "' "
            if loc == "'' ":
                loc = ""
            return f"validation error: {loc}{details['msg']}"
        loc = "'" + ",".join(self.loc) + "' " if self.loc else ""
        return f"validation error: {loc}{super().__str__()}"


class ContractViolation(Exception):
    def __init__(self, obj: Any = None):
        super().__init__(
            "the fetch routine needs to return a page-like object, "
            f"got {type(obj).__name__}"
        )
        self.obj = obj
