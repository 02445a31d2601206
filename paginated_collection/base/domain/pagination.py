# (c) Nelen & Schuurmans

from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator
from math import ceil
from typing import Any
from typing import Generic
from typing import Protocol
from typing import runtime_checkable
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError

from .exceptions import BadRequest
from .types import Json
from .types import Number
from .types import PageToken

__all__ = ["Page", "PageLike", "PaginateOptions"]

T = TypeVar("T")


class PaginateOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: PageToken = None
    per_page: Number = Field(gt=0)
    total_entries: Number | None = Field(default=None, ge=0)

    @classmethod
    def create(cls, **values) -> "PaginateOptions":
        try:
            return cls(**values)
        except ValidationError as e:
            raise BadRequest(e)


@runtime_checkable
class PageLike(Protocol):
    """What a fetch routine has to return.

    A response serializer only reads these attributes, so any object that has
    them will do. ``Page`` is the default implementation.
    """

    items: Any
    current_page: PageToken
    per_page: Number | None
    next_page: PageToken
    previous_page: PageToken
    first_page: PageToken
    last_page: PageToken
    total_entries: Number | None

    def total_pages(self) -> int | None:
        ...


class Page(BaseModel, Generic[T]):
    """One page of a (possibly unbounded) result set.

    ``current_page`` and ``per_page`` are set before the page is handed to a
    fetch routine. The other tokens and ``total_entries`` may be set by the
    fetch routine when it knows them. A token that is None means 'unknown', not
    'there is no such page'.

    Iterating a page yields its items, so ``dict(page)`` does not give the
    fields. Use ``metadata()`` or ``model_dump()`` for those.
    """

    items: list[T] = Field(default_factory=list)
    current_page: PageToken = None
    per_page: Number | None = None
    next_page: PageToken = None
    previous_page: PageToken = None
    first_page: PageToken = None
    last_page: PageToken = None
    total_entries: Number | None = None

    def total_pages(self) -> int | None:
        # per_page is validated by the builder; an unseeded page has no pages
        if self.total_entries is None or not self.per_page:
            return None
        if isinstance(self.total_entries, int) and isinstance(self.per_page, int):
            return -(-self.total_entries // self.per_page)
        return ceil(self.total_entries / self.per_page)

    def append(self, item: T) -> None:
        self.items.append(item)

    def extend(self, items: Iterable[T]) -> None:
        self.items.extend(items)

    def replace(self, items: Iterable[T]) -> "Page[T]":
        self.items = list(items)
        return self

    def map(self, func: Callable[[T], Any]) -> "Page":
        """Transform the items in place, keeping the pagination metadata."""
        self.items = [func(x) for x in self.items]
        return self

    def metadata(self) -> Json:
        return {
            **self.model_dump(exclude={"items"}),
            "total_pages": self.total_pages(),
        }

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]
