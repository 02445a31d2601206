# (c) Nelen & Schuurmans

import logging
from collections.abc import Mapping
from typing import Any
from typing import Awaitable
from typing import Callable
from typing import Generic
from typing import Optional
from typing import TypeVar
from typing import Union

from paginated_collection.base.domain import BadRequest
from paginated_collection.base.domain import ContractViolation
from paginated_collection.base.domain import FetchRoutineRequired
from paginated_collection.base.domain import Json
from paginated_collection.base.domain import Page
from paginated_collection.base.domain import PageLike
from paginated_collection.base.domain import PaginateOptions

__all__ = ["PaginatedCollection", "AsyncPaginatedCollection"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

Params = Optional[Union[PaginateOptions, Json]]


def _parse_options(params: Params, values: Json) -> PaginateOptions:
    if isinstance(params, PaginateOptions):
        params = params.model_dump()
    elif params is not None and not isinstance(params, Mapping):
        raise BadRequest(
            f"expected a mapping of options, got {type(params).__name__}",
            loc=("params",),
        )
    return PaginateOptions.create(**{**(params or {}), **values})


def _seed_page(options: PaginateOptions) -> Page[Any]:
    logger.debug(
        f"paginating page={options.page!r} per_page={options.per_page} "
        f"total_entries={options.total_entries}"
    )
    return Page(
        current_page=options.page,
        per_page=options.per_page,
        total_entries=options.total_entries,
    )


def _check_result(result: Any, options: PaginateOptions) -> PageLike:
    if not isinstance(result, PageLike):
        raise ContractViolation(result)
    # the returned values are authoritative, even if the fetch routine changed them
    if logger.isEnabledFor(logging.DEBUG) and (
        result.current_page != options.page or result.per_page != options.per_page
    ):
        logger.debug(
            f"fetch routine returned page={result.current_page!r} "
            f"per_page={result.per_page}, requested page={options.page!r} "
            f"per_page={options.per_page}"
        )
    return result


class PaginatedCollection(Generic[T]):
    """Builds pages from an arbitrary data source.

    The fetch routine receives an empty ``Page`` that already has
    ``current_page``, ``per_page`` and (optionally) ``total_entries`` set. It
    fills the page and returns it, optionally setting the next / previous /
    first / last page tokens or the total along the way:

        @PaginatedCollection.build
        def books(pager):
            rows = query_books(after=pager.current_page, limit=pager.per_page + 1)
            if len(rows) > pager.per_page:
                pager.next_page = rows[pager.per_page - 1]["id"]
            return pager.replace(rows[: pager.per_page])

        page = books.paginate(page=None, per_page=20)

    The routine may also return another object, provided it implements
    ``PageLike``. Exceptions raised by the routine are not caught.
    """

    fetch: Callable[[Page[T]], PageLike]

    def __init__(self, fetch: Optional[Callable[[Page[T]], PageLike]] = None):
        if fetch is None or not callable(fetch):
            raise FetchRoutineRequired()
        self.fetch = fetch

    @classmethod
    def build(
        cls, fetch: Optional[Callable[[Page[T]], PageLike]] = None
    ) -> "PaginatedCollection[T]":
        return cls(fetch)

    def paginate(self, params: Params = None, **values: Any) -> PageLike:
        options = _parse_options(params, values)
        result = self.fetch(_seed_page(options))
        return _check_result(result, options)


# This is a copy-paste from PaginatedCollection, but with an awaited fetch routine


class AsyncPaginatedCollection(Generic[T]):
    fetch: Callable[[Page[T]], Awaitable[PageLike]]

    def __init__(
        self, fetch: Optional[Callable[[Page[T]], Awaitable[PageLike]]] = None
    ):
        if fetch is None or not callable(fetch):
            raise FetchRoutineRequired()
        self.fetch = fetch

    @classmethod
    def build(
        cls, fetch: Optional[Callable[[Page[T]], Awaitable[PageLike]]] = None
    ) -> "AsyncPaginatedCollection[T]":
        return cls(fetch)

    async def paginate(self, params: Params = None, **values: Any) -> PageLike:
        options = _parse_options(params, values)
        result = await self.fetch(_seed_page(options))
        return _check_result(result, options)
