# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""In-memory data provider: sort a list, then cut out the requested page.

Usage::

    provider = ListDataProvider(
        sort=SortSpec(["name", "age"], params=request_params),
        pagination=PageCalculator(default_limit=20),
        key="id",
        page=int(request_params.get("page", 0)),
    )
    page = provider.get_page(users)
    page.items, page.keys, page.state.page_count
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from functools import cmp_to_key
from typing import Any, Generic, TypeVar

from flypager.data.page import Page
from flypager.data.pagination import PageCalculator, PageState
from flypager.data.sort import SortDirection, SortSpec

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _value(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def _compare(a: Any, b: Any) -> int:
    # None sorts before any value
    if a is None or b is None:
        return (a is not None) - (b is not None)
    try:
        return (a > b) - (a < b)
    except TypeError:
        # unorderable pair: order by type name, then by text
        left, right = (type(a).__name__, str(a)), (type(b).__name__, str(b))
        return (left > right) - (left < right)


def sort_items(items: Iterable[T], columns: Mapping[str, SortDirection | str]) -> list[T]:
    """Return *items* sorted by *columns*, compared in order.

    The first column that differs decides; items equal on every column keep
    their original relative order.
    """
    spec = [(column, SortDirection.parse(direction)) for column, direction in columns.items()]

    def compare(a: T, b: T) -> int:
        for column, direction in spec:
            result = _compare(_value(a, column), _value(b, column))
            if result:
                return -result if direction is SortDirection.DESC else result
        return 0

    return sorted(items, key=cmp_to_key(compare))


class ListDataProvider(Generic[T]):
    """Sorts and paginates an in-memory sequence.

    Args:
        sort: Sort specification; None disables sorting.
        pagination: Page calculator; None disables pagination.
        key: Key field name, key function, or None to use the position in
            the sorted sequence.
        page: Requested zero-based page.
        limit: Requested page size; None uses the calculator default.
    """

    def __init__(
        self,
        *,
        sort: SortSpec | None = None,
        pagination: PageCalculator | None = None,
        key: str | Callable[[T], Any] | None = None,
        page: int | None = 0,
        limit: int | None = None,
    ) -> None:
        self.sort = sort
        self.pagination = pagination
        self.key = key
        self.page = page
        self.limit = limit

    def get_page(self, source: Iterable[T] | None) -> Page[T]:
        models = list(source) if source is not None else []
        total = len(models)

        columns = self.sort.resolve_columns() if self.sort is not None else {}
        if columns:
            models = sort_items(models, columns)

        state: PageState | None = None
        offset = 0
        if self.pagination is not None:
            state = self.pagination.compute(total, self.page, self.limit)
            offset = state.offset
            models = models[offset : offset + state.limit]

        logger.debug("Prepared page with %d of %d items (offset=%d)", len(models), total, offset)
        return Page(
            items=models,
            keys=self._keys(models, offset),
            total=total,
            state=state,
            columns=columns,
        )

    def _keys(self, models: list[T], offset: int) -> list[Any]:
        if self.key is None:
            return list(range(offset, offset + len(models)))
        if isinstance(self.key, str):
            name = self.key
            return [model[name] if isinstance(model, Mapping) else getattr(model, name) for model in models]
        return [self.key(model) for model in models]
