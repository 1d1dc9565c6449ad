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
"""Pagination arithmetic: offsets, page windows, and navigation links.

Pages are zero-based. Out-of-range client input (negative page, page past
the end, zero or oversized limit) is clamped, never rejected.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass
from typing import Any

from flypager.config.properties import PaginationProperties
from flypager.core.config import Config
from flypager.data.sort import SortDirection
from flypager.kernel.exceptions import InvalidArgumentError
from flypager.web.adapters.starlette.url import StarletteUrlBuilder
from flypager.web.ports.url import UrlBuilderPort

logger = logging.getLogger(__name__)

LINK_SELF = "self"
LINK_FIRST = "first"
LINK_PREV = "prev"
LINK_NEXT = "next"
LINK_LAST = "last"


@dataclass(frozen=True)
class PageState:
    """Computed pagination values for one request.

    Attributes:
        total_count: Total number of items across all pages.
        limit: Effective page size after clamping.
        page_count: Number of pages (0 when there are no items).
        page_current: Zero-based current page after clamping.
        offset: Index of the first item of the current page.
        page_start: First page of the visible window (None when empty).
        page_end: Last page of the visible window (None when empty).
        page_display: Pages of the visible window in display order.
        page_first: Page the "first" link points to.
        page_last: Page the "last" link points to (None when empty).
        page_prev: Page the "prev" link points to.
        page_next: Page the "next" link points to (None when empty).
        count_more: Items after the current page.
        sort: Direction of the pager navigation.
    """

    total_count: int
    limit: int
    page_count: int
    page_current: int
    offset: int
    page_start: int | None
    page_end: int | None
    page_display: tuple[int, ...]
    page_first: int
    page_last: int | None
    page_prev: int
    page_next: int | None
    count_more: int
    sort: SortDirection = SortDirection.ASC

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


def _window(position: int, page_count: int, size: int) -> tuple[int, int]:
    """Bounds of a window of *size* pages around *position*.

    When the window cannot be centred the extra page goes after *position*.
    """
    if size <= 0 or size >= page_count:
        return 0, page_count - 1
    start = max(position - (size - 1) // 2, 0)
    end = start + size - 1
    if end > page_count - 1:
        end = page_count - 1
        start = end - size + 1
    return start, end


def calculate_page_state(
    total_count: int,
    page: int,
    limit: int,
    sort: SortDirection = SortDirection.ASC,
    page_limit: int = 0,
) -> PageState:
    """Compute a fresh :class:`PageState`.

    *limit* must already be a positive page size. *page_limit* is the size of
    the visible window; ``0`` shows every page. With ``sort=DESC`` the window
    and the navigation pages run from the last page down to page 0 while the
    offset stays ``page_current * limit``.
    """
    if total_count < 0:
        raise InvalidArgumentError(
            f"total_count must be >= 0, got {total_count}", context={"total_count": total_count}
        )
    if limit < 1:
        raise InvalidArgumentError(f"limit must be >= 1, got {limit}", context={"limit": limit})

    page_count = math.ceil(total_count / limit)
    if page_count == 0:
        return PageState(
            total_count=total_count,
            limit=limit,
            page_count=0,
            page_current=0,
            offset=0,
            page_start=None,
            page_end=None,
            page_display=(),
            page_first=0,
            page_last=None,
            page_prev=0,
            page_next=None,
            count_more=0,
            sort=sort,
        )

    last_index = page_count - 1
    current = min(max(page, 0), last_index)
    if current != page:
        logger.debug("Clamped requested page %d to %d (page_count=%d)", page, current, page_count)
    offset = current * limit

    if sort is SortDirection.DESC:
        low, high = _window(last_index - current, page_count, page_limit)
        start, end = last_index - low, last_index - high
        display = tuple(range(start, end - 1, -1))
        first, last = last_index, 0
        prev, next_ = min(current + 1, last_index), max(current - 1, 0)
    else:
        start, end = _window(current, page_count, page_limit)
        display = tuple(range(start, end + 1))
        first, last = 0, last_index
        prev, next_ = max(current - 1, 0), min(current + 1, last_index)

    return PageState(
        total_count=total_count,
        limit=limit,
        page_count=page_count,
        page_current=current,
        offset=offset,
        page_start=start,
        page_end=end,
        page_display=display,
        page_first=first,
        page_last=last,
        page_prev=prev,
        page_next=next_,
        count_more=max(total_count - (offset + limit), 0),
        sort=sort,
    )


class PageCalculator:
    """Pagination settings plus a cache of the last computed state.

    Args:
        default_limit: Page size used when the request gives none.
        max_limit: Upper bound for the page size.
        page_limit: Size of the visible page window (``0`` for all pages).
        sort: Navigation direction of the pager.
        page_param: Query parameter carrying the page number.
        limit_param: Query parameter carrying the page size.
        url_builder: Builds link URLs; defaults to a Starlette builder on ``/``.
    """

    def __init__(
        self,
        *,
        default_limit: int = 10,
        max_limit: int = 30,
        page_limit: int = 5,
        sort: SortDirection | str = SortDirection.ASC,
        page_param: str = "page",
        limit_param: str = "limit",
        url_builder: UrlBuilderPort | None = None,
    ) -> None:
        if max_limit <= 0:
            raise InvalidArgumentError(f"max_limit must be >= 1, got {max_limit}", context={"max_limit": max_limit})
        if default_limit <= 0:
            raise InvalidArgumentError(
                f"default_limit must be >= 1, got {default_limit}", context={"default_limit": default_limit}
            )
        self.default_limit = default_limit
        self.max_limit = max_limit
        self.page_limit = page_limit
        self.sort = SortDirection.parse(sort)
        self.page_param = page_param
        self.limit_param = limit_param
        self.url_builder: UrlBuilderPort = url_builder if url_builder is not None else StarletteUrlBuilder()
        self._cache_key: tuple[int, int, int, SortDirection, int] | None = None
        self._last_state: PageState | None = None

    @classmethod
    def from_config(cls, config: Config, url_builder: UrlBuilderPort | None = None) -> PageCalculator:
        """Create a PageCalculator using the ``flypager.pagination`` configuration section."""
        props = config.bind(PaginationProperties)
        return cls(
            default_limit=props.default_limit,
            max_limit=props.max_limit,
            page_limit=props.page_limit,
            sort=props.sort,
            page_param=props.page_param,
            limit_param=props.limit_param,
            url_builder=url_builder,
        )

    @property
    def last_state(self) -> PageState | None:
        """The most recently computed state."""
        return self._last_state

    def resolve_limit(self, limit: int | None) -> int:
        """Substitute the default for a missing or non-positive limit, then cap it."""
        if limit is None or limit <= 0:
            limit = self.default_limit
        return min(limit, self.max_limit)

    def compute(
        self,
        total_count: int,
        requested_page: int | None = 0,
        limit: int | None = None,
        sort: SortDirection | str | None = None,
        page_limit: int | None = None,
    ) -> PageState:
        """Compute the page state, reusing the last result when the inputs repeat."""
        if total_count < 0:
            raise InvalidArgumentError(
                f"total_count must be >= 0, got {total_count}", context={"total_count": total_count}
            )
        key = (
            total_count,
            max(requested_page or 0, 0),
            self.resolve_limit(limit),
            self.sort if sort is None else SortDirection.parse(sort),
            self.page_limit if page_limit is None else page_limit,
        )
        if self._last_state is None or self._cache_key != key:
            self._last_state = calculate_page_state(*key)
            self._cache_key = key
        return self._last_state

    def invalidate(self) -> None:
        """Drop cached states so the next :meth:`compute` recalculates."""
        self._cache_key = None
        self._last_state = None

    def build_url(self, page: int | None, limit: int | None = None) -> dict[str, int]:
        """Query parameters for *page*.

        Page 0 and the default limit are left out to keep URLs canonical.
        """
        params: dict[str, int] = {}
        if page is not None and page > 0:
            params[self.page_param] = page
        if limit is not None and limit > 0 and limit != self.default_limit:
            params[self.limit_param] = limit
        return params

    def create_url(self, page: int | None, limit: int | None = None) -> str:
        return self.url_builder.build(self.build_url(page, limit), remove=(self.page_param, self.limit_param))

    def navigation_links(self, state: PageState | None = None) -> dict[str, str]:
        """URLs for the self, first, prev, next, and last pages of *state*.

        *state* defaults to :attr:`last_state`.
        """
        if state is None:
            state = self._last_state
        if state is None:
            raise InvalidArgumentError("No page state available; call compute() first")

        def url(page: int | None) -> str:
            return self.create_url(page if page is not None else 0, state.limit)

        return {
            LINK_SELF: url(state.page_current),
            LINK_FIRST: url(state.page_first),
            LINK_PREV: url(state.page_prev),
            LINK_NEXT: url(state.page_next),
            LINK_LAST: url(state.page_last),
        }
