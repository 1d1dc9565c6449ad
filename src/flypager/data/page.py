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
"""Page of items produced by a data provider."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from flypager.data.pagination import PageState
from flypager.data.sort import SortDirection

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Page(Generic[T]):
    """The items of the current page with their keys.

    Attributes:
        items: The items on this page, sorted.
        keys: One key per item, in the same order.
        total: Number of items before pagination.
        state: Pagination values, or None when pagination is disabled.
        columns: Sort columns that were applied.
    """

    items: list[T]
    keys: list[Any]
    total: int
    state: PageState | None = None
    columns: dict[str, SortDirection] = field(default_factory=dict)

    @property
    def count(self) -> int:
        """Number of items on this page."""
        return len(self.items)

    @property
    def total_pages(self) -> int:
        """Total number of pages."""
        if self.state is None:
            return 1 if self.total else 0
        return self.state.page_count

    @property
    def has_next(self) -> bool:
        """Whether the pager's "next" page differs from the current one."""
        return self.state is not None and self.state.page_next not in (None, self.state.page_current)

    @property
    def has_previous(self) -> bool:
        """Whether the pager's "previous" page differs from the current one."""
        return self.state is not None and self.state.page_prev != self.state.page_current

    def map(self, func: Callable[[T], U]) -> Page[U]:
        """Transform items using a mapping function, preserving keys and metadata."""
        return Page(
            items=[func(item) for item in self.items],
            keys=list(self.keys),
            total=self.total,
            state=self.state,
            columns=dict(self.columns),
        )
