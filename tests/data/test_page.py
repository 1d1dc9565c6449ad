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
"""Tests for the Page container."""

from __future__ import annotations

import pytest

from flypager.data.page import Page
from flypager.data.pagination import calculate_page_state
from flypager.data.sort import SortDirection


def make_page(page: int, total: int = 25, limit: int = 10) -> Page[str]:
    state = calculate_page_state(total, page, limit)
    items = [f"item-{i}" for i in range(state.offset, min(state.offset + limit, total))]
    return Page(items=items, keys=list(range(state.offset, state.offset + len(items))), total=total, state=state)


class TestPage:
    def test_count_and_total(self) -> None:
        page = make_page(2)
        assert page.count == 5
        assert page.total == 25
        assert page.total_pages == 3

    def test_first_page_navigation(self) -> None:
        page = make_page(0)
        assert page.has_previous is False
        assert page.has_next is True

    def test_last_page_navigation(self) -> None:
        page = make_page(2)
        assert page.has_previous is True
        assert page.has_next is False

    def test_descending_pager_navigation(self) -> None:
        newest = Page(items=[], keys=[], total=25, state=calculate_page_state(25, 2, 10, SortDirection.DESC))
        assert newest.has_previous is False
        assert newest.has_next is True

        oldest = Page(items=[], keys=[], total=25, state=calculate_page_state(25, 0, 10, SortDirection.DESC))
        assert oldest.has_previous is True
        assert oldest.has_next is False

    def test_empty_paginated_page(self) -> None:
        page = Page(items=[], keys=[], total=0, state=calculate_page_state(0, 0, 10))
        assert page.has_next is False
        assert page.has_previous is False

    def test_unpaginated_page(self) -> None:
        page = Page(items=["a", "b"], keys=[0, 1], total=2)
        assert page.total_pages == 1
        assert page.has_next is False
        assert page.has_previous is False

    def test_empty_unpaginated_page(self) -> None:
        assert Page(items=[], keys=[], total=0).total_pages == 0

    def test_map_preserves_keys_and_metadata(self) -> None:
        page = Page(
            items=["a", "b"],
            keys=[10, 11],
            total=2,
            columns={"name": SortDirection.DESC},
        )
        mapped = page.map(str.upper)
        assert mapped.items == ["A", "B"]
        assert mapped.keys == [10, 11]
        assert mapped.total == 2
        assert mapped.columns == {"name": SortDirection.DESC}

    def test_frozen(self) -> None:
        page = make_page(0)
        with pytest.raises(AttributeError):
            page.total = 3  # type: ignore[misc]
