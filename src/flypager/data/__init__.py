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
"""flypager data — sorting, pagination, and in-memory data providers.

Framework-agnostic building blocks for list views:

    - :class:`SortSpec` — whitelisted multi-attribute sort parameters.
    - :class:`PageCalculator` — offsets, page windows, and navigation links.
    - :class:`ListDataProvider` — sorts and paginates an in-memory list.
"""

from flypager.data.page import Page
from flypager.data.pagination import (
    LINK_FIRST,
    LINK_LAST,
    LINK_NEXT,
    LINK_PREV,
    LINK_SELF,
    PageCalculator,
    PageState,
    calculate_page_state,
)
from flypager.data.provider import ListDataProvider, sort_items
from flypager.data.sort import AttributeDefinition, Order, SortDirection, SortSpec

__all__ = [
    # Sorting
    "AttributeDefinition",
    "Order",
    "SortDirection",
    "SortSpec",
    # Pagination
    "LINK_FIRST",
    "LINK_LAST",
    "LINK_NEXT",
    "LINK_PREV",
    "LINK_SELF",
    "PageCalculator",
    "PageState",
    "calculate_page_state",
    # Providers
    "ListDataProvider",
    "Page",
    "sort_items",
]
