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
"""Pagination subsystem configuration properties."""

from __future__ import annotations

from dataclasses import dataclass

from flypager.core.config import config_properties


@config_properties(prefix="flypager.pagination")
@dataclass
class PaginationProperties:
    """Configuration for the page calculator (flypager.pagination.*).

    page_limit is the size of the visible page window; sort is
    "asc" or "desc" and controls the pager navigation direction.
    """

    page_param: str = "page"
    limit_param: str = "limit"
    default_limit: int = 10
    max_limit: int = 30
    page_limit: int = 5
    sort: str = "asc"
