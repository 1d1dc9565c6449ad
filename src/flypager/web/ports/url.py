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
"""UrlBuilderPort — merges query parameters into navigation URLs."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class UrlBuilderPort(Protocol):
    """Port for turning query parameters into a URL string.

    Sort and pagination only decide *which* parameters a link carries;
    encoding them and merging them into the current URL is the adapter's job.
    """

    def build(self, params: Mapping[str, Any], remove: Iterable[str] = ()) -> str:
        """Return a URL with *remove* dropped and *params* merged into the query."""
        ...
