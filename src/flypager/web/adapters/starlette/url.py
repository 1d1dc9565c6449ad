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
"""Starlette adapter for UrlBuilderPort."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from starlette.datastructures import URL
from starlette.requests import Request


class StarletteUrlBuilder:
    """Builds URLs with :class:`starlette.datastructures.URL`.

    Args:
        base: Base URL whose path and existing query parameters are kept.
    """

    def __init__(self, base: str | URL = "/") -> None:
        self._base = base if isinstance(base, URL) else URL(base)

    @classmethod
    def from_request(cls, request: Request, absolute: bool = False) -> StarletteUrlBuilder:
        """Use the URL of the current request as base.

        Relative by default: only the path and query string are kept.
        """
        if absolute:
            return cls(request.url)
        url = request.url
        return cls(f"{url.path}?{url.query}" if url.query else url.path)

    @property
    def base(self) -> str:
        return str(self._base)

    def build(self, params: Mapping[str, Any], remove: Iterable[str] = ()) -> str:
        url = self._base
        keys = list(remove)
        if keys:
            url = url.remove_query_params(keys)
        if params:
            url = url.include_query_params(**{str(k): v for k, v in params.items()})
        return str(url)
