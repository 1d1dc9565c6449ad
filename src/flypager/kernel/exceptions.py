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
"""Exception hierarchy for flypager.

All library errors inherit from FlyPagerException so callers can catch
one type at the web boundary. Malformed request input (unknown sort
tokens, negative pages, oversized limits) is never an error: it is
ignored or clamped. Only configuration mistakes and programming errors
raise.
"""

from __future__ import annotations


class FlyPagerException(Exception):
    """Base exception for all flypager errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "UNKNOWN_ATTRIBUTE").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    default_code: str | None = None

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code if code is not None else self.default_code
        self.context: dict = context if context is not None else {}


class InvalidArgumentError(FlyPagerException, ValueError):
    """A configuration value or argument is outside its allowed domain.

    Raised for negative total counts, non-positive limits in configuration
    and attribute definitions without both sort mappings.
    """

    default_code = "INVALID_ARGUMENT"


class UnknownAttributeError(FlyPagerException, LookupError):
    """An attribute was referenced that the sort configuration does not declare."""

    default_code = "UNKNOWN_ATTRIBUTE"

    def __init__(self, attribute: str, message: str | None = None) -> None:
        super().__init__(
            message or f"Unknown sort attribute: {attribute!r}",
            context={"attribute": attribute},
        )
        self.attribute = attribute
