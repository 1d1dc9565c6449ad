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
"""Logging configuration properties."""

from __future__ import annotations

from dataclasses import dataclass, field

from flypager.core.config import config_properties


@config_properties(prefix="flypager.logging")
@dataclass
class LoggingProperties:
    """Configuration for flypager's own loggers (flypager.logging.*).

    ``level`` maps logger names to levels. The ``flypager`` entry sets the
    package logger; entries such as ``flypager.data.sort`` override it for
    one module.
    """

    format: str = "console"
    propagate: bool = False
    level: dict = field(default_factory=lambda: {"flypager": "WARNING"})
