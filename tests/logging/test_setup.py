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
"""Tests for structlog rendering of flypager's own loggers."""

import io
import json
import logging

import pytest

from flypager.core.config import Config
from flypager.data.pagination import PageCalculator
from flypager.data.provider import ListDataProvider
from flypager.data.sort import SortSpec
from flypager.logging import configure_logging, reset_logging
from flypager.logging.setup import HANDLER_NAME


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    reset_logging()


def installed_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger("flypager").handlers if h.get_name() == HANDLER_NAME]


def logging_config(**section) -> Config:
    return Config({"flypager": {"logging": section}})


class TestConfigureLogging:
    def test_packaged_defaults(self):
        stream = io.StringIO()
        package = configure_logging(Config.defaults(), stream=stream)
        assert package.name == "flypager"
        assert package.level == logging.WARNING
        assert package.propagate is False
        assert len(installed_handlers()) == 1

        SortSpec(["age"], params={"sort": "height"}).current_order()
        assert stream.getvalue() == ""

    def test_reconfigure_replaces_handler(self):
        configure_logging(Config.defaults(), stream=io.StringIO())
        configure_logging(Config.defaults(), stream=io.StringIO())
        assert len(installed_handlers()) == 1

    def test_propagate_setting(self):
        package = configure_logging(logging_config(propagate=True), stream=io.StringIO())
        assert package.propagate is True

    def test_unknown_level_name_falls_back_to_warning(self):
        package = configure_logging(logging_config(level={"flypager": "LOUD"}), stream=io.StringIO())
        assert package.level == logging.WARNING

    def test_logger_outside_package_rejected(self):
        with pytest.raises(ValueError, match="outside"):
            configure_logging(logging_config(level={"sqlalchemy": "DEBUG"}), stream=io.StringIO())


class TestModuleOutput:
    def test_sort_module_level_with_json(self):
        stream = io.StringIO()
        configure_logging(
            logging_config(format="json", level={"flypager.data.sort": "DEBUG"}),
            stream=stream,
        )
        assert logging.getLogger("flypager.data.sort").level == logging.DEBUG

        SortSpec(["age"], params={"sort": "height,age"}).current_order()
        PageCalculator().compute(total_count=20, requested_page=7)

        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        event = json.loads(lines[0])
        assert event["event"] == "Ignoring unknown sort attribute 'height'"
        assert event["logger"] == "flypager.data.sort"
        assert event["level"] == "debug"
        assert "timestamp" in event

    def test_package_level_with_console(self):
        stream = io.StringIO()
        configure_logging(logging_config(format="console", level={"flypager": "DEBUG"}), stream=stream)

        calculator = PageCalculator(default_limit=2)
        calculator.compute(total_count=20, requested_page=70)
        ListDataProvider(pagination=calculator).get_page(range(5))

        output = stream.getvalue()
        assert "Clamped requested page 70 to 9" in output
        assert "flypager.data.pagination" in output
        assert "Prepared page with 2 of 5 items" in output
        assert "flypager.data.provider" in output


class TestResetLogging:
    def test_restores_library_defaults(self):
        configure_logging(
            logging_config(level={"flypager": "ERROR", "flypager.data.pagination": "DEBUG"}),
            stream=io.StringIO(),
        )
        reset_logging()

        package = logging.getLogger("flypager")
        assert installed_handlers() == []
        assert package.level == logging.NOTSET
        assert package.propagate is True
        assert logging.getLogger("flypager.data.pagination").level == logging.NOTSET
