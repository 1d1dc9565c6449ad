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
"""Tests for Config loading, env overrides, and binding."""

import os
from dataclasses import dataclass
from pathlib import Path

import pytest
from pydantic import BaseModel, Field

from flypager.core.config import Config, config_properties


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"app": {"name": "test-service", "port": 8080}})
        assert config.get("app.name") == "test-service"
        assert config.get("app.port") == 8080

    def test_get_with_default(self):
        config = Config({})
        assert config.get("missing.key", "default") == "default"

    def test_get_falsy_values(self):
        config = Config({"flypager": {"sort": {"multi_sort": False, "limit": 0}}})
        assert config.get("flypager.sort.multi_sort") is False
        assert config.get("flypager.sort.limit") == 0

    def test_get_section(self):
        config = Config({"flypager": {"pagination": {"max_limit": 50}}})
        assert config.get_section("flypager.pagination") == {"max_limit": 50}
        assert config.get_section("flypager.missing") == {}

    def test_load_from_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "flypager.yaml"
        config_file.write_text("flypager:\n  pagination:\n    max_limit: 100\n")
        config = Config.from_file(config_file)
        assert config.get("flypager.pagination.max_limit") == 100
        assert config.get("flypager.pagination.default_limit") == 10
        assert str(config_file) in config.loaded_sources

    def test_load_from_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "flypager.toml"
        config_file.write_text("[flypager.sort]\nseparator = \";\"\n")
        config = Config.from_file(config_file, load_defaults=False)
        assert config.get("flypager.sort.separator") == ";"
        assert config.get("flypager.sort.param") is None

    def test_missing_file_keeps_defaults(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.get("flypager.sort.param") == "sort"

    def test_defaults(self):
        config = Config.defaults()
        assert config.get("flypager.pagination.max_limit") == 30
        assert config.get("flypager.logging.format") == "console"

    def test_env_var_override(self):
        os.environ["FLYPAGER_PAGINATION_MAX_LIMIT"] = "75"
        try:
            config = Config({"flypager": {"pagination": {"max_limit": 30}}})
            assert config.get("flypager.pagination.max_limit") == "75"
        finally:
            del os.environ["FLYPAGER_PAGINATION_MAX_LIMIT"]

    def test_to_dict_is_a_copy(self):
        config = Config({"a": 1})
        config.to_dict()["a"] = 2
        assert config.get("a") == 1


class TestProfileConfigMerging:
    def test_merge_profile_config(self, tmp_path):
        base = tmp_path / "flypager.yaml"
        base.write_text("flypager:\n  pagination:\n    max_limit: 50\n    page_limit: 7\n")
        profile = tmp_path / "flypager-admin.yaml"
        profile.write_text("flypager:\n  pagination:\n    max_limit: 500\n")

        config = Config.from_file(base, active_profiles=["admin"])
        assert config.get("flypager.pagination.max_limit") == 500
        assert config.get("flypager.pagination.page_limit") == 7
        assert any("profile: admin" in source for source in config.loaded_sources)

    def test_missing_profile_is_ignored(self, tmp_path):
        base = tmp_path / "flypager.yaml"
        base.write_text("flypager:\n  pagination:\n    max_limit: 50\n")
        config = Config.from_file(base, active_profiles=["missing"])
        assert config.get("flypager.pagination.max_limit") == 50


class TestConfigProperties:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="listing")
        @dataclass
        class ListingConfig:
            title: str = "Users"
            per_page: int = 5

        config = Config({"listing": {"title": "Orders", "per_page": 20}})
        listing = config.bind(ListingConfig)
        assert listing.title == "Orders"
        assert listing.per_page == 20

    def test_bind_uses_defaults(self):
        @config_properties(prefix="listing")
        @dataclass
        class ListingConfig:
            title: str = "Users"
            per_page: int = 5

        listing = Config({}).bind(ListingConfig)
        assert listing.title == "Users"
        assert listing.per_page == 5

    def test_bind_coerces_env_strings(self):
        @config_properties(prefix="listing")
        @dataclass
        class ListingConfig:
            per_page: int = 5
            enabled: bool = False

        os.environ["FLYPAGER_LISTING_PER_PAGE"] = "40"
        os.environ["FLYPAGER_LISTING_ENABLED"] = "true"
        try:
            listing = Config({}).bind(ListingConfig)
        finally:
            del os.environ["FLYPAGER_LISTING_PER_PAGE"]
            del os.environ["FLYPAGER_LISTING_ENABLED"]
        assert listing.per_page == 40
        assert listing.enabled is True

    def test_bind_pydantic_model(self):
        @config_properties(prefix="listing")
        class ListingModel(BaseModel):
            per_page: int = Field(default=5, ge=1)

        assert Config({"listing": {"per_page": 9}}).bind(ListingModel).per_page == 9

    def test_bind_pydantic_validation_error(self):
        @config_properties(prefix="listing")
        class ListingModel(BaseModel):
            per_page: int = Field(default=5, ge=1)

        with pytest.raises(ValueError, match="Configuration validation failed"):
            Config({"listing": {"per_page": 0}}).bind(ListingModel)

    def test_bind_requires_decorator(self):
        @dataclass
        class Plain:
            value: int = 1

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)
