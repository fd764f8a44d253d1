# Copyright 2025 CrownOps Engineering
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

"""Unit tests for the error code registry."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from distinctmap import (
    DistinctmapError,
    DistinctmapTypeError,
    DistinctmapValidationError,
    UnhashableValueError,
    UnknownStrategyError,
    error_code_catalog,
    error_code_for,
)
from distinctmap.config import (
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    UnsupportedConfigVersionError,
)

pytestmark = pytest.mark.unit


def test_error_code_for_known_hierarchy() -> None:
    assert error_code_for(DistinctmapError("x")) == "DM000"
    assert error_code_for(DistinctmapValidationError("x")) == "DM100"
    assert error_code_for(DistinctmapTypeError("x")) == "DM101"
    assert error_code_for(UnknownStrategyError("x", ("linear",))) == "DM102"
    assert error_code_for(UnhashableValueError([])) == "DM103"
    assert error_code_for(ConfigValidationError("x")) == "DM110"
    assert error_code_for(ConfigReadError(Path("a.toml"), OSError("x"))) == "DM111"
    assert error_code_for(InvalidConfigFileError(Path("a.toml"), ValueError("x"))) == "DM112"
    assert error_code_for(UnsupportedConfigVersionError(1, 0)) == "DM113"


def test_error_code_for_unmapped_exceptions_falls_back() -> None:
    assert error_code_for(RuntimeError("boom")) == "DM000"


def test_error_code_for_uses_nearest_mapped_base() -> None:
    class CustomConfigError(ConfigValidationError):
        pass

    assert error_code_for(CustomConfigError("x")) == "DM110"


def test_error_code_catalog_is_unique_and_well_formed() -> None:
    catalog = error_code_catalog()
    codes = list(catalog.values())
    assert len(codes) == len(set(codes))
    assert all(re.fullmatch(r"DM\d{3}", code) for code in codes)
    assert catalog["distinctmap.exceptions.UnknownStrategyError"] == "DM102"
    assert catalog["distinctmap.config.models.ConfigReadError"] == "DM111"


def test_library_errors_keep_builtin_bases() -> None:
    assert issubclass(UnknownStrategyError, ValueError)
    assert issubclass(UnhashableValueError, TypeError)
    assert issubclass(UnsupportedConfigVersionError, DistinctmapValidationError)
