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

"""distinctmap - deduplicating map helpers.

Provides an order-preserving deduplicating map, its ``None``-skipping
variant, and a map that reports only repeated results.
"""

from __future__ import annotations

from distinctmap.exceptions import (
    DistinctmapError,
    DistinctmapTypeError,
    DistinctmapValidationError,
    UnhashableValueError,
    UnknownStrategyError,
)

from ._internal.error_codes import ErrorCode, error_code_catalog, error_code_for
from .config import Config, load_config
from .core.model_types import DedupStrategy
from .logging import configure_logging
from .transforms import dedup_flat_map, dedup_map, dup_map

__all__ = [
    "Config",
    "DedupStrategy",
    "DistinctmapError",
    "DistinctmapTypeError",
    "DistinctmapValidationError",
    "ErrorCode",
    "UnhashableValueError",
    "UnknownStrategyError",
    "__version__",
    "configure_logging",
    "dedup_flat_map",
    "dedup_map",
    "dup_map",
    "error_code_catalog",
    "error_code_for",
    "load_config",
]

__version__ = "0.1.0"
