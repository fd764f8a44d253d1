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

"""Common exception hierarchy for distinctmap.

Errors raised by caller-supplied transforms are never wrapped in these types;
they reach the caller unchanged.
"""

from __future__ import annotations

__all__ = [
    "DistinctmapError",
    "DistinctmapTypeError",
    "DistinctmapValidationError",
    "UnhashableValueError",
    "UnknownStrategyError",
]


class DistinctmapError(Exception):
    """Base error for all distinctmap exceptions."""


class DistinctmapValidationError(DistinctmapError, ValueError):
    """Raised when input data fails validation checks."""


class DistinctmapTypeError(DistinctmapError, TypeError):
    """Raised when input data has an unexpected type."""


class UnknownStrategyError(DistinctmapValidationError):
    """Raised when a dedup strategy name does not match any known strategy."""

    def __init__(self, raw: object, allowed: tuple[str, ...]) -> None:
        """Initialize the exception with the rejected value and allowed names.

        Args:
            raw: The strategy value that could not be resolved.
            allowed: Tuple of accepted strategy names.
        """
        self.raw = raw
        self.allowed = allowed
        allowed_text = ", ".join(sorted(allowed))
        super().__init__(f"Unknown dedup strategy '{raw}'; expected one of: {allowed_text}")


class UnhashableValueError(DistinctmapTypeError):
    """Raised when the hashed dedup strategy meets a value it cannot hash."""

    def __init__(self, value: object) -> None:
        """Initialize the exception with the offending transformed value.

        Args:
            value: Transformed value that does not support hashing.
        """
        self.value = value
        super().__init__(
            f"hashed dedup strategy requires hashable values (got {type(value).__name__}); "
            "use the linear strategy for equality-only types",
        )
