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

"""Enumerations shared across distinctmap.

- Dedup strategies selecting how membership is checked
- Log output formats
- Loggable components
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final

from distinctmap.exceptions import UnknownStrategyError


class DedupStrategy(StrEnum):
    """Membership check used by the order-preserving dedup operations.

    Attributes:
        LINEAR: Scan the output with ``==``. Works for equality-only values.
        HASHED: Track seen values in a set. Requires hashable values.
    """

    LINEAR = "linear"
    HASHED = "hashed"

    @classmethod
    def from_str(cls, raw: str) -> DedupStrategy:
        """Create a DedupStrategy enum from a string value.

        Args:
            raw: String representation of the strategy.

        Returns:
            DedupStrategy enum value.

        Raises:
            UnknownStrategyError: If the string does not match any strategy.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise UnknownStrategyError(raw, DEDUP_STRATEGIES) from exc

    @classmethod
    def coerce(cls, raw: DedupStrategy | str | None) -> DedupStrategy:
        """Resolve an optional strategy argument, defaulting to ``LINEAR``.

        Args:
            raw: Strategy enum, strategy name, or ``None``.

        Returns:
            The matching DedupStrategy.

        Raises:
            UnknownStrategyError: If ``raw`` is neither ``None`` nor a known strategy.
        """
        if raw is None:
            return cls.LINEAR
        if isinstance(raw, DedupStrategy):
            return raw
        if isinstance(raw, str):
            return cls.from_str(raw)
        raise UnknownStrategyError(raw, DEDUP_STRATEGIES)


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(StrEnum):
    """Enumeration of loggable library components."""

    TRANSFORMS = "transforms"
    CONFIG = "config"


DEDUP_STRATEGIES: Final[tuple[str, ...]] = tuple(strategy.value for strategy in DedupStrategy)

__all__ = ["DEDUP_STRATEGIES", "DedupStrategy", "LogComponent", "LogFormat"]
