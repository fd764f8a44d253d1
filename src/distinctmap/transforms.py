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

"""Order-preserving dedup maps and the duplicates-only map.

All three operations iterate their input exactly once, call the transform once
per element in input order, and return a new list. Exceptions raised by the
transform propagate unchanged and no partial result is returned.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Hashable, Iterable
from typing import Any, Generic, Protocol, TypeVar

from distinctmap._internal.logging_utils import structured_extra
from distinctmap.core.model_types import DedupStrategy, LogComponent
from distinctmap.exceptions import UnhashableValueError

logger: logging.Logger = logging.getLogger("distinctmap.transforms")


class SupportsHashAndOrder(Hashable, Protocol):
    """Values that can live in a set and be sorted."""

    def __lt__(self, other: Any, /) -> bool: ...


E = TypeVar("E")
T = TypeVar("T")
S = TypeVar("S", bound=SupportsHashAndOrder)


class _DedupCollector(Generic[T]):
    """Accumulate values in first-occurrence order, dropping later equal ones."""

    __slots__ = ("_seen", "items")

    def __init__(self, strategy: DedupStrategy) -> None:
        self.items: list[T] = []
        self._seen: set[T] | None = set() if strategy is DedupStrategy.HASHED else None

    def add(self, item: T) -> None:
        if self._seen is None:
            if item in self.items:
                return
        else:
            try:
                if item in self._seen:
                    return
                self._seen.add(item)
            except TypeError as exc:
                raise UnhashableValueError(item) from exc
        self.items.append(item)


def _log_call(
    operation: str,
    *,
    strategy: DedupStrategy | None,
    input_count: int,
    output_count: int,
    started: float,
) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        "%s: %d input value(s) -> %d result value(s)",
        operation,
        input_count,
        output_count,
        extra=structured_extra(
            LogComponent.TRANSFORMS,
            operation=operation,
            strategy=strategy,
            input_count=input_count,
            output_count=output_count,
            duration_ms=(time.perf_counter() - started) * 1000,
        ),
    )


def dedup_map(
    values: Iterable[E],
    transform: Callable[[E], T],
    *,
    strategy: DedupStrategy | str | None = None,
) -> list[T]:
    """Map each value and keep the first occurrence of each equal result.

    Args:
        values: Input values, iterated once and never mutated.
        transform: Function applied to each value in input order.
        strategy: Membership check. ``linear`` (default) scans the result with
            ``==`` and needs nothing beyond equality; ``hashed`` tracks seen
            results in a set and needs hashable results.

    Returns:
        Transformed values in first-occurrence order, no two of them equal.

    Raises:
        UnknownStrategyError: If ``strategy`` names no known strategy.
        UnhashableValueError: If ``strategy`` is ``hashed`` and a result is unhashable.
    """
    started = time.perf_counter()
    resolved = DedupStrategy.coerce(strategy)
    collector: _DedupCollector[T] = _DedupCollector(resolved)
    count = 0
    for value in values:
        count += 1
        collector.add(transform(value))
    _log_call(
        "dedup_map",
        strategy=resolved,
        input_count=count,
        output_count=len(collector.items),
        started=started,
    )
    return collector.items


def dedup_flat_map(
    values: Iterable[E],
    transform: Callable[[E], T | None],
    *,
    strategy: DedupStrategy | str | None = None,
) -> list[T]:
    """Map each value, skip ``None`` results, and keep first occurrences.

    A transform that raises aborts the whole call: the exception reaches the
    caller as raised and nothing accumulated so far is returned. Callers that
    want to skip failing values should catch inside the transform and return
    ``None``.

    Args:
        values: Input values, iterated once and never mutated.
        transform: Function applied to each value; ``None`` means "no value".
        strategy: Membership check, as for ``dedup_map``.

    Returns:
        Non-``None`` transformed values in first-occurrence order, no two equal.

    Raises:
        UnknownStrategyError: If ``strategy`` names no known strategy.
        UnhashableValueError: If ``strategy`` is ``hashed`` and a result is unhashable.
    """
    started = time.perf_counter()
    resolved = DedupStrategy.coerce(strategy)
    collector: _DedupCollector[T] = _DedupCollector(resolved)
    count = 0
    for value in values:
        count += 1
        item = transform(value)
        if item is None:
            continue
        collector.add(item)
    _log_call(
        "dedup_flat_map",
        strategy=resolved,
        input_count=count,
        output_count=len(collector.items),
        started=started,
    )
    return collector.items


def dup_map(values: Iterable[E], transform: Callable[[E], S]) -> list[S]:
    """Return the transformed values produced more than once, sorted ascending.

    Args:
        values: Input values, iterated once and never mutated.
        transform: Function applied to each value; results must be hashable
            and totally ordered.

    Returns:
        Each repeated result exactly once, in ascending order.
    """
    started = time.perf_counter()
    seen_once: set[S] = set()
    duplicates: set[S] = set()
    count = 0
    for value in values:
        count += 1
        item = transform(value)
        if item in seen_once:
            duplicates.add(item)
        else:
            seen_once.add(item)
    result = sorted(duplicates)
    _log_call(
        "dup_map",
        strategy=None,
        input_count=count,
        output_count=len(result),
        started=started,
    )
    return result


__all__ = ["SupportsHashAndOrder", "dedup_flat_map", "dedup_map", "dup_map"]
