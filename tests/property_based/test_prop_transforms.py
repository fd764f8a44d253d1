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

"""Property-based tests for the dedup and duplicates-only maps."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

import pytest
from hypothesis import given
from hypothesis import strategies as st

from distinctmap import DedupStrategy, dedup_flat_map, dedup_map, dup_map
from tests.property_based.strategies import int_transforms, optional_int_transforms, small_int_lists

if TYPE_CHECKING:
    from collections.abc import Callable

pytestmark = pytest.mark.property


@given(small_int_lists(), int_transforms())
def test_dedup_map_has_no_equal_elements(values: list[int], transform: Callable[[int], int]) -> None:
    result = dedup_map(values, transform)
    assert len(result) == len(set(result))


@given(small_int_lists(), int_transforms())
def test_dedup_map_loses_no_values(values: list[int], transform: Callable[[int], int]) -> None:
    assert set(dedup_map(values, transform)) == {transform(value) for value in values}


@given(small_int_lists(), int_transforms())
def test_dedup_map_preserves_first_occurrence_order(
    values: list[int],
    transform: Callable[[int], int],
) -> None:
    mapped = [transform(value) for value in values]
    first_seen = sorted(set(mapped), key=mapped.index)
    assert dedup_map(values, transform) == first_seen


@given(small_int_lists(), int_transforms())
def test_dedup_map_strategies_agree(values: list[int], transform: Callable[[int], int]) -> None:
    linear = dedup_map(values, transform, strategy=DedupStrategy.LINEAR)
    hashed = dedup_map(values, transform, strategy=DedupStrategy.HASHED)
    assert linear == hashed


@given(small_int_lists(), optional_int_transforms())
def test_dedup_flat_map_excludes_absent_values(
    values: list[int],
    transform: Callable[[int], int | None],
) -> None:
    result = dedup_flat_map(values, transform)
    assert None not in result
    assert len(result) == len(set(result))
    assert set(result) == {item for item in map(transform, values) if item is not None}


@given(small_int_lists(), optional_int_transforms())
def test_dedup_flat_map_preserves_first_occurrence_order(
    values: list[int],
    transform: Callable[[int], int | None],
) -> None:
    present = [item for item in map(transform, values) if item is not None]
    first_seen = sorted(set(present), key=present.index)
    assert dedup_flat_map(values, transform) == first_seen
    assert dedup_flat_map(values, transform, strategy=DedupStrategy.HASHED) == first_seen


@given(small_int_lists(), st.integers(min_value=-20, max_value=20))
def test_dedup_flat_map_fails_whole_call(values: list[int], poison: int) -> None:
    def transform(value: int) -> int | None:
        if value == poison:
            message = f"cannot map {value}"
            raise LookupError(message)
        return value

    if poison in values:
        with pytest.raises(LookupError):
            _ = dedup_flat_map(values, transform)
    else:
        assert dedup_flat_map(values, transform) == list(dict.fromkeys(values))


@given(small_int_lists(), int_transforms())
def test_dup_map_returns_exactly_repeated_values(
    values: list[int],
    transform: Callable[[int], int],
) -> None:
    counts = Counter(transform(value) for value in values)
    result = dup_map(values, transform)
    assert result == sorted(value for value, count in counts.items() if count >= 2)
    assert all(left < right for left, right in zip(result, result[1:], strict=False))
