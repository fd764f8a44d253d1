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

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from collections.abc import Callable

from hypothesis import strategies as st

__all__ = [
    "int_transforms",
    "optional_int_transforms",
    "small_int_lists",
]


def small_int_lists(max_size: int = 40) -> st.SearchStrategy[list[int]]:
    """Return a strategy for short integer lists with plenty of repeats."""
    return st.lists(st.integers(min_value=-20, max_value=20), max_size=max_size)


def int_transforms() -> st.SearchStrategy[Callable[[int], int]]:
    """Strategy that emits deterministic integer transforms.

    Returns:
        Hypothesis strategy producing pure ``int -> int`` functions, including
        collapsing ones (modulo) that map distinct inputs to equal outputs.
    """
    modulus = st.integers(min_value=1, max_value=7).map(lambda m: lambda value: value % m)
    offset = st.integers(min_value=-5, max_value=5).map(lambda k: lambda value: value + k)
    return st.one_of(
        st.just(lambda value: value),
        st.just(abs),
        st.just(lambda value: value // 3),
        modulus,
        offset,
    )


def optional_int_transforms() -> st.SearchStrategy[Callable[[int], int | None]]:
    """Strategy that emits integer transforms that sometimes yield ``None``.

    Returns:
        Hypothesis strategy producing ``int -> int | None`` functions that drop
        values divisible by a drawn modulus.
    """

    def drop_multiples(modulus: int) -> Callable[[int], int | None]:
        return lambda value: None if value % modulus == 0 else value // 2

    return st.integers(min_value=2, max_value=5).map(drop_multiples)
