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

"""Walk through the three maps with small sample inputs.

The sample data and helper transforms are also defined in
``tests/fixtures/samples.py``; this script keeps its own copy so it runs
without the test tree on the path.
"""

from __future__ import annotations

import logging

from distinctmap import configure_logging, dedup_flat_map, dedup_map, dup_map, load_config

logger = logging.getLogger("distinctmap.examples")

NUMBERS = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 21, 33, 126]
NAMES = ["Mike", "Ben", "Phoebe", "Phoebe", "Jenny"]
POSSIBLE_INTEGERS = ["one", "2", "3", None, "four", "5", "5", None]


def highest_proper_factor(number: int) -> int:
    for candidate in range(number // 2, 1, -1):
        if number % candidate == 0:
            return candidate
    return 1


def parse_int_or_none(text: str | None) -> int | None:
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def main() -> None:
    config = load_config()
    configure_logging(config.logging.format, log_level=config.logging.level)
    strategy = config.dedup_strategy

    logger.info("numbers as strings: %s", dedup_map(NUMBERS, str, strategy=strategy))
    logger.info("unique names: %s", dedup_map(NAMES, lambda name: name, strategy=strategy))
    parsed = dedup_flat_map(POSSIBLE_INTEGERS, parse_int_or_none, strategy=strategy)
    logger.info("parsed integers: %s", parsed)
    logger.info("repeated names: %s", dup_map(NAMES, lambda name: name))
    logger.info("shared highest factors: %s", dup_map(NUMBERS, highest_proper_factor))


if __name__ == "__main__":
    main()
