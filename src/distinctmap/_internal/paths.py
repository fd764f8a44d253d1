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

"""Filesystem helpers for locating the project root."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, Literal, TypeAlias

from distinctmap._internal.logging_utils import structured_extra
from distinctmap.core.model_types import LogComponent

logger: logging.Logger = logging.getLogger("distinctmap.internal.paths")

__all__ = ["ROOT_MARKERS", "RootMarker", "resolve_project_root"]

RootMarker: TypeAlias = Literal["distinctmap.toml", ".distinctmap.toml", "pyproject.toml"]

ROOT_MARKERS: Final[tuple[RootMarker, RootMarker, RootMarker]] = (
    "distinctmap.toml",
    ".distinctmap.toml",
    "pyproject.toml",
)


def resolve_project_root(start: Path | None = None) -> Path:
    """Resolve the project root by walking parent directories for markers.

    Args:
        start: Optional starting path (defaults to current working directory).

    Returns:
        Path to the discovered project root.

    Raises:
        FileNotFoundError: If ``start`` is provided but does not exist.
    """
    base = (start or Path.cwd()).resolve()
    if base.is_file():
        base = base.parent

    checked: list[Path] = []
    for candidate in (base, *base.parents):
        checked.append(candidate)
        for marker in ROOT_MARKERS:
            if (candidate / marker).exists():
                return candidate

    if start is not None and not base.exists():
        message = f"Provided project root {start} does not exist."
        raise FileNotFoundError(message)

    logger.debug(
        "No project markers found; using %s as project root",
        base,
        extra=structured_extra(
            LogComponent.CONFIG,
            path=base,
            details={"checked": [str(path) for path in checked]},
        ),
    )
    return base
