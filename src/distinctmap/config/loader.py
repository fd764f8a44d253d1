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

"""Configuration loading for distinctmap.

Project-level configuration lives in ``distinctmap.toml``, ``.distinctmap.toml``,
or the ``[tool.distinctmap]`` table of ``pyproject.toml``.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import cast

from pydantic import ValidationError

from distinctmap._internal.logging_utils import structured_extra
from distinctmap._internal.paths import resolve_project_root
from distinctmap.core.model_types import LogComponent

from .models import (
    Config,
    ConfigModel,
    ConfigReadError,
    InvalidConfigFileError,
    config_from_model,
)

logger: logging.Logger = logging.getLogger("distinctmap.config")


@dataclass(slots=True, frozen=True)
class LoadedConfig:
    """Container for a loaded configuration and its source path.

    Attributes:
        config: Parsed configuration instance.
        path: Filesystem path the configuration was loaded from, or None when
            defaults are used.
    """

    config: Config
    path: Path | None


def load_config(explicit_path: Path | None = None) -> Config:
    """Load distinctmap configuration from a TOML file or use defaults.

    Args:
        explicit_path: Optional explicit path to a configuration file. If provided,
            only this file will be checked. If None, standard locations are searched.

    Returns:
        A Config object.
    """
    return load_config_with_metadata(explicit_path).config


def load_config_with_metadata(explicit_path: Path | None = None) -> LoadedConfig:
    """Load distinctmap configuration with metadata about the source file.

    The function searches for configuration files in the following order:
    1. If explicit_path is provided, only that path is checked.
    2. Otherwise, distinctmap.toml, .distinctmap.toml, and pyproject.toml are
       searched within the detected project root, using the first file that
       contains distinctmap configuration data.

    Standalone files hold the settings at the top level; ``pyproject.toml``
    nests them under ``[tool.distinctmap]``.

    Args:
        explicit_path: Optional explicit path to a configuration file.

    Returns:
        LoadedConfig: Parsed configuration and the path it originated from.

    Raises:
        ConfigReadError: If a candidate file cannot be read or parsed as TOML.
        InvalidConfigFileError: If a candidate file fails schema validation, or an
            explicit file carries no distinctmap configuration.
        UnsupportedConfigVersionError: If ``config_version`` is not supported.
    """
    search_order = _config_search_order(explicit_path)

    for candidate in search_order:
        loaded = _load_candidate_config(candidate, explicit=explicit_path is not None)
        if loaded is not None:
            logger.debug(
                "Loaded configuration from %s",
                loaded.path,
                extra=structured_extra(
                    LogComponent.CONFIG,
                    path=candidate,
                    strategy=loaded.config.dedup_strategy,
                ),
            )
            return loaded

    logger.debug(
        "No distinctmap configuration found; using defaults",
        extra=structured_extra(
            LogComponent.CONFIG,
            details={"searched": [str(path) for path in search_order]},
        ),
    )
    return LoadedConfig(config=Config(), path=None)


def _config_search_order(explicit_path: Path | None) -> list[Path]:
    if explicit_path:
        return [_resolve_candidate_path(explicit_path)]
    base_dir = resolve_project_root(Path.cwd())
    return [
        base_dir / "distinctmap.toml",
        base_dir / ".distinctmap.toml",
        base_dir / "pyproject.toml",
    ]


def _resolve_candidate_path(candidate: Path) -> Path:
    return candidate if candidate.is_absolute() else (Path.cwd() / candidate).resolve()


def _load_candidate_config(candidate: Path, *, explicit: bool) -> LoadedConfig | None:
    if not candidate.exists():
        if explicit:
            raise ConfigReadError(candidate, FileNotFoundError(f"{candidate} does not exist"))
        return None
    try:
        raw_map: dict[str, object] = tomllib.loads(candidate.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(candidate, exc) from exc

    payload = _extract_distinctmap_payload(candidate, raw_map)
    if payload is None:
        if explicit:
            message = (
                f"{candidate.name} does not define distinctmap configuration; "
                "add top-level settings or a [tool.distinctmap] section"
            )
            raise InvalidConfigFileError(candidate, ValueError(message))
        return None

    try:
        cfg_model = ConfigModel.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigFileError(candidate, exc) from exc

    return LoadedConfig(config=config_from_model(cfg_model), path=candidate.resolve())


def _extract_distinctmap_payload(candidate: Path, raw_map: dict[str, object]) -> dict[str, object] | None:
    """Extract the distinctmap configuration payload from a TOML mapping.

    Args:
        candidate: Source configuration path.
        raw_map: Data parsed from the TOML document.

    Returns:
        Mapping to validate or None when no distinctmap configuration is present
        (only for pyproject.toml lookups).

    Raises:
        InvalidConfigFileError: If [tool.distinctmap] exists but is not a table.
    """
    if candidate.name != "pyproject.toml":
        return raw_map

    tool_section = raw_map.get("tool")
    if tool_section is None:
        return None
    if not isinstance(tool_section, dict):
        message = "[tool] in pyproject.toml must be a TOML table"
        raise InvalidConfigFileError(candidate, ValueError(message))
    section = cast("dict[str, object]", tool_section).get("distinctmap")
    if section is None:
        return None
    if not isinstance(section, dict):
        message = "[tool.distinctmap] must be a TOML table"
        raise InvalidConfigFileError(candidate, ValueError(message))
    return cast("dict[str, object]", section)


__all__ = ["LoadedConfig", "load_config", "load_config_with_metadata"]
