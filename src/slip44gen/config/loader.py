# SPDX-License-Identifier: Apache-2.0
"""Read a generator job from YAML.

``${VAR}`` references are expanded from the environment before parsing and
top-level keys may be written kebab-case (``output-path``). Keys under
``name-overrides`` are coin names and are kept as written.
"""

from __future__ import annotations

import os
import re
import warnings
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .generator import CURRENT_CONFIG_VERSION, MIN_SUPPORTED_VERSION, GeneratorConfig

PathLike = Union[str, Path]

_VERSION_RE = re.compile(r"\d+")


class ConfigVersionError(RuntimeError):
    """Error when configuration version is incompatible."""


def parse_config_version(raw: Any) -> int:
    """Return ``raw`` as a supported schema version number.

    A job newer than this release is accepted with a UserWarning.

    Raises:
        ConfigVersionError: If the version is missing, not a whole number, or
            older than MIN_SUPPORTED_VERSION
    """
    if raw is None or raw == "":
        raise ConfigVersionError(
            f'config_version missing. Add `config_version: "{CURRENT_CONFIG_VERSION}"` to the job file.'
        )
    text = str(raw).strip()
    if isinstance(raw, bool) or not _VERSION_RE.fullmatch(text):
        raise ConfigVersionError(f"config_version must be a whole number, got {raw!r}")

    version = int(text)
    if version < MIN_SUPPORTED_VERSION:
        raise ConfigVersionError(
            f"config_version {version} is too old; this release reads "
            f"{MIN_SUPPORTED_VERSION} to {CURRENT_CONFIG_VERSION}"
        )
    if version > CURRENT_CONFIG_VERSION:
        warnings.warn(
            f"config_version {version} is newer than {CURRENT_CONFIG_VERSION}; "
            "reading it best-effort",
            UserWarning,
            stacklevel=3,
        )
    return version


def _read_job_file(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(os.path.expandvars(path.read_text(encoding="utf-8")))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path} must hold a mapping of job settings")
    return {str(key).replace("-", "_"): value for key, value in data.items()}


def load_config(path: PathLike) -> GeneratorConfig:
    """Load and validate a generator job.

    Raises:
        FileNotFoundError: If ``path`` is not a file
        ConfigVersionError: If ``config_version`` is missing or unsupported
        ValueError: If the YAML is malformed; pydantic's ValidationError (a
            ValueError) names the offending field, e.g.
            ``name_overrides.Foo-Bar``
    """
    yaml_path = Path(path)
    if not yaml_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    data = _read_job_file(yaml_path)
    data["config_version"] = parse_config_version(data.get("config_version"))
    return GeneratorConfig.model_validate(data)
