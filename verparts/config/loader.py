# Copyright 2025 Roger Cibrian
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

"""Configuration loading and merging for verparts.

Version lists can be kept in YAML files and fed to the CLI with
``--file``. This module loads such a file, layers it over shared defaults
and validates the result.

Configuration Layers
--------------------
1. **Shared defaults** (defaults/verparts.yaml)
   - Found by walking upward from the version list file
   - Optional; typically holds the ``options`` used across a repository

2. **Version list** (any YAML file)
   - Always required
   - Overrides shared defaults

File Shape
----------
    versions:
      - "1.2.3"
      - "v2021.03.01"
    options:
      reverse: false
      unique: false
      include_prerelease: true

Version entries must be strings. YAML reads unquoted ``1.10`` as the float
``1.1``, so unquoted numbers are rejected rather than silently changed.

Merge Behavior
--------------
The loader performs deep merging with "last wins" semantics:
  - **Dicts**: Recursively merged (keys from overlay override base)
  - **Lists**: Completely replaced (NOT appended/extended)
  - **Scalars**: Overwritten (strings, numbers, booleans)

Error Handling
--------------
- ConfigError: Missing file, YAML parse errors, empty files, wrong shapes
- All errors are chained with "from err" for better debugging

Examples
--------
Basic usage:

    >>> from pathlib import Path
    >>> from verparts.config import load_effective_config
    >>> cfg = load_effective_config(Path("releases.yaml"))
    >>> cfg["options"]["reverse"]
    False
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from verparts.exceptions import ConfigError

DEFAULTS_DIR = "defaults"
DEFAULTS_FILE = "verparts.yaml"

DEFAULT_OPTIONS: dict[str, bool] = {
    "reverse": False,
    "unique": False,
    "include_prerelease": True,
}

# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """
    Load a YAML file and return the parsed Python object.

    Raises:
      ConfigError - when the file does not exist, is not valid YAML or is empty
    """
    if not p.exists():
        raise ConfigError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


def _print_yaml_content(data: dict[str, Any], indent: int = 0) -> None:
    from verparts.logging import get_global_logger

    logger = get_global_logger()
    yaml_str = yaml.dump(data, default_flow_style=False, sort_keys=False)
    for line in yaml_str.split("\n"):
        if line.strip():
            logger.debug("CONFIG", " " * indent + line)


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dicts with "overlay wins".

    Rules:
      - dict + dict -> deep merge
      - list + list -> overlay REPLACES base (not concatenated)
      - everything else -> overlay overwrites base

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# -------------------------------
# Defaults discovery
# -------------------------------


def _find_defaults_file(start_dir: Path) -> Path | None:
    """
    Walk upward from 'start_dir' looking for 'defaults/verparts.yaml'.
    Returns the file path or None if not found.
    """
    for parent in [start_dir] + list(start_dir.parents):
        candidate = parent / DEFAULTS_DIR / DEFAULTS_FILE
        if candidate.exists():
            return candidate
    return None


# -------------------------------
# Validation
# -------------------------------


def _validate(cfg: dict[str, Any], source: Path) -> None:
    """
    Check field types and fill in missing options. Modifies cfg in place.
    """
    from verparts.logging import get_global_logger

    logger = get_global_logger()

    versions = cfg.setdefault("versions", [])
    if not isinstance(versions, list):
        raise ConfigError(f"'versions' must be a list in {source}")
    for i, entry in enumerate(versions):
        if not isinstance(entry, str):
            raise ConfigError(
                f"versions[{i}] must be a string, got {type(entry).__name__} "
                f"{entry!r} in {source} (quote version numbers in YAML)"
            )

    options = cfg.get("options")
    if options is None:
        options = {}
    if not isinstance(options, dict):
        raise ConfigError(f"'options' must be a mapping in {source}")

    for key, value in options.items():
        if key not in DEFAULT_OPTIONS:
            logger.warning("CONFIG", f"Ignoring unknown option {key!r} in {source}")
        elif not isinstance(value, bool):
            raise ConfigError(f"option {key!r} must be true or false in {source}")

    cfg["options"] = {**DEFAULT_OPTIONS, **options}


# -------------------------------
# Public API
# -------------------------------


def load_effective_config(path: Path) -> dict[str, Any]:
    """
    Load and merge the effective configuration for a version list file.

    Steps
      1) Read the version list YAML.
      2) Find 'defaults/verparts.yaml' by scanning upwards from the file.
      3) Merge: defaults -> file (dicts deep-merge, lists replace).
      4) Validate 'versions' and 'options'; fill built-in option defaults.

    Returns
      A merged configuration dict with 'versions' (list of str) and
      'options' (dict of bool).

    Raises
      ConfigError on missing files, YAML parse errors and invalid shapes.
    """
    from verparts.logging import get_global_logger

    logger = get_global_logger()

    path = path.resolve()
    logger.verbose("CONFIG", f"Loading version list: {path}")

    file_obj = _load_yaml_file(path)
    if not isinstance(file_obj, dict):
        raise ConfigError(f"top-level YAML must be a mapping (dict): {path}")

    merged: dict[str, Any] = {}
    defaults_path = _find_defaults_file(path.parent)
    if defaults_path is not None:
        logger.verbose("CONFIG", f"Loading defaults: {defaults_path}")
        defaults_obj = _load_yaml_file(defaults_path)
        if not isinstance(defaults_obj, dict):
            raise ConfigError(
                f"top-level YAML must be a mapping (dict): {defaults_path}"
            )
        logger.debug("CONFIG", f"--- Content from {defaults_path.name} ---")
        _print_yaml_content(defaults_obj)
        merged = _deep_merge_dicts(merged, defaults_obj)

    logger.debug("CONFIG", f"--- Content from {path.name} ---")
    _print_yaml_content(file_obj)
    merged = _deep_merge_dicts(merged, file_obj)

    _validate(merged, path)
    logger.verbose(
        "CONFIG", f"Loaded {len(merged['versions'])} version(s) from {path.name}"
    )
    return merged
