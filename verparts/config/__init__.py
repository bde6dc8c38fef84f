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

"""Configuration loading for verparts.

Version lists live in YAML files layered over optional shared defaults
(``defaults/verparts.yaml``, found by walking upward from the file).

Public API:

- load_effective_config: Load, merge and validate a version list file
- DEFAULT_OPTIONS: Built-in option values

Example:
    Basic usage:

        from pathlib import Path
        from verparts.config import load_effective_config

        config = load_effective_config(Path("releases.yaml"))
        print(config["versions"])
"""

from .loader import DEFAULT_OPTIONS, load_effective_config

__all__ = ["DEFAULT_OPTIONS", "load_effective_config"]
