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

"""Exception hierarchy for verparts.

This module defines a small exception hierarchy that lets library users
distinguish between parse failures, conversion failures and configuration
problems:

- EmptyVersionError: A string produced no version parts at all
- ConversionError: A version could not be expressed as four 32-bit integers
- ConfigError: Version list / defaults YAML could not be loaded or is malformed

All exceptions inherit from VerPartsError, allowing users to catch every
verparts error with a single except clause. The two value errors also
inherit from ValueError so callers that already guard ``int()``-style
parsing keep working.

Example:
    Catching specific error types:
        ```python
        from verparts import Version
        from verparts.exceptions import ConversionError, EmptyVersionError

        try:
            fixed = Version.parse("1.x.3").to_fixed4()
        except EmptyVersionError as e:
            print(f"Not a version: {e}")
        except ConversionError as e:
            print(f"{e.component.label} is not numeric: {e.literal}")
        ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from verparts.versioning.version import Component

__all__ = [
    "VerPartsError",
    "EmptyVersionError",
    "ConversionError",
    "ConfigError",
]


class VerPartsError(Exception):
    """Base exception for all verparts errors."""

    pass


class EmptyVersionError(VerPartsError, ValueError):
    """Raised when a string tokenizes to zero version parts.

    This happens for the empty string and for strings made up only of
    separator characters (``"..."``, ``"- _"``).

    Attributes:
        value: The rejected input string.
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"{value!r} is not a valid version")


class ConversionError(VerPartsError, ValueError):
    """Raised when a version cannot be converted to the fixed 4-number form.

    Attributes:
        component: Which positional component failed (major, minor, build
            or revision).
        literal: The token that could not be read as a 32-bit integer.
    """

    def __init__(self, component: Component, literal: str) -> None:
        self.component = component
        self.literal = literal
        super().__init__(
            f"Could not convert {literal!r} to int for {component.label}"
        )


class ConfigError(VerPartsError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - YAML parsing (syntax errors, invalid structure)
    - Missing version list or defaults files
    - Wrongly typed fields (``versions`` not a list of strings, ``options``
      not a mapping)

    Example:
        Catching configuration errors:
            ```python
            from verparts.config import load_effective_config
            from verparts.exceptions import ConfigError

            try:
                config = load_effective_config(Path("versions.yaml"))
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass
