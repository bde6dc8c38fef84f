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

"""Public API return types for verparts.

This module defines dataclasses for return values from the high-level
operations in ``verparts.core``. All dataclasses are frozen (immutable) to
prevent accidental mutation of return values.

Note:
    Only public API return types belong in this module. Domain types
    (like Version and FixedVersion) stay co-located with their logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from verparts.versioning import FixedVersion


@dataclass(frozen=True)
class SortResult:
    """Result from sorting a list of version strings.

    Attributes:
        versions: Original strings in sorted order.
        reverse: Whether the order is newest first.
        duplicates_removed: How many equal versions were dropped (always 0
            unless unique sorting was requested).
    """

    versions: tuple[str, ...]
    reverse: bool
    duplicates_removed: int


@dataclass(frozen=True)
class PartInfo:
    """Typed readings of one version part.

    Attributes:
        index: Zero-based position in the version.
        value: Token text.
        value_int: 32-bit integer reading, if any.
        value_long: 64-bit integer reading, if any.
        value_big: Unbounded integer reading, if any.
        value_date: Calendar date reading, if any.
        is_prerelease: True for non-numeric parts.
    """

    index: int
    value: str
    value_int: int | None
    value_long: int | None
    value_big: int | None
    value_date: date | None
    is_prerelease: bool


@dataclass(frozen=True)
class InspectResult:
    """Result from inspecting one version string.

    Attributes:
        original: The input string.
        parts: Per-part readings in order.
        is_prerelease: True if any part is non-numeric.
        fixed4: The 4-number form, or None if not convertible.
        fixed4_error: Why conversion failed, or None.
    """

    original: str
    parts: tuple[PartInfo, ...]
    is_prerelease: bool
    fixed4: FixedVersion | None
    fixed4_error: str | None
