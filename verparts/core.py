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

"""High-level operations over version strings.

These functions accept plain strings, parse them with
``verparts.versioning.Version`` and return plain values or frozen result
dataclasses. They are what the CLI calls, and they are convenient when
callers never need to hold on to Version objects themselves.

Design Principles:

- Each function has a single, clear responsibility
- Sorting is stable: equal versions keep their input order, except where
  equality is not transitive (a missing part equals both "0" and "00",
  which differ), so "1", "1.0" and "1.00" can come out in any arrangement
- Error handling uses exceptions; CLI layer formats for user display
- Progress is reported through the global logger (silent by default)

Example:
    Programmatic usage:
        ```python
        from verparts.core import compare_versions, newest_version, sort_versions

        compare_versions("1.10.0", "1.9.0")                   # 1
        sort_versions(["1.10", "1.9", "1.9.beta"]).versions   # ('1.9.beta', '1.9', '1.10')
        newest_version(["2.0.rc1", "1.9"], include_prerelease=False)  # '1.9'
        ```
"""

from __future__ import annotations

from collections.abc import Iterable

from verparts.exceptions import ConversionError
from verparts.logging import get_global_logger
from verparts.results import InspectResult, PartInfo, SortResult
from verparts.versioning import Version


def _parse(value: str) -> Version:
    logger = get_global_logger()
    v = Version.parse(value)
    logger.debug("PARSE", f"{value!r} -> {[p.value for p in v]}")
    return v


def compare_versions(a: str, b: str) -> int:
    """Compare two version strings.

    Returns:
        -1 if a is older than b, 0 if equal, 1 if a is newer.

    Raises:
        EmptyVersionError: If either string has no letters or digits.
    """
    return _parse(a).compare_to(_parse(b))


def is_newer(remote: str, current: str | None) -> bool:
    """Decide if 'remote' should be considered newer than 'current'.

    A missing current version means anything is newer.
    """
    logger = get_global_logger()
    if current is None:
        logger.verbose("COMPARE", f"No current version. Treat {remote!r} as newer")
        return True

    result = compare_versions(remote, current)
    if result > 0:
        logger.verbose("COMPARE", f"{remote!r} is newer than {current!r}")
    elif result == 0:
        logger.verbose("COMPARE", f"{remote!r} is the same as {current!r}")
    else:
        logger.verbose("COMPARE", f"{remote!r} is older than {current!r}")
    return result > 0


def sort_versions(
    values: Iterable[str],
    *,
    reverse: bool = False,
    unique: bool = False,
) -> SortResult:
    """Sort version strings oldest first (or newest first with reverse).

    Args:
        values: Version strings in any order.
        reverse: Sort newest first.
        unique: Drop every version equal to one already kept. The first
            occurrence in sorted order wins.

    Returns:
        SortResult with the original strings in sorted order.

    Note:
        Versions that are all equal to each other keep their input order.
        Mixed spellings of zero ("1", "1.0", "1.00") are not all equal to
        each other, so their relative order depends on the input order.

    Raises:
        EmptyVersionError: If any string has no letters or digits.
    """
    logger = get_global_logger()
    parsed = [_parse(v) for v in values]
    logger.verbose("SORT", f"Sorting {len(parsed)} version(s)")

    ordered = sorted(parsed, reverse=reverse)

    removed = 0
    if unique:
        seen: set[Version] = set()
        kept: list[Version] = []
        for v in ordered:
            if v in seen:
                logger.debug("SORT", f"Dropping duplicate {v.original!r}")
                removed += 1
                continue
            seen.add(v)
            kept.append(v)
        ordered = kept

    return SortResult(
        versions=tuple(v.original for v in ordered),
        reverse=reverse,
        duplicates_removed=removed,
    )


def newest_version(
    values: Iterable[str],
    *,
    include_prerelease: bool = True,
) -> str | None:
    """Return the newest of the given version strings.

    Args:
        values: Version strings in any order.
        include_prerelease: If False, versions with any non-numeric part
            are skipped.

    Returns:
        The original string of the newest version, or None if there is no
        candidate. Among equal versions the first one given wins.
    """
    logger = get_global_logger()
    newest: Version | None = None
    for value in values:
        v = _parse(value)
        if v.is_prerelease and not include_prerelease:
            logger.verbose("SORT", f"Skipping prerelease {value!r}")
            continue
        if newest is None or v > newest:
            newest = v
    return newest.original if newest is not None else None


def inspect_version(value: str) -> InspectResult:
    """Describe how a version string is tokenized and read."""
    v = _parse(value)
    parts = tuple(
        PartInfo(
            index=i,
            value=p.value,
            value_int=p.value_int,
            value_long=p.value_long,
            value_big=p.value_big,
            value_date=p.value_date,
            is_prerelease=p.is_prerelease,
        )
        for i, p in enumerate(v)
    )

    try:
        fixed4 = v.to_fixed4()
        fixed4_error = None
    except ConversionError as err:
        fixed4 = None
        fixed4_error = str(err)

    return InspectResult(
        original=v.original,
        parts=parts,
        is_prerelease=v.is_prerelease,
        fixed4=fixed4,
        fixed4_error=fixed4_error,
    )
