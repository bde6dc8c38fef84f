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

"""Single classified token of a free-form version string.

A VersionPart eagerly attempts several typed readings of its token: 32-bit
integer, 64-bit integer, unbounded integer, and calendar date/time. The
unbounded integer is the ground truth for numeric value and precedence;
the narrow readings only exist so callers can convert losslessly into
fixed-width version types.

Ordering rules (shared with VersionPartComparer):

- Non-numeric ("prerelease") parts sort before numeric parts.
- Numeric parts compare by value, then by spelling (``"007"`` < ``"7"``).
- Non-numeric parts compare case-insensitively.
- A missing part (``None``) equals a numeric zero, sorts below any other
  numeric part and above any non-numeric part.

Date grammar:
    Only digit runs of length 8 (YYYYMMDD), 12 (YYYYMMDDHHMM) or 14
    (YYYYMMDDHHMMSS) are read as dates. Shorter runs such as ``"2021"`` are
    ambiguous and never get a date reading.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_DATE_FORMATS: dict[int, str] = {
    8: "%Y%m%d",
    12: "%Y%m%d%H%M",
    14: "%Y%m%d%H%M%S",
}

# ----------------------------
# Typed readings
# ----------------------------


def _parse_big(token: str) -> int | None:
    if token.isascii() and token.isdigit():
        return int(token)
    return None


def _narrow(value: int | None, lo: int, hi: int) -> int | None:
    if value is None or not lo <= value <= hi:
        return None
    return value


def _parse_datetime(token: str) -> datetime | None:
    fmt = _DATE_FORMATS.get(len(token))
    if fmt is None or not (token.isascii() and token.isdigit()):
        return None
    try:
        return datetime.strptime(token, fmt)
    except ValueError:
        return None


# ----------------------------
# Part
# ----------------------------


@dataclass(frozen=True, eq=False)
class VersionPart:
    """One token of a version string with its typed readings.

    Attributes:
        value: The token exactly as tokenized (never empty).
        value_int: Integer value if it fits in 32 bits.
        value_long: Integer value if it fits in 64 bits.
        value_big: Integer value of any size, None for non-numeric tokens.
        value_datetime: Date/time reading for 8/12/14-digit tokens.
        value_date: Date portion of value_datetime.

    """

    value: str
    value_int: int | None = field(init=False, repr=False)
    value_long: int | None = field(init=False, repr=False)
    value_big: int | None = field(init=False, repr=False)
    value_datetime: datetime | None = field(init=False, repr=False)
    value_date: date | None = field(init=False, repr=False)
    _hash: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("version part must not be empty")

        big = _parse_big(self.value)
        dt = _parse_datetime(self.value)
        object.__setattr__(self, "value_big", big)
        object.__setattr__(self, "value_long", _narrow(big, INT64_MIN, INT64_MAX))
        object.__setattr__(self, "value_int", _narrow(big, INT32_MIN, INT32_MAX))
        object.__setattr__(self, "value_datetime", dt)
        object.__setattr__(self, "value_date", dt.date() if dt else None)
        object.__setattr__(self, "_hash", part_hash(self))

    @property
    def is_prerelease(self) -> bool:
        """True when the token has no numeric reading."""
        return self.value_big is None

    def __str__(self) -> str:
        return self.value

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionPart):
            return NotImplemented
        return part_equals(self, other)

    def __lt__(self, other: VersionPart) -> bool:
        if not isinstance(other, VersionPart):
            return NotImplemented
        return part_compare(self, other) < 0

    def __le__(self, other: VersionPart) -> bool:
        if not isinstance(other, VersionPart):
            return NotImplemented
        return part_compare(self, other) <= 0

    def __gt__(self, other: VersionPart) -> bool:
        if not isinstance(other, VersionPart):
            return NotImplemented
        return part_compare(self, other) > 0

    def __ge__(self, other: VersionPart) -> bool:
        if not isinstance(other, VersionPart):
            return NotImplemented
        return part_compare(self, other) >= 0


# ----------------------------
# Equality / ordering core
# ----------------------------


def part_hash(part: VersionPart) -> int:
    """Hash a part by numeric value, else by its lowercased token.

    Python ints hash by value, so the narrowest-reading-first rule collapses
    to hashing the unbounded value: ``"7"`` and ``"007"`` hash alike.
    """
    if part.value_int is not None:
        return hash(part.value_int)
    if part.value_long is not None:
        return hash(part.value_long)
    if part.value_big is not None:
        return hash(part.value_big)
    return hash(part.value.lower())


def _is_zero(part: VersionPart) -> bool:
    return part.value_big == 0


def part_equals(a: VersionPart | None, b: VersionPart | None) -> bool:
    """Compare two parts for equality, either of which may be missing.

    A missing part equals another missing part or a numeric zero. Two
    present parts are equal when their hashes, all three integer readings,
    and their tokens (ignoring case) agree.
    """
    if a is b:
        return True
    if a is None:
        return _is_zero(b)
    if b is None:
        return _is_zero(a)

    if hash(a) != hash(b):
        return False
    if a.value_int != b.value_int:
        return False
    if a.value_long != b.value_long:
        return False
    if a.value_big != b.value_big:
        return False
    return a.value.lower() == b.value.lower()


def _cmp(x, y) -> int:
    return (x > y) - (x < y)


def part_compare(a: VersionPart | None, b: VersionPart | None) -> int:
    """Order two parts, either of which may be missing.

    Returns -1 if a < b, 0 if equal, 1 if a > b. The result is 0 exactly
    when part_equals(a, b) is True.
    """
    if a is b:
        return 0
    if a is None:
        if _is_zero(b):
            return 0
        return 1 if b.is_prerelease else -1
    if b is None:
        if _is_zero(a):
            return 0
        return -1 if a.is_prerelease else 1

    if a.is_prerelease and not b.is_prerelease:
        return -1
    if not a.is_prerelease and b.is_prerelease:
        return 1

    if not a.is_prerelease:
        c = _cmp(a.value_big, b.value_big)
        if c:
            return c
    return _cmp(a.value.lower(), b.value.lower())
