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

"""Parsed free-form version: an immutable sequence of VersionPart.

Two versions are compared part by part over the longer of the two
sequences, with a missing part treated as described in
``verparts.versioning.part``: it equals a numeric zero, sorts above a
non-numeric part and below any other number. No length tie-break is
applied, so ``"1.0"`` and ``"1.0.0"`` are equal under both ``==`` and
ordering, and they hash alike.

Examples:
    >>> Version.parse("1.9.0") < Version.parse("1.10.0")
    True
    >>> Version.parse("1.0.alpha") < Version.parse("1.0.0")
    True
    >>> Version.parse("10.0.19044.1").to_fixed4()
    FixedVersion(major=10, minor=0, build=19044, revision=1)
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import Enum
from typing import NamedTuple, overload

from verparts.exceptions import ConversionError
from verparts.versioning.part import VersionPart, part_compare, part_equals
from verparts.versioning.tokenizer import tokenize


class Component(Enum):
    """Positional components of a conventional 4-number version."""

    MAJOR = 0
    MINOR = 1
    BUILD = 2
    REVISION = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class FixedVersion(NamedTuple):
    """Conventional major.minor.build.revision version of 32-bit integers."""

    major: int
    minor: int
    build: int
    revision: int

    def __str__(self) -> str:
        return ".".join(str(n) for n in self)


def _hash_parts(parts: tuple[VersionPart, ...]) -> int:
    # Trailing zeros are dropped so "1" and "1.0.0" hash alike.
    end = len(parts)
    while end > 0 and parts[end - 1].value_big == 0:
        end -= 1
    return hash(tuple(hash(p) for p in parts[:end]))


class Version(Sequence):
    """An ordered, immutable sequence of version parts.

    Args:
        value: Any string containing at least one ASCII letter or digit.

    Raises:
        TypeError: If value is not a string.
        EmptyVersionError: If value contains no letters or digits.
    """

    __slots__ = ("_original", "_parts", "_hash")

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("Version must be a string")

        self._original = value
        self._parts = tuple(VersionPart(t) for t in tokenize(value))
        self._hash = _hash_parts(self._parts)

    @classmethod
    def parse(cls, value: str) -> Version:
        """Parse a version string; same as calling the constructor."""
        return cls(value)

    @property
    def original(self) -> str:
        """The exact input string."""
        return self._original

    @property
    def parts(self) -> tuple[VersionPart, ...]:
        return self._parts

    def part_at(self, index: int) -> VersionPart | None:
        """Return the part at index, or None past the end."""
        if 0 <= index < len(self._parts):
            return self._parts[index]
        return None

    @property
    def major(self) -> VersionPart | None:
        return self.part_at(Component.MAJOR.value)

    @property
    def minor(self) -> VersionPart | None:
        return self.part_at(Component.MINOR.value)

    @property
    def build(self) -> VersionPart | None:
        return self.part_at(Component.BUILD.value)

    @property
    def revision(self) -> VersionPart | None:
        return self.part_at(Component.REVISION.value)

    @property
    def is_prerelease(self) -> bool:
        """True if any part is non-numeric."""
        return any(p.is_prerelease for p in self._parts)

    def to_fixed4(self) -> FixedVersion:
        """Convert the first four parts to a FixedVersion.

        Missing parts become 0. Parts past the fourth are ignored.

        Raises:
            ConversionError: If a present part among the first four has no
                32-bit integer reading.
        """
        values: list[int] = []
        for component in Component:
            part = self.part_at(component.value)
            if part is None:
                values.append(0)
            elif part.value_int is None:
                raise ConversionError(component, part.value)
            else:
                values.append(part.value_int)
        return FixedVersion(*values)

    # ----------------------------
    # Sequence protocol
    # ----------------------------

    @overload
    def __getitem__(self, index: int) -> VersionPart: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[VersionPart, ...]: ...

    def __getitem__(self, index):
        return self._parts[index]

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[VersionPart]:
        return iter(self._parts)

    # ----------------------------
    # Equality / ordering
    # ----------------------------

    def compare_to(self, other: Version) -> int:
        """Return -1, 0 or 1 comparing self with other part by part."""
        for i in range(max(len(self), len(other))):
            c = part_compare(self.part_at(i), other.part_at(i))
            if c:
                return c
        return 0

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        if self is other:
            return True
        return all(
            part_equals(self.part_at(i), other.part_at(i))
            for i in range(max(len(self), len(other)))
        )

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return self._original

    def __repr__(self) -> str:
        return f"Version({self._original!r})"
