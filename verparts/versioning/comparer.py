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

"""Stand-alone comparator for VersionPart values.

VersionPart already carries its own ordering. This comparator exists for
APIs that take a comparison strategy instead of relying on the type's
operators, and for sorting sequences that may contain missing parts
(``None``), which the operators cannot handle.

Example:
    Sorting parts through the shared comparator:
        ```python
        from verparts.versioning import PART_COMPARER, VersionPart

        parts = [VersionPart(t) for t in ("10", "beta", "9", "Alpha")]
        sorted(parts, key=PART_COMPARER.key)
        # [Alpha, beta, 9, 10]
        ```
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable

from verparts.versioning.part import (
    VersionPart,
    part_compare,
    part_equals,
    part_hash,
)


class VersionPartComparer:
    """Stateless comparator implementing VersionPart equality and ordering.

    Instances hold no state, so the module-level PART_COMPARER can be shared
    freely between threads.
    """

    __slots__ = ()

    def equals(self, x: VersionPart | None, y: VersionPart | None) -> bool:
        return part_equals(x, y)

    def hash(self, obj: VersionPart | None) -> int:
        """Hash consistent with equals; a missing part hashes like zero."""
        if obj is None:
            return hash(0)
        return part_hash(obj)

    def compare(self, x: VersionPart | None, y: VersionPart | None) -> int:
        return part_compare(x, y)

    @property
    def key(self) -> Callable[[VersionPart | None], Any]:
        """Key function for ``sorted``/``list.sort``/``min``/``max``."""
        return cmp_to_key(self.compare)

    def __repr__(self) -> str:
        return "PART_COMPARER"


PART_COMPARER = VersionPartComparer()
