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

"""Free-form version parsing and comparison for verparts.

This package turns arbitrary version strings (not only strict SemVer) into
ordered sequences of typed parts so versions from different ecosystems can
be sorted and compared consistently.

Modules:
    tokenizer
        Splits a string into letter runs and digit runs, dropping separators.
    part
        VersionPart with 32-bit/64-bit/unbounded integer and date readings,
        plus the shared equality, ordering and hash rules.
    comparer
        VersionPartComparer and its shared PART_COMPARER instance.
    version
        Version (immutable part sequence) and its fixed 4-number form.

Example:
    Basic version comparison:
        ```python
        from verparts.versioning import Version

        Version.parse("1.9.0") < Version.parse("1.10.0")   # True
        Version.parse("1.0") == Version.parse("1.0.0")     # True
        Version.parse("1.0.beta") < Version.parse("1.0.0") # True
        ```

    Conversion:
        ```python
        Version.parse("10.0.19044.1").to_fixed4()  # (10, 0, 19044, 1)
        ```
"""

from .comparer import PART_COMPARER, VersionPartComparer
from .part import VersionPart, part_compare, part_equals, part_hash
from .tokenizer import CharClass, classify, tokenize
from .version import Component, FixedVersion, Version

__all__ = [
    "CharClass",
    "Component",
    "FixedVersion",
    "PART_COMPARER",
    "Version",
    "VersionPart",
    "VersionPartComparer",
    "classify",
    "part_compare",
    "part_equals",
    "part_hash",
    "tokenize",
]
