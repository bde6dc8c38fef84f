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

"""Split free-form version strings into homogeneous runs of characters.

Every character is classified as an ASCII letter, an ASCII digit, or
anything else. Letters and digits accumulate into runs; a run ends when the
class changes or a separator ("other") character is met. Separators are
dropped, so ``"1..2"``, ``".1.2"`` and ``"1-2"`` all yield ``["1", "2"]``.

Examples:
    >>> tokenize("1.2.3")
    ['1', '2', '3']
    >>> tokenize("v2021.03.01")
    ['v', '2021', '03', '01']
    >>> tokenize("1.0.0-beta.4")
    ['1', '0', '0', 'beta', '4']
    >>> tokenize("2rc1")
    ['2', 'rc', '1']
"""

from __future__ import annotations

from enum import Enum
import string

from verparts.exceptions import EmptyVersionError

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)


class CharClass(Enum):
    """Classification of a single character for tokenizing."""

    LETTER = "letter"
    DIGIT = "digit"
    OTHER = "other"


def classify(ch: str) -> CharClass:
    """Classify one character. Non-ASCII letters and digits are OTHER."""
    if ch in _LETTERS:
        return CharClass.LETTER
    if ch in _DIGITS:
        return CharClass.DIGIT
    return CharClass.OTHER


def tokenize(value: str) -> list[str]:
    """Split a version string into letter runs and digit runs.

    Args:
        value: Any string.

    Returns:
        The non-empty tokens in input order.

    Raises:
        EmptyVersionError: If no token survives (empty input or separators
            only).
    """
    tokens: list[str] = []
    buf: list[str] = []
    last = CharClass.OTHER

    for ch in value:
        cls = classify(ch)
        if cls is CharClass.OTHER or cls is not last:
            if buf:
                tokens.append("".join(buf))
                buf.clear()
        if cls is not CharClass.OTHER:
            buf.append(ch)
        last = cls

    if buf:
        tokens.append("".join(buf))

    tokens = [t for t in tokens if t.strip()]
    if not tokens:
        raise EmptyVersionError(value)
    return tokens
