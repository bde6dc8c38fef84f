"""
verparts - free-form version parsing and comparison

verparts parses arbitrary version strings (not only strict SemVer) such as
"1.2.3", "v2021.03.01", "10.0.19044.1" or "1.0.0-beta.4" into ordered
sequences of typed parts, so versions from different ecosystems can be
sorted and compared consistently.

verparts provides:
  - Tokenizing into letter and digit runs, separators dropped
  - Parts with 32-bit, 64-bit, unbounded integer and date readings
  - Total ordering, equality and hashing over whole versions
  - Non-numeric (prerelease) parts ordered before numeric ones
  - Conversion to a fixed major.minor.build.revision form
  - A command-line tool for comparing, sorting and inspecting versions

Quick Start
-----------
Compare two versions:

    $ verparts compare 1.9.0 1.10.0

Sort a YAML list of versions newest first:

    $ verparts sort --file releases.yaml --reverse

For full CLI documentation:

    $ verparts --help

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
core : module
    High-level operations over version strings.
config : package
    YAML version list loading and merging.
versioning : package
    Tokenizer, VersionPart, VersionPartComparer and Version.

Public API
----------
    from verparts import Version, VersionPart, PART_COMPARER
    from verparts import compare_versions, sort_versions, newest_version

Project Information
-------------------
License: Apache-2.0
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"
__description__ = "Free-form version parsing, comparison and sorting"

from verparts.config import load_effective_config
from verparts.core import (
    compare_versions,
    inspect_version,
    is_newer,
    newest_version,
    sort_versions,
)
from verparts.exceptions import (
    ConfigError,
    ConversionError,
    EmptyVersionError,
    VerPartsError,
)
from verparts.results import InspectResult, PartInfo, SortResult
from verparts.versioning import (
    PART_COMPARER,
    Component,
    FixedVersion,
    Version,
    VersionPart,
    VersionPartComparer,
    tokenize,
)

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "Component",
    "ConfigError",
    "ConversionError",
    "EmptyVersionError",
    "FixedVersion",
    "InspectResult",
    "PART_COMPARER",
    "PartInfo",
    "SortResult",
    "VerPartsError",
    "Version",
    "VersionPart",
    "VersionPartComparer",
    "compare_versions",
    "inspect_version",
    "is_newer",
    "load_effective_config",
    "newest_version",
    "sort_versions",
    "tokenize",
]
