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

"""Output channels for verparts library code.

Parsing, sorting and config loading report what they do through a small
logger object rather than printing, so importing verparts never produces
output on its own. The CLI swaps in a printing logger from its -v/-d flags.

Channels and their users:

- verbose: one line per operation ("[SORT] Sorting 12 version(s)",
  "[COMPARE] '1.2' is newer than '1.1'", "[CONFIG] Loading ...")
- debug: per-version detail ("[PARSE] '1.0-rc1' -> ['1', '0', 'rc', '1']")
  and the merged YAML dump from the config loader
- warning: problems that do not stop the run, such as an unknown key
  under ``options`` in a version list file

Example:
    Turning on parse tracing from a script:
        ```python
        from verparts import sort_versions
        from verparts.logging import get_logger, set_global_logger

        set_global_logger(get_logger(debug=True))
        sort_versions(["1.10", "1.9"])
        ```
"""

from __future__ import annotations

from typing import Protocol


class Logger(Protocol):
    """What library code may call on a logger."""

    def verbose(self, prefix: str, message: str) -> None:
        """Report a high-level step (prefix: SORT, COMPARE, CONFIG)."""
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Report per-version detail (prefix: PARSE, SORT, CONFIG)."""
        ...

    def warning(self, prefix: str, message: str) -> None:
        """Report a recoverable problem, whatever the verbosity."""
        ...


class DefaultLogger:
    """Prints ``[PREFIX] message`` lines to stdout.

    Debug implies verbose. Warnings are printed in every mode.
    """

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        self._verbose = verbose or debug
        self._debug = debug

    def verbose(self, prefix: str, message: str) -> None:
        if self._verbose:
            print(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        if self._debug:
            print(f"[{prefix}] {message}")

    def warning(self, prefix: str, message: str) -> None:
        print(f"[{prefix}] WARNING: {message}")


class SilentLogger:
    """Drops everything, warnings included. The global default."""

    def verbose(self, prefix: str, message: str) -> None:
        pass

    def debug(self, prefix: str, message: str) -> None:
        pass

    def warning(self, prefix: str, message: str) -> None:
        pass


_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Build a printing logger for the given CLI flags."""
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Return the logger core.py and config/loader.py write to."""
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Replace the global logger; the CLI calls this once per command."""
    global _global_logger
    _global_logger = logger
