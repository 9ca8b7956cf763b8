"""Exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success
  2   Error — usage error, bad argument, unreadable asset directory
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 2
