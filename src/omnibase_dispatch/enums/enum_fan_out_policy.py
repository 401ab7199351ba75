# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Fan-out failure policy enumeration."""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumFanOutPolicy(str, Enum):
    """
    How the dispatcher reports handler failures during fan-out.

    - **FAIL_FAST**: The first handler exception propagates out of the
      dispatch call. Remaining handlers are not awaited by the caller.
    - **COLLECT_ALL**: Every handler runs to completion. If any of them
      failed, a single ``FanOutError`` carrying all failures is raised.
    """

    FAIL_FAST = "fail_fast"
    COLLECT_ALL = "collect_all"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__ = ["EnumFanOutPolicy"]
