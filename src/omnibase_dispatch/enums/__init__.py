# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Dispatch Enumerations Module.

Exports:
    EnumActionKind: Action kind classification (COMMAND, QUERY, EVENT, ...)
    EnumContextAction: Action type tags of the context middleware
    EnumFanOutPolicy: Fan-out failure policy (FAIL_FAST, COLLECT_ALL)
"""

from omnibase_dispatch.enums.enum_action_kind import EnumActionKind
from omnibase_dispatch.enums.enum_context_action import EnumContextAction
from omnibase_dispatch.enums.enum_fan_out_policy import EnumFanOutPolicy

__all__: list[str] = [
    "EnumActionKind",
    "EnumContextAction",
    "EnumFanOutPolicy",
]
