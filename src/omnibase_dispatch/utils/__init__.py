# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for action dispatch.

This package provides common utilities used across the dispatcher:
    - util_action: Action type/field extraction and diagnostic serialization
    - util_async: Awaiting results of callables that may be sync or async
"""

from omnibase_dispatch.utils.util_action import (
    get_action_field,
    get_action_type,
    serialize_action,
)
from omnibase_dispatch.utils.util_async import maybe_await

__all__: list[str] = [
    "get_action_field",
    "get_action_type",
    "maybe_await",
    "serialize_action",
]
