# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Dispatch Models Module.

Exports:
    ModelAction: Immutable typed action base
    ModelHandler: Handler table entry
    ModelDispatcherConfig: Dispatcher configuration
"""

from omnibase_dispatch.models.model_action import ModelAction
from omnibase_dispatch.models.model_dispatcher_config import ModelDispatcherConfig
from omnibase_dispatch.models.model_handler import HandlerFunc, ModelHandler

__all__: list[str] = [
    "HandlerFunc",
    "ModelAction",
    "ModelDispatcherConfig",
    "ModelHandler",
]
