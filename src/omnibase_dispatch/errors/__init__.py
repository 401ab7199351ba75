# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Dispatch Errors Module.

Exports:
    ModelDispatchErrorContext: Configuration model for bundled error context
    DispatchError: Base dispatcher error class
    NoHandlerError: Unmatched action under the default fallback
    HandlerRegistrationError: Invalid handler registration
    ImpossibleCaseError: Exhaustiveness check reached an impossible branch
    ContextNotInstalledError: Context middleware used before installation
    FanOutError: Collected fan-out handler failures
    ActionError: Typed, data-carrying action error
"""

from omnibase_dispatch.errors.dispatch_errors import (
    ContextNotInstalledError,
    DispatchError,
    FanOutError,
    HandlerRegistrationError,
    ImpossibleCaseError,
    NoHandlerError,
)
from omnibase_dispatch.errors.error_action import ActionError
from omnibase_dispatch.errors.model_dispatch_error_context import (
    ModelDispatchErrorContext,
)

__all__: list[str] = [
    "ActionError",
    "ContextNotInstalledError",
    "DispatchError",
    "FanOutError",
    "HandlerRegistrationError",
    "ImpossibleCaseError",
    "ModelDispatchErrorContext",
    "NoHandlerError",
]
