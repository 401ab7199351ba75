# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Dispatcher Error Classes.

Error Hierarchy:
    Exception
    ├── DispatchError (base dispatcher error)
    │   ├── NoHandlerError
    │   ├── HandlerRegistrationError
    │   ├── ImpossibleCaseError
    │   └── ContextNotInstalledError
    └── ExceptionGroup
        └── FanOutError

All DispatchError subclasses:
    - Accept ModelDispatchErrorContext for bundled context parameters
    - Accept extra keyword context for debugging
    - Support proper error chaining with ``raise ... from e``

Handler faults are never wrapped in these classes; they propagate to the
dispatch caller unchanged.
"""

from __future__ import annotations

from omnibase_dispatch.errors.model_dispatch_error_context import (
    ModelDispatchErrorContext,
)
from omnibase_dispatch.utils.util_action import get_action_type, serialize_action


class DispatchError(Exception):
    """Base error class for dispatcher errors.

    Structured Fields (via ModelDispatchErrorContext):
        action_type: Type tag of the action being dispatched
        operation: Dispatcher operation that failed

    Example:
        >>> context = ModelDispatchErrorContext(operation="dispatch")
        >>> raise DispatchError("Dispatch failed", context=context, retry=False)
    """

    def __init__(
        self,
        message: str,
        context: ModelDispatchErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize DispatchError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled dispatch context (action_type, operation, ...)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context
        self.extra_context: dict[str, object] = dict(extra_context)


class NoHandlerError(DispatchError):
    """Raised by the default ``otherwise`` fallback for unmatched actions.

    The message names the serialized action so the unmatched input is
    visible in logs and test output.

    Example:
        >>> raise NoHandlerError("foooo")
        Traceback (most recent call last):
            ...
        NoHandlerError: NO_HANDLER: "foooo"
    """

    def __init__(
        self,
        action: object,
        context: ModelDispatchErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        self.action = action
        super().__init__(
            f"NO_HANDLER: {serialize_action(action)}",
            context=context
            or ModelDispatchErrorContext(
                action_type=get_action_type(action),
                operation="dispatch",
            ),
            **extra_context,
        )


class HandlerRegistrationError(DispatchError):
    """Raised when a handler cannot be registered.

    Used for empty action types, non-callable handler bodies and
    non-dispatchable kinds.
    """


class ImpossibleCaseError(DispatchError):
    """Raised by ``never()`` when a supposedly exhaustive branch is reached."""

    def __init__(self, value: object, **extra_context: object) -> None:
        self.value = value
        super().__init__(f"Never: {serialize_action(value)}", **extra_context)


class ContextNotInstalledError(DispatchError):
    """Raised by the placeholder context handlers from ``install_context()``."""


class FanOutError(ExceptionGroup):  # noqa: N818
    """All failures collected from one fan-out dispatch.

    Raised only under ``EnumFanOutPolicy.COLLECT_ALL``. ``exceptions``
    holds each failing handler's exception in handler order.
    """

    def derive(self, excs):  # type: ignore[no-untyped-def,override]
        return FanOutError(self.message, excs)


__all__ = [
    "ContextNotInstalledError",
    "DispatchError",
    "FanOutError",
    "HandlerRegistrationError",
    "ImpossibleCaseError",
    "NoHandlerError",
]
