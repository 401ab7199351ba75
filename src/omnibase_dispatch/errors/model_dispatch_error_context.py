# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Dispatch Error Context Model.

Bundles the structured fields attached to dispatcher errors so error
constructors keep a short parameter list.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelDispatchErrorContext(BaseModel):
    """Structured context for dispatcher errors.

    Attributes:
        action_type: Type tag of the action being dispatched, if known
        operation: Dispatcher operation that failed (dispatch, register, ...)

    Example:
        >>> context = ModelDispatchErrorContext(
        ...     action_type="Account.CreateAccount",
        ...     operation="dispatch",
        ... )
        >>> raise NoHandlerError({"type": "unknown"}, context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    action_type: str | None = Field(
        default=None,
        description="Type tag of the action being dispatched",
    )
    operation: str | None = Field(
        default=None,
        description="Dispatcher operation that failed",
    )


__all__ = ["ModelDispatchErrorContext"]
