# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handler table entry model.

A handler table is a plain ``dict[str, ModelHandler]``. Entries are frozen
so a table assembled by merging fragments can be shared between
dispatchers without any of them altering it.

Note:
    Two entries wrapping the same callable for the same type compare equal
    (pydantic value equality). The dispatcher therefore de-duplicates
    table values by identity, never by equality, so registering one
    listener twice invokes it twice.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from omnibase_dispatch.enums import EnumActionKind

# (action, next) -> output | Awaitable[output]
HandlerFunc = Callable[[Any, Callable[..., Awaitable[Any]]], Any]


class ModelHandler(BaseModel):
    """Single handler registration.

    Attributes:
        kind: Kind of the actions this handler serves
        type: Action type tag this handler is registered for
        handler: Callable invoked as ``handler(action, next)``
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    kind: EnumActionKind = Field(
        description="Kind of the actions this handler serves",
    )
    type: str = Field(
        min_length=1,
        description="Action type tag this handler is registered for",
    )
    handler: HandlerFunc = Field(
        description="Callable invoked as handler(action, next)",
    )


__all__ = ["HandlerFunc", "ModelHandler"]
