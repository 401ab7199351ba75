# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Typed action base model.

Plain mappings are valid actions, but applications that want validated,
immutable action payloads subclass ``ModelAction``:

Example:
    >>> class ModelCreateAccount(ModelAction):
    ...     kind: ClassVar[EnumActionKind] = EnumActionKind.COMMAND
    ...     type: Literal["Account.CreateAccount"] = "Account.CreateAccount"
    ...     name: str
    >>> await api(ModelCreateAccount(name="test"))
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from omnibase_dispatch.enums import EnumActionKind


class ModelAction(BaseModel):
    """Immutable action carrying a ``type`` tag.

    Attributes:
        kind: Declared kind of the action shape (class-level)
        type: Type tag used for dispatch resolution
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    kind: ClassVar[EnumActionKind] = EnumActionKind.MODEL

    type: str = Field(
        min_length=1,
        description="Type tag used for dispatch resolution",
    )


__all__ = ["ModelAction"]
