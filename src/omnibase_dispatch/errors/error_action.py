# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Typed action error.

``ActionError`` is a real exception that also behaves as an action: it
carries the ``type`` tag of the error action and the structured ``data``
payload describing the failure. A handler can therefore both raise it to
its caller and emit it through ``next`` to error-kind listeners.

Instances are normally built with ``kind_of_error()`` rather than
constructed directly.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class ActionError(Exception):
    """Exception stamped with an action ``type`` and structured ``data``.

    Attributes:
        type: Type tag of the error action (``data["type"]``)
        data: Structured payload describing the failure

    Example:
        >>> error = ActionError({"type": "Post.PostError", "post_id": "1"})
        >>> error.type
        'Post.PostError'
        >>> str(error)
        'Post.PostError'
    """

    def __init__(self, data: Any, message: str | None = None) -> None:
        action_type = _data_type(data)
        super().__init__(action_type if message is None else message)
        self.type = action_type
        self.data = data

    @property
    def message(self) -> str:
        """Human-readable error message."""
        return str(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self.type!r}, message={str(self)!r})"


def _data_type(data: Any) -> str:
    if isinstance(data, Mapping):
        action_type = data.get("type")
    else:
        action_type = getattr(data, "type", None)
    if isinstance(action_type, Enum):
        action_type = action_type.value
    if not isinstance(action_type, str) or not action_type:
        raise ValueError("Error data must carry a non-empty 'type' tag")
    return action_type


__all__ = ["ActionError"]
