# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Action Kind Enumeration.

Classifies every action routed through the dispatcher:
- COMMAND: Imperative request, single handler, may emit further actions
- QUERY: Read request, single handler, returns output
- EVENT: Fact notification, zero or more handlers
- REJECTION: Command/query refused by policy, zero or more handlers
- NOTIFICATION: Informational fact, zero or more handlers
- ERROR: Failure signal carrying structured data, zero or more handlers
- MODEL: Plain data record, never dispatched
- NONE: Sentinel meaning "no handler matched"

Thread Safety:
    All enums in this module are immutable and thread-safe.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumActionKind(str, Enum):
    """
    Kind classification for dispatchable actions.

    The kind determines how the dispatcher resolves an action:

    - **Single-handler kinds** (COMMAND, QUERY): exactly one handler per
      action type. Merging two registrations for the same type keeps the
      later one. The handler's return value is the dispatch result.

    - **Fan-out kinds** (EVENT, REJECTION, NOTIFICATION, ERROR): any number
      of handlers per action type. All of them run concurrently and the
      dispatch result is always ``None``.

    Example:
        >>> EnumActionKind.COMMAND.is_single_handler
        True
        >>> EnumActionKind.EVENT.is_fan_out
        True
        >>> EnumActionKind.NONE.is_dispatchable
        False
    """

    COMMAND = "command"
    """Imperative request handled by exactly one handler."""

    QUERY = "query"
    """Read request handled by exactly one handler."""

    EVENT = "event"
    """Fact that has occurred."""

    REJECTION = "rejection"
    """Command or query not fulfilled due to policy."""

    NOTIFICATION = "notification"
    """Informational fact distinct from a settled event."""

    ERROR = "error"
    """Failure signal carrying structured data."""

    MODEL = "model"
    """Plain data record."""

    NONE = "none"
    """No handler matched."""

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value

    @property
    def is_single_handler(self) -> bool:
        """Whether at most one handler may serve this kind."""
        return self in _SINGLE_HANDLER_KINDS

    @property
    def is_fan_out(self) -> bool:
        """Whether every registered handler is invoked for this kind."""
        return self in _FAN_OUT_KINDS

    @property
    def is_dispatchable(self) -> bool:
        """Whether handlers can be registered for this kind."""
        return self.is_single_handler or self.is_fan_out


_SINGLE_HANDLER_KINDS: frozenset[EnumActionKind] = frozenset(
    {EnumActionKind.COMMAND, EnumActionKind.QUERY}
)

_FAN_OUT_KINDS: frozenset[EnumActionKind] = frozenset(
    {
        EnumActionKind.EVENT,
        EnumActionKind.REJECTION,
        EnumActionKind.NOTIFICATION,
        EnumActionKind.ERROR,
    }
)


__all__ = ["EnumActionKind"]
