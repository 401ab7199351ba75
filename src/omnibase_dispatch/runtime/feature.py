# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Handler Table Builder.

This module provides ``Feature``, which produces handler table fragments for
each dispatchable action kind, plus the introspection helpers that operate
on assembled tables.

Handler Table Layout:
    A handler table is a plain ``dict[str, ModelHandler]`` built by merging
    fragments with ``{**a, **b}`` (or ``a | b``):

    - Command/query fragments hold one entry under the canonical ``type``
      key. Merging two fragments for the same type keeps the later one.
    - Event-like fragments (event, rejection, notification, error) hold the
      same entry under the canonical key AND under a synthetic key
      ``_<type>_<uuid4 hex>``. The synthetic key survives merges, so
      independently authored listeners are never lost. The canonical key
      keeps only the last registration and is not authoritative for the
      listener count.

    ``Api`` recovers the complete listener set for a type by de-duplicating
    all table values by identity and grouping them by ``type``.

Example:
    >>> on = Feature()
    >>> table = on.handlers({
    ...     **on.command("Account.CreateAccount", create_account),
    ...     **on.event("Account.AccountCreated", send_welcome_mail),
    ...     **on.event("Account.AccountCreated", update_statistics),
    ... })
    >>> get_kind(table)({"type": "Account.CreateAccount"})
    <EnumActionKind.COMMAND: 'command'>
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, NoReturn
from uuid import uuid4

from omnibase_dispatch.enums import EnumActionKind
from omnibase_dispatch.errors import (
    HandlerRegistrationError,
    ImpossibleCaseError,
    ModelDispatchErrorContext,
)
from omnibase_dispatch.models import HandlerFunc, ModelHandler
from omnibase_dispatch.utils import get_action_type

logger = logging.getLogger(__name__)

HandlerTable = dict[str, ModelHandler]


def make_handler(
    kind: EnumActionKind,
    action_type: str,
    handler: HandlerFunc,
) -> HandlerTable:
    """Build a handler table fragment for one registration.

    Args:
        kind: Dispatchable kind of the action.
        action_type: Type tag the handler serves.
        handler: Callable invoked as ``handler(action, next)``.

    Returns:
        ``{type: entry}`` for single-handler kinds, or
        ``{type: entry, "_<type>_<hex>": entry}`` for fan-out kinds.

    Raises:
        HandlerRegistrationError: If the kind is not dispatchable, the type is
            empty, or the handler is not callable.
    """
    if isinstance(action_type, Enum):
        action_type = action_type.value

    context = ModelDispatchErrorContext(
        action_type=action_type if isinstance(action_type, str) and action_type else None,
        operation="register",
    )

    if not kind.is_dispatchable:
        raise HandlerRegistrationError(
            f"Cannot register handlers for kind '{kind}'",
            context=context,
        )
    if not isinstance(action_type, str) or not action_type:
        raise HandlerRegistrationError(
            "Action type must be a non-empty string",
            context=context,
        )
    if not callable(handler):
        raise HandlerRegistrationError(
            f"Handler must be callable, got {type(handler).__name__}",
            context=context,
        )

    entry = ModelHandler(kind=kind, type=action_type, handler=handler)

    logger.debug(
        "Handler registered",
        extra={
            "action_type": action_type,
            "kind": kind.value,
            "handler": getattr(handler, "__qualname__", repr(handler)),
        },
    )

    if kind.is_single_handler:
        return {action_type: entry}

    return {
        action_type: entry,
        f"_{action_type}_{uuid4().hex}": entry,
    }


class Feature:
    """Builder for handler table fragments.

    Each method returns a fragment to be merged into a handler table.
    Instances carry no state; create one wherever it reads best.

    Example:
        >>> when = Feature()
        >>> api = Api({
        ...     **when.command("Post.CreatePost", create_post),
        ...     **when.query("Post.GetPost", get_post),
        ...     **when.error("Post.PostError", report_post_error),
        ... })
    """

    def command(self, action_type: str, handler: HandlerFunc) -> HandlerTable:
        """Register the single handler of a command type."""
        return make_handler(EnumActionKind.COMMAND, action_type, handler)

    def query(self, action_type: str, handler: HandlerFunc) -> HandlerTable:
        """Register the single handler of a query type."""
        return make_handler(EnumActionKind.QUERY, action_type, handler)

    def event(self, action_type: str, handler: HandlerFunc) -> HandlerTable:
        """Register one of possibly many listeners of an event type."""
        return make_handler(EnumActionKind.EVENT, action_type, handler)

    def rejection(self, action_type: str, handler: HandlerFunc) -> HandlerTable:
        """Register one of possibly many listeners of a rejection type."""
        return make_handler(EnumActionKind.REJECTION, action_type, handler)

    def notification(self, action_type: str, handler: HandlerFunc) -> HandlerTable:
        """Register one of possibly many listeners of a notification type."""
        return make_handler(EnumActionKind.NOTIFICATION, action_type, handler)

    def error(self, action_type: str, handler: HandlerFunc) -> HandlerTable:
        """Register one of possibly many listeners of an error type."""
        return make_handler(EnumActionKind.ERROR, action_type, handler)

    def handlers(self, table: Mapping[str, ModelHandler]) -> Mapping[str, ModelHandler]:
        """Return ``table`` unchanged. Marks where a feature's table is assembled."""
        return handlers(table)


def handlers(table: Mapping[str, ModelHandler]) -> Mapping[str, ModelHandler]:
    """Return ``table`` unchanged."""
    return table


def _lookup(table: Mapping[str, ModelHandler], action: object) -> ModelHandler | None:
    action_type = get_action_type(action)
    if action_type is None:
        return None
    return table.get(action_type)


def get_kind(
    table: Mapping[str, ModelHandler],
) -> Callable[[object], EnumActionKind]:
    """Build a kind resolver for a handler table.

    Args:
        table: Handler table to introspect.

    Returns:
        Callable mapping an action to the declared kind of its handler, or
        ``EnumActionKind.NONE`` when no handler is registered for it.

    Raises:
        TypeError: If ``table`` is not a mapping.

    Example:
        >>> kind = get_kind(table)(action)
        >>> match kind:
        ...     case EnumActionKind.COMMAND | EnumActionKind.QUERY:
        ...         ...
        ...     case EnumActionKind.NONE:
        ...         ...
        ...     case _:
        ...         never(kind)
    """
    if not isinstance(table, Mapping):
        raise TypeError(
            f"handlers must be a mapping, got {type(table).__name__}"
        )

    def resolve(action: object) -> EnumActionKind:
        entry = _lookup(table, action)
        if entry is None:
            return EnumActionKind.NONE
        return entry.kind

    return resolve


def has_handler(table: Mapping[str, ModelHandler]) -> Callable[[object], bool]:
    """Build a predicate telling whether an action has a registered handler."""
    if not isinstance(table, Mapping):
        raise TypeError(
            f"handlers must be a mapping, got {type(table).__name__}"
        )

    def check(action: object) -> bool:
        return _lookup(table, action) is not None

    return check


def nothing(*args: Any, **kwargs: Any) -> None:
    """Handler body that does nothing."""
    return None


def never(value: object) -> NoReturn:
    """Fail loudly when an exhaustive branch falls through.

    Raises:
        ImpossibleCaseError: Always, naming the serialized value.
    """
    raise ImpossibleCaseError(value)


__all__ = [
    "Feature",
    "HandlerTable",
    "get_kind",
    "handlers",
    "has_handler",
    "make_handler",
    "never",
    "nothing",
]
