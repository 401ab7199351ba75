# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Context Middleware.

Supplies a piece of mutable state to handlers through ordinary dispatch:
handlers read it with a ``Context.GetContext`` query and change it with a
``Context.MutateContext`` command. Nothing in the dispatcher knows about
this module; it is a handler table like any other.

Usage:
    ``install_context()`` registers placeholder handlers that fail loudly,
    so a table that needs context declares it without owning any state.
    ``use_context(value)`` supplies the real handlers, either per call as an
    override table or merged into the base table for a long-lived context.

Example:
    >>> api = Api({**app_handlers, **install_context()})
    >>> await api(
    ...     {"type": EnumContextAction.GET_CONTEXT},
    ...     use_context({"command_id": "command-id-123"}),
    ... )
    {'command_id': 'command-id-123'}
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from omnibase_dispatch.enums import EnumActionKind, EnumContextAction
from omnibase_dispatch.errors import ActionError, ContextNotInstalledError
from omnibase_dispatch.models import ModelHandler
from omnibase_dispatch.runtime.action_dispatcher import NextDispatch
from omnibase_dispatch.runtime.error_factory import kind_of_error
from omnibase_dispatch.runtime.feature import Feature, HandlerTable, nothing
from omnibase_dispatch.utils import get_action_field, maybe_await

logger = logging.getLogger(__name__)

T = TypeVar("T")

ContextSetter = Callable[[T], Any]

CONTEXT_NOT_INSTALLED = "Context not installed, please install_context()"


class ContextMutationError(ActionError):
    """Raised when a context mutation or its persistence fails.

    ``data`` is ``{"type": "Context.ContextMutationError", "from_context": ...}``
    holding the value the context had before the failed mutation.
    """


make_context_mutation_error = kind_of_error(ContextMutationError)


def install_context() -> HandlerTable:
    """Declare the context actions without providing a context.

    Returns:
        Handler table whose get/mutate handlers raise
        ``ContextNotInstalledError`` and whose mutated/mutation-error
        listeners do nothing.
    """
    on = Feature()

    def not_installed(action: Any, next: NextDispatch) -> Any:  # noqa: A002
        raise ContextNotInstalledError(CONTEXT_NOT_INSTALLED)

    return on.handlers(
        {
            **on.command(EnumContextAction.MUTATE_CONTEXT, not_installed),
            **on.query(EnumContextAction.GET_CONTEXT, not_installed),
            **on.event(EnumContextAction.CONTEXT_MUTATED, nothing),
            **on.error(EnumContextAction.CONTEXT_MUTATION_ERROR, nothing),
        }
    )


class ContextStore(Generic[T]):
    """Holds the current context value for one ``use_context()`` table."""

    def __init__(self, value: T, setter: ContextSetter[T] | None = None) -> None:
        self.value = value
        self._setter = setter

    async def get_context(self, query: Any, next: NextDispatch) -> T:  # noqa: A002
        return self.value

    async def mutate_context(self, command: Any, next: NextDispatch) -> None:  # noqa: A002
        from_context = self.value
        try:
            mutate = get_action_field(command, "mutate")
            if not callable(mutate):
                raise TypeError("MutateContext requires a callable 'mutate' field")

            self.value = mutate(self.value)

            if self._setter is not None:
                await maybe_await(self._setter(self.value))

            await next(
                {
                    "type": EnumContextAction.CONTEXT_MUTATED.value,
                    "from_context": from_context,
                    "to_context": self.value,
                }
            )
        except Exception as e:
            error = make_context_mutation_error(
                {
                    "type": EnumContextAction.CONTEXT_MUTATION_ERROR.value,
                    "from_context": from_context,
                },
                e,
            )
            logger.warning(
                "Context mutation failed",
                extra={
                    "action_type": EnumContextAction.MUTATE_CONTEXT.value,
                    "error_type": type(e).__name__,
                },
            )
            await next(error)
            raise error


def use_context(
    context: T,
    set_context: ContextSetter[T] | None = None,
) -> HandlerTable:
    """Provide the context actions backed by ``context``.

    Args:
        context: Initial context value.
        set_context: Optional (possibly async) callback persisting every new
            value after a successful mutation.

    Returns:
        Handler table serving ``Context.GetContext`` and
        ``Context.MutateContext``. The table owns its state: each call to
        ``use_context()`` starts from ``context`` independently.
    """
    store = ContextStore(context, set_context)
    return {
        EnumContextAction.MUTATE_CONTEXT.value: ModelHandler(
            kind=EnumActionKind.COMMAND,
            type=EnumContextAction.MUTATE_CONTEXT.value,
            handler=store.mutate_context,
        ),
        EnumContextAction.GET_CONTEXT.value: ModelHandler(
            kind=EnumActionKind.QUERY,
            type=EnumContextAction.GET_CONTEXT.value,
            handler=store.get_context,
        ),
    }


__all__ = [
    "CONTEXT_NOT_INSTALLED",
    "ContextMutationError",
    "ContextStore",
    "install_context",
    "make_context_mutation_error",
    "use_context",
]
