# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Action Dispatcher.

This module provides ``Api``, the dispatcher that resolves actions against a
handler table and executes the matching handler(s).

Resolution:
    1. Per-call override table (if given): a command/query entry for the
       action's type runs instead of the base handler. Anything else falls
       through to the base table.
    2. Base table:
       - No entry: ``otherwise(action)``. The default fallback raises
         ``NoHandlerError``.
       - Command/query: the single handler runs and its output is returned.
       - Event-like: every registered listener runs concurrently; the result
         is always ``None``.

Handlers are called as ``handler(action, next)``. ``next`` dispatches
follow-up actions; it is the dispatcher itself unless ``next_dispatch`` was
supplied, and it keeps consulting the per-call overrides when there are any.

Handlers, the listener and ``otherwise`` may be plain functions or
coroutine functions. Awaitable results are awaited.

Thread Safety:
    The handler table is copied at construction and never modified. The
    fan-out map is derived from that copy on first use and only read
    afterwards, so rebuilding it concurrently yields the same map.

Example:
    >>> on = Feature()
    >>> api = Api({
    ...     **on.command("Account.CreateAccount", create_account),
    ...     **on.event("Account.AccountCreated", send_welcome_mail),
    ... })
    >>> account = await api({"type": "Account.CreateAccount", "name": "test"})
"""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from collections.abc import Awaitable, Callable, Mapping
from types import MappingProxyType
from typing import Any

from omnibase_dispatch.enums import EnumFanOutPolicy
from omnibase_dispatch.errors import FanOutError, NoHandlerError
from omnibase_dispatch.models import HandlerFunc, ModelDispatcherConfig, ModelHandler
from omnibase_dispatch.utils import get_action_type, maybe_await

logger = logging.getLogger(__name__)

NextDispatch = Callable[[Any], Awaitable[Any]]
ListenerFunc = Callable[[Any], Any]
OtherwiseFunc = Callable[[Any], Any]


def default_otherwise(action: object) -> Any:
    """Fallback for unmatched actions.

    Raises:
        NoHandlerError: Always, naming the serialized action.
    """
    raise NoHandlerError(action)


class Api:
    """Dispatcher bound to one handler table.

    Attributes:
        handlers: Read-only snapshot of the handler table
        config: Dispatcher configuration

    Args:
        handlers: Handler table assembled from ``Feature`` fragments.
        listener: Optional callback observing every action that reaches a
            matched handler (before it runs). Not called for actions
            resolved through ``otherwise``.
        otherwise: Fallback for unmatched actions. Its return value becomes
            the dispatch result.
        next_dispatch: Dispatcher handed to handlers as ``next`` instead of
            this one, to layer independently composed tables.
        config: Dispatcher configuration (fan-out failure policy).

    Example:
        >>> events = Api(event_table)
        >>> commands = Api(command_table, next_dispatch=events)
        >>> await commands({"type": "Post.DeletePost", "id": "1"})
    """

    def __init__(
        self,
        handlers: Mapping[str, ModelHandler],
        listener: ListenerFunc | None = None,
        otherwise: OtherwiseFunc | None = None,
        *,
        next_dispatch: NextDispatch | None = None,
        config: ModelDispatcherConfig | None = None,
    ) -> None:
        if not isinstance(handlers, Mapping):
            raise TypeError(
                f"handlers must be a mapping, got {type(handlers).__name__}"
            )

        self._handlers: Mapping[str, ModelHandler] = MappingProxyType(dict(handlers))
        self._listener = listener
        self._otherwise: OtherwiseFunc = otherwise or default_otherwise
        self._next_dispatch = next_dispatch
        self._config = config or ModelDispatcherConfig()

        # Built lazily on the first fan-out dispatch
        self._fan_out_map: dict[str, tuple[HandlerFunc, ...]] | None = None

    @property
    def handlers(self) -> Mapping[str, ModelHandler]:
        """Read-only snapshot of the handler table."""
        return self._handlers

    @property
    def config(self) -> ModelDispatcherConfig:
        """Dispatcher configuration."""
        return self._config

    async def __call__(
        self,
        action: Any,
        overrides: Mapping[str, ModelHandler] | None = None,
    ) -> Any:
        """Dispatch an action.

        Args:
            action: Action carrying a ``type`` tag.
            overrides: Optional handler table consulted before the base
                table for this call only.

        Returns:
            The command/query handler's output, ``None`` for event-like
            actions, or the ``otherwise`` result for unmatched actions.

        Raises:
            NoHandlerError: If nothing matched and no custom ``otherwise``
                was given.
            TypeError: If ``overrides`` is not a mapping.
            FanOutError: If fan-out handlers failed under COLLECT_ALL.
            Exception: Any exception raised by a handler, unchanged.
        """
        if overrides is None:
            return await self.handle(action, self._next_dispatch or self)

        if not isinstance(overrides, Mapping):
            raise TypeError(
                f"handlers must be a mapping, got {type(overrides).__name__}"
            )

        dispatch = self._with_overrides(overrides)
        return await dispatch(action)

    def _with_overrides(self, overrides: Mapping[str, ModelHandler]) -> NextDispatch:
        async def dispatch(action: Any) -> Any:
            action_type = get_action_type(action)
            entry = overrides.get(action_type) if action_type is not None else None

            if entry is not None and entry.kind.is_single_handler:
                logger.debug(
                    "Dispatching to override handler",
                    extra=self._build_log_context(
                        action_type=action_type,
                        kind=entry.kind.value,
                        has_overrides=True,
                    ),
                )
                await self._notify(action)
                return await maybe_await(entry.handler(action, dispatch))

            # Event-like overrides are not supported; the base table decides
            return await self.handle(action, dispatch)

        return dispatch

    async def handle(self, action: Any, next: NextDispatch) -> Any:  # noqa: A002
        """Resolve an action against the base table with an explicit ``next``.

        Matches the handler signature, so a dispatcher can serve as the
        body of a handler registered in another table.
        """
        action_type = get_action_type(action)
        entry = self._handlers.get(action_type) if action_type is not None else None

        if entry is None:
            logger.debug(
                "No handler matched, using fallback",
                extra=self._build_log_context(action_type=action_type),
            )
            return await maybe_await(self._otherwise(action))

        await self._notify(action)

        if entry.kind.is_single_handler:
            logger.debug(
                "Dispatching to handler",
                extra=self._build_log_context(
                    action_type=action_type,
                    kind=entry.kind.value,
                ),
            )
            return await maybe_await(entry.handler(action, next))

        listeners = self._get_fan_out_map().get(entry.type, ())
        logger.debug(
            "Fanning out to listeners",
            extra=self._build_log_context(
                action_type=action_type,
                kind=entry.kind.value,
                handler_count=len(listeners),
            ),
        )
        await self._fan_out(action, next, listeners)
        return None

    async def _notify(self, action: Any) -> None:
        if self._listener is not None:
            await maybe_await(self._listener(action))

    def _get_fan_out_map(self) -> dict[str, tuple[HandlerFunc, ...]]:
        if self._fan_out_map is None:
            # Identity de-duplication: one entry appears under its canonical
            # and its synthetic key
            unique = {id(entry): entry for entry in self._handlers.values()}
            grouped: dict[str, list[HandlerFunc]] = defaultdict(list)
            for entry in unique.values():
                grouped[entry.type].append(entry.handler)
            self._fan_out_map = {
                action_type: tuple(funcs) for action_type, funcs in grouped.items()
            }
        return self._fan_out_map

    async def _fan_out(
        self,
        action: Any,
        next: NextDispatch,  # noqa: A002
        listeners: tuple[HandlerFunc, ...],
    ) -> None:
        async def invoke(handler: HandlerFunc) -> Any:
            return await maybe_await(handler(action, next))

        if self._config.fan_out_policy is EnumFanOutPolicy.FAIL_FAST:
            await asyncio.gather(*(invoke(handler) for handler in listeners))
            return

        results = await asyncio.gather(
            *(invoke(handler) for handler in listeners),
            return_exceptions=True,
        )
        failures: list[Exception] = []
        for result in results:
            if isinstance(result, Exception):
                failures.append(result)
            elif isinstance(result, BaseException):
                raise result

        if failures:
            action_type = get_action_type(action)
            logger.error(
                "Fan-out handlers failed",
                extra=self._build_log_context(
                    action_type=action_type,
                    handler_count=len(listeners),
                    failure_count=len(failures),
                ),
            )
            raise FanOutError(
                f"{len(failures)} of {len(listeners)} handlers failed for '{action_type}'",
                failures,
            )

    def _build_log_context(
        self,
        action_type: str | None = None,
        kind: str | None = None,
        handler_count: int | None = None,
        failure_count: int | None = None,
        has_overrides: bool = False,
    ) -> dict[str, str | int | bool]:
        context: dict[str, str | int | bool] = {}
        if action_type is not None:
            context["action_type"] = action_type
        if kind is not None:
            context["kind"] = kind
        if handler_count is not None:
            context["handler_count"] = handler_count
        if failure_count is not None:
            context["failure_count"] = failure_count
        if has_overrides:
            context["has_overrides"] = True
        return context

    def __repr__(self) -> str:
        return (
            f"Api(handlers={len(self._handlers)}, "
            f"fan_out_policy={self._config.fan_out_policy.value!r})"
        )


__all__ = [
    "Api",
    "ListenerFunc",
    "NextDispatch",
    "OtherwiseFunc",
    "default_otherwise",
]
