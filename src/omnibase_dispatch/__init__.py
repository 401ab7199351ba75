# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX Action Dispatch - In-process command, query and event routing.

This package routes tagged actions to handlers assembled from mergeable
handler table fragments:

- Feature: builds handler table fragments per action kind
- Api: resolves and executes handlers, with per-call overrides and
  concurrent fan-out for event-like kinds
- kind_of_error: typed, data-carrying errors that double as error actions
- install_context / use_context: context middleware built on the same
  dispatch contract

Example:
    >>> from omnibase_dispatch import Api, Feature
    >>> on = Feature()
    >>> api = Api({
    ...     **on.command("Account.CreateAccount", create_account),
    ...     **on.event("Account.AccountCreated", send_welcome_mail),
    ... })
    >>> await api({"type": "Account.CreateAccount", "name": "test"})
"""

from omnibase_dispatch.enums import (
    EnumActionKind,
    EnumContextAction,
    EnumFanOutPolicy,
)
from omnibase_dispatch.errors import (
    ActionError,
    ContextNotInstalledError,
    DispatchError,
    FanOutError,
    HandlerRegistrationError,
    ImpossibleCaseError,
    ModelDispatchErrorContext,
    NoHandlerError,
)
from omnibase_dispatch.models import (
    ModelAction,
    ModelDispatcherConfig,
    ModelHandler,
)
from omnibase_dispatch.runtime import (
    Api,
    ContextMutationError,
    Feature,
    get_kind,
    handlers,
    has_handler,
    install_context,
    kind_of_error,
    never,
    nothing,
    use_context,
)
from omnibase_dispatch.utils import get_action_type

__version__ = "0.1.0"

__all__: list[str] = [
    "ActionError",
    "Api",
    "ContextMutationError",
    "ContextNotInstalledError",
    "DispatchError",
    "EnumActionKind",
    "EnumContextAction",
    "EnumFanOutPolicy",
    "FanOutError",
    "Feature",
    "HandlerRegistrationError",
    "ImpossibleCaseError",
    "ModelAction",
    "ModelDispatchErrorContext",
    "ModelDispatcherConfig",
    "ModelHandler",
    "NoHandlerError",
    "get_action_type",
    "get_kind",
    "handlers",
    "has_handler",
    "install_context",
    "kind_of_error",
    "never",
    "nothing",
    "use_context",
]
