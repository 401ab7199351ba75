# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Dispatch runtime.

Exports:
    Feature: Handler table fragment builder
    Api: Dispatcher bound to a handler table
    kind_of_error: Typed ActionError constructor factory
    get_kind / has_handler / handlers: Handler table introspection
    nothing / never: Handler body and exhaustiveness helpers
    install_context / use_context: Context middleware tables
"""

from omnibase_dispatch.runtime.action_dispatcher import (
    Api,
    ListenerFunc,
    NextDispatch,
    OtherwiseFunc,
    default_otherwise,
)
from omnibase_dispatch.runtime.context_middleware import (
    CONTEXT_NOT_INSTALLED,
    ContextMutationError,
    ContextStore,
    install_context,
    make_context_mutation_error,
    use_context,
)
from omnibase_dispatch.runtime.error_factory import kind_of_error
from omnibase_dispatch.runtime.feature import (
    Feature,
    HandlerTable,
    get_kind,
    handlers,
    has_handler,
    make_handler,
    never,
    nothing,
)

__all__: list[str] = [
    "CONTEXT_NOT_INSTALLED",
    "Api",
    "ContextMutationError",
    "ContextStore",
    "Feature",
    "HandlerTable",
    "ListenerFunc",
    "NextDispatch",
    "OtherwiseFunc",
    "default_otherwise",
    "get_kind",
    "handlers",
    "has_handler",
    "install_context",
    "kind_of_error",
    "make_context_mutation_error",
    "make_handler",
    "never",
    "nothing",
    "use_context",
]
