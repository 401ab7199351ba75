# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Context middleware action types."""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumContextAction(str, Enum):
    """
    Action type tags served by the context middleware.

    - **GET_CONTEXT** (query): returns the current context value
    - **MUTATE_CONTEXT** (command): applies ``mutate(context) -> context``
    - **CONTEXT_MUTATED** (event): carries ``from_context`` and ``to_context``
    - **CONTEXT_MUTATION_ERROR** (error): carries ``from_context``
    """

    GET_CONTEXT = "Context.GetContext"
    MUTATE_CONTEXT = "Context.MutateContext"
    CONTEXT_MUTATED = "Context.ContextMutated"
    CONTEXT_MUTATION_ERROR = "Context.ContextMutationError"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__ = ["EnumContextAction"]
