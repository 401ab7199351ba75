# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Typed error factory.

``kind_of_error()`` returns a constructor for ``ActionError`` instances
stamped with the error action's ``type`` and ``data``. Built from an
existing exception, the new error keeps that exception's message,
traceback and cause, so the original diagnostic trail survives the
re-tagging.

Example:
    >>> PostError = kind_of_error()
    >>> try:
    ...     await repository.save(post)
    ... except OSError as e:
    ...     error = PostError({"type": "Post.PostError", "post_id": post.id}, e)
    ...     await next(error)
    ...     raise error
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from omnibase_dispatch.errors import ActionError

ErrorT = TypeVar("ErrorT", bound=ActionError)


def kind_of_error(
    error_cls: type[ErrorT] = ActionError,  # type: ignore[assignment]
) -> Callable[[Any, str | BaseException | None], ErrorT]:
    """Build a typed error constructor.

    Args:
        error_cls: ``ActionError`` subclass to instantiate.

    Returns:
        ``make(data, message_or_fault=None)`` producing ``error_cls``
        instances. ``data`` must carry a ``type`` tag.
    """

    def make(data: Any, message_or_fault: str | BaseException | None = None) -> ErrorT:
        if isinstance(message_or_fault, BaseException):
            fault = message_or_fault
            error = error_cls(data, str(fault))
            error.__traceback__ = fault.__traceback__
            error.__cause__ = fault.__cause__
            return error

        if isinstance(message_or_fault, str) and message_or_fault:
            return error_cls(data, message_or_fault)
        return error_cls(data)

    return make


__all__ = ["kind_of_error"]
