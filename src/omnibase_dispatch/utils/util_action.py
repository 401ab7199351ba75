# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Action inspection utilities.

Actions reach the dispatcher in several shapes: plain mappings with a
``"type"`` key, pydantic ``ModelAction`` instances, ``ActionError``
exceptions, or any object exposing a ``type`` attribute. The helpers in
this module read the type tag and render an action for diagnostics
without caring which of those shapes was used.

Example:
    >>> get_action_type({"type": "Account.CreateAccount", "name": "test"})
    'Account.CreateAccount'
    >>> get_action_type("foooo") is None
    True
    >>> serialize_action("foooo")
    '"foooo"'
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum


def get_action_type(action: object) -> str | None:
    """Return the ``type`` tag of an action, or ``None`` if it has none.

    Args:
        action: Candidate action in any supported shape.

    Returns:
        The non-empty ``type`` string, or ``None`` when the value carries no
        usable type tag (``None``, scalars, mappings without ``"type"``).
    """
    if action is None:
        return None

    if isinstance(action, Mapping):
        action_type = action.get("type")
    else:
        action_type = getattr(action, "type", None)

    if isinstance(action_type, Enum):
        action_type = action_type.value

    if isinstance(action_type, str) and action_type:
        return action_type
    return None


def get_action_field(action: object, name: str, default: object = None) -> object:
    """Read a payload field from a mapping or attribute-style action."""
    if isinstance(action, Mapping):
        return action.get(name, default)
    return getattr(action, name, default)


def _json_default(value: object) -> object:
    # pydantic models and exceptions fall through to their natural forms
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")  # type: ignore[union-attr]
    if isinstance(value, BaseException):
        return {"error": type(value).__name__, "message": str(value)}
    return repr(value)


def serialize_action(action: object) -> str:
    """Render an action as JSON for error messages and logs.

    Values that JSON cannot represent (callables, arbitrary objects) are
    rendered with ``repr()`` so serialization never fails.

    Args:
        action: The action to render.

    Returns:
        JSON text describing the action.
    """
    try:
        return json.dumps(action, default=_json_default)
    except (TypeError, ValueError):
        return repr(action)


__all__: list[str] = ["get_action_field", "get_action_type", "serialize_action"]
