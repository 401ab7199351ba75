# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Unit tests for the context middleware.

Covers the two supported wirings:
- Per-call: ``install_context()`` in the base table, ``use_context()`` as
  an override table on each dispatch
- Long-lived: ``use_context()`` merged into the base table
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from omnibase_dispatch import (
    Api,
    ContextMutationError,
    ContextNotInstalledError,
    EnumContextAction,
    Feature,
    install_context,
    use_context,
)

GET_CONTEXT = {"type": EnumContextAction.GET_CONTEXT.value}


def _set_command_id(command_id: str) -> dict[str, Any]:
    return {
        "type": EnumContextAction.MUTATE_CONTEXT.value,
        "mutate": lambda context: {**context, "command_id": command_id},
    }


class TestInstallContext:
    """Tests for the placeholder context."""

    @pytest.mark.asyncio
    async def test_get_fails_until_installed(self) -> None:
        api = Api({**install_context()})

        with pytest.raises(
            ContextNotInstalledError,
            match=r"Context not installed, please install_context\(\)",
        ):
            await api(GET_CONTEXT)

    @pytest.mark.asyncio
    async def test_mutate_fails_until_installed(self) -> None:
        api = Api({**install_context()})

        with pytest.raises(ContextNotInstalledError):
            await api(_set_command_id("x"))

    @pytest.mark.asyncio
    async def test_mutation_events_are_silently_accepted(self) -> None:
        api = Api({**install_context()})

        result = await api(
            {
                "type": EnumContextAction.CONTEXT_MUTATED.value,
                "from_context": 1,
                "to_context": 2,
            }
        )

        assert result is None


class TestUseContextAsOverride:
    """Per-call context supplied through overrides."""

    @pytest.mark.asyncio
    async def test_get_and_mutate(self) -> None:
        api = Api({**install_context()})
        initial = {"command_id": "command-id-123"}

        assert await api(GET_CONTEXT, use_context(initial)) == initial

        persisted: list[dict[str, Any]] = []
        await api(
            _set_command_id("new-command-id-345"),
            use_context(initial, persisted.append),
        )

        assert persisted == [{"command_id": "new-command-id-345"}]
        assert initial == {"command_id": "command-id-123"}
        assert await api(GET_CONTEXT, use_context(persisted[-1])) == {
            "command_id": "new-command-id-345"
        }

    @pytest.mark.asyncio
    async def test_async_setter_awaited(self) -> None:
        persisted: list[Any] = []

        async def set_context(context: Any) -> None:
            persisted.append(context)

        api = Api({**install_context()})
        await api(_set_command_id("abc"), use_context({}, set_context))

        assert persisted == [{"command_id": "abc"}]

    @pytest.mark.asyncio
    async def test_handlers_reach_context_through_next(self, feature: Feature) -> None:
        """Application handlers read the per-call context via next."""

        async def whoami(query: Any, next: Any) -> str:  # noqa: A002
            context = await next(GET_CONTEXT)
            return context["user"]

        api = Api({**install_context(), **feature.query("App.WhoAmI", whoami)})

        assert await api({"type": "App.WhoAmI"}, use_context({"user": "ada"})) == "ada"
        assert await api({"type": "App.WhoAmI"}, use_context({"user": "bob"})) == "bob"


class TestUseContextMerged:
    """Long-lived context merged into the base table."""

    @pytest.mark.asyncio
    async def test_state_persists_across_calls(self, recorded: list[Any]) -> None:
        on = Feature()
        api = Api(
            {
                **install_context(),
                **use_context({"command_id": "command-id-123"}),
                **on.event(
                    EnumContextAction.CONTEXT_MUTATED,
                    lambda event, next: recorded.append(event),
                ),
            }
        )

        assert await api(GET_CONTEXT) == {"command_id": "command-id-123"}

        await api(_set_command_id("new-command-id-345"))

        assert await api(GET_CONTEXT) == {"command_id": "new-command-id-345"}
        assert recorded == [
            {
                "type": EnumContextAction.CONTEXT_MUTATED.value,
                "from_context": {"command_id": "command-id-123"},
                "to_context": {"command_id": "new-command-id-345"},
            }
        ]

    @pytest.mark.asyncio
    async def test_each_use_context_owns_its_state(self) -> None:
        first = Api({**install_context(), **use_context(0)})
        second = Api({**install_context(), **use_context(0)})

        await first(
            {"type": EnumContextAction.MUTATE_CONTEXT.value, "mutate": lambda n: n + 1}
        )

        assert await first(GET_CONTEXT) == 1
        assert await second(GET_CONTEXT) == 0


class TestMutationFailure:
    """Failed mutations are emitted and re-raised as typed errors."""

    @pytest.mark.asyncio
    async def test_failing_transform(self, recorded: list[Any]) -> None:
        on = Feature()
        api = Api(
            {
                **install_context(),
                **use_context({"count": 1}),
                **on.error(
                    EnumContextAction.CONTEXT_MUTATION_ERROR,
                    lambda error, next: recorded.append(error),
                ),
            }
        )

        def explode(context: Any) -> Any:
            raise ValueError("bad transform")

        with pytest.raises(ContextMutationError, match="bad transform") as exc_info:
            await api({"type": EnumContextAction.MUTATE_CONTEXT.value, "mutate": explode})

        error = exc_info.value
        assert error.type == EnumContextAction.CONTEXT_MUTATION_ERROR.value
        assert error.data == {
            "type": EnumContextAction.CONTEXT_MUTATION_ERROR.value,
            "from_context": {"count": 1},
        }
        assert recorded == [error]
        assert await api(GET_CONTEXT) == {"count": 1}

    @pytest.mark.asyncio
    async def test_failing_setter(self) -> None:
        def set_context(context: Any) -> None:
            raise OSError("store unavailable")

        api = Api({**install_context()})

        with pytest.raises(ContextMutationError, match="store unavailable") as exc_info:
            await api(_set_command_id("x"), use_context({"command_id": "a"}, set_context))

        assert exc_info.value.data["from_context"] == {"command_id": "a"}

    @pytest.mark.asyncio
    async def test_missing_mutate_field(self) -> None:
        api = Api({**install_context(), **use_context(None)})

        with pytest.raises(ContextMutationError, match="callable 'mutate'"):
            await api({"type": EnumContextAction.MUTATE_CONTEXT.value})

    @pytest.mark.asyncio
    async def test_failure_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        api = Api({**install_context(), **use_context({"count": 1})})

        def explode(context: Any) -> Any:
            raise ValueError("bad transform")

        with caplog.at_level(logging.WARNING, logger="omnibase_dispatch"):
            with pytest.raises(ContextMutationError):
                await api(
                    {"type": EnumContextAction.MUTATE_CONTEXT.value, "mutate": explode}
                )

        warnings = [r for r in caplog.records if r.levelname == "WARNING"]
        assert len(warnings) == 1
        assert warnings[0].message == "Context mutation failed"
        assert warnings[0].action_type == EnumContextAction.MUTATE_CONTEXT.value
        assert warnings[0].error_type == "ValueError"
