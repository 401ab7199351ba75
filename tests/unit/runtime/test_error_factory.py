# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for kind_of_error() and ActionError."""

from __future__ import annotations

from typing import Any

import pytest

from omnibase_dispatch import ActionError, Api, Feature, kind_of_error

POST_ERROR_DATA = {
    "type": "Post.PostError",
    "post_ref": {"type": "Post.PostRef", "id": "1", "account_id": "account-id"},
}


class TestKindOfError:
    """Tests for typed error construction."""

    def test_from_data_only(self) -> None:
        PostError = kind_of_error()

        error = PostError(POST_ERROR_DATA)

        assert isinstance(error, Exception)
        assert isinstance(error, ActionError)
        assert error.type == "Post.PostError"
        assert error.data == POST_ERROR_DATA
        assert str(error) == "Post.PostError"
        assert error.message == "Post.PostError"

    def test_with_message(self) -> None:
        error = kind_of_error()(POST_ERROR_DATA, "post could not be saved")

        assert str(error) == "post could not be saved"
        assert error.type == "Post.PostError"

    def test_adopts_fault_message_traceback_and_cause(self) -> None:
        root = OSError("disk full")
        try:
            try:
                raise root
            except OSError as e:
                raise ValueError("foo") from e
        except ValueError as caught:
            fault = caught

        error = kind_of_error()(POST_ERROR_DATA, fault)

        assert str(error) == "foo"
        assert error.__traceback__ is fault.__traceback__
        assert error.__cause__ is root
        assert error.data == POST_ERROR_DATA

    def test_raised_error_keeps_original_frames(self) -> None:
        def failing_repository() -> None:
            raise RuntimeError("foo")

        try:
            failing_repository()
        except RuntimeError as e:
            fault = e

        with pytest.raises(ActionError) as exc_info:
            raise kind_of_error()(POST_ERROR_DATA, fault)

        frames = [entry.name for entry in exc_info.traceback]
        assert "failing_repository" in frames

    def test_custom_error_class(self) -> None:
        class PostError(ActionError):
            pass

        error = kind_of_error(PostError)(POST_ERROR_DATA)

        assert type(error) is PostError

    def test_data_without_type_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty 'type'"):
            kind_of_error()({"post_id": "1"})

    def test_attribute_style_data(self) -> None:
        class Data:
            type = "Post.PostError"

        error = kind_of_error()(Data())

        assert error.type == "Post.PostError"


class TestErrorAsAction:
    """Typed errors travel through dispatch as error-kind actions."""

    @pytest.mark.asyncio
    async def test_thrown_and_emitted(self, feature: Feature, recorded: list[Any]) -> None:
        PostError = kind_of_error()

        async def create_post(command: Any, next: Any) -> None:  # noqa: A002
            error = PostError(POST_ERROR_DATA, "title is empty")
            await next(error)
            raise error

        api = Api(
            {
                **feature.command("Post.CreatePost", create_post),
                **feature.error("Post.PostError", lambda error, next: recorded.append(error)),
            }
        )

        with pytest.raises(ActionError, match="title is empty") as exc_info:
            await api({"type": "Post.CreatePost", "title": ""})

        assert recorded == [exc_info.value]
        assert recorded[0].data == POST_ERROR_DATA
