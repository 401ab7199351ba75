# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_dispatch tests."""

from __future__ import annotations

from typing import Any

import pytest

from omnibase_dispatch import Feature

# =============================================================================
# Account domain used across dispatcher tests
# =============================================================================

CREATE_ACCOUNT = "Account.CreateAccount"
GET_ACCOUNT = "Account.GetAccount"
ACCOUNT_CREATED = "Account.AccountCreated"


async def _create_account(command: dict[str, Any], next: Any) -> dict[str, Any]:  # noqa: A002
    """Build an account record and announce it."""
    account = {"type": "Account", "id": "1", "name": command["name"]}
    await next({"type": ACCOUNT_CREATED, "account": account})
    return account


async def _get_account(query: dict[str, Any], next: Any) -> dict[str, Any]:  # noqa: A002
    """Return a synthetic account for the requested id."""
    return {"type": "Account", "id": query["id"], "name": f"Name {query['id']}"}


@pytest.fixture
def feature() -> Feature:
    """Fresh handler table builder."""
    return Feature()


@pytest.fixture
def recorded() -> list[Any]:
    """Shared list for handlers and listeners to record into."""
    return []


@pytest.fixture
def create_account() -> Any:
    """Command handler for ``Account.CreateAccount``."""
    return _create_account


@pytest.fixture
def get_account() -> Any:
    """Query handler for ``Account.GetAccount``."""
    return _get_account
