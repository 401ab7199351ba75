# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Dispatcher Configuration Model.

Environment Variables:
    ONEX_DISPATCH_FAN_OUT_POLICY: ``fail_fast`` (default) or ``collect_all``
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

from omnibase_dispatch.enums import EnumFanOutPolicy

ENV_FAN_OUT_POLICY = "ONEX_DISPATCH_FAN_OUT_POLICY"


class ModelDispatcherConfig(BaseModel):
    """Configuration for an ``Api`` dispatcher instance.

    Attributes:
        fan_out_policy: How handler failures surface during event-like
            fan-out (default FAIL_FAST)

    Example:
        >>> config = ModelDispatcherConfig(
        ...     fan_out_policy=EnumFanOutPolicy.COLLECT_ALL,
        ... )
        >>> api = Api(table, config=config)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    fan_out_policy: EnumFanOutPolicy = Field(
        default=EnumFanOutPolicy.FAIL_FAST,
        description="Failure policy for event-like fan-out dispatch",
    )

    @classmethod
    def from_env(cls) -> ModelDispatcherConfig:
        """Build a configuration from ``ONEX_DISPATCH_*`` environment variables.

        Returns:
            Configuration with environment overrides applied.

        Raises:
            ValueError: If ``ONEX_DISPATCH_FAN_OUT_POLICY`` names an unknown policy.
        """
        raw_policy = os.getenv(ENV_FAN_OUT_POLICY)
        if raw_policy is None or not raw_policy.strip():
            return cls()

        value = raw_policy.strip().lower()
        try:
            policy = EnumFanOutPolicy(value)
        except ValueError:
            valid = ", ".join(sorted(p.value for p in EnumFanOutPolicy))
            raise ValueError(
                f"Invalid {ENV_FAN_OUT_POLICY} '{raw_policy}'. Valid values: {valid}"
            ) from None
        return cls(fan_out_policy=policy)


__all__ = ["ENV_FAN_OUT_POLICY", "ModelDispatcherConfig"]
