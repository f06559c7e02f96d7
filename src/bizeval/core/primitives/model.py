# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Every input and result record in bizeval is immutable: calculations return
    new records and never mutate the ones they were handed.
    """

    model_config = ConfigDict(
        frozen=True,  # Results are values; callers decide what to persist
        extra="forbid",  # Catches typos and missing field definitions immediately
    )
