# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Valuation records previously stored by the caller for a business.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from pydantic import Field

from ..core.primitives import (
    ConfidenceLevelEnum,
    Model,
    PositiveFloat,
    ValuationMethodologyEnum,
)


class ValuationRecord(Model):
    """
    A single recorded valuation of a business.

    The link to the valued business is a plain identifier (``business_id``)
    resolved by the caller; records never hold a reference to the business
    object itself.

    Attributes:
        calculated_value: Resulting business value
        multiple: Multiple applied by the methodology
        methodology: How the value was derived
        confidence_level: Analyst confidence in the value
        revenue_multiple: Revenue multiple used, when applicable
        profit_multiple: Profit multiple used, when applicable
        ebitda_multiple: EBITDA multiple used, when applicable
        sde_multiple: SDE multiple used, when applicable
        notes: Free-form analyst notes
    """

    # === CORE IDENTITY ===
    uid: UUID = Field(default_factory=uuid4, description="Unique identifier")
    business_id: Optional[UUID] = Field(
        default=None, description="Identifier of the valued business"
    )
    created_at: datetime = Field(default_factory=datetime.now)

    # === VALUATION ===
    calculated_value: PositiveFloat
    multiple: PositiveFloat = 0.0
    methodology: ValuationMethodologyEnum
    confidence_level: ConfidenceLevelEnum = ConfidenceLevelEnum.MEDIUM

    # === COMPONENT MULTIPLES ===
    revenue_multiple: Optional[PositiveFloat] = None
    profit_multiple: Optional[PositiveFloat] = None
    ebitda_multiple: Optional[PositiveFloat] = None
    sde_multiple: Optional[PositiveFloat] = None

    notes: Optional[str] = None

    def with_notes(self, notes: Optional[str]) -> "ValuationRecord":
        """Return a copy of this record with replaced notes.

        Notes are the only part of a record that may change after creation.
        """
        return self.model_copy(update={"notes": notes})
