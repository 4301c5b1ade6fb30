"""Data contracts for the growth calculator endpoints."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from growth_calculator.core.cagr import CagrResult, LookbackPeriod


class CalculateRequest(BaseModel):
    """User edits to apply on top of the configured defaults."""

    model_config = ConfigDict(extra="forbid")

    deposit: Optional[float] = Field(
        None,
        gt=0,
        allow_inf_nan=False,
        description="Initial lump-sum deposit.",
    )
    timeframe: Optional[LookbackPeriod] = Field(
        None,
        description="Lookback window whose historical CAGR drives the projection.",
    )


class PeriodsResponse(BaseModel):
    """Historical CAGR for every lookback window the NAV history supports."""

    periods: List[CagrResult]
