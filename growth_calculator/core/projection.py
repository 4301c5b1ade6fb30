"""Lump-sum growth projection."""

from __future__ import annotations


def project_value(principal: float, cagr: float, years: float) -> float:
    """Grow `principal` at a constant annual `cagr` for `years` (annual compounding).

    No rounding happens here; presentation layers round for display. A rate
    of -100% or worse is a total loss: any positive span projects to 0.0.
    """
    if years < 0:
        raise ValueError("years must be non-negative")
    growth = 1.0 + cagr
    if growth <= 0 and years > 0:
        return 0.0
    return principal * growth ** years


__all__ = ["project_value"]
