"""Aggregate figures computed over the managed websites."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WebsiteStats:
    """Counts per status plus the visitor total."""

    total: int
    active_count: int
    building_count: int
    suspended_count: int
    total_visitors: int


__all__ = ["WebsiteStats"]
