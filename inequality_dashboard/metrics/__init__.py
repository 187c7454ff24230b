"""Inequality metric calculations."""

from inequality_dashboard.metrics.census import aggregate_states
from inequality_dashboard.metrics.earnings_gap import compute_earnings_gap, project

__all__ = ["aggregate_states", "compute_earnings_gap", "project"]
