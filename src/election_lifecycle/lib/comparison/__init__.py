"""Comparison library — enrollment trends and insights between elections.

Public API:
    - compare: Per-metric trends of one election against a baseline
    - compare_with: Compare against a baseline looked up by id in a pool
    - eligible_baselines: Completed prior elections, most recent first
    - summarize_insights: Significant changes and overall direction
"""

from election_lifecycle.lib.comparison.insights import (
    Insights,
    OverallTrend,
    SignificantChange,
    describe_change,
    eligible_baselines,
    is_eligible_baseline,
    order_by_recency,
    summarize_insights,
)
from election_lifecycle.lib.comparison.metrics import (
    METRIC_NAMES,
    SIGNIFICANCE_THRESHOLD,
    CandidateSummary,
    ComparisonResult,
    TrendDirection,
    TrendMetric,
    build_trend,
    compare,
    compare_with,
    summarize_candidates,
)

__all__ = [
    "METRIC_NAMES",
    "SIGNIFICANCE_THRESHOLD",
    "CandidateSummary",
    "ComparisonResult",
    "Insights",
    "OverallTrend",
    "SignificantChange",
    "TrendDirection",
    "TrendMetric",
    "build_trend",
    "compare",
    "compare_with",
    "describe_change",
    "eligible_baselines",
    "is_eligible_baseline",
    "order_by_recency",
    "summarize_candidates",
    "summarize_insights",
]
