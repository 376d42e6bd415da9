"""Analyzer modules"""

from robokeiba.analyzers.index_calculator import (
    compute_ability_index,
    compute_base_index,
    compute_tendency_index,
    compute_total_index,
    priority_weight,
)
from robokeiba.analyzers.odds_stats import (
    compute_all_ability_indices,
    compute_odds_mean,
    compute_odds_variance,
    summarize_odds,
    validate_odds,
)
from robokeiba.analyzers.score_calculator import IndexCalculator

__all__ = [
    "IndexCalculator",
    "compute_ability_index",
    "compute_all_ability_indices",
    "compute_base_index",
    "compute_odds_mean",
    "compute_odds_variance",
    "compute_tendency_index",
    "compute_total_index",
    "priority_weight",
    "summarize_odds",
    "validate_odds",
]
