"""想定オッズの統計・妥当性チェック"""

from collections.abc import Iterable
from dataclasses import replace
from typing import Protocol

import numpy as np

from robokeiba.analyzers.index_calculator import compute_ability_index
from robokeiba.config.weights import ODDS_MAX, ODDS_MIN_EXCLUSIVE
from robokeiba.models.entry import HorseOdds, OddsSummary
from robokeiba.utils.rounding import round_half_up


class HasOdds(Protocol):
    """odds属性を持つオブジェクト"""

    odds: float


def validate_odds(odds: float) -> bool:
    """オッズの妥当性をチェックする（0 < odds <= 1000）"""
    return ODDS_MIN_EXCLUSIVE < odds <= ODDS_MAX


def _valid_odds(horses: Iterable[HasOdds]) -> np.ndarray:
    return np.array([h.odds for h in horses if h.odds > 0], dtype=float)


def compute_odds_mean(horses: Iterable[HasOdds]) -> float:
    """平均オッズを計算する

    オッズが0以下の馬は除外する。

    Args:
        horses: odds属性を持つ馬のリスト

    Returns:
        平均オッズ（小数点2桁）、有効な馬がいない場合は0
    """
    odds = _valid_odds(horses)
    if odds.size == 0:
        return 0.0

    return round_half_up(float(odds.mean()))


def compute_odds_variance(horses: Iterable[HasOdds]) -> float:
    """オッズの分散（母分散）を計算する

    平均は小数点2桁に丸めた値を使う。

    Args:
        horses: odds属性を持つ馬のリスト

    Returns:
        分散（小数点2桁）、有効な馬がいない場合は0
    """
    odds = _valid_odds(horses)
    if odds.size == 0:
        return 0.0

    average = round_half_up(float(odds.mean()))
    variance = float(np.mean((odds - average) ** 2))
    return round_half_up(variance)


def compute_all_ability_indices(horses: Iterable[HorseOdds]) -> list[HorseOdds]:
    """全馬の能力指数を計算する

    Args:
        horses: オッズ入力済みの馬リスト

    Returns:
        ability_indexを設定した新しいHorseOddsのリスト
    """
    return [
        replace(horse, ability_index=compute_ability_index(horse.odds))
        for horse in horses
    ]


def summarize_odds(horses: Iterable[HasOdds]) -> OddsSummary:
    """オッズの統計情報をまとめる"""
    horses = list(horses)
    return OddsSummary(
        horse_count=len(horses),
        valid_count=sum(1 for h in horses if h.odds > 0),
        mean=compute_odds_mean(horses),
        variance=compute_odds_variance(horses),
    )
