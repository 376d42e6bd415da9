"""指数計算関数

根幹指数・能力指数・傾向指数・総合指数を計算する純粋関数群。
いずれも入力のみから値を計算し、副作用を持たない。
"""

from collections.abc import Iterable

from robokeiba.config.weights import (
    BASE_INDEX_RATIO,
    MAX_INDEX,
    TOTAL_INDEX_DIVISOR,
)
from robokeiba.models.entry import TendencyCategory
from robokeiba.utils.rounding import round_half_up


def compute_base_index(user_input: float) -> float:
    """根幹指数を計算する

    入力値（0-100）の範囲チェックは呼び出し側で行う。

    Args:
        user_input: ユーザーが入力した根幹指数（0-100）

    Returns:
        根幹指数（入力値 × 0.5）
    """
    return user_input * BASE_INDEX_RATIO


def compute_ability_index(odds: float) -> float:
    """能力指数を計算する（オッズの逆数ベース、最大50点）

    Args:
        odds: 単勝オッズ

    Returns:
        0-50の範囲の能力指数（小数点2桁）、オッズが0以下の場合は0
    """
    if odds <= 0:
        return 0.0

    # オッズが低いほど能力指数が高くなる
    score = (1 / odds) * 100
    return round_half_up(min(MAX_INDEX, score))


def priority_weight(rank: int) -> float:
    """優先順位から優先度係数を計算する

    1位=0.4, 2位=0.3, 3位=0.2, 4位=0.1
    """
    return (5 - rank) / 10


def compute_tendency_index(
    place_rate: float,
    selected_categories: Iterable[TendencyCategory] | None,
) -> float:
    """傾向指数を計算する（複勝率 × 優先度係数 × 複勝効率、最大50点）

    Args:
        place_rate: 馬の複勝率（現在の計算式では使用しない）
        selected_categories: 優先順位順に並んだ傾向パラメータ

    Returns:
        0-50の範囲の傾向指数（小数点2桁）、未選択の場合は0
    """
    if not selected_categories:
        return 0.0

    total_score = 0.0
    total_weight = 0.0

    for rank, category in enumerate(selected_categories, start=1):
        weight = priority_weight(rank)
        total_score += category.place_rate * weight * category.efficiency
        total_weight += weight

    if total_weight <= 0:
        return 0.0

    # 有効な重みで正規化して50点満点に換算
    score = total_score / total_weight * MAX_INDEX
    return round_half_up(max(0.0, min(MAX_INDEX, score)))


def compute_total_index(
    base_index: float, ability_index: float, tendency_index: float
) -> float:
    """競走馬能力総合指数を計算する

    base_index には0.5倍する前の根幹指数（0-100）を渡す。
    除数200により0.5倍が暗黙に適用される。

    Args:
        base_index: 根幹指数の入力値（0-100）
        ability_index: 能力指数（0-50）
        tendency_index: 傾向指数（0-50）

    Returns:
        総合指数（小数点2桁）
    """
    x = base_index
    total = (x / TOTAL_INDEX_DIVISOR) * ability_index + (
        (TOTAL_INDEX_DIVISOR - x) / TOTAL_INDEX_DIVISOR
    ) * tendency_index
    return round_half_up(total)
