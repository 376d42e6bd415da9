"""IndexCalculator - 全馬の指数計算とランキング"""

from collections.abc import Iterable

from robokeiba.analyzers.index_calculator import (
    compute_ability_index,
    compute_base_index,
    compute_tendency_index,
    compute_total_index,
)
from robokeiba.models.entry import CalculationResult, CategorySelection, RaceHorse
from robokeiba.utils.rounding import round_half_up


class IndexCalculator:
    """AIロボットの設定から各馬の総合指数を計算する"""

    def __init__(self, root_index: float, selection: CategorySelection | None):
        """IndexCalculatorを初期化する

        Args:
            root_index: 根幹指数の入力値（0-100）
            selection: 優先順位順の傾向パラメータ（Noneの場合は傾向指数0）
        """
        self._root_index = root_index
        self._selection = selection

    @property
    def base_index(self) -> float:
        """根幹指数（入力値 × 0.5）"""
        return round_half_up(compute_base_index(self._root_index))

    def calculate(self, horse: RaceHorse) -> CalculationResult:
        """1頭分の指数を計算する

        Args:
            horse: 対象馬

        Returns:
            計算結果
        """
        ability_index = compute_ability_index(horse.odds)
        tendency_index = compute_tendency_index(horse.place_rate, self._selection)
        # 総合指数には0.5倍前の入力値を渡す
        total_index = compute_total_index(
            self._root_index, ability_index, tendency_index
        )

        return CalculationResult(
            horse_id=horse.id,
            horse_name=horse.name,
            base_index=self.base_index,
            ability_index=ability_index,
            tendency_index=tendency_index,
            total_index=total_index,
        )

    def calculate_all(self, horses: Iterable[RaceHorse]) -> list[CalculationResult]:
        """全馬の指数を計算する（入力順）"""
        return [self.calculate(horse) for horse in horses]

    @staticmethod
    def rank(results: Iterable[CalculationResult]) -> list[CalculationResult]:
        """総合指数の降順に並べる

        同点の場合は入力順を維持する。
        """
        return sorted(results, key=lambda r: r.total_index, reverse=True)
