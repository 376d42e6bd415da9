"""PredictionService - AIロボットでレースの指数を計算するサービス"""

import logging
from collections.abc import Iterable
from typing import Protocol

from robokeiba.analyzers.score_calculator import IndexCalculator
from robokeiba.exceptions import NotFoundError
from robokeiba.models import (
    CalculationResult,
    CategorySelection,
    RaceHorseRecord,
    RobotDefinition,
    TendencyCategory,
)

logger = logging.getLogger(__name__)


class RaceRepository(Protocol):
    """出走馬リポジトリのプロトコル"""

    def get_horses(self, race_id: int) -> list[RaceHorseRecord]:
        """出走馬を取得"""
        ...


def build_selection(
    robot: RobotDefinition, categories: Iterable[TendencyCategory]
) -> CategorySelection:
    """ロボットの傾向パラメータからCategorySelectionを作成する

    Args:
        robot: AIロボット定義
        categories: 複勝率・複勝効率を持つ傾向パラメータのカタログ

    Returns:
        優先順位順のCategorySelection

    Raises:
        NotFoundError: カタログに存在しないカテゴリが含まれる場合
        ValueError: 優先順位が1-4の順列でない場合
    """
    catalog = {c.id: c for c in categories}
    missing = [p.id for p in robot.tendency_params if p.id not in catalog]
    if missing:
        raise NotFoundError(f"傾向パラメータの統計が見つかりません: {missing}")

    return CategorySelection.from_priorities(
        {catalog[p.id]: p.priority for p in robot.tendency_params}
    )


class PredictionService:
    """AIロボットの設定で出走馬の総合指数を計算するサービス"""

    def __init__(self, repository: RaceRepository, categories: Iterable[TendencyCategory]):
        """初期化

        Args:
            repository: 出走馬リポジトリ
            categories: 傾向パラメータのカタログ
        """
        self._repository = repository
        self._categories = list(categories)

    def predict(self, robot: RobotDefinition, race_id: int) -> list[CalculationResult]:
        """レースの全馬の指数を計算する

        Args:
            robot: AIロボット定義
            race_id: レースID

        Returns:
            総合指数の降順に並べた計算結果（同点は馬番順）
        """
        selection = build_selection(robot, self._categories)
        calculator = IndexCalculator(robot.root_index, selection)

        horses = [record.to_entry() for record in self._repository.get_horses(race_id)]
        missing_odds = [h.horse_number for h in horses if h.odds <= 0]
        if missing_odds:
            logger.warning("Odds not entered for horse numbers %s (race_id=%s)", missing_odds, race_id)

        results = calculator.rank(calculator.calculate_all(horses))
        logger.debug("Calculated %d results for race_id=%s", len(results), race_id)
        return results
