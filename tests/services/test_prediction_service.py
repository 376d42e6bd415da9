"""Tests for PredictionService"""

from unittest.mock import Mock

import pytest

from robokeiba.exceptions import NotFoundError
from robokeiba.models import (
    RaceHorseRecord,
    RobotDefinition,
    TendencyCategory,
    TendencyParam,
)
from robokeiba.services.prediction_service import PredictionService, build_selection


def create_categories() -> list[TendencyCategory]:
    """テスト用の傾向パラメータカタログを作成するヘルパー"""
    stats = [(0.72, 0.85), (0.68, 0.78), (0.75, 0.82), (0.70, 0.80), (0.65, 0.75)]
    return [
        TendencyCategory(id=i, name=f"cat{i}", place_rate=rate, efficiency=eff)
        for i, (rate, eff) in enumerate(stats, start=1)
    ]


def create_robot(priorities: dict[int, int] | None = None, root_index: int = 50) -> RobotDefinition:
    """テスト用のRobotDefinitionを作成するヘルパー"""
    priorities = priorities or {1: 1, 2: 2, 3: 3, 4: 4}
    return RobotDefinition(
        name="テストロボ",
        root_index=root_index,
        tendency_params=tuple(
            TendencyParam(id=cid, name=f"cat{cid}", priority=rank)
            for cid, rank in priorities.items()
        ),
        race_params=(),
        learning_thought="predictor",
    )


def create_horse(horse_id: int, number: int, name: str, odds: float) -> RaceHorseRecord:
    """テスト用のRaceHorseRecordを作成するヘルパー"""
    return RaceHorseRecord(
        id=horse_id, race_id=1, horse_number=number, name=name, odds=odds, place_rate=0.5
    )


class TestBuildSelection:
    """build_selection関数のテスト"""

    def test_orders_by_priority(self):
        """ロボットの優先順位順に並べる"""
        robot = create_robot({4: 1, 2: 2, 5: 3, 1: 4})
        selection = build_selection(robot, create_categories())
        assert [c.id for c in selection] == [4, 2, 5, 1]

    def test_uses_catalog_stats(self):
        """カタログの複勝率・複勝効率を使う"""
        selection = build_selection(create_robot(), create_categories())
        assert selection.categories[0].place_rate == 0.72
        assert selection.categories[0].efficiency == 0.85

    def test_unknown_category_raises(self):
        """カタログにないカテゴリはNotFoundError"""
        robot = create_robot({1: 1, 2: 2, 3: 3, 9: 4})
        with pytest.raises(NotFoundError):
            build_selection(robot, create_categories())

    def test_incomplete_selection_raises(self):
        """4つ未満の選択はValueError"""
        robot = create_robot({1: 1, 2: 2, 3: 3})
        with pytest.raises(ValueError):
            build_selection(robot, create_categories())


class TestPredictionService:
    """PredictionServiceのテスト"""

    @pytest.fixture
    def repository(self):
        repository = Mock()
        repository.get_horses.return_value = [
            create_horse(101, 1, "トウカイテイオー", 3.2),
            create_horse(102, 2, "ディープインパクト", 2.8),
            create_horse(103, 3, "オグリキャップ", 4.1),
        ]
        return repository

    def test_predict_ranks_by_total_index(self, repository):
        """総合指数の降順で返す"""
        service = PredictionService(repository, create_categories())
        results = service.predict(create_robot(), race_id=1)

        repository.get_horses.assert_called_once_with(1)
        assert [r.horse_name for r in results] == [
            "ディープインパクト",
            "トウカイテイオー",
            "オグリキャップ",
        ]

    def test_predict_values(self, repository):
        """根幹指数50、傾向指数29.15で計算する"""
        service = PredictionService(repository, create_categories())
        results = {r.horse_id: r for r in service.predict(create_robot(), race_id=1)}

        assert results[101].base_index == 25.0
        assert results[101].ability_index == 31.25
        assert results[101].tendency_index == 29.15
        assert results[101].total_index == 29.68
        assert results[102].total_index == 30.79

    def test_missing_odds_gives_zero_ability(self, repository):
        """オッズ未入力の馬は能力指数0で計算する"""
        repository.get_horses.return_value = [create_horse(104, 4, "未入力", 0)]
        service = PredictionService(repository, create_categories())

        result = service.predict(create_robot(root_index=100), race_id=1)[0]
        assert result.ability_index == 0.0
        # (100/200) * 0 + (100/200) * 29.15 = 14.575 → 14.58
        assert result.total_index == 14.58

    def test_empty_race(self, repository):
        """出走馬がいない場合は空リスト"""
        repository.get_horses.return_value = []
        service = PredictionService(repository, create_categories())
        assert service.predict(create_robot(), race_id=1) == []
