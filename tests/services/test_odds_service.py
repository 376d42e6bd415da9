"""Tests for OddsService"""

import pytest

from robokeiba.data.dummy_data import seed
from robokeiba.db import get_engine, get_session, init_db
from robokeiba.exceptions import InvalidOddsError, NotFoundError
from robokeiba.repositories import SQLAlchemyRaceRepository
from robokeiba.services.odds_service import OddsService


@pytest.fixture
def service():
    engine = get_engine(":memory:")
    init_db(engine)
    with get_session(engine) as session:
        seed(session)
        yield OddsService(SQLAlchemyRaceRepository(session))
    engine.dispose()


class TestOddsService:
    """OddsServiceのテスト"""

    def test_preview_uses_current_odds_by_default(self, service):
        """入力のない馬は現在のオッズを使う"""
        preview = service.preview(1, {})

        assert preview.race_name == "第1回 東京競馬場 1R"
        assert [h.odds for h in preview.horses][:2] == [3.2, 2.8]
        assert preview.horses[0].ability_index == 31.25
        assert preview.summary.horse_count == 8
        assert preview.summary.valid_count == 8

    def test_preview_applies_input(self, service):
        """入力したオッズで能力指数を再計算する"""
        preview = service.preview(1, {1: 2.0, 2: 4.0})

        assert preview.horses[0].ability_index == 50.0
        assert preview.horses[1].ability_index == 25.0

    def test_preview_zero_odds_excluded_from_stats(self, service):
        """オッズ0の馬は統計から除外する"""
        preview = service.preview(1, {n: 0 for n in range(3, 9)} | {1: 2.0, 2: 4.0})

        assert preview.summary.valid_count == 2
        assert preview.summary.mean == 3.0
        assert preview.summary.variance == 1.0

    def test_preview_unknown_number_raises(self, service):
        """存在しない馬番はNotFoundError"""
        with pytest.raises(NotFoundError):
            service.preview(1, {99: 3.0})

    def test_save(self, service):
        """オッズを保存する"""
        snapshot = service.save(1, {1: 2.0})
        assert snapshot.race_id == 1
        assert snapshot.horses[0]["odds"] == 2.0
        assert snapshot.horses[0]["ability_index"] == 50.0

    def test_save_skips_unentered_odds(self, service):
        """未入力（0）の馬を除いて保存する"""
        snapshot = service.save(1, {1: 2.0, 2: 0})

        assert [h["horse_number"] for h in snapshot.horses] == [1, 3, 4, 5, 6, 7, 8]
        assert snapshot.horses[0]["ability_index"] == 50.0

    def test_save_rejects_when_nothing_entered(self, service):
        """1頭もオッズが入力されていないと保存できない"""
        with pytest.raises(InvalidOddsError, match="入力されていません"):
            service.save(1, {n: 0 for n in range(1, 9)})

    def test_save_rejects_odds_over_1000(self, service):
        """1000倍を超えるオッズは保存できない"""
        with pytest.raises(InvalidOddsError):
            service.save(1, {1: 1000.5})
