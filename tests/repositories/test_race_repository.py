"""SQLAlchemyRaceRepositoryのテスト"""

import pytest

from robokeiba.data.dummy_data import seed
from robokeiba.db import get_engine, get_session, init_db
from robokeiba.exceptions import InvalidOddsError, NotFoundError
from robokeiba.models import HorseOdds, RaceHorseRecord
from robokeiba.repositories import SQLAlchemyRaceRepository


@pytest.fixture
def session():
    engine = get_engine(":memory:")
    init_db(engine)
    with get_session(engine) as session:
        seed(session)
        yield session
    engine.dispose()


def odds_for(repository: SQLAlchemyRaceRepository, race_id: int, odds: float) -> list[HorseOdds]:
    """全馬に同じオッズを設定したHorseOddsを作成するヘルパー"""
    return [
        HorseOdds(horse_id=h.id, horse_number=h.horse_number, horse_name=h.name, odds=odds)
        for h in repository.get_horses(race_id)
    ]


class TestSQLAlchemyRaceRepository:
    """SQLAlchemyRaceRepositoryのテスト"""

    def test_list_races(self, session):
        """レース一覧をレース番号順に取得する"""
        races = SQLAlchemyRaceRepository(session).list_races()
        assert [r.race_number for r in races] == [1, 2, 3, 4, 5]

    def test_get_race_unknown_raises(self, session):
        """存在しないレースはNotFoundError"""
        with pytest.raises(NotFoundError):
            SQLAlchemyRaceRepository(session).get_race(999)

    def test_get_horses_ordered_by_number(self, session):
        """出走馬を馬番順に取得する"""
        horses = SQLAlchemyRaceRepository(session).get_horses(1)
        assert [h.horse_number for h in horses] == list(range(1, 9))
        assert horses[0].name == "トウカイテイオー"

    def test_get_categories(self, session):
        """傾向パラメータのカタログを取得する"""
        categories = SQLAlchemyRaceRepository(session).get_categories()
        assert len(categories) == 8
        assert categories[0].place_rate == 0.72
        assert categories[0].efficiency == 0.85

    def test_save_odds_updates_horses(self, session):
        """オッズと能力指数を保存する"""
        repository = SQLAlchemyRaceRepository(session)
        snapshot = repository.save_odds(1, odds_for(repository, 1, 4.0))

        assert len(snapshot.horses) == 8
        assert snapshot.horses[0]["ability_index"] == 25.0
        record = session.get(RaceHorseRecord, 101)
        assert record.odds == 4.0
        assert record.ability_index == 25.0

    def test_save_odds_rejects_invalid_without_writing(self, session):
        """不正なオッズがある場合は何も保存しない"""
        repository = SQLAlchemyRaceRepository(session)
        entries = odds_for(repository, 1, 4.0)
        entries[3] = HorseOdds(
            horse_id=entries[3].horse_id, horse_number=4, horse_name="x", odds=1500.0
        )

        with pytest.raises(InvalidOddsError) as exc_info:
            repository.save_odds(1, entries)

        assert exc_info.value.invalid == {entries[3].horse_id: 1500.0}
        assert session.get(RaceHorseRecord, 101).odds == 3.2
        assert repository.get_saved_odds() == []

    def test_save_odds_unknown_horse_raises(self, session):
        """他のレースの馬はNotFoundError"""
        repository = SQLAlchemyRaceRepository(session)
        with pytest.raises(NotFoundError):
            repository.save_odds(1, odds_for(repository, 2, 4.0))

    def test_get_saved_odds_filters_by_race(self, session):
        """レースIDで保存済みオッズを絞り込む"""
        repository = SQLAlchemyRaceRepository(session)
        repository.save_odds(1, odds_for(repository, 1, 4.0))
        repository.save_odds(2, odds_for(repository, 2, 5.0))

        assert len(repository.get_saved_odds()) == 2
        saved = repository.get_saved_odds(2)
        assert [s.race_id for s in saved] == [2]

    def test_save_odds_skips_unentered_horses(self, session):
        """オッズ未入力（0）の馬は保存対象から外す"""
        repository = SQLAlchemyRaceRepository(session)
        entries = odds_for(repository, 1, 4.0)
        entries[1] = HorseOdds(
            horse_id=entries[1].horse_id, horse_number=2, horse_name="x", odds=0
        )

        snapshot = repository.save_odds(1, entries)

        assert [h["horse_number"] for h in snapshot.horses] == [1, 3, 4, 5, 6, 7, 8]
        assert session.get(RaceHorseRecord, 102).odds == 2.8
        assert session.get(RaceHorseRecord, 103).odds == 4.0

    def test_save_odds_rejects_when_nothing_entered(self, session):
        """1頭もオッズが入力されていない場合は保存しない"""
        repository = SQLAlchemyRaceRepository(session)

        with pytest.raises(InvalidOddsError) as exc_info:
            repository.save_odds(1, odds_for(repository, 1, 0))

        assert exc_info.value.invalid == {}
        assert repository.get_saved_odds() == []
