"""サンプルデータ投入のテスト"""

from sqlalchemy import func, select

from robokeiba.data.dummy_data import seed
from robokeiba.db import get_engine, get_session, init_db
from robokeiba.models import Race, RaceHorseRecord, TendencyCategoryRecord


class TestSeed:
    """seed関数のテスト"""

    def test_seed_creates_records(self):
        """レース・出走馬・傾向パラメータを登録する"""
        engine = get_engine(":memory:")
        init_db(engine)

        try:
            with get_session(engine) as session:
                created = seed(session)

                assert created == 8 + 5 + 5 * 8
                assert session.scalar(select(func.count()).select_from(Race)) == 5
                assert session.scalar(select(func.count()).select_from(RaceHorseRecord)) == 40
                assert (
                    session.scalar(select(func.count()).select_from(TendencyCategoryRecord))
                    == 8
                )
        finally:
            engine.dispose()

    def test_seed_is_idempotent(self):
        """2回目の投入では何も登録しない"""
        engine = get_engine(":memory:")
        init_db(engine)

        try:
            with get_session(engine) as session:
                seed(session)
            with get_session(engine) as session:
                assert seed(session) == 0
        finally:
            engine.dispose()
