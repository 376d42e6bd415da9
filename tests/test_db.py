"""データベース接続モジュールのテスト"""

from datetime import date
from pathlib import Path

import pytest
from sqlalchemy import inspect, select, text
from sqlalchemy.exc import IntegrityError

from robokeiba.db import get_engine, get_session, init_db
from robokeiba.models import Race, RaceHorseRecord, Robot


@pytest.fixture
def engine(tmp_path: Path):
    engine = get_engine(tmp_path / "robokeiba.db")
    init_db(engine)
    yield engine
    engine.dispose()


def make_robot(name: str = "テストロボ") -> Robot:
    return Robot(
        name=name,
        root_index=50,
        tendency_params=[],
        race_params=[],
        learning_thought="jockey",
    )


class TestGetEngine:
    """get_engine関数のテスト"""

    def test_親ディレクトリを作成する(self, tmp_path: Path) -> None:
        """存在しないディレクトリ配下のDBファイルを作成できる"""
        db_path = tmp_path / "data" / "robokeiba.db"
        engine = get_engine(str(db_path))

        try:
            init_db(engine)
            assert db_path.exists()
        finally:
            engine.dispose()

    def test_外部キー制約が有効(self, engine) -> None:
        """接続ごとにPRAGMA foreign_keysが有効になっている"""
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1

    def test_存在しないレースの出走馬は保存できない(self, engine) -> None:
        """外部キー違反はIntegrityError"""
        with pytest.raises(IntegrityError):
            with get_session(engine) as session:
                session.add(
                    RaceHorseRecord(
                        id=1, race_id=999, horse_number=1, name="x", odds=2.0, place_rate=0.5
                    )
                )


class TestGetSession:
    """get_session関数のテスト"""

    def test_正常終了時にコミットされる(self, engine) -> None:
        """明示的なcommitなしでロボットが保存される"""
        with get_session(engine) as session:
            session.add(make_robot())

        with get_session(engine) as session:
            names = session.execute(select(Robot.name)).scalars().all()
            assert names == ["テストロボ"]

    def test_例外発生時にロールバックされる(self, engine) -> None:
        """例外時はロボットが保存されない"""
        with pytest.raises(ValueError):
            with get_session(engine) as session:
                session.add(make_robot())
                session.flush()
                raise ValueError("テスト用例外")

        with get_session(engine) as session:
            assert session.execute(select(Robot)).scalars().all() == []

    def test_コミット後も属性を参照できる(self, engine) -> None:
        """expire_on_commit=Falseのためセッション外でも値を読める"""
        with get_session(engine) as session:
            race = Race(id=1, name="テストレース", date=date(2024, 1, 15))
            session.add(race)

        assert race.name == "テストレース"


class TestInitDb:
    """init_db関数のテスト"""

    def test_全テーブルを作成する(self, engine) -> None:
        """ロボット・レース・出走馬・オッズのテーブルが作成されることを確認"""
        tables = set(inspect(engine).get_table_names())
        assert {
            "robots",
            "races",
            "race_horses",
            "race_odds",
            "tendency_categories",
        } <= tables

    def test_既存データを保持したまま再実行できる(self, engine) -> None:
        """init_dbを再実行しても既存の行は消えない"""
        with get_session(engine) as session:
            session.add(make_robot())

        init_db(engine)

        with get_session(engine) as session:
            assert len(session.execute(select(Robot)).scalars().all()) == 1
