"""レース・出走馬・想定オッズリポジトリ"""

import logging
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from robokeiba.analyzers.index_calculator import compute_ability_index
from robokeiba.analyzers.odds_stats import validate_odds
from robokeiba.exceptions import InvalidOddsError, NotFoundError
from robokeiba.models import (
    HorseOdds,
    Race,
    RaceHorseRecord,
    RaceOdds,
    TendencyCategory,
    TendencyCategoryRecord,
)

logger = logging.getLogger(__name__)


class SQLAlchemyRaceRepository:
    """SQLAlchemyを使用したレースリポジトリ"""

    def __init__(self, session: Session):
        """初期化

        Args:
            session: SQLAlchemyセッション
        """
        self.session = session

    def list_races(self) -> list[Race]:
        """レース一覧を開催日・レース番号順に取得"""
        stmt = select(Race).order_by(Race.date, Race.race_number, Race.id)
        return list(self.session.execute(stmt).scalars())

    def get_race(self, race_id: int) -> Race:
        """レースを取得する

        Raises:
            NotFoundError: レースが存在しない場合
        """
        race = self.session.get(Race, race_id)
        if race is None:
            raise NotFoundError(f"レースが見つかりません: {race_id}")
        return race

    def get_horses(self, race_id: int) -> list[RaceHorseRecord]:
        """出走馬を馬番順に取得"""
        self.get_race(race_id)
        stmt = (
            select(RaceHorseRecord)
            .where(RaceHorseRecord.race_id == race_id)
            .order_by(RaceHorseRecord.horse_number)
        )
        return list(self.session.execute(stmt).scalars())

    def get_categories(self) -> list[TendencyCategory]:
        """傾向パラメータのカタログを取得"""
        stmt = select(TendencyCategoryRecord).order_by(TendencyCategoryRecord.id)
        return [r.to_entry() for r in self.session.execute(stmt).scalars()]

    def save_odds(self, race_id: int, horse_odds: Iterable[HorseOdds]) -> RaceOdds:
        """想定オッズを保存する

        オッズ未入力（0以下）の馬は保存対象から外す。
        入力済みのオッズに1頭でも不正な値がある場合は何も保存しない。

        Args:
            race_id: レースID
            horse_odds: 各馬のオッズ

        Returns:
            保存したスナップショット

        Raises:
            InvalidOddsError: 入力済みのオッズが有効範囲外、または1頭も入力されていない場合
            NotFoundError: レースまたは馬が存在しない場合
        """
        horse_odds = list(horse_odds)
        entered = [h for h in horse_odds if h.odds > 0]
        if not entered:
            raise InvalidOddsError({})

        invalid = {h.horse_id: h.odds for h in entered if not validate_odds(h.odds)}
        if invalid:
            raise InvalidOddsError(invalid)

        records = {h.id: h for h in self.get_horses(race_id)}
        unknown = [h.horse_id for h in horse_odds if h.horse_id not in records]
        if unknown:
            raise NotFoundError(f"出走馬が見つかりません: race_id={race_id}, horse_id={unknown}")

        snapshot = []
        for entry in entered:
            record = records[entry.horse_id]
            record.odds = entry.odds
            record.ability_index = compute_ability_index(entry.odds)
            snapshot.append(
                {
                    "horse_id": record.id,
                    "horse_number": record.horse_number,
                    "horse_name": record.name,
                    "odds": record.odds,
                    "ability_index": record.ability_index,
                }
            )

        race_odds = RaceOdds(race_id=race_id, horses=snapshot)
        self.session.add(race_odds)
        self.session.flush()

        logger.info("Saved odds for race_id=%s (%d horses)", race_id, len(snapshot))
        return race_odds

    def get_saved_odds(self, race_id: int | None = None) -> list[RaceOdds]:
        """保存済みオッズを新しい順に取得"""
        stmt = select(RaceOdds).order_by(RaceOdds.created_at.desc(), RaceOdds.id.desc())
        if race_id is not None:
            stmt = stmt.where(RaceOdds.race_id == race_id)
        return list(self.session.execute(stmt).scalars())
