"""OddsService - 想定オッズ入力サービス"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from robokeiba.analyzers.odds_stats import compute_all_ability_indices, summarize_odds
from robokeiba.exceptions import NotFoundError
from robokeiba.models import HorseOdds, OddsSummary, RaceOdds
from robokeiba.repositories.race_repository import SQLAlchemyRaceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OddsPreview:
    """オッズ入力のプレビュー（イミュータブル）"""

    race_id: int
    race_name: str
    horses: tuple[HorseOdds, ...]
    summary: OddsSummary


class OddsService:
    """想定オッズの入力・保存を行うサービス"""

    def __init__(self, repository: SQLAlchemyRaceRepository):
        """初期化

        Args:
            repository: レースリポジトリ
        """
        self._repository = repository

    def preview(self, race_id: int, odds_by_number: Mapping[int, float]) -> OddsPreview:
        """入力したオッズで能力指数と統計を再計算する

        入力のない馬は現在のオッズを使う。

        Args:
            race_id: レースID
            odds_by_number: 馬番 → オッズ

        Returns:
            オッズ入力のプレビュー
        """
        race = self._repository.get_race(race_id)
        records = self._repository.get_horses(race_id)

        unknown = sorted(set(odds_by_number) - {r.horse_number for r in records})
        if unknown:
            raise NotFoundError(f"馬番が見つかりません: race_id={race_id}, 馬番={unknown}")

        entries = [
            HorseOdds(
                horse_id=record.id,
                horse_number=record.horse_number,
                horse_name=record.name,
                odds=odds_by_number.get(record.horse_number, record.odds),
            )
            for record in records
        ]
        horses = compute_all_ability_indices(entries)

        return OddsPreview(
            race_id=race.id,
            race_name=race.name,
            horses=tuple(horses),
            summary=summarize_odds(horses),
        )

    def save(self, race_id: int, odds_by_number: Mapping[int, float]) -> RaceOdds:
        """オッズを保存する

        Raises:
            InvalidOddsError: 不正なオッズが含まれる場合
        """
        preview = self.preview(race_id, odds_by_number)
        logger.debug(
            "Saving odds for race_id=%s: mean=%s variance=%s",
            race_id,
            preview.summary.mean,
            preview.summary.variance,
        )
        return self._repository.save_odds(race_id, preview.horses)
