"""サンプルデータ投入

レース・出走馬・傾向パラメータの統計を登録する。
"""

import logging
from datetime import date

from sqlalchemy.orm import Session

from robokeiba.constants import TENDENCY_CATEGORIES
from robokeiba.models import Race, RaceHorseRecord, TendencyCategoryRecord

logger = logging.getLogger(__name__)

# (馬名, 想定オッズ, 複勝率)
DUMMY_HORSES: tuple[tuple[str, float, float], ...] = (
    ("トウカイテイオー", 3.2, 0.75),
    ("ディープインパクト", 2.8, 0.82),
    ("オグリキャップ", 4.1, 0.68),
    ("シンボリルドルフ", 5.5, 0.61),
    ("メジロマックイーン", 6.2, 0.55),
    ("ナリタタイシン", 7.8, 0.48),
    ("エアグルーヴ", 8.5, 0.42),
    ("サイレンススズカ", 9.2, 0.38),
)

# (レースID, レース名, 開催日, 競馬場, レース番号, 距離, 条件)
DUMMY_RACES: tuple[tuple[int, str, date, str, int, int, str], ...] = (
    (1, "第1回 東京競馬場 1R", date(2024, 1, 15), "東京", 1, 1600, "3歳未勝利"),
    (2, "第1回 東京競馬場 2R", date(2024, 1, 15), "東京", 2, 1400, "3歳未勝利"),
    (3, "第1回 東京競馬場 3R", date(2024, 1, 15), "東京", 3, 2000, "3歳1勝クラス"),
    (4, "第1回 東京競馬場 4R", date(2024, 1, 15), "東京", 4, 1800, "4歳以上1勝クラス"),
    (5, "第1回 東京競馬場 5R", date(2024, 1, 15), "東京", 5, 2400, "4歳以上2勝クラス"),
)

# 傾向パラメータID → (複勝率, 複勝効率)
CATEGORY_STATS: dict[int, tuple[float, float]] = {
    1: (0.72, 0.85),
    2: (0.68, 0.78),
    3: (0.75, 0.82),
    4: (0.70, 0.80),
    5: (0.65, 0.75),
    6: (0.73, 0.83),
    7: (0.67, 0.77),
    8: (0.69, 0.79),
}


def seed(session: Session) -> int:
    """サンプルデータを登録する

    登録済みのIDはスキップする（冪等性あり）。

    Args:
        session: SQLAlchemyセッション

    Returns:
        新規に登録したレコード数
    """
    created = 0

    for category in TENDENCY_CATEGORIES:
        if session.get(TendencyCategoryRecord, category["id"]) is not None:
            continue
        place_rate, efficiency = CATEGORY_STATS[category["id"]]
        session.add(
            TendencyCategoryRecord(
                id=category["id"],
                name=category["name"],
                description=category["description"],
                place_rate=place_rate,
                efficiency=efficiency,
            )
        )
        created += 1

    for race_id, name, race_date, venue, race_number, distance, condition in DUMMY_RACES:
        if session.get(Race, race_id) is not None:
            continue
        session.add(
            Race(
                id=race_id,
                name=name,
                date=race_date,
                venue=venue,
                race_number=race_number,
                distance=distance,
                condition=condition,
            )
        )
        created += 1

        for horse_number, (horse_name, odds, place_rate) in enumerate(DUMMY_HORSES, start=1):
            session.add(
                RaceHorseRecord(
                    id=race_id * 100 + horse_number,
                    race_id=race_id,
                    horse_number=horse_number,
                    name=horse_name,
                    odds=odds,
                    place_rate=place_rate,
                )
            )
            created += 1

    session.flush()
    logger.info("Seeded %d records", created)
    return created
