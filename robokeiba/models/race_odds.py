"""保存済みオッズモデル定義"""

from datetime import datetime

from sqlalchemy import JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from robokeiba.models.base import Base


class RaceOdds(Base):
    """保存済み想定オッズのスナップショット

    Attributes:
        id: ID（主キー）
        race_id: レースID
        horses: 保存時点の各馬のオッズと能力指数
            [{"horse_id", "horse_number", "horse_name", "odds", "ability_index"}, ...]
        created_at: 作成日時
        updated_at: 更新日時
    """

    __tablename__ = "race_odds"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    race_id: Mapped[int] = mapped_column(ForeignKey("races.id"), nullable=False)
    horses: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<RaceOdds(id={self.id!r}, race_id={self.race_id!r})>"
