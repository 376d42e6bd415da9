"""出走馬モデル定義"""

from datetime import datetime

from sqlalchemy import Float, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from robokeiba.models.base import Base
from robokeiba.models.entry import RaceHorse


class RaceHorseRecord(Base):
    """出走馬モデル

    Attributes:
        id: 馬ID（主キー）
        race_id: レースID
        horse_number: 馬番
        name: 馬名
        odds: 想定オッズ（0は未入力）
        place_rate: 複勝率（0.0-1.0）
        ability_index: オッズから計算した能力指数
        updated_at: 更新日時
    """

    __tablename__ = "race_horses"
    __table_args__ = (
        UniqueConstraint("race_id", "horse_number", name="uq_race_horse_number"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    race_id: Mapped[int] = mapped_column(ForeignKey("races.id"), nullable=False)
    horse_number: Mapped[int] = mapped_column(nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    odds: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    place_rate: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    ability_index: Mapped[float | None] = mapped_column(Float, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        default=datetime.utcnow, onupdate=datetime.utcnow
    )

    race: Mapped["Race"] = relationship(back_populates="horses")

    def to_entry(self) -> RaceHorse:
        """指数計算用の値オブジェクトに変換する"""
        return RaceHorse(
            id=self.id,
            name=self.name,
            odds=self.odds,
            place_rate=self.place_rate,
            horse_number=self.horse_number,
        )

    def __repr__(self) -> str:
        return f"<RaceHorseRecord(id={self.id!r}, name={self.name!r}, odds={self.odds!r})>"
