"""Raceモデル定義"""

from datetime import date, datetime

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from robokeiba.models.base import Base


class Race(Base):
    """レースモデル

    Attributes:
        id: レースID（主キー）
        name: レース名
        date: 開催日
        venue: 競馬場
        race_number: レース番号
        distance: 距離（メートル）
        condition: 条件（例: "3歳以上1勝クラス"）
        horses: 出走馬
        created_at: 作成日時
        updated_at: 更新日時
    """

    __tablename__ = "races"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    date: Mapped[date] = mapped_column(Date, nullable=False)
    venue: Mapped[str | None] = mapped_column(String, nullable=True)
    race_number: Mapped[int | None] = mapped_column(nullable=True)
    distance: Mapped[int | None] = mapped_column(nullable=True)
    condition: Mapped[str | None] = mapped_column(String, nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        default=datetime.utcnow, onupdate=datetime.utcnow
    )

    horses: Mapped[list["RaceHorseRecord"]] = relationship(
        back_populates="race", order_by="RaceHorseRecord.horse_number"
    )

    def __repr__(self) -> str:
        return f"<Race(id={self.id!r}, name={self.name!r})>"
