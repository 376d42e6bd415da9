"""傾向パラメータモデル定義"""

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from robokeiba.models.base import Base
from robokeiba.models.entry import TendencyCategory


class TendencyCategoryRecord(Base):
    """傾向パラメータモデル

    Attributes:
        id: カテゴリID（主キー）
        name: カテゴリ名
        description: 説明
        place_rate: 複勝率（0.0-1.0）
        efficiency: 複勝効率（0.0-1.0）
    """

    __tablename__ = "tendency_categories"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, nullable=False, default="")
    place_rate: Mapped[float] = mapped_column(Float, nullable=False)
    efficiency: Mapped[float] = mapped_column(Float, nullable=False)

    def to_entry(self) -> TendencyCategory:
        """指数計算用の値オブジェクトに変換する"""
        return TendencyCategory(
            id=self.id,
            name=self.name,
            place_rate=self.place_rate,
            efficiency=self.efficiency,
            description=self.description,
        )

    def __repr__(self) -> str:
        return f"<TendencyCategoryRecord(id={self.id!r}, name={self.name!r})>"
