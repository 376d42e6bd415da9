"""AIロボットモデル定義"""

from datetime import datetime

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from robokeiba.models.base import Base


class Robot(Base):
    """AIロボットモデル

    Attributes:
        id: ロボットID（主キー）
        name: ロボット名
        root_index: 根幹指数の入力値（0-100）
        tendency_params: 傾向パラメータ [{"id", "name", "priority"}, ...]
        race_params: レース傾向パラメータ
            [{"category", "sub_categories": [{"id", "name", "priority"}]}, ...]
        learning_thought: 学習的思考（jockey / trainer / predictor）
        created_at: 作成日時
    """

    __tablename__ = "robots"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    root_index: Mapped[int] = mapped_column(nullable=False)
    tendency_params: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    race_params: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    learning_thought: Mapped[str] = mapped_column(String, nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<Robot(id={self.id!r}, name={self.name!r})>"
