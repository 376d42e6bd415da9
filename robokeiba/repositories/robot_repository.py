"""AIロボットリポジトリ"""

import logging
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from robokeiba.models import (
    RaceParam,
    Robot,
    RobotDefinition,
    SubCategory,
    TendencyParam,
)

logger = logging.getLogger(__name__)


class RobotStore(Protocol):
    """AIロボット保存先のプロトコル"""

    def list(self) -> list[RobotDefinition]:
        """保存済みロボットを新しい順に取得"""
        ...

    def get(self, robot_id: int) -> RobotDefinition | None:
        """IDでロボットを取得"""
        ...

    def save(self, definition: RobotDefinition) -> RobotDefinition:
        """ロボットを保存し、ID付きの定義を返す"""
        ...

    def delete(self, robot_id: int) -> bool:
        """ロボットを削除する（存在しない場合はFalse）"""
        ...


def _to_definition(robot: Robot) -> RobotDefinition:
    return RobotDefinition(
        id=robot.id,
        name=robot.name,
        root_index=robot.root_index,
        tendency_params=tuple(
            TendencyParam(id=p["id"], name=p["name"], priority=p["priority"])
            for p in sorted(robot.tendency_params, key=lambda p: p["priority"])
        ),
        race_params=tuple(
            RaceParam(
                category=p["category"],
                sub_categories=tuple(
                    SubCategory(id=s["id"], name=s["name"], priority=s["priority"])
                    for s in p["sub_categories"]
                ),
            )
            for p in robot.race_params
        ),
        learning_thought=robot.learning_thought,
        created_at=robot.created_at,
    )


class SQLAlchemyRobotRepository:
    """SQLAlchemyを使用したAIロボットリポジトリ"""

    def __init__(self, session: Session):
        """初期化

        Args:
            session: SQLAlchemyセッション
        """
        self.session = session

    def list(self) -> list[RobotDefinition]:
        stmt = select(Robot).order_by(Robot.created_at.desc(), Robot.id.desc())
        return [_to_definition(r) for r in self.session.execute(stmt).scalars()]

    def get(self, robot_id: int) -> RobotDefinition | None:
        robot = self.session.get(Robot, robot_id)
        if robot is None:
            return None
        return _to_definition(robot)

    def save(self, definition: RobotDefinition) -> RobotDefinition:
        robot = Robot(
            name=definition.name,
            root_index=definition.root_index,
            tendency_params=[
                {"id": p.id, "name": p.name, "priority": p.priority}
                for p in definition.tendency_params
            ],
            race_params=[
                {
                    "category": p.category,
                    "sub_categories": [
                        {"id": s.id, "name": s.name, "priority": s.priority}
                        for s in p.sub_categories
                    ],
                }
                for p in definition.race_params
            ],
            learning_thought=definition.learning_thought,
        )
        self.session.add(robot)
        self.session.flush()

        logger.info("Saved robot id=%s name=%s", robot.id, robot.name)
        return _to_definition(robot)

    def delete(self, robot_id: int) -> bool:
        robot = self.session.get(Robot, robot_id)
        if robot is None:
            logger.debug("Robot id=%s not found", robot_id)
            return False

        self.session.delete(robot)
        self.session.flush()
        logger.info("Deleted robot id=%s", robot_id)
        return True
