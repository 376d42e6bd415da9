"""Repository modules"""

from robokeiba.repositories.race_repository import SQLAlchemyRaceRepository
from robokeiba.repositories.robot_repository import (
    RobotStore,
    SQLAlchemyRobotRepository,
)

__all__ = [
    "RobotStore",
    "SQLAlchemyRaceRepository",
    "SQLAlchemyRobotRepository",
]
