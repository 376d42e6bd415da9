"""データモデルパッケージ"""

from robokeiba.models.base import Base
from robokeiba.models.category import TendencyCategoryRecord
from robokeiba.models.entry import (
    CalculationResult,
    CategorySelection,
    HorseOdds,
    OddsSummary,
    RaceHorse,
    RaceParam,
    RobotDefinition,
    SubCategory,
    TendencyCategory,
    TendencyParam,
)
from robokeiba.models.horse import RaceHorseRecord
from robokeiba.models.race import Race
from robokeiba.models.race_odds import RaceOdds
from robokeiba.models.robot import Robot

__all__ = [
    "Base",
    "CalculationResult",
    "CategorySelection",
    "HorseOdds",
    "OddsSummary",
    "Race",
    "RaceHorse",
    "RaceHorseRecord",
    "RaceOdds",
    "RaceParam",
    "Robot",
    "RobotDefinition",
    "SubCategory",
    "TendencyCategory",
    "TendencyCategoryRecord",
    "TendencyParam",
]
