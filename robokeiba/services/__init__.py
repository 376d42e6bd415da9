"""Services module"""

from robokeiba.services.odds_service import OddsPreview, OddsService
from robokeiba.services.prediction_service import (
    PredictionService,
    RaceRepository,
    build_selection,
)
from robokeiba.services.wizard import RobotWizard

__all__ = [
    "OddsPreview",
    "OddsService",
    "PredictionService",
    "RaceRepository",
    "RobotWizard",
    "build_selection",
]
