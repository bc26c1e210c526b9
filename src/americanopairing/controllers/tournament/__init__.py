from americanopairing.controllers.tournament.result_recorder import ResultRecorder
from americanopairing.controllers.tournament.round_manager import RoundManager

__all__ = ["ResultRecorder", "RoundManager"]
