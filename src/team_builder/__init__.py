from src.team_builder.assigner import SnakeDraftAssigner
from src.team_builder.errors import InvalidConfigurationError, MissingArgumentError
from src.team_builder.reporter import TeamReporter
from src.team_builder.shuffler import SeededShuffler
from src.team_builder.team import Partition, SelectionResult, Team, TrialSummary
from src.team_builder.trial_selector import TrialSelector

__all__ = [
    "InvalidConfigurationError",
    "MissingArgumentError",
    "Partition",
    "SeededShuffler",
    "SelectionResult",
    "SnakeDraftAssigner",
    "Team",
    "TeamReporter",
    "TrialSelector",
    "TrialSummary",
]
