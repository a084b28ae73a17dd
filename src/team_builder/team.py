"""Team and partition models for a single balancing trial."""

import statistics
from dataclasses import dataclass, field
from typing import List

from src.data_pipeline.models import ScoredPlayer


@dataclass
class Team:
    """A team being filled during one trial."""

    team_id: int
    players: List[ScoredPlayer] = field(default_factory=list)
    total_engagement_score: float = 0.0

    def add_player(self, player: ScoredPlayer):
        """Append *player* and add its score to the running total."""
        self.players.append(player)
        self.total_engagement_score += player.engagement_score

    @property
    def size(self) -> int:
        return len(self.players)

    @property
    def average_score(self) -> float:
        """Mean engagement score; 0 for an empty team."""
        return self.total_engagement_score / max(1, len(self.players))


@dataclass
class Partition:
    """The teams produced by one trial, ordered by team id."""

    trial_number: int  # 1-based
    seed: str
    teams: List[Team]

    def __post_init__(self):
        self.teams = sorted(self.teams, key=lambda t: t.team_id)

    @property
    def team_averages(self) -> List[float]:
        return [team.average_score for team in self.teams]

    @property
    def std_dev(self) -> float:
        """Population standard deviation of the team averages."""
        averages = self.team_averages
        if not averages:
            return 0.0
        return statistics.pstdev(averages)

    def player_ids(self) -> List[str]:
        return [p.player_id for team in self.teams for p in team.players]


@dataclass(frozen=True)
class TrialSummary:
    """Statistics kept for every trial, including the discarded ones."""

    trial_number: int
    std_dev: float
    team_averages: List[float]


@dataclass
class SelectionResult:
    """Outcome of a full multi-trial run."""

    best: Partition
    summaries: List[TrialSummary]

    @property
    def best_trial_number(self) -> int:
        return self.best.trial_number

    @property
    def trials(self) -> int:
        return len(self.summaries)
