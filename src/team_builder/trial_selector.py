"""Multi-trial selection of the most balanced partition.

Each trial shuffles the scored roster with its own derived seed, runs the
snake-draft assigner and measures the population standard deviation of
the per-team average scores. The partition with the lowest deviation wins;
on an exact tie the earlier trial is kept.
"""

import logging
from typing import List, Optional, Sequence, Union

from src.data_pipeline.models import ScoredPlayer
from src.team_builder.assigner import SnakeDraftAssigner
from src.team_builder.config import TRIALS
from src.team_builder.errors import InvalidConfigurationError
from src.team_builder.shuffler import SeededShuffler
from src.team_builder.team import Partition, SelectionResult, TrialSummary

logger = logging.getLogger(__name__)


class TrialSelector:
    """Runs independent trials and keeps the best partition."""

    def __init__(
        self,
        num_teams: int,
        seed: Union[str, int, float],
        trials: int = TRIALS,
    ):
        if trials <= 0:
            raise InvalidConfigurationError(
                f"Number of trials must be positive, got {trials}"
            )
        self.assigner = SnakeDraftAssigner(num_teams)
        self.seed = str(seed)
        self.trials = trials

    def trial_seed(self, index: int) -> str:
        """Seed for the 0-based trial *index*: ``"<seed>-<index>"``."""
        return f"{self.seed}-{index}"

    def run_trial(self, players: Sequence[ScoredPlayer], index: int) -> Partition:
        """Shuffle a copy of *players* and assign it to a fresh team set."""
        seed = self.trial_seed(index)
        shuffled = SeededShuffler(seed).shuffle(players)
        teams = self.assigner.assign(shuffled)
        return Partition(trial_number=index + 1, seed=seed, teams=teams)

    def run(self, players: Sequence[ScoredPlayer]) -> SelectionResult:
        """Run all trials in index order and return the best partition.

        The best partition is replaced only on a strictly lower standard
        deviation, so the earliest trial wins ties.
        """
        best: Optional[Partition] = None
        summaries: List[TrialSummary] = []

        for index in range(self.trials):
            partition = self.run_trial(players, index)
            std_dev = partition.std_dev
            summaries.append(
                TrialSummary(
                    trial_number=partition.trial_number,
                    std_dev=std_dev,
                    team_averages=partition.team_averages,
                )
            )
            logger.debug(
                "Trial %d/%d (seed=%s): std dev %.6f",
                partition.trial_number, self.trials, partition.seed, std_dev,
            )

            if best is None or std_dev < best.std_dev:
                best = partition

        logger.info(
            "Best trial %d/%d with std dev %.6f",
            best.trial_number, self.trials, best.std_dev,
        )
        return SelectionResult(best=best, summaries=summaries)
