"""Greedy snake-draft assignment of players to teams."""

import logging
from typing import List, Sequence

from src.data_pipeline.models import ScoredPlayer
from src.team_builder.errors import InvalidConfigurationError
from src.team_builder.team import Team

logger = logging.getLogger(__name__)


def _score_key(team: Team) -> float:
    return team.total_engagement_score


class SnakeDraftAssigner:
    """Gives each player, in order, to the team with the lowest total score.

    Before every pick the working team list is re-sorted by total score with
    Python's stable sort. Teams with equal totals therefore keep the order
    they had after the previous pick, not their original id order. This is
    a greedy heuristic and is not globally optimal.
    """

    def __init__(self, num_teams: int):
        if isinstance(num_teams, bool) or not isinstance(num_teams, int):
            raise InvalidConfigurationError(
                f"Number of teams must be an integer, got {num_teams!r}"
            )
        if num_teams <= 0:
            raise InvalidConfigurationError(
                f"Number of teams must be positive, got {num_teams}"
            )
        self.num_teams = num_teams

    def new_teams(self) -> List[Team]:
        """Fresh, empty teams with ids 1..N."""
        return [Team(team_id=i) for i in range(1, self.num_teams + 1)]

    @staticmethod
    def assign_next(teams: List[Team], player: ScoredPlayer) -> Team:
        """Stable-sort *teams* in place and give *player* to the first one."""
        teams.sort(key=_score_key)
        target = teams[0]
        target.add_player(player)
        return target

    def assign(self, players: Sequence[ScoredPlayer]) -> List[Team]:
        """Run *players* through a fresh team set.

        Returns the teams in their final working order; callers that need
        id order sort them (see :class:`Partition`).
        """
        if self.num_teams > len(players):
            logger.warning(
                "%d teams for %d players: %d team(s) will stay empty",
                self.num_teams, len(players), self.num_teams - len(players),
            )

        teams = self.new_teams()
        for player in players:
            self.assign_next(teams, player)
        return teams
