"""Console report for a finished balancing run."""

import sys
from typing import List, Optional, TextIO

from src.team_builder.config import DEBUG_DECIMALS, JUSTIFICATION, TEAM_LABEL_PREFIX
from src.team_builder.team import SelectionResult, TrialSummary


def _fmt(value: float) -> str:
    return f"{value:.{DEBUG_DECIMALS}f}"


class TeamReporter:
    """Formats the chosen partition and, in debug mode, every trial."""

    def format_trial(self, summary: TrialSummary) -> str:
        averages = ", ".join(_fmt(avg) for avg in summary.team_averages)
        return (
            f"Trial {summary.trial_number}: "
            f"Standard Deviation = {_fmt(summary.std_dev)}, "
            f"Team Averages: [{averages}]"
        )

    def format_debug(self, result: SelectionResult) -> List[str]:
        lines = ["--- Starting Trials ---"]
        lines.extend(self.format_trial(s) for s in result.summaries)
        lines.append("--- Trials Complete ---")
        lines.append(f"Best Trial: {result.best_trial_number}/{result.trials}")
        return lines

    def format_report(self, result: SelectionResult, debug: bool = False) -> List[str]:
        """Build every output line, in print order."""
        lines: List[str] = []
        if debug:
            lines.extend(self.format_debug(result))

        teams = result.best.teams

        lines.append("")
        lines.append("--- Final Team Assignment ---")
        for team in teams:
            for player in team.players:
                lines.append(f"{player.player_id} -> {TEAM_LABEL_PREFIX}{team.team_id}")

        lines.append("")
        lines.append("--- Team Summary ---")
        for team in teams:
            lines.append(f"Team {team.team_id}:")
            lines.append(f"  - Size: {team.size}")
            lines.append(f"  - Average Engagement Score: {_fmt(team.average_score)}")

        lines.append("")
        lines.append("--- Justification ---")
        lines.append(JUSTIFICATION)
        return lines

    def write_report(
        self,
        result: SelectionResult,
        stream: Optional[TextIO] = None,
        debug: bool = False,
    ) -> None:
        stream = stream or sys.stdout
        for line in self.format_report(result, debug=debug):
            print(line, file=stream)
