# Independent shuffle + assign runs per balancing job
TRIALS = 10

# Console report
DEBUG_DECIMALS = 4
TEAM_LABEL_PREFIX = "new_team_"

JUSTIFICATION = (
    "The average engagement score is a trustworthy fairness statistic for "
    "the shuffle because it represents a player's overall contribution and "
    "activity. By balancing this score across teams, we ensure that each "
    "team has a similar level of overall engagement, leading to a fair and "
    "balanced distribution of active and engaged players."
)
