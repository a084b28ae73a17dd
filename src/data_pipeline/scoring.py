"""Composite engagement scoring.

Each metric is min-max normalized across the whole roster, then the
player's engagement score is the equal-weighted mean of the normalized
metrics. A metric that is constant across all players contributes 0.
"""

import logging
from typing import List, Sequence

import pandas as pd

from src.data_pipeline.config import ID_COLUMN, METRIC_COLUMNS
from src.data_pipeline.models import PlayerRecord, ScoredPlayer

logger = logging.getLogger(__name__)


class EmptyInputError(Exception):
    """Raised when there are no players to score."""


class EngagementScorer:
    """Normalize raw metrics and compute per-player engagement scores."""

    def __init__(self, metrics: Sequence[str] = tuple(METRIC_COLUMNS)):
        if not metrics:
            raise ValueError("At least one metric is required")
        self.metrics = list(metrics)

    def metric_table(self, records: Sequence[PlayerRecord]) -> pd.DataFrame:
        """Raw metric values indexed by player_id."""
        if not records:
            raise EmptyInputError("Cannot score an empty player list")
        return pd.DataFrame(
            [[float(getattr(r, m)) for m in self.metrics] for r in records],
            columns=self.metrics,
            index=pd.Index([r.player_id for r in records], name=ID_COLUMN),
        )

    def normalize(self, records: Sequence[PlayerRecord]) -> pd.DataFrame:
        """Min-max normalize every metric to [0, 1].

        ``(value - min) / (max - min)`` per column; a column with
        ``max == min`` is all zeros.
        """
        raw = self.metric_table(records)
        mins = raw.min()
        spans = raw.max() - mins

        normalized = raw - mins
        for metric in self.metrics:
            if spans[metric] == 0:
                logger.debug("Metric %s is constant; contributes 0", metric)
                normalized[metric] = 0.0
            else:
                normalized[metric] = normalized[metric] / spans[metric]
        return normalized

    def score(self, records: Sequence[PlayerRecord]) -> List[ScoredPlayer]:
        """Return a new scored list in the same order as *records*.

        Raises:
            EmptyInputError: if *records* is empty.
        """
        normalized = self.normalize(records)
        scores = normalized.mean(axis=1).tolist()

        scored = [
            ScoredPlayer.from_record(record, float(score))
            for record, score in zip(records, scores)
        ]
        logger.info(
            "Scored %d players (range=[%.4f, %.4f])",
            len(scored), min(scores), max(scores),
        )
        return scored
