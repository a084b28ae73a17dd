"""Player data models shared by the ingestion and scoring steps."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlayerRecord:
    """One row of the input table."""

    player_id: str
    historical_event_engagements: float
    historical_messages_sent: float
    days_active_last_30: float


@dataclass(frozen=True)
class ScoredPlayer:
    """A player record with its composite engagement score in [0, 1]."""

    player_id: str
    historical_event_engagements: float
    historical_messages_sent: float
    days_active_last_30: float
    engagement_score: float

    @classmethod
    def from_record(cls, record: PlayerRecord, engagement_score: float) -> "ScoredPlayer":
        return cls(
            player_id=record.player_id,
            historical_event_engagements=record.historical_event_engagements,
            historical_messages_sent=record.historical_messages_sent,
            days_active_last_30=record.days_active_last_30,
            engagement_score=engagement_score,
        )
