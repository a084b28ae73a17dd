"""Shared fixtures for the team builder test suite."""

import textwrap

import pytest

from src.data_pipeline.models import PlayerRecord, ScoredPlayer
from src.data_pipeline.scoring import EngagementScorer

HEADER = (
    "player_id;historical_event_engagements;"
    "historical_messages_sent;days_active_last_30"
)


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

def make_record(player_id, events=0.0, messages=0.0, days=0.0):
    return PlayerRecord(
        player_id=player_id,
        historical_event_engagements=float(events),
        historical_messages_sent=float(messages),
        days_active_last_30=float(days),
    )


def make_player(player_id, score):
    """A scored player whose raw metrics are irrelevant to the test."""
    return ScoredPlayer(
        player_id=player_id,
        historical_event_engagements=0.0,
        historical_messages_sent=0.0,
        days_active_last_30=0.0,
        engagement_score=score,
    )


@pytest.fixture(scope="module")
def scorer():
    return EngagementScorer()


@pytest.fixture
def records():
    """Twelve players with spread-out metrics."""
    rows = [
        ("p01", 12, 340, 28), ("p02", 3, 45, 9), ("p03", 7, 120, 17),
        ("p04", 0, 12, 2), ("p05", 15, 410, 30), ("p06", 5, 88, 14),
        ("p07", 9, 205, 22), ("p08", 1, 30, 5), ("p09", 11, 260, 25),
        ("p10", 4, 60, 11), ("p11", 6, 150, 19), ("p12", 2, 20, 6),
    ]
    return [make_record(*row) for row in rows]


@pytest.fixture
def scored_players(scorer, records):
    return scorer.score(records)


# ------------------------------------------------------------------
# CSV fixtures
# ------------------------------------------------------------------

@pytest.fixture
def write_csv(tmp_path):
    """Write dedented *text* to a temp file and return its path."""

    def _write(text, name="players.csv", encoding="utf-8"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(text).lstrip("\n"), encoding=encoding)
        return path

    return _write


@pytest.fixture
def players_csv(write_csv):
    return write_csv(f"""
        {HEADER}
        p01;12;340;28
        p02;3;45;9
        p03;7;120;17
        p04;0;12;2
        p05;15;410;30
        p06;5;88;14
        p07;9;205;22
        p08;1;30;5
    """)
