from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_INPUT_FILE = DATA_DIR / "level_a_players_csv.csv"

# Input table layout
DEFAULT_DELIMITER = ";"
ID_COLUMN = "player_id"

# Engagement metrics, equally weighted in the composite score
METRIC_COLUMNS = [
    "historical_event_engagements",
    "historical_messages_sent",
    "days_active_last_30",
]

REQUIRED_COLUMNS = [ID_COLUMN, *METRIC_COLUMNS]
