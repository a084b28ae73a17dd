"""CSV ingestion for the player engagement table.

Handles the quirks of the exported player table:
- Leading byte-order mark on the header row
- Whitespace padding around headers and cells
- Blank or whitespace-only lines between rows
- Configurable single-character delimiter (semicolon by default)
"""

import logging
import math
from pathlib import Path
from typing import List

import pandas as pd

from src.data_pipeline.config import (
    DEFAULT_DELIMITER,
    ID_COLUMN,
    METRIC_COLUMNS,
    REQUIRED_COLUMNS,
)
from src.data_pipeline.models import PlayerRecord
from src.team_builder.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Raised when the player table cannot be parsed."""


class PlayerIngester:
    """Reads the player table into immutable :class:`PlayerRecord` objects."""

    def __init__(self, filepath: Path, delimiter: str = DEFAULT_DELIMITER):
        if not isinstance(delimiter, str) or len(delimiter) != 1:
            raise InvalidConfigurationError(
                f"Delimiter must be a single character, got {delimiter!r}"
            )
        self.filepath = Path(filepath)
        self.delimiter = delimiter

    def read_table(self) -> pd.DataFrame:
        """Read and clean the raw table.

        Returns a DataFrame with exactly the required columns, string ids
        and float metrics, with blank rows dropped.

        Raises:
            FileNotFoundError: if the input file does not exist.
            ParseError: if the table is malformed.
        """
        if not self.filepath.exists():
            raise FileNotFoundError(f"Input file not found: {self.filepath}")

        logger.info("Reading player table: %s", self.filepath)
        try:
            df = pd.read_csv(
                self.filepath,
                sep=self.delimiter,
                encoding="utf-8-sig",
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
            )
        except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
            raise ParseError(f"Failed to parse {self.filepath.name}: {e}") from e

        # Rows wider than the header make pandas use the first column as the index
        if len(df) and not isinstance(df.index, pd.RangeIndex):
            raise ParseError(
                f"{self.filepath.name} has rows with more fields than the header"
            )

        df.columns = [str(col).strip().lstrip("\ufeff") for col in df.columns]

        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise ParseError(
                f"{self.filepath.name} is missing required columns: {missing}"
            )

        # keep_default_na=False leaves NaN only where a row ran out of fields
        short = df.isna().any(axis=1)

        df = df[REQUIRED_COLUMNS].fillna("")
        for col in REQUIRED_COLUMNS:
            df[col] = df[col].str.strip()

        # Whitespace-only lines survive skip_blank_lines as all-empty rows
        blank = (df == "").all(axis=1)
        short_ids = df.loc[short & ~blank, ID_COLUMN].tolist()
        if short_ids:
            raise ParseError(
                f"{self.filepath.name} has rows with fewer fields than the header: "
                f"{short_ids}"
            )
        df = df[~blank].reset_index(drop=True)

        return self._validate(df)

    def _validate(self, df: pd.DataFrame) -> pd.DataFrame:
        """Coerce metrics to floats and reject rows that break the contract."""
        if (df[ID_COLUMN] == "").any():
            raise ParseError(
                f"{self.filepath.name} has {int((df[ID_COLUMN] == '').sum())} "
                "row(s) without a player_id"
            )

        duplicated = df[ID_COLUMN][df[ID_COLUMN].duplicated()].unique().tolist()
        if duplicated:
            raise ParseError(f"Duplicate player_id values: {duplicated}")

        for col in METRIC_COLUMNS:
            values = pd.to_numeric(df[col], errors="coerce")
            invalid = values.isna() | values.isin([math.inf, -math.inf])
            bad = df.loc[invalid, ID_COLUMN].tolist()
            if bad:
                raise ParseError(f"Non-numeric or non-finite {col} for players: {bad}")
            negative = df.loc[values < 0, ID_COLUMN].tolist()
            if negative:
                raise ParseError(f"Negative {col} for players: {negative}")
            df[col] = values.astype(float)

        return df

    def read_players(self) -> List[PlayerRecord]:
        """Read the table and return one record per row, in file order."""
        df = self.read_table()
        players = [
            PlayerRecord(
                player_id=str(row[ID_COLUMN]),
                historical_event_engagements=float(row["historical_event_engagements"]),
                historical_messages_sent=float(row["historical_messages_sent"]),
                days_active_last_30=float(row["days_active_last_30"]),
            )
            for row in df.to_dict(orient="records")
        ]
        logger.info("Loaded %d players from %s", len(players), self.filepath.name)
        return players
