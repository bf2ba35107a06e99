"""Load tosses, games, and teams from CSV or JSON files.

Each table lives in ``<data_dir>/<table>.csv`` or ``<data_dir>/<table>.json``.
JSON files hold either a list of row objects or ``{"rows": [...]}``.
Rows are validated one by one; invalid rows are logged and skipped unless
``strict`` is set, in which case the first invalid row raises.

Usage:
    dataset = load_dataset(Path("data"))
    stats = calculate_team_stats(dataset.tosses, dataset.game_for)
"""

from __future__ import annotations

import csv
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar

import pydantic
import structlog

from toss_vault.engine.lookup import GameFor, TeamFor, build_game_lookup, build_team_lookup
from toss_vault.exceptions import DataLoadError, ValidationError
from toss_vault.models.game import Game
from toss_vault.models.team import Team
from toss_vault.models.toss import Toss

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=pydantic.BaseModel)

TABLES: dict[str, type[pydantic.BaseModel]] = {"tosses": Toss, "games": Game, "teams": Team}
SUPPORTED_SUFFIXES = (".csv", ".json")


def read_rows(path: Path) -> list[dict[str, Any]]:
    """
    Read raw rows from a CSV or JSON file.

    Raises:
        DataLoadError: If the file is missing, unreadable, or not CSV/JSON.
    """
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise DataLoadError(f"Unsupported file format '{suffix}' for {path}")

    try:
        with path.open(encoding="utf-8", newline="") as f:
            if suffix == ".csv":
                return list(csv.DictReader(f))
            payload = json.load(f)
    except FileNotFoundError as e:
        raise DataLoadError(f"Data file not found: {path}") from e
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, csv.Error) as e:
        raise DataLoadError(f"Could not read {path}: {e}") from e

    if isinstance(payload, dict):
        payload = payload.get("rows")
    if not isinstance(payload, list) or not all(isinstance(row, dict) for row in payload):
        raise DataLoadError(f"{path} must contain a list of row objects")
    return payload


def validate_rows(
    rows: list[dict[str, Any]], model: type[M], table: str, strict: bool = False
) -> list[M]:
    """
    Validate raw rows into models.

    Args:
        rows: Raw row dictionaries.
        model: Pydantic model for the table.
        table: Table name, used in log messages and errors.
        strict: Raise on the first invalid row instead of skipping it.

    Returns:
        Validated models in input order.

    Raises:
        ValidationError: In strict mode, for the first invalid row.
    """
    validated: list[M] = []
    rejected = 0
    for row_number, row in enumerate(rows, start=1):
        try:
            validated.append(model.model_validate(row))
        except pydantic.ValidationError as exc:
            error = ValidationError(table, row_number, str(exc.errors()[0].get("msg", exc)))
            if strict:
                raise error from exc
            rejected += 1
            logger.warning("Skipping invalid row", table=table, row=row_number, error=str(error))

    logger.info("Validated rows", table=table, count=len(validated), rejected=rejected)
    return validated


def find_table(data_dir: Path, table: str) -> Path | None:
    """Return the first existing ``<table>.csv`` / ``<table>.json`` in ``data_dir``."""
    for suffix in SUPPORTED_SUFFIXES:
        candidate = data_dir / f"{table}{suffix}"
        if candidate.exists():
            return candidate
    return None


def load_table(path: Path, table: str, strict: bool = False) -> list[Any]:
    """Read and validate one table file."""
    if table not in TABLES:
        raise DataLoadError(f"Unknown table '{table}', expected one of {sorted(TABLES)}")
    logger.debug("Loading table", table=table, path=str(path))
    return validate_rows(read_rows(path), TABLES[table], table, strict=strict)


@dataclass
class TossDataset:
    """The three input collections plus lookups built once per load."""

    tosses: list[Toss] = field(default_factory=list)
    games: list[Game] = field(default_factory=list)
    teams: list[Team] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.game_for: GameFor = build_game_lookup(self.games)
        self.team_for: TeamFor = build_team_lookup(self.teams)


def load_dataset(data_dir: Path, strict: bool = False) -> TossDataset:
    """
    Load every table from ``data_dir``.

    The tosses table is required. Games and teams are optional: without them,
    game-result statistics are all "no data" and no team is treated as defunct.

    Raises:
        DataLoadError: If ``data_dir`` or the tosses table is missing.
    """
    if not data_dir.is_dir():
        raise DataLoadError(f"Data directory not found: {data_dir}")

    tables: dict[str, list[Any]] = {}
    for table in TABLES:
        path = find_table(data_dir, table)
        if path is None:
            if table == "tosses":
                raise DataLoadError(f"No tosses.csv or tosses.json in {data_dir}")
            logger.warning("Table file not found, continuing without it", table=table)
            tables[table] = []
            continue
        tables[table] = load_table(path, table, strict=strict)

    return TossDataset(tosses=tables["tosses"], games=tables["games"], teams=tables["teams"])
