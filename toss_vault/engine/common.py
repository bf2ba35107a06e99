"""Small helpers shared by the aggregators."""

from __future__ import annotations

import math
from collections.abc import Iterable

# Identifiers used by source data for teams that could not be resolved.
PLACEHOLDER_TEAMS: frozenset[str] = frozenset({"Unknown"})


def percentage(numerator: int, denominator: int) -> int:
    """Whole-number percent rounded half up; 0 for an empty denominator."""
    if denominator <= 0:
        return 0
    return math.floor(numerator * 100 / denominator + 0.5)


def is_placeholder(team: str | None, placeholders: Iterable[str] = PLACEHOLDER_TEAMS) -> bool:
    return not team or team in placeholders
