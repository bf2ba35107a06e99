"""Canonical chronological ordering of toss events.

This comparator is the only place that decides which toss came first. Every
aggregator sorts through :func:`sort_tosses`.

Rules, in order:

1. ``game_date`` ascending when both tosses have one.
2. If either date is missing, ``season`` ascending, then ``week`` ascending.
3. At the same instant, every Regular toss precedes every Overtime toss.
   This keeps each game's Regular toss ahead of its Overtime toss no matter
   which other games share the date.
4. Tosses of the same type at the same instant are an unordered tie.

Dates are ``datetime.date`` values compared by year/month/day, so no time
zone is ever involved.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from functools import cmp_to_key

from toss_vault.models.toss import Toss


def compare_tosses(a: Toss, b: Toss) -> int:
    """Three-way comparison of two tosses under the canonical ordering."""
    if a.game_date is not None and b.game_date is not None:
        if a.game_date != b.game_date:
            return -1 if a.game_date < b.game_date else 1
    elif a.season != b.season:
        return -1 if a.season < b.season else 1
    elif a.week != b.week:
        return -1 if a.week < b.week else 1

    if a.toss_type != b.toss_type:
        return -1 if a.toss_type == "Regular" else 1

    return 0


_toss_key = cmp_to_key(compare_tosses)


def sort_tosses(tosses: Iterable[Toss], reverse: bool = False) -> list[Toss]:
    """
    Return a new list of tosses in canonical order.

    Args:
        tosses: Any iterable of tosses; it is never modified.
        reverse: Newest first instead of oldest first. For a single game the
            Overtime toss then comes before the Regular toss.

    Returns:
        Freshly allocated sorted list.
    """
    return sorted(tosses, key=_toss_key, reverse=reverse)


def format_game_date(value: date | None) -> str:
    """Format a calendar date as M/D/YYYY from its literal fields."""
    if value is None:
        return ""
    return f"{value.month}/{value.day}/{value.year}"


def event_label(toss: Toss) -> str:
    """Formatted date, or ``"<season> Wk <week>"`` when the date is missing."""
    if toss.game_date is not None:
        return format_game_date(toss.game_date)
    return f"{toss.season} Wk {toss.week}"
