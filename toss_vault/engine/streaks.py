"""Streak scanning over canonically ordered toss sequences.

All functions expect events ordered oldest to newest (see
:func:`toss_vault.engine.ordering.sort_tosses`). Overtime tosses are
ordinary events here: a game that went to overtime contributes two
independent results.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from toss_vault.engine.ordering import event_label
from toss_vault.models.toss import Toss

TossPredicate = Callable[[Toss], bool]


@dataclass(frozen=True)
class Run:
    """A run of consecutive events matching a predicate."""

    length: int = 0
    tosses: tuple[Toss, ...] = ()

    @property
    def start_label(self) -> str:
        return event_label(self.tosses[0]) if self.tosses else ""

    @property
    def end_label(self) -> str:
        return event_label(self.tosses[-1]) if self.tosses else ""


def won_by(team: str) -> TossPredicate:
    return lambda toss: toss.winner == team


def lost_by(team: str) -> TossPredicate:
    return lambda toss: toss.loser == team


def signed_streak(outcomes: Sequence[bool]) -> int:
    """
    Signed length of the trailing run of equal outcomes.

    Scans from the last outcome backward and stops at the first outcome that
    disagrees with it: ``+n`` for a run of True, ``-n`` for a run of False,
    0 for an empty sequence.
    """
    if not outcomes:
        return 0
    latest = outcomes[-1]
    streak = 0
    for outcome in reversed(outcomes):
        if outcome != latest:
            break
        streak += 1 if latest else -1
    return streak


def current_streak(events: Sequence[Toss], team: str) -> int:
    """Signed current toss streak for ``team``; positive while winning."""
    return signed_streak([toss.winner == team for toss in events])


def longest_run(events: Sequence[Toss], predicate: TossPredicate) -> Run:
    """
    Longest run of consecutive events matching ``predicate``.

    Scans forward once. A later run of equal length does not replace the
    first maximal run found.
    """
    best = Run()
    length = 0
    buffer: list[Toss] = []
    for toss in events:
        if predicate(toss):
            length += 1
            buffer.append(toss)
            if length > best.length:
                best = Run(length, tuple(buffer))
        else:
            length = 0
            buffer = []
    return best


def trailing_run(events: Sequence[Toss], predicate: TossPredicate) -> Run:
    """Run of matching events ending at the most recent event (empty if it does not match)."""
    run: list[Toss] = []
    for toss in reversed(events):
        if not predicate(toss):
            break
        run.append(toss)
    run.reverse()
    return Run(len(run), tuple(run))


def streak_extremes(events: Sequence[Toss], team: str) -> tuple[int, int]:
    """Longest toss win streak and longest toss loss streak for ``team``."""
    return longest_run(events, won_by(team)).length, longest_run(events, lost_by(team)).length


def active_run(events: Sequence[Toss], team: str) -> tuple[Run, Run]:
    """Trailing win run and trailing loss run for ``team``; at most one is non-empty."""
    return trailing_run(events, won_by(team)), trailing_run(events, lost_by(team))
