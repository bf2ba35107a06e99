"""Tests for canonical toss ordering."""

from datetime import date
from itertools import permutations


def test_sort_by_date(make_toss):
    from toss_vault.engine.ordering import sort_tosses

    later = make_toss(week=3)
    earlier = make_toss(week=1)
    middle = make_toss(week=2)

    assert sort_tosses([later, earlier, middle]) == [earlier, middle, later]


def test_regular_precedes_overtime_in_any_input_order(make_toss):
    """Within one game the Regular toss always comes first."""
    from toss_vault.engine.ordering import sort_tosses

    regular = make_toss(winner="BUF", loser="KC", week=5)
    overtime = make_toss(winner="KC", loser="BUF", week=5, toss_type="Overtime")
    other = make_toss(winner="KC", loser="MIA", week=4)

    for order in permutations([regular, overtime, other]):
        assert sort_tosses(order) == [other, regular, overtime]


def test_regular_precedes_overtime_with_other_games_same_day(make_toss):
    """Another game on the same date never lets an Overtime toss jump its Regular toss."""
    from toss_vault.engine.ordering import sort_tosses

    overtime = make_toss(winner="KC", loser="BUF", week=1, toss_type="Overtime")
    other = make_toss(winner="NYJ", loser="MIA", week=1)
    regular = make_toss(winner="BUF", loser="KC", week=1)

    for order in permutations([overtime, other, regular]):
        result = sort_tosses(order)
        assert result.index(regular) < result.index(overtime)
        assert result[-1] == overtime


def test_busy_day_statistics_ignore_input_order(make_toss):
    from toss_vault.engine.lookup import no_games
    from toss_vault.engine.records import calculate_all_records
    from toss_vault.engine.teams import calculate_team_stats

    overtime = make_toss(winner="KC", loser="BUF", week=1, toss_type="Overtime")
    other = make_toss(winner="NYJ", loser="MIA", week=1)
    regular = make_toss(winner="BUF", loser="KC", week=1)

    expected_stats = calculate_team_stats([regular, other, overtime], no_games)
    expected_book = calculate_all_records([regular, other, overtime], no_games)
    assert {s.abbr: s.current_streak for s in expected_stats}["KC"] == 1
    assert expected_book.active_win_streak.holders == ("KC", "NYJ")

    for order in permutations([overtime, other, regular]):
        assert calculate_team_stats(order, no_games) == expected_stats
        assert calculate_all_records(order, no_games) == expected_book


def test_missing_date_falls_back_to_season_and_week(make_toss):
    from toss_vault.engine.ordering import sort_tosses

    dated = make_toss(season=2021, week=2)
    undated_old = make_toss(season=2020, week=17, game_date=None)
    undated_same_season = make_toss(season=2021, week=1, game_date=None)

    assert sort_tosses([dated, undated_old, undated_same_season]) == [
        undated_old,
        undated_same_season,
        dated,
    ]


def test_missing_date_regular_overtime_tie_break(make_toss):
    from toss_vault.engine.ordering import sort_tosses

    overtime = make_toss(week=6, game_date=None, toss_type="Overtime")
    regular = make_toss(winner="BUF", loser="KC", week=6, game_date=None)

    assert sort_tosses([overtime, regular]) == [regular, overtime]


def test_compare_unrelated_tosses_same_day_is_tie(make_toss):
    from toss_vault.engine.ordering import compare_tosses

    a = make_toss(winner="KC", loser="BUF", week=2)
    b = make_toss(winner="MIA", loser="NYJ", week=2)

    assert compare_tosses(a, b) == 0
    assert compare_tosses(b, a) == 0


def test_sort_does_not_mutate_input(make_toss):
    from toss_vault.engine.ordering import sort_tosses

    tosses = [make_toss(week=3), make_toss(week=1)]
    snapshot = list(tosses)
    result = sort_tosses(tosses)

    assert tosses == snapshot
    assert result is not tosses


def test_reverse_puts_overtime_first(make_toss):
    from toss_vault.engine.ordering import sort_tosses

    regular = make_toss(week=5)
    overtime = make_toss(week=5, toss_type="Overtime")
    older = make_toss(week=1)

    assert sort_tosses([older, regular, overtime], reverse=True) == [overtime, regular, older]


def test_format_game_date_and_event_label(make_toss):
    from toss_vault.engine.ordering import event_label, format_game_date

    assert format_game_date(date(2021, 9, 12)) == "9/12/2021"
    assert format_game_date(None) == ""
    assert event_label(make_toss(season=2023, week=1)) == "9/10/2023"
    assert event_label(make_toss(season=2020, week=5, game_date=None)) == "2020 Wk 5"
