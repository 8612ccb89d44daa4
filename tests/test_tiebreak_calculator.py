import itertools

from swisspairing.constants import TB_BUCHHOLZ, TB_WINS
from swisspairing.participant import Participant
from swisspairing.tournament import TiebreakCalculator


def _ids(standings):
    return [p.id for p in standings]


def test_score_ranks_first():
    low = Participant(1, "Low")
    high = Participant(2, "High")
    high.add_point(2.0)

    standings = TiebreakCalculator().get_standings([low, high])

    assert _ids(standings) == [2, 1]


def test_buchholz_breaks_score_ties():
    a, b, c, d = (Participant(i, n) for i, n in enumerate("ABCD", 1))
    a.add_point(1.0)
    b.add_point(1.0)
    c.add_point(1.0)
    a.add_opponent(d)
    b.add_opponent(c)

    standings = TiebreakCalculator().get_standings([a, b, c, d])

    # b met c (1.0), a met d (0.0), c has no opponents
    assert _ids(standings) == [2, 1, 3, 4]


def test_wins_break_buchholz_ties():
    drawer = Participant(1, "Drawer")
    drawer.add_point(1.0)
    drawer.add_draw()
    drawer.add_draw()

    winner = Participant(2, "Winner")
    winner.add_point(1.0)
    winner.add_win()

    standings = TiebreakCalculator().get_standings([drawer, winner])

    assert _ids(standings) == [2, 1]


def test_lower_id_breaks_remaining_ties():
    players = [Participant(i, f"P{i}") for i in (3, 1, 2)]

    standings = TiebreakCalculator().get_standings(players)

    assert _ids(standings) == [1, 2, 3]


def test_standings_are_a_strict_total_order():
    players = [Participant(i, f"P{i}") for i in range(1, 7)]
    players[0].add_point(1.0)
    players[1].add_point(1.0)
    players[2].add_point(0.5)
    players[3].add_point(0.5)
    players[0].add_opponent(players[2])
    players[1].add_opponent(players[3])

    calculator = TiebreakCalculator()
    expected = _ids(calculator.get_standings(players))

    # Input order never matters
    for ordering in itertools.permutations(players):
        assert _ids(calculator.get_standings(ordering)) == expected


def test_standings_do_not_mutate_input():
    players = [Participant(i, f"P{i}") for i in (2, 1)]
    TiebreakCalculator().get_standings(players)
    assert _ids(players) == [2, 1]


def test_calculate_all_tiebreaks():
    a = Participant(1, "A")
    b = Participant(2, "B")
    b.add_point(1.0)
    b.add_win()
    a.add_opponent(b)
    b.add_opponent(a)

    tiebreaks = TiebreakCalculator().calculate_all_tiebreaks({1: a, 2: b})

    assert tiebreaks[1] == {TB_BUCHHOLZ: 1.0, TB_WINS: 0.0}
    assert tiebreaks[2] == {TB_BUCHHOLZ: 0.0, TB_WINS: 1.0}
