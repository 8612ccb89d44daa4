import pytest

from swisspairing.enums import MatchOutcome
from swisspairing.exceptions import InvalidMatchException
from swisspairing.pairing import create_swiss_pairings
from swisspairing.participant import Participant


def _players(count):
    return [Participant(i, f"P{i}") for i in range(1, count + 1)]


def _ids(matches):
    return [
        (m.player1.id, m.player2.id if m.player2 is not None else None)
        for m in matches
    ]


def _mark_played(p1, p2):
    p1.add_opponent(p2)
    p2.add_opponent(p1)


def test_even_pool_pairs_in_rank_order():
    matches = create_swiss_pairings(_players(4), 1)

    assert _ids(matches) == [(1, 2), (3, 4)]
    assert all(m.round_number == 1 for m in matches)
    assert not any(m.is_played for m in matches)


def test_odd_pool_gives_bye_to_lowest_ranked_first():
    players = _players(5)
    matches = create_swiss_pairings(players, 1)

    assert _ids(matches) == [(5, None), (1, 2), (3, 4)]
    bye = matches[0]
    assert bye.is_bye
    assert bye.result is MatchOutcome.WIN_PLAYER1

    p5 = players[4]
    assert p5.was_byed
    assert p5.score == 1.0
    assert p5.wins == 1


def test_every_participant_appears_exactly_once():
    players = _players(7)
    matches = create_swiss_pairings(players, 1)

    seen = []
    for m in matches:
        seen.append(m.player1.id)
        if m.player2 is not None:
            seen.append(m.player2.id)

    assert sorted(seen) == [p.id for p in players]
    assert sum(1 for m in matches if m.is_bye) == 1


def test_participant_with_bye_is_skipped_for_next_bye():
    players = _players(5)
    players[4].was_byed = True

    matches = create_swiss_pairings(players, 2)

    assert matches[0].is_bye
    assert matches[0].player1.id == 4
    assert players[3].was_byed


def test_bye_scan_moves_up_past_all_byed_participants():
    players = _players(5)
    for p in players[2:]:
        p.was_byed = True

    matches = create_swiss_pairings(players, 3)

    assert matches[0].player1.id == 2


def test_second_bye_only_when_everyone_had_one():
    players = _players(3)
    for p in players:
        p.was_byed = True

    matches = create_swiss_pairings(players, 4)

    bye_player = matches[0].player1
    assert bye_player.id == 3
    assert bye_player.score == 1.0
    assert bye_player.wins == 1
    assert bye_player.was_byed


def test_ranking_uses_score_then_buchholz():
    players = _players(4)
    p1, p2, p3, p4 = players

    # p2 and p4 lead on score, p4 has the stronger opponent
    p2.add_point(1.0)
    p4.add_point(1.0)
    p3.add_point(0.5)
    _mark_played(p4, p3)
    _mark_played(p2, p1)

    matches = create_swiss_pairings(players, 2)

    assert _ids(matches) == [(4, 2), (3, 1)]


def test_pairing_avoids_previous_opponents():
    players = _players(4)
    _mark_played(players[0], players[1])
    _mark_played(players[2], players[3])

    matches = create_swiss_pairings(players, 2)

    assert _ids(matches) == [(1, 3), (2, 4)]


def test_forced_repeat_when_no_new_opponent_exists():
    players = _players(2)
    _mark_played(players[0], players[1])

    matches = create_swiss_pairings(players, 2)

    assert _ids(matches) == [(1, 2)]


def test_bye_recipient_is_not_paired_again():
    players = _players(3)
    matches = create_swiss_pairings(players, 1)

    assert _ids(matches) == [(3, None), (1, 2)]


def test_bad_round_number_credits_no_bye():
    players = _players(3)

    with pytest.raises(InvalidMatchException):
        create_swiss_pairings(players, 0)

    assert all(p.score == 0.0 and not p.was_byed for p in players)
