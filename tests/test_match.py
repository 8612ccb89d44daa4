import pytest

from swisspairing.enums import MatchOutcome, ParticipantStatus
from swisspairing.exceptions import (
    ByeResultException,
    DuplicateResultException,
    InvalidArgumentException,
    InvalidMatchException,
    InvalidResultException,
    InvalidStateException,
)
from swisspairing.models import Match, outcome_from_draw
from swisspairing.models.match import OUTCOME_PROBABILITIES
from swisspairing.participant import Participant

LOW = ParticipantStatus.LOW
MEDIUM = ParticipantStatus.MEDIUM
HIGH = ParticipantStatus.HIGH


class FixedRandom:
    """Stands in for random.Random, always drawing the same number."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return self.value


def _pair(status1=LOW, status2=LOW):
    return Participant(1, "Alice", status1), Participant(2, "Bob", status2)


def test_match_requires_two_players():
    alice, _ = _pair()
    with pytest.raises(InvalidMatchException):
        Match(alice, None, 1)
    with pytest.raises(InvalidMatchException):
        Match(None, alice, 1)


def test_match_rejects_same_participant():
    alice, _ = _pair()
    with pytest.raises(InvalidArgumentException):
        Match(alice, alice, 1)
    with pytest.raises(InvalidMatchException):
        Match(alice, Participant(1, "Alice again"), 1)


@pytest.mark.parametrize("bad_round", [0, -1, True, "1", None])
def test_match_rejects_non_positive_round_number(bad_round):
    alice, bob = _pair()

    with pytest.raises(InvalidMatchException):
        Match(alice, bob, bad_round)
    with pytest.raises(InvalidMatchException):
        Match.bye(alice, bad_round)


def test_new_match_is_not_played():
    alice, bob = _pair()
    match = Match(alice, bob, 3)

    assert match.round_number == 3
    assert match.result is MatchOutcome.NOT_PLAYED
    assert not match.is_played
    assert not match.is_bye
    assert match.to_file_string() == "Alice vs Bob => NOT_PLAYED"
    assert str(match) == "Round 3: Alice vs Bob => Not played yet"


def test_player1_win_updates_both_participants():
    alice, bob = _pair()
    match = Match(alice, bob, 1)
    match.set_result(MatchOutcome.WIN_PLAYER1)

    assert (alice.score, alice.wins, alice.losses) == (1.0, 1, 0)
    assert (bob.score, bob.wins, bob.losses) == (0.0, 0, 1)
    assert alice.has_played_with(bob)
    assert bob.has_played_with(alice)
    assert match.to_file_string() == "Alice vs Bob => 1-0"
    assert str(match) == "Round 1: Alice vs Bob => Alice wins"


def test_player2_win_mirrors_player1_win():
    alice, bob = _pair()
    match = Match(alice, bob, 1)
    match.set_result(MatchOutcome.WIN_PLAYER2)

    assert (alice.score, alice.losses) == (0.0, 1)
    assert (bob.score, bob.wins) == (1.0, 1)
    assert match.to_file_string() == "Alice vs Bob => 0-1"


def test_draw_gives_half_point_each():
    alice, bob = _pair()
    match = Match(alice, bob, 1)
    match.set_result(MatchOutcome.DRAW)

    assert (alice.score, alice.draws) == (0.5, 1)
    assert (bob.score, bob.draws) == (0.5, 1)
    assert match.to_file_string() == "Alice vs Bob => 0.5-0.5"
    assert str(match) == "Round 1: Alice vs Bob => Draw"


def test_result_can_only_be_set_once():
    alice, bob = _pair()
    match = Match(alice, bob, 1)
    match.set_result(MatchOutcome.WIN_PLAYER1)

    with pytest.raises(DuplicateResultException):
        match.set_result(MatchOutcome.WIN_PLAYER2)

    assert alice.score == 1.0
    assert bob.score == 0.0
    assert match.result is MatchOutcome.WIN_PLAYER1


@pytest.mark.parametrize("bad_outcome", [MatchOutcome.NOT_PLAYED, "1-0", None])
def test_invalid_outcome_is_rejected(bad_outcome):
    alice, bob = _pair()
    match = Match(alice, bob, 1)

    with pytest.raises(InvalidResultException):
        match.set_result(bad_outcome)

    assert not match.is_played
    assert alice.opponent_ids == set()


def test_bye_match_is_resolved_on_creation():
    carol = Participant(3, "Carol")
    bye = Match.bye(carol, 2)

    assert bye.is_bye
    assert bye.is_played
    assert bye.player2 is None
    assert bye.result is MatchOutcome.WIN_PLAYER1
    assert bye.to_file_string() == "Carol (BYE) => WIN"
    assert str(bye) == "Round 2: Carol (BYE)"


def test_bye_accepts_only_player1_win():
    carol = Participant(3, "Carol")
    carol.award_bye()
    bye = Match.bye(carol, 1)

    bye.set_result(MatchOutcome.WIN_PLAYER1)
    assert carol.score == 1.0

    with pytest.raises(ByeResultException):
        bye.set_result(MatchOutcome.DRAW)
    with pytest.raises(InvalidStateException):
        bye.set_result(MatchOutcome.WIN_PLAYER2)
    assert carol.score == 1.0
    assert carol.wins == 1


def test_bye_cannot_be_auto_resolved():
    bye = Match.bye(Participant(3, "Carol"), 1)
    with pytest.raises(ByeResultException):
        bye.auto_resolve(FixedRandom(0))


def test_outcome_table_values():
    assert OUTCOME_PROBABILITIES[(LOW, LOW)] == (45, 10)
    assert OUTCOME_PROBABILITIES[(LOW, MEDIUM)] == (35, 15)
    assert OUTCOME_PROBABILITIES[(LOW, HIGH)] == (30, 15)
    assert OUTCOME_PROBABILITIES[(MEDIUM, LOW)] == (50, 15)
    assert OUTCOME_PROBABILITIES[(MEDIUM, MEDIUM)] == (45, 10)
    assert OUTCOME_PROBABILITIES[(MEDIUM, HIGH)] == (35, 15)
    assert OUTCOME_PROBABILITIES[(HIGH, LOW)] == (55, 15)
    assert OUTCOME_PROBABILITIES[(HIGH, MEDIUM)] == (50, 15)
    assert OUTCOME_PROBABILITIES[(HIGH, HIGH)] == (45, 10)


@pytest.mark.parametrize("statuses", sorted(OUTCOME_PROBABILITIES, key=str))
def test_outcome_thresholds(statuses):
    win, draw = OUTCOME_PROBABILITIES[statuses]

    assert outcome_from_draw(0, *statuses) is MatchOutcome.WIN_PLAYER1
    assert outcome_from_draw(win - 1, *statuses) is MatchOutcome.WIN_PLAYER1
    assert outcome_from_draw(win, *statuses) is MatchOutcome.DRAW
    assert outcome_from_draw(win + draw - 1, *statuses) is MatchOutcome.DRAW
    assert outcome_from_draw(win + draw, *statuses) is MatchOutcome.WIN_PLAYER2
    assert outcome_from_draw(99, *statuses) is MatchOutcome.WIN_PLAYER2


def test_auto_resolve_uses_status_weights():
    # HIGH vs LOW: 0-54 player1, 55-69 draw, 70-99 player2
    alice, bob = _pair(HIGH, LOW)
    rng = FixedRandom(60)
    outcome = Match(alice, bob, 1).auto_resolve(rng)

    assert outcome is MatchOutcome.DRAW
    assert rng.calls == [100]
    assert alice.score == 0.5
    assert bob.score == 0.5


def test_auto_resolve_applies_player2_win():
    alice, bob = _pair(LOW, HIGH)
    match = Match(alice, bob, 1)

    assert match.auto_resolve(FixedRandom(45)) is MatchOutcome.WIN_PLAYER2
    assert bob.score == 1.0
    assert match.is_played


def test_auto_resolve_refuses_played_match():
    alice, bob = _pair()
    match = Match(alice, bob, 1)
    match.set_result(MatchOutcome.DRAW)

    with pytest.raises(DuplicateResultException):
        match.auto_resolve(FixedRandom(0))
