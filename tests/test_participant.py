import pytest

from swisspairing.enums import ParticipantStatus
from swisspairing.exceptions import (
    ByeAlreadyAwardedException,
    InvalidArgumentException,
    InvalidParticipantDataException,
    InvalidStateException,
)
from swisspairing.participant import Participant


def test_new_participant_starts_empty():
    p = Participant(1, "Alice", ParticipantStatus.HIGH)

    assert p.id == 1
    assert p.name == "Alice"
    assert p.status is ParticipantStatus.HIGH
    assert p.score == 0.0
    assert (p.wins, p.draws, p.losses) == (0, 0, 0)
    assert p.opponent_ids == set()
    assert not p.was_byed


def test_default_status_is_low():
    assert Participant(1, "Alice").status is ParticipantStatus.LOW


def test_status_accepts_name_text():
    assert Participant(1, "Alice", "high").status is ParticipantStatus.HIGH


@pytest.mark.parametrize("bad_id", [0, -3, True, "1", None])
def test_invalid_id_is_rejected(bad_id):
    with pytest.raises(InvalidParticipantDataException):
        Participant(bad_id, "Alice")


@pytest.mark.parametrize("bad_name", ["", "   ", None])
def test_blank_name_is_rejected(bad_name):
    with pytest.raises(InvalidParticipantDataException):
        Participant(1, bad_name)


@pytest.mark.parametrize("bad_name", ["Bob | Jr", "Ann\nB", "Ann\rB"])
def test_name_with_separator_or_line_break_is_rejected(bad_name):
    with pytest.raises(InvalidParticipantDataException):
        Participant(1, bad_name)

    p = Participant(1, "Alice")
    with pytest.raises(InvalidParticipantDataException):
        p.name = bad_name
    assert p.name == "Alice"


def test_name_is_stored_stripped():
    p = Participant(1, "  Bob  ")
    assert p.name == "Bob"

    p.name = "Ann\tB "
    assert p.name == "Ann\tB"


def test_unknown_status_is_rejected():
    with pytest.raises(InvalidParticipantDataException):
        Participant(1, "Alice", "EXPERT")


def test_invalid_data_is_an_argument_error():
    with pytest.raises(InvalidArgumentException):
        Participant(0, "Alice")


def test_add_point_rejects_negative_amount():
    p = Participant(1, "Alice")
    p.add_point(0.5)

    with pytest.raises(InvalidArgumentException):
        p.add_point(-1.0)

    assert p.score == 0.5


def test_add_opponent_is_idempotent_and_ignores_self_and_none():
    alice = Participant(1, "Alice")
    bob = Participant(2, "Bob")

    alice.add_opponent(bob)
    alice.add_opponent(bob)
    alice.add_opponent(alice)
    alice.add_opponent(None)

    assert alice.opponent_ids == {2}
    assert alice.has_played_with(bob)
    assert not bob.has_played_with(alice)
    assert not alice.has_played_with(None)


def test_award_bye_credits_point_and_win_once():
    p = Participant(1, "Alice")
    p.award_bye()

    assert p.was_byed
    assert p.score == 1.0
    assert p.wins == 1

    with pytest.raises(ByeAlreadyAwardedException):
        p.award_bye()
    assert p.score == 1.0
    assert p.wins == 1


def test_second_bye_is_a_state_error():
    p = Participant(1, "Alice")
    p.award_bye()
    with pytest.raises(InvalidStateException):
        p.award_bye()


def test_buchholz_reflects_current_opponent_scores():
    alice = Participant(1, "Alice")
    bob = Participant(2, "Bob")
    carol = Participant(3, "Carol")
    arena = {p.id: p for p in (alice, bob, carol)}

    alice.add_opponent(bob)
    alice.add_opponent(carol)
    bob.add_point(1.0)
    assert alice.buchholz(arena) == 1.0

    # Opponents keep scoring after the game was played
    carol.add_point(0.5)
    bob.add_point(1.0)
    assert alice.buchholz(arena) == 2.5


def test_buchholz_skips_opponents_outside_arena():
    alice = Participant(1, "Alice")
    bob = Participant(2, "Bob")
    bob.add_point(1.0)
    alice.add_opponent(bob)

    assert alice.buchholz({alice.id: alice}) == 0.0


def test_from_dict_restores_roster_identity_only():
    restored = Participant.from_dict(
        {"id": 4, "name": "Dora", "status": "MEDIUM", "score": 2.5}
    )

    assert restored.id == 4
    assert restored.name == "Dora"
    assert restored.status is ParticipantStatus.MEDIUM
    assert restored.score == 0.0
    assert restored.wins == 0


def test_from_dict_without_status_defaults_to_low():
    restored = Participant.from_dict({"id": 2, "name": "Bob"})
    assert restored.status is ParticipantStatus.LOW


def test_str_shows_id_name_and_score():
    p = Participant(7, "Eve")
    p.add_point(1.5)
    assert str(p) == "ID - 7 | Eve | 1.5"
