import pytest

from swisspairing.cli import main
from swisspairing.cli.session import CommandError, TournamentSession
from swisspairing.enums import ParticipantStatus
from swisspairing.exceptions import DuplicateResultException, TournamentStateException


def _session_with_players(count, seed=1):
    session = TournamentSession(seed=seed)
    session.execute('create "Friday Blitz"')
    for i in range(1, count + 1):
        session.execute(f"add {i} Player{i}")
    return session


def test_create_and_add_participants():
    session = _session_with_players(2)
    output = session.execute('add 3 "Dora Doe" high')

    assert session.tournament.name == "Friday Blitz"
    assert "Dora Doe" in output
    assert session.tournament.get_participant(3).status is ParticipantStatus.HIGH


def test_commands_need_a_tournament():
    session = TournamentSession()
    with pytest.raises(CommandError):
        session.execute("start")


def test_unknown_command_and_bad_arguments():
    session = _session_with_players(2)

    with pytest.raises(CommandError):
        session.execute("shuffle")
    with pytest.raises(CommandError):
        session.execute("add x Bob")
    with pytest.raises(CommandError):
        session.execute("add 5 Bob EXPERT")
    with pytest.raises(CommandError):
        session.execute("remove")


def test_blank_line_produces_no_output():
    assert TournamentSession().execute("   ") == ""


def test_full_session_flow():
    session = _session_with_players(3)

    assert session.execute("start") == "Tournament started: 2 rounds"

    round_output = session.execute("next")
    assert round_output.splitlines()[0] == "Round 1 of 2"
    assert "Player3 (BYE) => WIN" in round_output

    session.execute("auto")
    assert "=== CURRENT STANDINGS ===" in session.execute("standings")

    session.execute("next")
    session.execute("auto")
    assert "=== FINAL STANDINGS ===" in session.execute("standings")

    matches = session.execute("matches")
    assert "=== ROUND 1 ===" in matches
    assert "=== ROUND 2 ===" in matches


def test_roster_change_after_start_is_refused():
    session = _session_with_players(2)
    session.execute("start")

    with pytest.raises(TournamentStateException):
        session.execute("add 3 Late")
    with pytest.raises(TournamentStateException):
        session.execute("remove 1")


def test_manual_result_entry():
    session = _session_with_players(4)
    session.execute("start")
    session.execute("next")

    assert session.execute("result 1 1") == "Round 1: Player1 vs Player2 => Player1 wins"
    assert session.execute("result 2 draw").endswith("=> Draw")

    with pytest.raises(DuplicateResultException):
        session.execute("result 1 2")
    with pytest.raises(CommandError):
        session.execute("result 3 1")
    with pytest.raises(CommandError):
        session.execute("result 1 maybe")


def test_save_and_load(tmp_path):
    path = tmp_path / "blitz.txt"
    session = _session_with_players(3)
    session.execute("start")
    session.execute("next")

    assert str(path) in session.execute(f'save "{path}"')

    other = TournamentSession()
    output = other.execute(f'load "{path}"')

    assert "Friday Blitz" in output
    assert "3 participants" in output
    assert [p.id for p in other.tournament.get_participant_list()] == [1, 2, 3]
    assert other.tournament.current_round == 0


def test_simulate_and_roster_commands(tmp_path, capsys):
    path = tmp_path / "sim.txt"

    assert main(["--seed", "3", "simulate", "--participants", "6", "--output", str(path)]) == 0
    assert path.exists()
    assert "FINAL STANDINGS" in capsys.readouterr().out

    assert main(["roster", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Simulated Tournament" in out
    assert "Player 6" in out


def test_simulate_needs_two_participants(capsys):
    assert main(["simulate", "--participants", "1"]) == 1
    assert "Error" in capsys.readouterr().out


def test_roster_of_missing_file_fails(tmp_path, capsys):
    assert main(["roster", str(tmp_path / "missing.txt")]) == 1


def test_save_adds_default_extension(tmp_path):
    session = _session_with_players(2)
    session.execute(f'save "{tmp_path / "night"}"')

    assert (tmp_path / "night.txt").exists()
