import json

import pytest

from debatetab.exceptions import (
    DuplicateJudgeException,
    DuplicateTeamException,
    InvalidTeamException,
    InvalidTournamentDataException,
)
from debatetab.models import (
    BallotBP,
    Judge,
    PairingBP,
    PairingTwoTeam,
    Round,
    Speaker,
    Team,
    TeamResultBP,
    Tournament,
    TournamentConfig,
    pairing_from_dict,
)


def _bp_team(number):
    return Team(
        name=f"Team {number}",
        id=f"T{number}",
        speakers=[Speaker(name=f"S{number}-1"), Speaker(name=f"S{number}-2")],
    )


def _make_tournament(num_teams=4):
    tournament = Tournament(config=TournamentConfig(name="Model Cup"))
    for number in range(1, num_teams + 1):
        tournament.add_team(_bp_team(number))
    return tournament


def test_legacy_record_is_migrated():
    data = {
        "name": "Old Open",
        "format": "BP",
        "teams": [
            {"id": "T1", "name": "Alpha", "speakers": ["Ann", "Bob"]},
            {"id": "T2", "name": "Beta", "speakers": ["Cat", "Dan"]},
        ],
        "judges": [{"id": "J1", "name": "Judy"}],
        "rounds": [{"id": "R1", "round_number": 1}],
    }

    tournament = Tournament.from_dict(data)

    assert tournament.name == "Old Open"
    assert tournament.config.break_after_round == 4
    assert tournament.break_categories == []
    assert tournament.speaker_categories == []
    alpha = tournament.get_team("T1")
    assert alpha.speaker_names == ["Ann", "Bob"]
    assert all(speaker.id for speaker in alpha.speakers)
    assert alpha.speakers[0].id != alpha.speakers[1].id
    assert alpha.wins == 0
    assert alpha.team_points == 0
    assert alpha.positions_spoken == []
    assert alpha.break_category_ids == []
    assert tournament.get_judge("J1").rounds_judged == 0
    round_ = tournament.rounds[0]
    assert round_.status == "draft"
    assert round_.is_silent is False
    assert round_.pairing_algorithm is None


@pytest.mark.parametrize("missing", ["name", "teams", "judges", "rounds"])
def test_incomplete_record_is_rejected(missing):
    data = {"name": "Broken", "teams": [], "judges": [], "rounds": []}
    del data[missing]

    with pytest.raises(InvalidTournamentDataException):
        Tournament.from_dict(data)


@pytest.mark.parametrize("text", ["not json", "[1, 2, 3]"])
def test_from_json_rejects_non_objects(text):
    with pytest.raises(InvalidTournamentDataException):
        Tournament.from_json(text)


def test_json_keeps_rounds_and_ballots():
    tournament = _make_tournament()
    teams = tournament.teams
    pairing = PairingBP(
        *teams,
        room="Room 1",
        judges=[Judge(name="Judy", id="J1")],
        ballot=BallotBP(
            ranks=[
                TeamResultBP(team_id=t.id, rank=r, speaker_points=[75.0, 74.5])
                for r, t in enumerate(teams, start=1)
            ],
            chair_judge_id="J1",
        ),
    )
    tournament.rounds.append(
        Round(round_number=1, pairings=[pairing], motion="THW test")
    )

    restored = Tournament.from_json(tournament.to_json())

    assert restored.to_dict() == tournament.to_dict()
    restored_pairing = restored.rounds[0].pairings[0]
    assert isinstance(restored_pairing, PairingBP)
    assert restored_pairing.ballot.result_for("T1").team_points == 3
    assert json.loads(tournament.to_json())["config"]["name"] == "Model Cup"


def test_untagged_pairings_follow_the_tournament_format():
    tournament = _make_tournament()
    tournament.rounds.append(
        Round(round_number=1, pairings=[PairingBP(*tournament.teams)])
    )
    data = tournament.to_dict()
    del data["rounds"][0]["pairings"][0]["format"]

    restored = Tournament.from_dict(data).rounds[0].pairings[0]

    assert isinstance(restored, PairingBP)
    assert restored.closing_opposition.id == "T4"

    ap_room = PairingTwoTeam(
        proposition=_bp_team(1), opposition=_bp_team(2), format="AP"
    ).to_dict()
    del ap_room["format"]
    assert pairing_from_dict(ap_room, "AP").format == "AP"
    assert pairing_from_dict(ap_room).format == "WSDC"


@pytest.mark.parametrize(
    "path",
    [
        ("teams", 0, "id"),
        ("judges", 0, "id"),
        ("rounds", 0, "id"),
        ("rounds", 0, "round_number"),
        ("rounds", 0, "pairings", 0, "id"),
        ("rounds", 0, "pairings", 0, "opening_government"),
    ],
)
def test_missing_required_field_is_rejected(path):
    tournament = _make_tournament()
    tournament.add_judge(Judge(name="Judy", id="J1"))
    tournament.rounds.append(
        Round(round_number=1, pairings=[PairingBP(*tournament.teams)])
    )
    data = tournament.to_dict()
    record = data
    for key in path[:-1]:
        record = record[key]
    del record[path[-1]]

    with pytest.raises(InvalidTournamentDataException):
        Tournament.from_dict(data)


def test_pairing_from_dict_dispatches_on_format():
    room = PairingTwoTeam(
        proposition=Team(name="A", id="A", speakers=[Speaker(name="a")] * 3),
        opposition=Team(name="B", id="B", speakers=[Speaker(name="b")] * 3),
        format="AP",
    )

    restored = pairing_from_dict(room.to_dict())

    assert isinstance(restored, PairingTwoTeam)
    assert restored.format == "AP"
    assert restored.position_of("B") == "opposition"


def test_add_team_checks_identity_and_shape():
    tournament = _make_tournament(num_teams=1)

    with pytest.raises(DuplicateTeamException):
        tournament.add_team(_bp_team(1))
    with pytest.raises(InvalidTeamException):
        tournament.add_team(Team(name="Solo", speakers=[Speaker(name="Only")]))
    with pytest.raises(InvalidTeamException):
        tournament.add_team(
            Team(name="  ", speakers=[Speaker(name="A"), Speaker(name="B")])
        )
    assert len(tournament.teams) == 1


def test_duplicate_judge():
    tournament = _make_tournament(num_teams=0)
    tournament.add_judge(Judge(name="Judy", id="J1"))

    with pytest.raises(DuplicateJudgeException):
        tournament.add_judge(Judge(name="Judith", id="J1"))
    assert tournament.remove_judge("J1")
    assert not tournament.remove_judge("J1")


def test_update_team_keeps_identity_and_counters():
    tournament = _make_tournament(num_teams=1)
    team = tournament.get_team("T1")
    team.team_points = 5

    assert tournament.update_team(
        "T1", name="Renamed", speakers=[Speaker(name="X"), Speaker(name="Y")]
    )
    assert team.name == "Renamed"
    assert team.speaker_names == ["X", "Y"]
    assert team.team_points == 5

    with pytest.raises(InvalidTeamException):
        tournament.update_team("T1", speakers=[Speaker(name="Z")])
    assert team.speaker_names == ["X", "Y"]
    assert not tournament.update_team("missing", name="Nobody")


def test_removing_categories_untags_members():
    tournament = _make_tournament(num_teams=2)
    novice = tournament.add_break_category("Novice")
    esl = tournament.add_speaker_category("ESL")
    team = tournament.get_team("T1")
    team.break_category_ids.append(novice.id)
    team.speakers[0].category_ids.append(esl.id)

    assert tournament.remove_break_category(novice.id)
    assert tournament.remove_speaker_category(esl.id)

    assert team.break_category_ids == []
    assert team.speakers[0].category_ids == []
    assert not tournament.remove_break_category(novice.id)


def test_copy_shares_no_state():
    tournament = _make_tournament()
    clone = tournament.copy()

    clone.get_team("T1").name = "Changed"
    clone.teams.pop()

    assert tournament.get_team("T1").name == "Team 1"
    assert len(tournament.teams) == 4


def test_unknown_format_is_rejected():
    with pytest.raises(InvalidTournamentDataException):
        TournamentConfig(name="Odd", format="Karl Popper")
