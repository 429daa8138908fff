"""Tests for roster record conversion and gender normalization."""

import json

import pytest

from nosso_volei.models.player import Gender, Player, TeamSide
from nosso_volei.utils.gender_normalizer import normalize_gender, normalize_gender_strict
from nosso_volei.utils.roster_codec import (
    decode_roster,
    dumps_roster,
    loads_roster,
    player_from_record,
    player_to_record,
)


def test_normalize_gender_aliases():
    """All known labels map to the stored Portuguese values."""
    assert normalize_gender("Masculino") == Gender.MALE
    assert normalize_gender("masculino") == Gender.MALE
    assert normalize_gender("M") == Gender.MALE
    assert normalize_gender("male") == Gender.MALE
    assert normalize_gender("Homem") == Gender.MALE

    assert normalize_gender("Feminino") == Gender.FEMALE
    assert normalize_gender(" F ") == Gender.FEMALE
    assert normalize_gender("female") == Gender.FEMALE
    assert normalize_gender("Mulher") == Gender.FEMALE

    assert normalize_gender(Gender.FEMALE) == Gender.FEMALE


def test_normalize_gender_unknown():
    assert normalize_gender(None) is None
    assert normalize_gender("other") is None
    with pytest.raises(ValueError, match="Unknown gender"):
        normalize_gender_strict("x")


def test_player_to_record_uses_stored_field_names():
    player = Player(
        id="abc",
        name="ANA",
        gender=Gender.FEMALE,
        team=TeamSide.WAITING,
        sequence_number=7,
        created_at=1700000000000,
    )
    assert player_to_record(player) == {
        "id": "abc",
        "name": "ANA",
        "gender": "Feminino",
        "team": "WAITING",
        "sequenceNumber": 7,
        "createdAt": 1700000000000,
    }


def test_player_from_record_round_trips():
    record = {
        "id": "abc",
        "name": "ANA",
        "gender": "Feminino",
        "team": "B",
        "sequenceNumber": 4,
        "createdAt": 99,
    }
    assert player_to_record(player_from_record(record, 1)) == record


def test_missing_sequence_number_defaults_to_position():
    payload = [
        {"id": "a", "name": "bruno", "gender": "Masculino", "team": "A"},
        {"id": "b", "name": "CLARA", "gender": "Feminino", "team": "A", "sequenceNumber": 10},
        {"id": "c", "name": "DAVI", "gender": "Masculino", "team": "WAITING"},
    ]

    players = decode_roster(payload)

    assert [p.sequence_number for p in players] == [1, 10, 3]
    assert players[0].name == "BRUNO"
    assert players[0].created_at == 0


def test_non_list_payload_is_empty():
    assert decode_roster({"players": []}) == []
    assert decode_roster(None) == []
    assert decode_roster("junk") == []


def test_bad_records_are_skipped():
    payload = [
        {"id": "a", "name": "A", "gender": "Masculino", "team": "A", "sequenceNumber": 1},
        {"id": "b", "name": "B", "gender": "???", "team": "A"},
        {"id": "c", "name": "C", "gender": "Feminino", "team": "Z"},
        {"name": "no id", "gender": "Feminino", "team": "A"},
        "not a record",
    ]

    players = decode_roster(payload)

    assert [p.id for p in players] == ["a"]


def test_loads_roster():
    assert loads_roster(None) == []
    assert loads_roster("") == []
    assert loads_roster("{not json") is None
    assert loads_roster('{"a": 1}') is None
    assert loads_roster("[]") == []


def test_dumps_roster_is_json_list():
    players = [
        Player(id="x", name="JOÃO", gender=Gender.MALE, team=TeamSide.A, sequence_number=1),
    ]
    raw = dumps_roster(players)
    assert json.loads(raw)[0]["name"] == "JOÃO"
    assert loads_roster(raw) == players
