"""Conversion between Player objects and persisted roster records.

Stored records use the camelCase field names of the browser app:
{id, name, gender, team, sequenceNumber, createdAt}.
"""

import json
import logging
from typing import Any

from nosso_volei.models.player import Player, TeamSide
from nosso_volei.utils.gender_normalizer import normalize_gender

logger = logging.getLogger(__name__)


def player_to_record(player: Player) -> dict:
    """Serialize a player to its stored record form."""
    return {
        "id": player.id,
        "name": player.name,
        "gender": player.gender.value,
        "team": player.team.value,
        "sequenceNumber": player.sequence_number,
        "createdAt": player.created_at,
    }


def player_from_record(record: dict, position: int) -> Player:
    """Build a player from a stored record.

    Args:
        record: Stored record dict
        position: 1-based position of the record in the loaded list, used as
            the sequence number for records saved before queue ordering existed

    Raises:
        ValueError: If a required field is missing or invalid
    """
    if not isinstance(record, dict):
        raise ValueError(f"Record is not an object: {record!r}")

    player_id = record.get("id")
    if not player_id:
        raise ValueError("Record has no id")

    gender = normalize_gender(record.get("gender"))
    if gender is None:
        raise ValueError(f"Unknown gender: {record.get('gender')!r}")

    try:
        team = TeamSide(record.get("team"))
    except ValueError:
        raise ValueError(f"Unknown team: {record.get('team')!r}") from None

    sequence_number = record.get("sequenceNumber")
    # bool is an int subclass; treat it as missing like a non-number
    if not isinstance(sequence_number, int) or isinstance(sequence_number, bool):
        sequence_number = position

    created_at = record.get("createdAt")
    if not isinstance(created_at, int) or isinstance(created_at, bool):
        created_at = 0

    return Player(
        id=str(player_id),
        name=str(record.get("name", "")).upper(),
        gender=gender,
        team=team,
        sequence_number=sequence_number,
        created_at=created_at,
    )


def decode_roster(payload: Any) -> list[Player]:
    """Decode a parsed payload into a roster.

    A payload that is not a list yields an empty roster. Individual records
    that cannot be decoded are skipped.
    """
    if not isinstance(payload, list):
        logger.warning(f"Stored roster is not a list ({type(payload).__name__}), using empty roster")
        return []

    players: list[Player] = []
    for index, record in enumerate(payload):
        try:
            players.append(player_from_record(record, index + 1))
        except ValueError as e:
            logger.warning(f"Skipping roster record {index + 1}: {e}")
    return players


def loads_roster(raw: str | None) -> list[Player] | None:
    """Parse a JSON string into a roster.

    Returns:
        The decoded roster, an empty list for an empty payload, or None when
        the text is not valid JSON or not a list (caller treats it as corrupt)
    """
    if not raw:
        return []
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(f"Stored roster is not valid JSON: {e}")
        return None
    if not isinstance(payload, list):
        logger.warning(f"Stored roster is not a list ({type(payload).__name__})")
        return None
    return decode_roster(payload)


def dumps_roster(players: list[Player]) -> str:
    """Serialize a roster to a JSON string."""
    return json.dumps([player_to_record(p) for p in players], ensure_ascii=False)
