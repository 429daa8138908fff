"""Utility modules for nosso_volei."""

from nosso_volei.utils.gender_normalizer import (
    GENDER_ALIASES,
    normalize_gender,
    normalize_gender_strict,
)
from nosso_volei.utils.roster_codec import (
    decode_roster,
    dumps_roster,
    loads_roster,
    player_from_record,
    player_to_record,
)

__all__ = [
    "GENDER_ALIASES",
    "normalize_gender",
    "normalize_gender_strict",
    "decode_roster",
    "dumps_roster",
    "loads_roster",
    "player_from_record",
    "player_to_record",
]
