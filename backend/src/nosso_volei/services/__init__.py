"""Business logic services."""

from nosso_volei.services.rotation_engine import (
    GAME_CAPACITY,
    TEAM_SIZE,
    RandomSource,
    admit_player,
    balance_teams,
    next_team,
    remove_and_refill,
    resolve_match,
    update_player,
)
from nosso_volei.services.roster_service import RosterService

__all__ = [
    "GAME_CAPACITY",
    "TEAM_SIZE",
    "RandomSource",
    "admit_player",
    "balance_teams",
    "next_team",
    "remove_and_refill",
    "resolve_match",
    "update_player",
    "RosterService",
]
