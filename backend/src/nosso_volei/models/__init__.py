"""Data models for the volleyball roster rotation."""

from nosso_volei.models.player import PLAYING_SIDES, Gender, Player, TeamSide

__all__ = [
    "PLAYING_SIDES",
    "Gender",
    "Player",
    "TeamSide",
]
