"""Player and team models."""

from dataclasses import dataclass
from enum import Enum


class Gender(str, Enum):
    """Player gender, stored with the Portuguese labels used by the app."""

    MALE = "Masculino"
    FEMALE = "Feminino"


class TeamSide(str, Enum):
    """Where a player currently sits in the rotation."""

    A = "A"
    B = "B"
    WAITING = "WAITING"

    @property
    def opponent(self) -> "TeamSide":
        """The other playing side. WAITING has no opponent."""
        if self is TeamSide.A:
            return TeamSide.B
        if self is TeamSide.B:
            return TeamSide.A
        raise ValueError("WAITING has no opponent side")


PLAYING_SIDES = (TeamSide.A, TeamSide.B)


@dataclass(frozen=True)
class Player:
    """A single roster entry."""

    id: str
    name: str  # Upper-cased at entry
    gender: Gender
    team: TeamSide
    sequence_number: int  # Lower = arrived or re-queued earlier
    created_at: int = 0  # Epoch millis, informational only

