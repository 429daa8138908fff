"""Grouped roster views for display."""

from collections import defaultdict
from dataclasses import dataclass, field

from nosso_volei.models.player import Gender, Player, TeamSide
from nosso_volei.utils.roster_codec import player_to_record


@dataclass
class TeamSummary:
    """Players on one side, in queue order."""

    side: TeamSide
    players: list[Player] = field(default_factory=list)

    @property
    def male_count(self) -> int:
        return sum(1 for p in self.players if p.gender == Gender.MALE)

    @property
    def female_count(self) -> int:
        return sum(1 for p in self.players if p.gender == Gender.FEMALE)


@dataclass
class TeamView:
    """Roster grouped into team A, team B and the waiting line.

    Ordering inside each group is by ascending sequence number. This is
    presentation only; it never feeds back into team assignment.
    """

    team_a: TeamSummary
    team_b: TeamSummary
    waiting: TeamSummary

    @classmethod
    def from_roster(cls, players: list[Player]) -> "TeamView":
        """Group a roster by side, sorting each side by sequence number."""
        by_side: dict[TeamSide, list[Player]] = defaultdict(list)
        for player in sorted(players, key=lambda p: p.sequence_number):
            by_side[player.team].append(player)

        return cls(
            team_a=TeamSummary(TeamSide.A, by_side[TeamSide.A]),
            team_b=TeamSummary(TeamSide.B, by_side[TeamSide.B]),
            waiting=TeamSummary(TeamSide.WAITING, by_side[TeamSide.WAITING]),
        )

    @property
    def total_players(self) -> int:
        return len(self.team_a.players) + len(self.team_b.players) + len(self.waiting.players)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON response."""
        return {
            "total_players": self.total_players,
            "teams": {
                summary.side.value: {
                    "players": [player_to_record(p) for p in summary.players],
                    "count": len(summary.players),
                    "male_count": summary.male_count,
                    "female_count": summary.female_count,
                }
                for summary in (self.team_a, self.team_b, self.waiting)
            },
        }

