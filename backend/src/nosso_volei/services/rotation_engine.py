"""Roster rotation rules: admission, balancing, match resolution and refill.

Every function here takes the current roster and returns a new list of
players. Inputs are never mutated; Player is frozen and changes are made
with dataclasses.replace.
"""

import random
from dataclasses import replace
from typing import Optional, Protocol, Sequence, TypeVar

from nosso_volei.models.player import Gender, Player, TeamSide

T = TypeVar("T")

TEAM_SIZE = 6
GAME_CAPACITY = TEAM_SIZE * 2


class RandomSource(Protocol):
    """Anything that can shuffle a list in place (random.Random does)."""

    def shuffle(self, x: list) -> None: ...


def max_sequence(players: Sequence[Player]) -> int:
    """Highest sequence number in the roster, or 0 when empty."""
    return max((p.sequence_number for p in players), default=0)


def by_seniority(players: Sequence[Player]) -> list[Player]:
    """Players sorted by ascending sequence number."""
    return sorted(players, key=lambda p: p.sequence_number)


def players_on(players: Sequence[Player], side: TeamSide) -> list[Player]:
    """Players on one side, sorted by ascending sequence number."""
    return by_seniority([p for p in players if p.team == side])


def find_player(players: Sequence[Player], player_id: str) -> Optional[Player]:
    return next((p for p in players if p.id == player_id), None)


def _shuffled(items: list[T], rng: RandomSource) -> list[T]:
    result = list(items)
    rng.shuffle(result)
    return result


# ---------------------------------------------------------------------------
# Admission
# ---------------------------------------------------------------------------


def next_team(players: Sequence[Player]) -> TeamSide:
    """Team for a newly joining player: fill A, then B, then the waiting line."""
    count_a = sum(1 for p in players if p.team == TeamSide.A)
    count_b = sum(1 for p in players if p.team == TeamSide.B)

    if count_a < TEAM_SIZE:
        return TeamSide.A
    if count_b < TEAM_SIZE:
        return TeamSide.B
    return TeamSide.WAITING


def admit_player(
    players: Sequence[Player],
    player_id: str,
    name: str,
    gender: Gender,
    created_at: int = 0,
) -> list[Player]:
    """Append a new player at the end of the queue.

    Args:
        players: Current roster
        player_id: Unique id for the new player (caller guarantees uniqueness)
        name: Display name, upper-cased here
        gender: Player gender
        created_at: Creation timestamp in epoch millis

    Returns:
        New roster with the player appended
    """
    new_player = Player(
        id=player_id,
        name=name.strip().upper(),
        gender=gender,
        team=next_team(players),
        sequence_number=max_sequence(players) + 1,
        created_at=created_at,
    )
    return [*players, new_player]


# ---------------------------------------------------------------------------
# Balancer
# ---------------------------------------------------------------------------


def balance_teams(players: Sequence[Player], rng: Optional[RandomSource] = None) -> list[Player]:
    """Re-seed both teams from the earliest arrivals, balanced by gender.

    The 12 lowest sequence numbers form the game pool and everybody else
    waits. Within the pool, men alternate A/B after a shuffle, then women
    fill whichever team is smaller (ties go to A). Sequence numbers are not
    changed.

    Args:
        players: Current roster
        rng: Shuffle source; defaults to a fresh unseeded random.Random

    Returns:
        Team A players, then team B, then the waiting line
    """
    rng = rng or random.Random()

    ordered = by_seniority(players)
    game_pool = ordered[:GAME_CAPACITY]
    waiting_pool = ordered[GAME_CAPACITY:]

    men = _shuffled([p for p in game_pool if p.gender == Gender.MALE], rng)
    women = _shuffled([p for p in game_pool if p.gender == Gender.FEMALE], rng)

    team_a: list[Player] = []
    team_b: list[Player] = []

    for i, player in enumerate(men):
        if i % 2 == 0:
            team_a.append(replace(player, team=TeamSide.A))
        else:
            team_b.append(replace(player, team=TeamSide.B))

    for player in women:
        if len(team_a) <= len(team_b):
            team_a.append(replace(player, team=TeamSide.A))
        else:
            team_b.append(replace(player, team=TeamSide.B))

    waiting = [replace(p, team=TeamSide.WAITING) for p in waiting_pool]

    return team_a + team_b + waiting


# ---------------------------------------------------------------------------
# Match resolution
# ---------------------------------------------------------------------------


def resolve_match(players: Sequence[Player], winning_side: TeamSide) -> list[Player]:
    """Rotate the roster after a game.

    Winners keep their side and sequence numbers. With at least six players
    waiting, the whole losing team goes to the back of the queue and the
    first six waiting players take its place. With fewer, every waiting
    player comes in and the most senior losers fill the remaining spots,
    re-numbered so they are the first to leave next time; the other losers
    go to the back of the queue.

    Args:
        players: Current roster
        winning_side: TeamSide.A or TeamSide.B

    Returns:
        Winners, then the new losing-side team, then the waiting line

    Raises:
        ValueError: If winning_side is not a playing side
    """
    winning_side = TeamSide(winning_side)
    loser_side = winning_side.opponent

    next_seq = max_sequence(players)

    def requeue(player: Player, team: TeamSide) -> Player:
        nonlocal next_seq
        next_seq += 1
        return replace(player, team=team, sequence_number=next_seq)

    winners = [p for p in players if p.team == winning_side]
    losers = players_on(players, loser_side)
    waiting = players_on(players, TeamSide.WAITING)

    if len(waiting) >= TEAM_SIZE:
        moved_losers = [requeue(p, TeamSide.WAITING) for p in losers]
        entering = [replace(p, team=loser_side) for p in waiting[:TEAM_SIZE]]

        next_loser_side = entering
        next_waiting = waiting[TEAM_SIZE:] + moved_losers
    else:
        spots_to_keep = TEAM_SIZE - len(waiting)
        staying = [requeue(p, loser_side) for p in losers[:spots_to_keep]]
        moved_losers = [requeue(p, TeamSide.WAITING) for p in losers[spots_to_keep:]]
        entering = [replace(p, team=loser_side) for p in waiting]

        next_loser_side = entering + staying
        next_waiting = moved_losers

    return winners + next_loser_side + next_waiting


# ---------------------------------------------------------------------------
# Removal / edit
# ---------------------------------------------------------------------------


def remove_and_refill(players: Sequence[Player], player_id: str) -> list[Player]:
    """Remove a player, promoting the first waiting player into a vacated team.

    An unknown id returns the roster unchanged.
    """
    removed = find_player(players, player_id)
    if removed is None:
        return list(players)

    remaining = [p for p in players if p.id != player_id]

    if removed.team == TeamSide.WAITING:
        return remaining

    waiting = players_on(remaining, TeamSide.WAITING)
    if not waiting:
        # Team is left short-handed
        return remaining

    substitute = waiting[0]
    return [
        replace(p, team=removed.team) if p.id == substitute.id else p
        for p in remaining
    ]


def update_player(
    players: Sequence[Player],
    player_id: str,
    name: str,
    gender: Gender,
) -> list[Player]:
    """Rename a player or change gender. No rotation side effects."""
    return [
        replace(p, name=name.strip().upper(), gender=gender) if p.id == player_id else p
        for p in players
    ]
