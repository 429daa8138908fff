"""Roster business logic service.

Owns the single authoritative roster. Every mutation runs the matching
rotation_engine function under a lock, swaps the whole roster for the
result and persists it.
"""

import logging
import random
import threading
import time
import uuid
from typing import Callable, Optional

from nosso_volei.models.player import PLAYING_SIDES, Gender, Player, TeamSide
from nosso_volei.models.team_view import TeamView
from nosso_volei.repositories.roster_repository import RosterRepository
from nosso_volei.services import rotation_engine

logger = logging.getLogger(__name__)

MIN_PLAYERS_TO_BALANCE = 2

# Names used for quick test players
MALE_TEST_NAMES = [
    "Bruno", "Carlos", "Daniel", "Eduardo", "Felipe", "Gabriel", "Henrique",
    "Igor", "João", "Lucas", "Mateus", "Pedro", "Rafael", "Thiago", "Vitor",
    "Arthur", "Bernardo", "Caio", "Davi", "Enzo",
]
FEMALE_TEST_NAMES = [
    "Amanda", "Beatriz", "Camila", "Daniela", "Fernanda", "Gabriela", "Helena",
    "Isabela", "Julia", "Larissa", "Mariana", "Natália", "Patrícia", "Rafaela",
    "Sofia", "Alice", "Bianca", "Clara", "Diana", "Elisa",
]


def _now_millis() -> int:
    return int(time.time() * 1000)


class RosterService:
    """Applies roster operations and keeps the stored copy in sync."""

    def __init__(
        self,
        repository: RosterRepository,
        rng: Optional[random.Random] = None,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
        clock: Callable[[], int] = _now_millis,
    ):
        """Initialize the service and load the saved roster.

        Args:
            repository: Storage for the roster
            rng: Random source for balancing and test players
            id_factory: Produces unique player ids
            clock: Returns the current time in epoch millis
        """
        self.repository = repository
        self.rng = rng or random.Random()
        self._id_factory = id_factory
        self._clock = clock
        self._lock = threading.Lock()
        self._players: list[Player] = repository.load()
        logger.info(f"RosterService: Loaded {len(self._players)} players")

    def _commit(self, players: list[Player]) -> None:
        """Replace the roster wholesale and persist it. Caller holds the lock."""
        self._players = players
        self.repository.save(players)

    def list_players(self) -> list[Player]:
        with self._lock:
            return list(self._players)

    def team_view(self) -> TeamView:
        """Current roster grouped by side."""
        return TeamView.from_roster(self.list_players())

    def add_player(self, name: str, gender: Gender) -> Player:
        """Add a player to the end of the queue."""
        with self._lock:
            players = rotation_engine.admit_player(
                self._players,
                player_id=self._id_factory(),
                name=name,
                gender=gender,
                created_at=self._clock(),
            )
            self._commit(players)
            new_player = players[-1]

        logger.info(
            f"Added {new_player.name} ({new_player.gender.value}) to {new_player.team.value} "
            f"with sequence {new_player.sequence_number}"
        )
        return new_player

    def add_random_player(self) -> Player:
        """Add a test player with a random name and gender."""
        gender = Gender.MALE if self.rng.random() > 0.5 else Gender.FEMALE
        names = MALE_TEST_NAMES if gender == Gender.MALE else FEMALE_TEST_NAMES
        return self.add_player(self.rng.choice(names), gender)

    def update_player(self, player_id: str, name: str, gender: Gender) -> Optional[Player]:
        """Edit name and gender. Returns None if the player does not exist."""
        with self._lock:
            if rotation_engine.find_player(self._players, player_id) is None:
                return None
            players = rotation_engine.update_player(self._players, player_id, name, gender)
            self._commit(players)
            updated = rotation_engine.find_player(players, player_id)

        logger.info(f"Updated player {player_id}: {updated.name} ({updated.gender.value})")
        return updated

    def remove_player(self, player_id: str) -> Optional[Player]:
        """Remove a player and refill the team from the waiting line.

        Returns:
            The removed player, or None if no player has that id
        """
        with self._lock:
            removed = rotation_engine.find_player(self._players, player_id)
            if removed is None:
                return None
            players = rotation_engine.remove_and_refill(self._players, player_id)
            self._commit(players)

        logger.info(f"Removed {removed.name} from {removed.team.value}")
        return removed

    def balance(self) -> TeamView:
        """Re-draw teams from the earliest arrivals.

        Raises:
            ValueError: If fewer than two players are registered
        """
        with self._lock:
            if len(self._players) < MIN_PLAYERS_TO_BALANCE:
                raise ValueError(
                    f"At least {MIN_PLAYERS_TO_BALANCE} players are needed to balance teams"
                )
            players = rotation_engine.balance_teams(self._players, self.rng)
            self._commit(players)

        view = TeamView.from_roster(players)
        logger.info(
            f"Balanced teams: A={len(view.team_a.players)} B={len(view.team_b.players)} "
            f"waiting={len(view.waiting.players)}"
        )
        return view

    def record_win(self, winning_side: TeamSide) -> TeamView:
        """Rotate the roster after a game won by winning_side.

        Raises:
            ValueError: If winning_side is not A/B, or either team is empty
        """
        winning_side = TeamSide(winning_side)
        with self._lock:
            for side in PLAYING_SIDES:
                if not any(p.team == side for p in self._players):
                    raise ValueError(f"Team {side.value} has no players")

            waiting_before = sum(1 for p in self._players if p.team == TeamSide.WAITING)
            players = rotation_engine.resolve_match(self._players, winning_side)
            self._commit(players)

        mode = "full" if waiting_before >= rotation_engine.TEAM_SIZE else "partial"
        logger.info(f"Team {winning_side.value} won, {mode} swap with {waiting_before} waiting")
        logger.debug(f"Max sequence now {rotation_engine.max_sequence(players)}")
        return TeamView.from_roster(players)

    def reset(self) -> None:
        """Delete every player."""
        with self._lock:
            self._commit([])
        logger.info("Roster reset")
