"""DuckDB-based persistence for the roster."""

import logging
from pathlib import Path

import duckdb

from nosso_volei.models.player import Player
from nosso_volei.utils.roster_codec import dumps_roster, loads_roster

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "nosso_volei_data_v2"
LEGACY_STORAGE_KEY = "volleyMix_players"


class RosterRepository:
    """Key/value store holding the whole roster as one JSON payload per key.

    The roster is always written whole, so a save replaces the previous
    state in a single statement.
    """

    def __init__(
        self,
        database_path: str | Path,
        storage_key: str = DEFAULT_STORAGE_KEY,
        legacy_storage_key: str | None = LEGACY_STORAGE_KEY,
    ):
        """Initialize with path to the DuckDB file, creating it if needed.

        Args:
            database_path: Path to the .duckdb file
            storage_key: Key the current roster is saved under
            legacy_storage_key: Older key read when the current one is absent
        """
        self._db_path = Path(database_path)
        self.storage_key = storage_key
        self.legacy_storage_key = legacy_storage_key

        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        with duckdb.connect(str(self._db_path)) as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS roster_store (
                    key VARCHAR PRIMARY KEY,
                    payload VARCHAR NOT NULL,
                    updated_at TIMESTAMP DEFAULT current_timestamp
                )
                """
            )
        logger.info(f"RosterRepository: Using {self._db_path}")

    def _get_raw(self, key: str) -> str | None:
        with duckdb.connect(str(self._db_path)) as conn:
            row = conn.execute(
                "SELECT payload FROM roster_store WHERE key = ?", [key]
            ).fetchone()
        return row[0] if row else None

    def _put_raw(self, key: str, payload: str) -> None:
        with duckdb.connect(str(self._db_path)) as conn:
            conn.execute(
                """
                INSERT INTO roster_store (key, payload, updated_at)
                VALUES (?, ?, current_timestamp)
                ON CONFLICT (key) DO UPDATE SET
                    payload = excluded.payload,
                    updated_at = excluded.updated_at
                """,
                [key, payload],
            )

    def _delete(self, *keys: str) -> None:
        with duckdb.connect(str(self._db_path)) as conn:
            for key in keys:
                conn.execute("DELETE FROM roster_store WHERE key = ?", [key])

    def load(self) -> list[Player]:
        """Load the saved roster.

        Falls back to the legacy key when nothing is stored under the
        current key. A corrupt payload clears both keys and yields an
        empty roster.
        """
        raw = self._get_raw(self.storage_key)
        if not raw and self.legacy_storage_key:
            raw = self._get_raw(self.legacy_storage_key)

        players = loads_roster(raw)
        if players is None:
            logger.warning("Failed to load players, clearing stored roster")
            self.clear()
            return []
        return players

    def save(self, players: list[Player]) -> None:
        """Replace the stored roster. An empty roster removes the key."""
        if players:
            self._put_raw(self.storage_key, dumps_roster(players))
        else:
            self._delete(self.storage_key)

    def clear(self) -> None:
        """Remove the roster under both the current and legacy keys."""
        keys = [self.storage_key]
        if self.legacy_storage_key:
            keys.append(self.legacy_storage_key)
        self._delete(*keys)
