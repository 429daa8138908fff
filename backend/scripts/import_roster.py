#!/usr/bin/env python3
"""Import a roster JSON export into the DuckDB roster store.

Accepts the list saved by the browser app (for example a copy of the
localStorage value). Records without a sequenceNumber get their 1-based
position; records that cannot be decoded are skipped.

Usage:
    uv run python scripts/import_roster.py roster.json [database_path]

Default database_path: data/roster.duckdb (relative to repo root)
"""
import json
import sys
from pathlib import Path

from nosso_volei.repositories.roster_repository import RosterRepository
from nosso_volei.services.rotation_engine import players_on
from nosso_volei.models.player import TeamSide
from nosso_volei.utils.roster_codec import decode_roster


def import_roster(json_path: Path, database_path: Path) -> int:
    """Load json_path into the store at database_path.

    Returns:
        Number of players imported
    """
    with open(json_path, encoding="utf-8") as f:
        payload = json.load(f)

    if not isinstance(payload, list):
        print(f"Warning: {json_path} does not contain a list, nothing imported")
        return 0

    players = decode_roster(payload)
    skipped = len(payload) - len(players)

    repo = RosterRepository(database_path)
    repo.save(players)

    for side in TeamSide:
        print(f"  {side.value}: {len(players_on(players, side))} players")
    if skipped:
        print(f"  ✗ skipped {skipped} malformed records")

    return len(players)


def main():
    if len(sys.argv) < 2:
        print("Usage: import_roster.py roster.json [database_path]")
        sys.exit(1)

    json_path = Path(sys.argv[1])
    if len(sys.argv) > 2:
        database_path = Path(sys.argv[2])
    else:
        # backend/scripts -> backend -> repo root
        repo_root = Path(__file__).parent.parent.parent
        database_path = repo_root / "data" / "roster.duckdb"

    if not json_path.exists():
        print(f"Error: File not found: {json_path}")
        sys.exit(1)

    count = import_roster(json_path, database_path)
    print(f"\nDone! Imported {count} players into {database_path}")


if __name__ == "__main__":
    main()
