"""REST endpoints for the roster."""

from typing import Literal

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, field_validator

from nosso_volei.models.player import Gender, TeamSide
from nosso_volei.services.roster_service import RosterService
from nosso_volei.utils.gender_normalizer import normalize_gender_strict
from nosso_volei.utils.roster_codec import player_to_record

router = APIRouter(prefix="/api/roster", tags=["roster"])


class PlayerRequest(BaseModel):
    name: str
    gender: Gender

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name must not be blank")
        return value.upper()

    @field_validator("gender", mode="before")
    @classmethod
    def parse_gender(cls, value):
        return normalize_gender_strict(value)


class MatchResultRequest(BaseModel):
    winner: Literal["A", "B"]


def _get_service(request: Request) -> RosterService:
    return request.app.state.roster_service


@router.get("")
async def get_roster(request: Request):
    """Roster grouped into team A, team B and the waiting line."""
    return _get_service(request).team_view().to_dict()


@router.post("/players", status_code=201)
async def add_player(request: Request, body: PlayerRequest):
    """Add a player at the end of the queue."""
    player = _get_service(request).add_player(body.name, body.gender)
    return player_to_record(player)


@router.post("/players/random", status_code=201)
async def add_random_player(request: Request):
    """Add a test player with a random name and gender."""
    player = _get_service(request).add_random_player()
    return player_to_record(player)


@router.patch("/players/{player_id}")
async def update_player(request: Request, player_id: str, body: PlayerRequest):
    """Rename a player or change gender."""
    player = _get_service(request).update_player(player_id, body.name, body.gender)
    if player is None:
        raise HTTPException(status_code=404, detail="Player not found")
    return player_to_record(player)


@router.delete("/players/{player_id}")
async def remove_player(request: Request, player_id: str):
    """Remove a player, pulling the next waiting player into their team."""
    service = _get_service(request)
    removed = service.remove_player(player_id)
    if removed is None:
        raise HTTPException(status_code=404, detail="Player not found")
    response = service.team_view().to_dict()
    response["removed"] = player_to_record(removed)
    return response


@router.post("/balance")
async def balance_teams(request: Request):
    """Re-draw both teams from the earliest arrivals, balanced by gender."""
    try:
        view = _get_service(request).balance()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return view.to_dict()


@router.post("/matches")
async def record_match(request: Request, body: MatchResultRequest):
    """Record the winner of a game and rotate the roster."""
    try:
        view = _get_service(request).record_win(TeamSide(body.winner))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return view.to_dict()


@router.delete("")
async def reset_roster(request: Request):
    """Delete every player."""
    service = _get_service(request)
    service.reset()
    return service.team_view().to_dict()
