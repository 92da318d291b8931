"""Pydantic schemas for data service responses and configuration."""

from pydantic import BaseModel, Field, field_validator

from .constants import (
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_SERVICE_URL,
    MAX_TEAMS_PER_TOURNAMENT,
    MIN_ENTRY_VALUE,
)


class MatchUp(BaseModel):
    """A match index and the ids of the teams playing it."""

    match: int = Field(..., ge=0)
    team_ids: list[int] = Field(..., alias='teamIds', min_length=1)

    class Config:
        extra = 'ignore'
        populate_by_name = True


class TournamentSetup(BaseModel):
    """Response of the tournament endpoint."""

    tournament_id: int = Field(..., alias='tournamentId')
    match_ups: list[MatchUp] = Field(..., alias='matchUps')

    class Config:
        extra = 'ignore'
        populate_by_name = True


class MatchScore(BaseModel):
    """Response of the match endpoint."""

    score: int

    class Config:
        extra = 'ignore'


class TeamDetails(BaseModel):
    """Response of the team endpoint."""

    team_id: int | None = Field(None, alias='teamId')
    name: str = Field(..., min_length=1)
    score: int

    class Config:
        extra = 'ignore'
        populate_by_name = True


class WinningScore(BaseModel):
    """Response of the winner endpoint."""

    score: int

    class Config:
        extra = 'ignore'


class TournamentConfig(BaseModel):
    """Tournament runner configuration settings."""

    service_url: str = Field(default=DEFAULT_SERVICE_URL, min_length=1)
    max_teams_per_tournament: int = Field(default=MAX_TEAMS_PER_TOURNAMENT, ge=MIN_ENTRY_VALUE)
    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)
    parallel_matches: bool = False

    @field_validator('service_url')
    @classmethod
    def validate_service_url(cls, v):
        """Ensure the service URL is absolute."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError(f'Service URL must start with http:// or https://, got {v}')
        return v.rstrip('/')

    class Config:
        extra = 'forbid'
