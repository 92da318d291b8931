"""Async client for the tournament data service."""

import logging
from typing import Optional

import httpx
from pydantic import BaseModel, ValidationError

from .constants import MATCH_ENDPOINT, TEAM_ENDPOINT, TOURNAMENT_ENDPOINT, WINNER_ENDPOINT
from .schemas import MatchScore, TeamDetails, TournamentSetup, WinningScore

logger = logging.getLogger('knockout.service')


class TournamentService:
    """
    Fetches tournament, match, team and winner data over HTTP.

    Every fetch returns the validated response model, or None when the
    service gave no usable value (transport error, non-2xx status, body that
    is not JSON or does not match the schema).

    Example:
        async with TournamentService('http://localhost:8765') as service:
            setup = await service.fetch_tournament(2, 8)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    async def __aenter__(self) -> 'TournamentService':
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this service created it."""
        if self._owns_client:
            await self._client.aclose()

    async def fetch_tournament(
        self, teams_per_match: int, number_of_teams: int
    ) -> Optional[TournamentSetup]:
        """Create a tournament and get its id and first round match-ups."""
        data = {'teamsPerMatch': teams_per_match, 'numberOfTeams': number_of_teams}
        return await self._request('POST', TOURNAMENT_ENDPOINT, TournamentSetup, data=data)

    async def fetch_match(self, tournament_id: int, round: int, match: int) -> Optional[MatchScore]:
        """Get the score of a match."""
        params = {'tournamentId': tournament_id, 'round': round, 'match': match}
        return await self._request('GET', MATCH_ENDPOINT, MatchScore, params=params)

    async def fetch_team(self, tournament_id: int, team_id: int) -> Optional[TeamDetails]:
        """Get a team's name and score."""
        params = {'tournamentId': tournament_id, 'teamId': team_id}
        return await self._request('GET', TEAM_ENDPOINT, TeamDetails, params=params)

    async def fetch_winner(
        self, tournament_id: int, team_scores: list[int], match_score: int
    ) -> Optional[WinningScore]:
        """Get the winning score given every team score and the match score."""
        # teamScores is sent once per team: ?teamScores=1&teamScores=2
        params = {
            'tournamentId': tournament_id,
            'matchScore': match_score,
            'teamScores': list(team_scores),
        }
        return await self._request('GET', WINNER_ENDPOINT, WinningScore, params=params)

    async def _request(
        self, method: str, endpoint: str, schema: type[BaseModel], **kwargs
    ) -> Optional[BaseModel]:
        try:
            response = await self._client.request(method, endpoint, **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f'{method} {endpoint} failed: {e}')
            return None

        try:
            payload = response.json()
        except ValueError:
            logger.warning(f'{method} {endpoint} returned a body that is not JSON')
            return None

        if payload is None:
            logger.warning(f'{method} {endpoint} returned an empty body')
            return None

        try:
            return schema.model_validate(payload)
        except ValidationError as e:
            logger.warning(f'{method} {endpoint} returned an invalid {schema.__name__}: {e}')
            return None
