"""Shared fixtures: an in-memory stand-in for the tournament data service."""

import asyncio

import pytest

from knockout.schemas import MatchScore, MatchUp, TeamDetails, TournamentSetup, WinningScore


class FakeTournamentService:
    """
    In-memory data service.

    Team ids run 1..number_of_teams, each team's score equals its id unless
    overridden, and the winning score is the highest team score, so the
    highest id in a match wins.
    """

    def __init__(self, tournament_id=7):
        self.tournament_id = tournament_id
        self.team_scores = {}
        self.missing_teams = set()
        self.missing_match_scores = set()  # {(round, match)}
        self.missing_winners = False
        self.missing_setup = False
        self.winning_score_override = None
        self.team_delays = {}  # {team_id: seconds}
        self.calls = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return None

    async def fetch_tournament(self, teams_per_match, number_of_teams):
        self.calls.append(('tournament', teams_per_match, number_of_teams))
        if self.missing_setup:
            return None
        ids = list(range(1, number_of_teams + 1))
        match_ups = [
            MatchUp(match=i, team_ids=ids[i * teams_per_match:(i + 1) * teams_per_match])
            for i in range(number_of_teams // teams_per_match)
        ]
        return TournamentSetup(tournament_id=self.tournament_id, match_ups=match_ups)

    async def fetch_match(self, tournament_id, round, match):
        self.calls.append(('match', round, match))
        if (round, match) in self.missing_match_scores:
            return None
        return MatchScore(score=round * 100 + match)

    async def fetch_team(self, tournament_id, team_id):
        self.calls.append(('team', team_id))
        if team_id in self.team_delays:
            await asyncio.sleep(self.team_delays[team_id])
        if team_id in self.missing_teams:
            return None
        return TeamDetails(
            team_id=team_id,
            name=f'Team {team_id}',
            score=self.team_scores.get(team_id, team_id),
        )

    async def fetch_winner(self, tournament_id, team_scores, match_score):
        self.calls.append(('winner', tuple(team_scores), match_score))
        if self.missing_winners:
            return None
        if self.winning_score_override is not None:
            return WinningScore(score=self.winning_score_override)
        return WinningScore(score=max(team_scores))


@pytest.fixture
def fake_service():
    """Fresh in-memory data service."""
    return FakeTournamentService()
