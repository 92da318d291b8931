"""Round resolution: match winners and the next round's match-ups.

A match moves through PENDING -> SCORED -> TEAMS_LOADED -> COMPLETE as the
data service answers. Any missing answer raises DataGapError; nothing is
retried.
"""

import asyncio
import logging
from typing import Callable, Optional

from .calculator import calculate_winning_team, create_round_matches, get_team_ids
from .exceptions import DataGapError
from .models import Match, MatchState, Round, RoundAdvance, Team
from .schemas import MatchUp
from .service import TournamentService

logger = logging.getLogger('knockout.resolver')

MatchCallback = Callable[[Match], None]


async def fetch_teams(service: TournamentService, match: Match, tournament_id: int) -> list[Team]:
    """
    Fetch the details of every team in a match.

    Teams are fetched one at a time in team_ids order.

    Raises:
        DataGapError: If any team cannot be fetched
    """
    teams = []
    for team_id in match.team_ids:
        details = await service.fetch_team(tournament_id, team_id)
        if details is None:
            raise DataGapError(
                f'No details for team {team_id}', match.round_number, match.match_id
            )
        teams.append(Team(id=team_id, name=details.name, score=details.score))
    return teams


async def resolve_match(
    service: TournamentService,
    match: Match,
    match_up: MatchUp,
    tournament_id: int,
) -> Team:
    """
    Resolve a single match and return its winning team.

    Args:
        service: Data service client
        match: Match to fill in (mutated as data arrives)
        match_up: Match index and team ids for this match
        tournament_id: Tournament id from the setup response

    Returns:
        The winning Team

    Raises:
        DataGapError: If the score, a team, or the winning score is missing,
            or no team has the winning score
    """
    match.match_id = match_up.match
    match.team_ids = list(match_up.team_ids)

    match_score = await service.fetch_match(tournament_id, match.round_number, match.match_id)
    if match_score is None:
        raise DataGapError('No match score', match.round_number, match.match_id)
    match.score = match_score.score
    match.state = MatchState.SCORED

    match.teams = await fetch_teams(service, match, tournament_id)
    match.state = MatchState.TEAMS_LOADED

    team_scores = [team.score for team in match.teams]
    winner = await service.fetch_winner(tournament_id, team_scores, match.score)
    if winner is None:
        raise DataGapError('No winning score', match.round_number, match.match_id)
    match.winning_score = winner.score

    winning_team = calculate_winning_team(match.winning_score, match.teams)
    if winning_team is None:
        raise DataGapError(
            f'No team has the winning score {match.winning_score}',
            match.round_number,
            match.match_id,
        )

    match.winning_team = winning_team
    match.state = MatchState.COMPLETE
    logger.debug(
        f'Round {match.round_number} match {match.match_id}: '
        f'team {winning_team.id} wins with {match.winning_score}'
    )
    return winning_team


async def resolve_round(
    service: TournamentService,
    round_: Round,
    match_ups: list[MatchUp],
    tournament_id: int,
    parallel: bool = False,
    on_match_complete: Optional[MatchCallback] = None,
) -> list[Team]:
    """
    Resolve every match of a round.

    Matches are resolved in match order. With parallel=True they run
    concurrently but winners are still returned in match order, and a
    failing match cancels the others before the error is raised.

    Args:
        service: Data service client
        round_: Round whose matches are filled in
        match_ups: One match-up per match, in match order
        tournament_id: Tournament id from the setup response
        parallel: Resolve the round's matches concurrently
        on_match_complete: Called with each match once its winner is known

    Returns:
        Winning teams ordered by match index

    Raises:
        DataGapError: If the match-ups don't fit the round or a match
            cannot be resolved
    """
    if len(match_ups) != len(round_.matches):
        raise DataGapError(
            f'Expected {len(round_.matches)} match-ups, got {len(match_ups)}', round_.number
        )

    async def run(match: Match, match_up: MatchUp) -> Team:
        winning_team = await resolve_match(service, match, match_up, tournament_id)
        if on_match_complete:
            on_match_complete(match)
        return winning_team

    pairs = list(zip(round_.matches, match_ups))
    if parallel:
        tasks = [asyncio.ensure_future(run(m, mu)) for m, mu in pairs]
        try:
            winning_teams = list(await asyncio.gather(*tasks))
        except Exception:
            # No match may keep running once the round has failed
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
    else:
        winning_teams = []
        for match, match_up in pairs:
            winning_teams.append(await run(match, match_up))

    round_.winning_teams = winning_teams
    return winning_teams


def advance_round(winning_teams: list[Team], teams_per_match: int) -> RoundAdvance:
    """
    Turn a round's winners into the champion or the next round's match-ups.

    Args:
        winning_teams: Winners ordered by match index
        teams_per_match: Teams competing in each match

    Returns:
        RoundAdvance with the champion set when a single winner remains,
        otherwise the next round's match-ups
    """
    if len(winning_teams) == 1:
        return RoundAdvance(champion=winning_teams[0])

    winning_team_ids = get_team_ids(winning_teams)
    return RoundAdvance(next_matches=create_round_matches(winning_team_ids, teams_per_match))
