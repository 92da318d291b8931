"""Bracket arithmetic: rounds, games per round, match-ups and winners."""

from typing import Optional

from .models import Team, TournamentPlan
from .schemas import MatchUp


def calculate_rounds(teams_per_match: int, number_of_teams: int) -> int:
    """
    Calculate the total number of rounds.

    Args:
        teams_per_match: Teams competing in each match
        number_of_teams: Total teams in the tournament

    Returns:
        The exponent k where teams_per_match ** k == number_of_teams

    Raises:
        ValueError: If number_of_teams is not a positive power of teams_per_match
    """
    if teams_per_match < 2:
        raise ValueError(f'Teams per match must be at least 2, got {teams_per_match}')

    rounds = 1
    while teams_per_match ** rounds < number_of_teams:
        rounds += 1

    if teams_per_match ** rounds != number_of_teams:
        raise ValueError(f'{number_of_teams} is not a power of {teams_per_match}')
    return rounds


def calculate_games_per_round(
    teams_per_match: int, number_of_teams: int, number_of_rounds: int
) -> list[int]:
    """
    Calculate the number of games played in each round.

    The first round has number_of_teams / teams_per_match games and every
    following round divides the previous one by teams_per_match.
    """
    games_per_round = []
    games = number_of_teams // teams_per_match
    for _ in range(number_of_rounds):
        games_per_round.append(games)
        games //= teams_per_match
    return games_per_round


def build_plan(teams_per_match: int, number_of_teams: int) -> TournamentPlan:
    """Size the bracket for a validated pair of entries."""
    number_of_rounds = calculate_rounds(teams_per_match, number_of_teams)
    games_per_round = calculate_games_per_round(teams_per_match, number_of_teams, number_of_rounds)
    return TournamentPlan(
        teams_per_match=teams_per_match,
        number_of_teams=number_of_teams,
        number_of_rounds=number_of_rounds,
        games_per_round=tuple(games_per_round),
    )


def get_team_ids(teams: list[Team]) -> list[int]:
    """Retrieve the ids from a list of teams, preserving order."""
    return [team.id for team in teams]


def create_round_matches(winning_team_ids: list[int], teams_per_match: int) -> list[MatchUp]:
    """
    Build the next round's match-ups from the previous round's winners.

    Ids are taken in order in consecutive, non-overlapping chunks of
    teams_per_match; the chunk position becomes the match index.

    Args:
        winning_team_ids: Winner ids ordered by the previous round's match index
        teams_per_match: Teams competing in each match

    Returns:
        List of MatchUp objects
    """
    number_of_games = len(winning_team_ids) // teams_per_match
    matches = []
    for match_index in range(number_of_games):
        start = match_index * teams_per_match
        matches.append(
            MatchUp(match=match_index, team_ids=winning_team_ids[start:start + teams_per_match])
        )
    return matches


def calculate_winning_team(winning_score: Optional[int], teams: list[Team]) -> Optional[Team]:
    """
    Pick the winning team of a match.

    Among the teams whose score equals the winning score, the team with the
    lowest id wins.

    Args:
        winning_score: Match-deciding score from the data service
        teams: Teams that played the match

    Returns:
        The winning Team, or None if no team has the winning score
    """
    if winning_score is None:
        return None
    teams_with_winning_score = [team for team in teams if team.score == winning_score]
    if not teams_with_winning_score:
        return None
    return min(teams_with_winning_score, key=lambda team: team.id)
