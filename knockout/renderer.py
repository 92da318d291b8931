"""Console rendering and JSON summaries of a tournament run."""

from dataclasses import asdict
from typing import Optional

from .models import Match, Round, Team
from .tournament import Tournament


class ConsoleRenderer:
    """Prints match, round and champion lines as a tournament progresses."""

    def __init__(self, verbose: bool = True):
        self.verbose = verbose

    def attach(self, tournament: Tournament) -> None:
        """Subscribe to the tournament's completion events."""
        tournament.on_match_complete(self.match_complete)
        tournament.on_round_complete(self.round_complete)
        tournament.on_tournament_complete(self.tournament_complete)

    def match_complete(self, match: Match) -> None:
        if not self.verbose:
            return
        teams = ', '.join(f'{t.name} ({t.score})' for t in match.teams)
        winner = match.winning_team
        print(f'  Match {match.match_id}: {teams} -> {winner.name} ✓')

    def round_complete(self, round_: Round) -> None:
        if not self.verbose:
            return
        print(f'\nRound {round_.number + 1} complete: {len(round_.winning_teams)} team(s) advance')
        print('=' * 60)

    def tournament_complete(self, champion: Optional[Team]) -> None:
        if champion is None:
            print('❌ The tournament ended without a winner.')
        else:
            print(f'🏆 {champion.name} is the Winner.')


def summarize_tournament(tournament: Tournament) -> dict:
    """
    Build a JSON-serializable summary of a tournament run.

    Returns:
        Dict with tournament id, state, plan, rounds, champion and error
    """
    plan = tournament.plan
    return {
        'tournament_id': tournament.tournament_id,
        'state': tournament.state.value,
        'plan': {
            'teams_per_match': plan.teams_per_match,
            'number_of_teams': plan.number_of_teams,
            'number_of_rounds': plan.number_of_rounds,
            'games_per_round': list(plan.games_per_round),
        } if plan else None,
        'rounds': [
            {
                'round': round_.number,
                'matches': [
                    {
                        'match': match.match_id,
                        'state': match.state.value,
                        'team_ids': match.team_ids,
                        'score': match.score,
                        'winning_score': match.winning_score,
                        'winning_team_id': match.winning_team.id if match.winning_team else None,
                    }
                    for match in round_.matches
                ],
            }
            for round_ in tournament.rounds
        ],
        'champion': asdict(tournament.champion) if tournament.champion else None,
        'error': str(tournament.last_error) if tournament.last_error else None,
    }
