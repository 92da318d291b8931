from .models import (
    Match,
    MatchState,
    Round,
    RoundAdvance,
    Team,
    TournamentPlan,
    TournamentState,
    ValidationResult,
)
from .exceptions import (
    BracketValidationError,
    DataGapError,
    KnockoutError,
    TournamentStateError,
)
from .validators import validate_entries, parse_entry
from .calculator import (
    build_plan,
    calculate_rounds,
    calculate_games_per_round,
    calculate_winning_team,
    create_round_matches,
    get_team_ids,
)
from .schemas import MatchUp, TournamentSetup, MatchScore, TeamDetails, WinningScore
from .service import TournamentService
from .resolver import resolve_match, resolve_round, advance_round
from .tournament import Tournament
from .renderer import ConsoleRenderer, summarize_tournament

__all__ = [
    # Models
    'Match',
    'MatchState',
    'Round',
    'RoundAdvance',
    'Team',
    'TournamentPlan',
    'TournamentState',
    'ValidationResult',
    # Errors
    'BracketValidationError',
    'DataGapError',
    'KnockoutError',
    'TournamentStateError',
    # Validation and bracket arithmetic
    'validate_entries',
    'parse_entry',
    'build_plan',
    'calculate_rounds',
    'calculate_games_per_round',
    'calculate_winning_team',
    'create_round_matches',
    'get_team_ids',
    # Data service
    'MatchUp',
    'TournamentSetup',
    'MatchScore',
    'TeamDetails',
    'WinningScore',
    'TournamentService',
    # Round resolution
    'resolve_match',
    'resolve_round',
    'advance_round',
    'Tournament',
    # Rendering
    'ConsoleRenderer',
    'summarize_tournament',
]
