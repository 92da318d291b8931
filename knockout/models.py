"""Data models for the knockout bracket runner."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .schemas import MatchUp


class MatchState(str, Enum):
    PENDING = 'pending'
    SCORED = 'scored'
    TEAMS_LOADED = 'teams-loaded'
    COMPLETE = 'complete'


class TournamentState(str, Enum):
    IDLE = 'idle'
    RUNNING = 'running'
    COMPLETE = 'complete'


@dataclass
class ValidationResult:
    """Outcome of validating the bracket entries."""
    valid: bool = True
    message: str = ''


@dataclass(frozen=True)
class TournamentPlan:
    """Bracket dimensions derived once per tournament."""
    teams_per_match: int
    number_of_teams: int
    number_of_rounds: int
    games_per_round: Tuple[int, ...]


@dataclass
class Team:
    """A competitor, identified by its service id."""
    id: int
    name: Optional[str] = None
    score: Optional[int] = None


@dataclass
class Match:
    """A single match within a round."""
    round_number: int
    match_id: Optional[int] = None
    team_ids: List[int] = field(default_factory=list)
    teams: List[Team] = field(default_factory=list)
    score: Optional[int] = None
    winning_score: Optional[int] = None
    winning_team: Optional[Team] = None
    state: MatchState = MatchState.PENDING

    @property
    def is_complete(self) -> bool:
        return self.state is MatchState.COMPLETE


@dataclass
class Round:
    """One elimination stage; owns its matches."""
    number: int
    matches: List[Match] = field(default_factory=list)
    winning_teams: List[Team] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return bool(self.matches) and all(m.is_complete for m in self.matches)


@dataclass
class RoundAdvance:
    """Either the tournament champion or the next round's match-ups."""
    champion: Optional[Team] = None
    next_matches: List[MatchUp] = field(default_factory=list)
