"""Tournament orchestration: plan the bracket, then resolve rounds to a champion."""

import logging
from typing import Any, Callable, Optional

from .calculator import build_plan
from .config import get_max_teams_per_tournament, get_parallel_matches
from .exceptions import BracketValidationError, DataGapError, TournamentStateError
from .models import (
    Match,
    Round,
    Team,
    TournamentPlan,
    TournamentState,
    ValidationResult,
)
from .resolver import advance_round, resolve_round
from .service import TournamentService
from .validators import parse_entry, validate_entries

logger = logging.getLogger('knockout.tournament')


class Tournament:
    """
    Owns the plan, rounds and matches of one tournament run.

    State moves IDLE -> RUNNING -> COMPLETE; reset() returns to IDLE and
    discards everything from the previous run. Renderers subscribe to
    match, round and tournament completion events instead of reading the
    state while it changes.

    Example:
        async with TournamentService(get_service_url()) as service:
            tournament = Tournament(service)
            tournament.on_round_complete(lambda r: print(len(r.winning_teams)))
            champion = await tournament.start(2, 8)
    """

    def __init__(
        self,
        service: TournamentService,
        max_teams: Optional[int] = None,
        parallel_matches: Optional[bool] = None,
    ):
        self.service = service
        self.max_teams = max_teams if max_teams is not None else get_max_teams_per_tournament()
        self.parallel_matches = (
            parallel_matches if parallel_matches is not None else get_parallel_matches()
        )
        self._match_callbacks: list[Callable[[Match], Any]] = []
        self._round_callbacks: list[Callable[[Round], Any]] = []
        self._complete_callbacks: list[Callable[[Optional[Team]], Any]] = []
        self._clear()

    def _clear(self) -> None:
        self.state = TournamentState.IDLE
        self.plan: Optional[TournamentPlan] = None
        self.rounds: list[Round] = []
        self.tournament_id: Optional[int] = None
        self.current_round_matches = None
        self.champion: Optional[Team] = None
        self.last_error: Optional[DataGapError] = None

    @property
    def is_complete(self) -> bool:
        return self.state is TournamentState.COMPLETE

    def on_match_complete(self, callback: Callable[[Match], Any]) -> None:
        """Register a callback run with each match once its winner is known."""
        self._match_callbacks.append(callback)

    def on_round_complete(self, callback: Callable[[Round], Any]) -> None:
        """Register a callback run with each round once all its winners are known."""
        self._round_callbacks.append(callback)

    def on_tournament_complete(self, callback: Callable[[Optional[Team]], Any]) -> None:
        """Register a callback run with the champion (or None) when a run ends."""
        self._complete_callbacks.append(callback)

    def validate(self, teams_per_match: Any, number_of_teams: Any) -> ValidationResult:
        """Validate raw entries against this tournament's team limit."""
        return validate_entries(teams_per_match, number_of_teams, self.max_teams)

    def reset(self) -> None:
        """
        Discard the plan, rounds, matches and champion of the previous run.

        Raises:
            TournamentStateError: If a run is in progress
        """
        if self.state is TournamentState.RUNNING:
            raise TournamentStateError('Cannot reset a tournament while it is running')
        self._clear()
        logger.debug('Tournament reset')

    async def start(self, teams_per_match: Any, number_of_teams: Any) -> Optional[Team]:
        """
        Validate the entries and run the tournament to completion.

        A completed previous run is reset first.

        Args:
            teams_per_match: Teams competing in each match (raw entry)
            number_of_teams: Total teams in the tournament (raw entry)

        Returns:
            The champion Team, or None if the data service left a gap

        Raises:
            BracketValidationError: If the entries are invalid
            TournamentStateError: If a run is already in progress
        """
        if self.state is TournamentState.RUNNING:
            raise TournamentStateError('A tournament is already running')
        if self.is_complete:
            self.reset()

        result = self.validate(teams_per_match, number_of_teams)
        if not result.valid:
            logger.info(f'Invalid entries: {result.message}')
            raise BracketValidationError(result.message, result)

        self.plan = build_plan(parse_entry(teams_per_match), parse_entry(number_of_teams))
        self.rounds = self.generate_rounds(self.plan)
        self.state = TournamentState.RUNNING
        logger.info(
            f'Starting tournament: {self.plan.number_of_teams} teams, '
            f'{self.plan.teams_per_match} per match, {self.plan.number_of_rounds} rounds'
        )

        try:
            self.champion = await self.run_tournament()
        except DataGapError as e:
            logger.warning(f'Tournament stopped without a champion: {e}')
            self.last_error = e
            self.champion = None
        finally:
            self.state = TournamentState.COMPLETE

        for callback in self._complete_callbacks:
            callback(self.champion)
        return self.champion

    @staticmethod
    def generate_rounds(plan: TournamentPlan) -> list[Round]:
        """Create every round with empty matches, sized by the plan."""
        rounds = []
        for round_number, number_of_games in enumerate(plan.games_per_round):
            matches = [Match(round_number=round_number) for _ in range(number_of_games)]
            rounds.append(Round(number=round_number, matches=matches))
        return rounds

    async def run_tournament(self) -> Team:
        """Fetch the tournament setup and process the rounds."""
        setup = await self.service.fetch_tournament(
            self.plan.teams_per_match, self.plan.number_of_teams
        )
        if setup is None:
            raise DataGapError('No tournament setup')

        self.tournament_id = setup.tournament_id
        self.current_round_matches = setup.match_ups
        logger.debug(f'Tournament {self.tournament_id} created')
        return await self.process_rounds()

    async def process_rounds(self) -> Team:
        """Resolve rounds in order until a single winner remains."""
        for round_ in self.rounds:
            winning_teams = await resolve_round(
                self.service,
                round_,
                self.current_round_matches,
                self.tournament_id,
                parallel=self.parallel_matches,
                on_match_complete=self._match_complete,
            )
            for callback in self._round_callbacks:
                callback(round_)

            advance = advance_round(winning_teams, self.plan.teams_per_match)
            if advance.champion is not None:
                logger.info(f'Team {advance.champion.id} ({advance.champion.name}) is the winner')
                return advance.champion
            self.current_round_matches = advance.next_matches

        raise DataGapError('Rounds ran out before a single winner remained')

    def _match_complete(self, match: Match) -> None:
        for callback in self._match_callbacks:
            callback(match)
