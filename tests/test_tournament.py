"""Integration tests for running a whole tournament."""

import asyncio

import pytest

from knockout.constants import NOT_A_POWER_MESSAGE
from knockout.exceptions import BracketValidationError, DataGapError, TournamentStateError
from knockout.models import TournamentState
from knockout.renderer import ConsoleRenderer, summarize_tournament
from knockout.tournament import Tournament


@pytest.fixture
def tournament(fake_service):
    """Tournament against the in-memory service with a 100 team limit."""
    return Tournament(fake_service, max_teams=100, parallel_matches=False)


class TestTournamentRun:
    """Tests for a full run from entries to champion."""

    @pytest.mark.asyncio
    async def test_four_teams_in_pairs(self, tournament, fake_service):
        """Test 2 per match, 4 teams: two matches then a final."""
        champion = await tournament.start(2, 4)

        assert tournament.plan.number_of_rounds == 2
        assert tournament.plan.games_per_round == (2, 1)
        assert [len(r.matches) for r in tournament.rounds] == [2, 1]
        assert [m.team_ids for m in tournament.rounds[0].matches] == [[1, 2], [3, 4]]
        assert tournament.rounds[1].matches[0].team_ids == [2, 4]
        assert champion.id == 4
        assert champion.name == 'Team 4'
        assert tournament.champion is champion
        assert tournament.tournament_id == 7
        assert tournament.state is TournamentState.COMPLETE
        assert fake_service.calls[0] == ('tournament', 2, 4)

    @pytest.mark.asyncio
    @pytest.mark.parametrize('parallel', [False, True])
    async def test_three_per_match(self, fake_service, parallel):
        """Test 27 teams in threes over three rounds."""
        tournament = Tournament(fake_service, max_teams=100, parallel_matches=parallel)
        champion = await tournament.start('3', '27')

        assert tournament.plan.games_per_round == (9, 3, 1)
        assert [t.id for t in tournament.rounds[0].winning_teams] == [3, 6, 9, 12, 15, 18, 21, 24, 27]
        assert tournament.rounds[1].matches[0].team_ids == [3, 6, 9]
        assert champion.id == 27

    @pytest.mark.asyncio
    async def test_events(self, tournament):
        """Test match, round and tournament events fire in order."""
        events = []
        tournament.on_match_complete(lambda m: events.append(('match', m.round_number, m.match_id)))
        tournament.on_round_complete(lambda r: events.append(('round', r.number)))
        tournament.on_tournament_complete(lambda c: events.append(('champion', c.id)))

        await tournament.start(2, 4)

        assert events == [
            ('match', 0, 0),
            ('match', 0, 1),
            ('round', 0),
            ('match', 1, 0),
            ('round', 1),
            ('champion', 4),
        ]


class TestTournamentValidation:
    """Tests for entries rejected before the run starts."""

    @pytest.mark.asyncio
    async def test_not_a_power(self, tournament, fake_service):
        """Test 3 per match with 10 teams is rejected with the power message."""
        with pytest.raises(BracketValidationError) as exc_info:
            await tournament.start(3, 10)

        assert exc_info.value.message == NOT_A_POWER_MESSAGE
        assert not exc_info.value.result.valid
        assert tournament.state is TournamentState.IDLE
        assert tournament.plan is None
        assert fake_service.calls == []

    @pytest.mark.asyncio
    async def test_exceeds_maximum(self, tournament):
        """Test the tournament's team limit applies."""
        with pytest.raises(BracketValidationError, match='maximum'):
            await tournament.start(2, 128)

    def test_validate_without_starting(self, tournament):
        """Test validate() reports without changing state."""
        result = tournament.validate('', 4)
        assert result.message == 'Please enter teams'
        assert tournament.state is TournamentState.IDLE


class TestDataGaps:
    """Tests for runs the data service cannot complete."""

    @pytest.mark.asyncio
    async def test_missing_setup(self, tournament, fake_service):
        """Test no setup ends the run without a champion."""
        fake_service.missing_setup = True
        champion = await tournament.start(2, 4)

        assert champion is None
        assert tournament.state is TournamentState.COMPLETE
        assert isinstance(tournament.last_error, DataGapError)

    @pytest.mark.asyncio
    async def test_missing_score_in_final(self, tournament, fake_service):
        """Test a gap in the final keeps earlier rounds' results."""
        fake_service.missing_match_scores = {(1, 0)}
        champion = await tournament.start(2, 4)

        assert champion is None
        assert tournament.rounds[0].is_complete
        assert not tournament.rounds[1].is_complete
        assert tournament.last_error.round_number == 1
        assert tournament.last_error.match_id == 0

    @pytest.mark.asyncio
    async def test_completion_event_on_gap(self, tournament, fake_service):
        """Test renderers learn that the run ended without a champion."""
        fake_service.missing_teams = {3}
        results = []
        tournament.on_tournament_complete(results.append)

        await tournament.start(2, 4)

        assert results == [None]

    @pytest.mark.asyncio
    async def test_parallel_gap_ends_run(self, fake_service):
        """Test no match finishes after a concurrent run has ended on a gap."""
        fake_service.missing_match_scores = {(0, 0)}
        fake_service.team_delays = {3: 0.05}
        tournament = Tournament(fake_service, max_teams=100, parallel_matches=True)
        events = []
        tournament.on_match_complete(lambda m: events.append(('match', m.match_id)))
        tournament.on_tournament_complete(lambda c: events.append(('done', c)))

        champion = await tournament.start(2, 4)
        await asyncio.sleep(0.2)

        assert champion is None
        assert events == [('done', None)]
        assert not tournament.rounds[0].matches[1].is_complete
        assert tournament.last_error.match_id == 0


class TestReset:
    """Tests for resetting and rerunning."""

    @pytest.mark.asyncio
    async def test_reset_clears_state(self, tournament):
        """Test reset discards plan, rounds and champion."""
        await tournament.start(2, 8)
        tournament.reset()

        assert tournament.state is TournamentState.IDLE
        assert tournament.plan is None
        assert tournament.rounds == []
        assert tournament.tournament_id is None
        assert tournament.champion is None
        assert tournament.last_error is None

    @pytest.mark.asyncio
    async def test_rerun_reproduces_plan(self, tournament, fake_service):
        """Test the same entries after reset give an identical plan."""
        await tournament.start(2, 8)
        first_plan = tournament.plan

        tournament.reset()
        fake_service.team_scores = {1: 50}
        champion = await tournament.start(2, 8)

        assert tournament.plan == first_plan
        assert champion.id == 1

    @pytest.mark.asyncio
    async def test_start_after_complete_resets(self, tournament, fake_service):
        """Test starting again after a completed run begins from scratch."""
        fake_service.missing_setup = True
        await tournament.start(2, 4)
        fake_service.missing_setup = False

        champion = await tournament.start(4, 16)

        assert champion.id == 16
        assert tournament.last_error is None
        assert len(tournament.rounds) == 2

    @pytest.mark.asyncio
    async def test_start_while_running(self, tournament):
        """Test a second start during a run is refused."""
        tournament.state = TournamentState.RUNNING
        with pytest.raises(TournamentStateError):
            await tournament.start(2, 4)
        with pytest.raises(TournamentStateError):
            tournament.reset()


class TestRendering:
    """Tests for the console renderer and JSON summary."""

    @pytest.mark.asyncio
    async def test_console_output(self, tournament, capsys):
        """Test matches, rounds and the winner are printed."""
        ConsoleRenderer().attach(tournament)
        await tournament.start(2, 4)

        out = capsys.readouterr().out
        assert 'Match 0: Team 1 (1), Team 2 (2) -> Team 2' in out
        assert 'Round 1 complete: 2 team(s) advance' in out
        assert 'Team 4 is the Winner.' in out

    @pytest.mark.asyncio
    async def test_quiet_output(self, tournament, capsys):
        """Test quiet mode only prints the result."""
        ConsoleRenderer(verbose=False).attach(tournament)
        await tournament.start(2, 4)

        out = capsys.readouterr().out
        assert 'Match' not in out
        assert 'Team 4 is the Winner.' in out

    @pytest.mark.asyncio
    async def test_summary(self, tournament):
        """Test the summary captures plan, rounds and champion."""
        await tournament.start(2, 4)
        summary = summarize_tournament(tournament)

        assert summary['tournament_id'] == 7
        assert summary['state'] == 'complete'
        assert summary['plan']['games_per_round'] == [2, 1]
        assert summary['rounds'][0]['matches'][1]['winning_team_id'] == 4
        assert summary['champion'] == {'id': 4, 'name': 'Team 4', 'score': 4}
        assert summary['error'] is None
