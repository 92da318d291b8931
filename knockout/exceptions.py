"""Exceptions raised while planning and running a tournament."""

from typing import Optional


class KnockoutError(Exception):
    """Base class for knockout errors."""


class BracketValidationError(KnockoutError):
    """The teams per match / number of teams entries are not a valid bracket."""

    def __init__(self, message: str, result=None):
        super().__init__(message)
        self.message = message
        self.result = result


class DataGapError(KnockoutError):
    """The data service gave no usable value for a setup, score, team or winner."""

    def __init__(
        self,
        message: str,
        round_number: Optional[int] = None,
        match_id: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.round_number = round_number
        self.match_id = match_id

    def __str__(self) -> str:
        if self.round_number is None:
            return self.message
        if self.match_id is None:
            return f'Round {self.round_number}: {self.message}'
        return f'Round {self.round_number}, match {self.match_id}: {self.message}'


class TournamentStateError(KnockoutError):
    """A tournament operation was requested in a state that does not allow it."""
