"""Validation of the bracket entries (teams per match, number of teams)."""

from typing import Any, Optional

from .constants import (
    EXCEEDS_MAXIMUM_MESSAGE,
    MIN_ENTRY_VALUE,
    MISSING_ENTRY_MESSAGE,
    NOT_A_POWER_MESSAGE,
    NUMBER_OF_TEAMS_FIELD,
    TEAMS_PER_MATCH_FIELD,
    TOO_SMALL_ENTRY_MESSAGE,
)
from .models import ValidationResult


def parse_entry(value: Any) -> Optional[int]:
    """
    Convert a raw entry into an integer.

    Accepts ints, integral floats and numeric strings (e.g. ' 8 ', '4.0').
    Returns None for missing, boolean, non-numeric or non-integral values.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            return int(value)
        except ValueError:
            try:
                value = float(value)
            except ValueError:
                return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def validate_entry(value: Any, field_name: str) -> ValidationResult:
    """
    Apply the basic checks shared by both entries.

    Args:
        value: Raw entry
        field_name: Name used in the message (e.g. 'teams')

    Returns:
        ValidationResult (message empty if valid)
    """
    number = parse_entry(value)
    if not number:
        return ValidationResult(False, MISSING_ENTRY_MESSAGE.format(field=field_name))
    if number < MIN_ENTRY_VALUE:
        return ValidationResult(False, TOO_SMALL_ENTRY_MESSAGE.format(field=field_name))
    return ValidationResult(True, '')


def validate_entries(teams_per_match: Any, number_of_teams: Any, max_teams: int) -> ValidationResult:
    """
    Check that the entries describe a complete single-elimination bracket.

    Checks, in order:
    - Teams per match is present, numeric and at least 2
    - Number of teams is present, numeric and at least 2
    - Number of teams does not exceed max_teams
    - Number of teams is teams per match to the power of a positive integer

    Args:
        teams_per_match: Teams competing in each match
        number_of_teams: Total teams in the tournament
        max_teams: Maximum number of teams allowed

    Returns:
        ValidationResult with valid=True and an empty message only when
        every check passes
    """
    result = validate_entry(teams_per_match, TEAMS_PER_MATCH_FIELD)
    if not result.valid:
        return result

    result = validate_entry(number_of_teams, NUMBER_OF_TEAMS_FIELD)
    if not result.valid:
        return result

    teams_per_match = parse_entry(teams_per_match)
    number_of_teams = parse_entry(number_of_teams)

    if number_of_teams > max_teams:
        return ValidationResult(False, EXCEEDS_MAXIMUM_MESSAGE)

    # Terminates because teams_per_match >= 2
    exponent = 1
    while teams_per_match ** exponent < number_of_teams:
        exponent += 1

    if teams_per_match ** exponent != number_of_teams:
        return ValidationResult(False, NOT_A_POWER_MESSAGE)

    return result
