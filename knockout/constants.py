"""Constants and messages for the knockout bracket runner."""

# Team names are generated from 75 team names combined with 668 suburbs
MAX_TEAMS_PER_TOURNAMENT = 75 * 668

MIN_ENTRY_VALUE = 2

DEFAULT_SERVICE_URL = 'http://localhost:8765'
DEFAULT_REQUEST_TIMEOUT = 10.0

# Field names used in validation messages
TEAMS_PER_MATCH_FIELD = 'teams'
NUMBER_OF_TEAMS_FIELD = 'tournament teams'

# Validation messages
MISSING_ENTRY_MESSAGE = 'Please enter {field}'
TOO_SMALL_ENTRY_MESSAGE = 'You must enter at least 2 {field}'
EXCEEDS_MAXIMUM_MESSAGE = 'The number of teams per tournament exceeds the maximum allowed'
NOT_A_POWER_MESSAGE = (
    'The number of teams per tournament must be equal to the value of '
    'teams per match to the power of a positive integer'
)

# Data service endpoints
TOURNAMENT_ENDPOINT = '/tournament'
MATCH_ENDPOINT = '/match'
TEAM_ENDPOINT = '/team'
WINNER_ENDPOINT = '/winner'
