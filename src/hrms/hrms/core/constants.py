"""Constants and defaults."""

ALL = "all"

DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 200

MIN_PASSWORD_LENGTH = 6
INITIAL_PASSWORD_LENGTH = 6
