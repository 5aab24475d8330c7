"""Application-wide constants.

This module centralizes magic numbers and configuration values that are
used across multiple modules. Values that need to be configurable at
runtime should go in config.py instead.
"""

# ===================
# Assessment Constants
# ===================

# Lower bounds (inclusive) of each level tier, on the 0-100 overall score
ADVANCED_SCORE_THRESHOLD = 80
INTERMEDIATE_SCORE_THRESHOLD = 50

MIN_SCORE = 0
MAX_SCORE = 100


# ===================
# Recommendation Constants
# ===================

# Synthetic goals sent with every assessment-driven recommendation request
RECOMMENDATION_GOALS = ("career advancement", "skill development")

# Nominal weekly time budget sent with recommendation requests
DEFAULT_TIME_AVAILABLE = "10 hours per week"

# Skill label used when an assessment produced no category scores
GENERIC_SKILL_LABEL = "General"

RECOMMEND_PATH_ENDPOINT = "/api/ai/recommend-path"


# ===================
# User-facing Messages
# ===================

# Shown in place of technical error text; details go to the log
QUESTIONS_LOAD_ERROR_MESSAGE = "Failed to load assessment questions. Please try again."
RECOMMENDATION_ERROR_MESSAGE = "Failed to get a recommendation. Please try again."


# ===================
# Analytics Constants
# ===================

# Producer-defined day order of weekly activity
WEEK_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
WEEKLY_ACTIVITY_LENGTH = 7
