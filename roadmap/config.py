"""
Configuration constants for the roadmap planner.

This module contains all configuration values and constants used throughout
the planning algorithm. Centralizing these makes it easy to adjust
behavior as academic calendars and load policies change.
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
DEFAULT_CATALOG = DATA_DIR / "example_catalog.json"
DEFAULT_TRANSCRIPT = DATA_DIR / "example_transcript.json"


# =============================================================================
# ACADEMIC CALENDAR
# =============================================================================
# Quarter system: three terms per academic year. Term offsets map onto this
# sequence cyclically, and the year advances when Spring wraps back to Fall.

TERMS = ("Fall", "Winter", "Spring")

# Codes used in a course's "typically offered" list
TERM_CODES = {
    "Fall": "FA",
    "Winter": "WI",
    "Spring": "SP",
}


def term_index(term: str) -> int:
    """Position of a term name in the yearly cycle (case-insensitive)."""
    normalized = term.strip().capitalize()
    if normalized not in TERMS:
        raise ValueError(f"Unknown term {term!r}; expected one of {', '.join(TERMS)}")
    return TERMS.index(normalized)


def term_code(term: str) -> str:
    """Convert a term name (e.g., "Winter") to its offering code (e.g., "WI")."""
    return TERM_CODES[TERMS[term_index(term)]]


# =============================================================================
# CAPACITY DEFAULTS
# =============================================================================

# Per-quarter limits used when the caller supplies none
DEFAULT_MAX_UNITS = 16
DEFAULT_MAX_DIFFICULTY = 24
DEFAULT_MAX_COURSES = 4

# A quarter is "heavy" once units or difficulty reach this share of the cap
HEAVY_THRESHOLD = 0.85

# Extra quarters the allocator may walk past the target's earliest slot
SAFETY_MARGIN = 5


# =============================================================================
# SCORING HEURISTIC
# =============================================================================
# score = CRITICALITY_WEIGHT * (downstream + SLACK_NUMERATOR / (slack + 1))
#       + LOAD_BALANCE_WEIGHT * (1 - projected_difficulty / max_difficulty)
#
# These are tuning knobs, not derived values. Override them per request
# through ScoringWeights.

CRITICALITY_WEIGHT = 2.0
LOAD_BALANCE_WEIGHT = 3.0
SLACK_NUMERATOR = 10.0


# =============================================================================
# GRADE DEFINITIONS
# =============================================================================

# Passing grades that count as "completed"
PASSING_GRADES = {"A+", "A", "A-", "B+", "B", "B-", "C+", "C", "C-", "D", "P", "S", "CR"}

# Grades that mean course is NOT completed
# NP = No Pass, NC = No Credit, W = Withdrawn, I = Incomplete
FAILING_GRADES = {"F", "NP", "NC", "U", "W", "I"}


# =============================================================================
# ROADMAP API
# =============================================================================

API_BASE_URL = os.environ.get("ROADMAP_API_URL", "http://localhost:3000/api")
API_TIMEOUT = 15
API_RETRIES = 5
API_BACKOFF_FACTOR = 2


# =============================================================================
# COURSE ATTRIBUTE BOUNDS
# =============================================================================

# Difficulty and workload are rated on the same 1-10 scale
SCORE_MIN = 1
SCORE_MAX = 10
DEFAULT_DIFFICULTY = 5
DEFAULT_WORKLOAD = 5
