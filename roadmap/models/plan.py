"""
Plan data models.

Contains the planner's inputs (PlanRequest with its capacity and scoring
settings) and outputs (QuarterPlan, PlanExplanation, PlanResult).
"""

from dataclasses import dataclass, field
from typing import Hashable

from ..config import (
    TERMS,
    DEFAULT_MAX_UNITS,
    DEFAULT_MAX_DIFFICULTY,
    DEFAULT_MAX_COURSES,
    CRITICALITY_WEIGHT,
    LOAD_BALANCE_WEIGHT,
    SLACK_NUMERATOR,
    term_index,
)


@dataclass(frozen=True)
class CapacityConfig:
    """
    Per-quarter limits. Every quarter in the plan stays within all three.
    """
    max_units: int = DEFAULT_MAX_UNITS
    max_difficulty: float = DEFAULT_MAX_DIFFICULTY
    max_courses: int = DEFAULT_MAX_COURSES

    def __post_init__(self):
        for name in ("max_units", "max_difficulty", "max_courses"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")


@dataclass(frozen=True)
class ScoringWeights:
    """
    Weights of the greedy priority score.

    These are heuristic tuning knobs: change them to bias the planner towards
    urgency (criticality) or towards evenly loaded quarters (load balance).
    """
    criticality: float = CRITICALITY_WEIGHT
    load_balance: float = LOAD_BALANCE_WEIGHT
    slack_numerator: float = SLACK_NUMERATOR


@dataclass(frozen=True)
class PlanRequest:
    """
    Everything one planning run needs.

    courses should already exclude completed courses, and edges must only
    reference ids present in courses. target_term/target_year anchor the
    target course: it is placed in exactly that quarter or not at all.
    """
    target_course_id: Hashable
    target_term: str
    target_year: int
    courses: tuple
    edges: tuple = ()
    capacity: CapacityConfig = field(default_factory=CapacityConfig)
    weights: ScoringWeights = field(default_factory=ScoringWeights)

    def __post_init__(self):
        # Normalize "spring" -> "Spring"; raises ValueError for unknown terms
        object.__setattr__(self, "target_term", TERMS[term_index(self.target_term)])
        object.__setattr__(self, "courses", tuple(self.courses))
        object.__setattr__(self, "edges", tuple(self.edges))


@dataclass
class QuarterTotals:
    """Aggregate load of one quarter."""
    units: int = 0
    difficulty: float = 0
    workload: float = 0
    course_count: int = 0
    is_heavy: bool = False

    def to_dict(self) -> dict:
        return {
            "units": self.units,
            "difficulty": self.difficulty,
            "workload": self.workload,
            "courseCount": self.course_count,
            "isHeavy": self.is_heavy,
        }


@dataclass
class QuarterPlan:
    """
    One populated quarter of the schedule.

    Example:
        term: "Winter"
        year: 2026
        courses: [MATH 20B, MATH 18]   # in the order they were placed
        totals: QuarterTotals(units=8, difficulty=11, ...)
    """
    term: str
    year: int
    courses: list
    totals: QuarterTotals

    @property
    def total_units(self) -> int:
        return self.totals.units

    @property
    def label(self) -> str:
        return f"{self.term} {self.year}"

    def to_dict(self) -> dict:
        return {
            "term": self.term,
            "year": self.year,
            "courses": [c.to_dict() for c in self.courses],
            "totals": self.totals.to_dict(),
            "totalUnits": self.total_units,
        }


@dataclass
class PlanExplanation:
    """
    Human-readable account of a planning run.

    blockers: hard failures (why a course could not be placed)
    warnings: soft issues (e.g., a heavy quarter)
    suggestions: actionable hints, or a success summary
    """
    blockers: list = field(default_factory=list)
    warnings: list = field(default_factory=list)
    suggestions: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "blockers": list(self.blockers),
            "warnings": list(self.warnings),
            "suggestions": list(self.suggestions),
        }


@dataclass
class PlanResult:
    """
    Output of QuarterPlanner.plan().

    Always well formed: a failed run has an empty plan, the affected courses
    in unscheduled, and the reasons in explanation.blockers.
    """
    plan: list                             # List of QuarterPlan, chronological
    unscheduled: list                      # List of Course that could not be placed
    explanation: PlanExplanation

    @property
    def total_units(self) -> int:
        return sum(q.total_units for q in self.plan)

    @property
    def is_complete(self) -> bool:
        return not self.unscheduled and not self.explanation.blockers

    def placement(self) -> dict:
        """Map course id -> (term, year) for every scheduled course."""
        return {
            course.id: (quarter.term, quarter.year)
            for quarter in self.plan
            for course in quarter.courses
        }

    def to_dict(self) -> dict:
        return {
            "plan": [q.to_dict() for q in self.plan],
            "unscheduled": [c.to_dict() for c in self.unscheduled],
            "explanation": self.explanation.to_dict(),
            "totalQuarters": len(self.plan),
            "totalUnits": self.total_units,
        }
