"""
Data models for the roadmap planner.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .course import Course, PrereqEdge, CourseStatus, TranscriptCourse
from .plan import (
    CapacityConfig,
    ScoringWeights,
    PlanRequest,
    QuarterTotals,
    QuarterPlan,
    PlanExplanation,
    PlanResult,
)
from .major import Major, MajorRequirement
from .roadmap import Roadmap

__all__ = [
    # Course models
    "Course",
    "PrereqEdge",
    "CourseStatus",
    "TranscriptCourse",
    # Planner input
    "CapacityConfig",
    "ScoringWeights",
    "PlanRequest",
    # Planner output
    "QuarterTotals",
    "QuarterPlan",
    "PlanExplanation",
    "PlanResult",
    # Majors
    "Major",
    "MajorRequirement",
    # Prerequisite tree
    "Roadmap",
]
