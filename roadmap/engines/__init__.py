"""
Planning engines.

The four planning phases (graph, critical path, allocation, assembly), the
planner that composes them, and the roadmap engine that decides which
courses need planning in the first place.
"""

from .graph import PrereqGraph, build_graph
from .critical_path import (
    CriticalPath,
    analyze,
    topological_order,
    compute_latest,
    compute_downstream_counts,
)
from .calendar import CalendarAnchor, shift_term
from .allocator import Allocation, TermAllocator
from .assembler import PlanAssembler
from .planner import QuarterPlanner, plan_schedule
from .roadmap import RoadmapEngine

__all__ = [
    "PrereqGraph",
    "build_graph",
    "CriticalPath",
    "analyze",
    "topological_order",
    "compute_latest",
    "compute_downstream_counts",
    "CalendarAnchor",
    "shift_term",
    "Allocation",
    "TermAllocator",
    "PlanAssembler",
    "QuarterPlanner",
    "plan_schedule",
    "RoadmapEngine",
]
