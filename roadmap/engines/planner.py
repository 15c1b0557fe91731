"""
Quarter Planner.

Composes the four planning phases into a single call:

    build_graph -> analyze -> TermAllocator -> PlanAssembler

Each call builds its own state from the request and keeps nothing
afterwards, so one planner instance can serve concurrent callers.
"""

import logging
from typing import Hashable, Iterable, Optional

from ..exceptions import CycleDetectedError
from ..models import (
    CapacityConfig,
    Course,
    PlanExplanation,
    PlanRequest,
    PlanResult,
    PrereqEdge,
    ScoringWeights,
)
from .allocator import TermAllocator
from .assembler import PlanAssembler
from .calendar import CalendarAnchor
from .critical_path import analyze
from .graph import build_graph

logger = logging.getLogger(__name__)

NOTHING_TO_SCHEDULE = "All prerequisites are already completed; nothing to schedule."
CYCLE_BLOCKER = "Circular dependency detected in prerequisites."


class QuarterPlanner:
    """
    Plans the quarters leading up to a target course.

    FAILURES ARE DATA:
    ------------------
    plan() never raises for planning problems. A prerequisite cycle yields
    an empty plan with every course unscheduled and one blocker; courses
    that cannot be placed are listed in `unscheduled` with a blocker each.
    Only malformed requests (unknown term, non-positive caps) raise
    ValueError, and they do so while the request is being built.

    USAGE:
        planner = QuarterPlanner()
        result = planner.plan(PlanRequest(
            target_course_id=12,
            target_term="Spring",
            target_year=2027,
            courses=courses,
            edges=edges,
        ))
    """

    def plan(self, request: PlanRequest) -> PlanResult:
        courses = list(request.courses)
        if not courses:
            return PlanResult(
                plan=[],
                unscheduled=[],
                explanation=PlanExplanation(suggestions=[NOTHING_TO_SCHEDULE]),
            )

        explanation = PlanExplanation()

        # PHASE 1: adjacency
        graph = build_graph(courses, request.edges)

        # PHASE 2: earliest / latest / downstream
        try:
            critical_path = analyze(graph, request.target_course_id)
        except CycleDetectedError as exc:
            logger.warning("Planning aborted: %s", exc)
            explanation.blockers.append(CYCLE_BLOCKER)
            return PlanResult(plan=[], unscheduled=courses, explanation=explanation)

        anchor = CalendarAnchor(
            term=request.target_term,
            year=request.target_year,
            offset=critical_path.target_offset,
        )

        # PHASE 3: greedy allocation
        allocator = TermAllocator(graph, critical_path, request.capacity, request.weights, anchor)
        allocation = allocator.allocate()
        allocator.diagnose(allocation, explanation)

        # PHASE 4: calendar plan + explanation
        result = PlanAssembler(anchor, request.capacity).assemble(allocation, explanation, len(graph))
        logger.info(
            "Planned %d course(s) over %d quarter(s), %d unscheduled",
            len(graph) - len(result.unscheduled),
            len(result.plan),
            len(result.unscheduled),
        )
        return result


def plan_schedule(target_course_id: Hashable, target_term: str, target_year: int,
                  courses: Iterable[Course], edges: Iterable[PrereqEdge] = (),
                  capacity: Optional[CapacityConfig] = None,
                  weights: Optional[ScoringWeights] = None) -> PlanResult:
    """Functional shortcut for QuarterPlanner().plan(PlanRequest(...))."""
    request = PlanRequest(
        target_course_id=target_course_id,
        target_term=target_term,
        target_year=target_year,
        courses=tuple(courses),
        edges=tuple(edges),
        capacity=capacity or CapacityConfig(),
        weights=weights or ScoringWeights(),
    )
    return QuarterPlanner().plan(request)
