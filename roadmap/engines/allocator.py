"""
Greedy Term Allocator.

This module fills quarters one at a time, choosing among the courses that
are ready each quarter by a priority score and packing them under the
per-quarter unit, difficulty, and course-count limits.
"""

import logging
from dataclasses import dataclass, field

from ..config import SAFETY_MARGIN
from ..models import Course, CapacityConfig, ScoringWeights, PlanExplanation
from .calendar import CalendarAnchor
from .critical_path import CriticalPath
from .graph import PrereqGraph

logger = logging.getLogger(__name__)


@dataclass
class TermLoad:
    """Running totals of the quarter being filled."""
    courses: list = field(default_factory=list)
    units: int = 0
    difficulty: float = 0
    workload: float = 0

    def fits(self, course: Course, capacity: CapacityConfig) -> bool:
        """Check every cap against the total AFTER adding this one course."""
        if self.units + course.units_max > capacity.max_units:
            return False
        if self.difficulty + course.difficulty > capacity.max_difficulty:
            return False
        if len(self.courses) + 1 > capacity.max_courses:
            return False
        return True

    def add(self, course: Course):
        self.courses.append(course)
        self.units += course.units_max
        self.difficulty += course.difficulty
        self.workload += course.workload


@dataclass
class Allocation:
    """
    Outcome of the greedy pass.

    Attributes:
        assignments: {course_id: quarter offset}
        loads: {offset: TermLoad} for every offset that received a course
        remaining: Courses never placed, in input order
    """
    assignments: dict
    loads: dict
    remaining: list

    @property
    def used_offsets(self) -> list:
        return sorted(offset for offset, load in self.loads.items() if load.courses)


class TermAllocator:
    """
    Walks quarter offsets forward and greedily packs eligible courses.

    ═══════════════════════════════════════════════════════════════════════════
    PER-QUARTER STEPS
    ═══════════════════════════════════════════════════════════════════════════

    1. ELIGIBILITY: every prerequisite already sits in an EARLIER quarter,
       and the course's latest slot has not passed.
    2. SCORING (once, at the start of the quarter):
          criticality = downstream + slack_numerator / (slack + 1)
          balance     = 1 - (quarter difficulty + course difficulty) / cap
          score       = w_crit * criticality + w_load * balance
       Higher first; equal scores keep input order.
    3. PLACEMENT: in score order, SKIP any course that is not offered this
       term or would push units, difficulty, or course count over its cap.

    The walk stops once everything is placed or the safety ceiling
    (target offset + SAFETY_MARGIN) is passed.

    ═══════════════════════════════════════════════════════════════════════════
    """

    def __init__(self, graph: PrereqGraph, critical_path: CriticalPath,
                 capacity: CapacityConfig, weights: ScoringWeights,
                 anchor: CalendarAnchor, safety_margin: int = SAFETY_MARGIN):
        self.graph = graph
        self.critical_path = critical_path
        self.capacity = capacity
        self.weights = weights
        self.anchor = anchor
        self.ceiling = critical_path.target_offset + safety_margin

    def allocate(self) -> Allocation:
        """Run the greedy pass. Owns all scheduling state for this one run."""
        assignments = {}
        loads = {}
        remaining = list(self.graph.course_ids)

        offset = 0
        while remaining and offset <= self.ceiling:
            eligible = [cid for cid in remaining if self._is_eligible(cid, offset, assignments)]
            if not eligible:
                offset += 1
                continue

            load = TermLoad()
            code = self.anchor.term_code(offset)
            ranked = sorted(
                eligible,
                key=lambda cid: self.score(cid, offset, load),
                reverse=True,
            )

            for cid in ranked:
                course = self.graph.course(cid)
                if not course.is_offered(code):
                    logger.debug("%s not offered in %s, deferring", course.code, code)
                    continue
                if not load.fits(course, self.capacity):
                    continue
                load.add(course)
                assignments[cid] = offset
                remaining.remove(cid)

            if load.courses:
                loads[offset] = load
                logger.debug(
                    "Offset %d (%s): %s",
                    offset,
                    self.anchor.describe(offset),
                    ", ".join(c.code for c in load.courses),
                )
            offset += 1

        return Allocation(
            assignments=assignments,
            loads=loads,
            remaining=[self.graph.course(cid) for cid in remaining],
        )

    def _is_eligible(self, cid, offset: int, assignments: dict) -> bool:
        for prereq in self.graph.prereqs_of[cid]:
            placed = assignments.get(prereq)
            if placed is None or placed >= offset:
                return False
        latest = self.critical_path.latest_of(cid)
        return latest is None or latest >= offset

    def score(self, cid, offset: int, load: TermLoad) -> float:
        course = self.graph.course(cid)
        latest = self.critical_path.latest_of(cid)
        if latest is None:
            latest = self.critical_path.target_offset
        slack = max(latest - offset, 0)

        criticality = (self.critical_path.downstream[cid]
                       + self.weights.slack_numerator / (slack + 1))
        balance = 1 - (load.difficulty + course.difficulty) / self.capacity.max_difficulty

        return self.weights.criticality * criticality + self.weights.load_balance * balance

    def diagnose(self, allocation: Allocation, explanation: PlanExplanation):
        """
        Explain every course left in allocation.remaining.

        A course whose prerequisites are also unplaced is blocked by them;
        anything else simply did not fit the quarters it was allowed in.
        """
        deadline = self.anchor.describe(self.critical_path.target_offset)

        for course in allocation.remaining:
            missing = [
                prereq for prereq in self.graph.prereqs_of[course.id]
                if prereq not in allocation.assignments
            ]
            if missing:
                names = ", ".join(self.graph.name_of(p) for p in missing)
                explanation.blockers.append(
                    f"{course.code} could not be scheduled because its prerequisites "
                    f"are also unscheduled: {names}."
                )
            else:
                explanation.blockers.append(
                    f"{course.code} could not fit within the quarter constraints before {deadline}."
                )
                explanation.suggestions.append(
                    f"Try increasing the per-quarter course, unit, or difficulty limits "
                    f"to fit {course.code}."
                )

        if allocation.remaining:
            logger.warning(
                "%d course(s) left unscheduled: %s",
                len(allocation.remaining),
                ", ".join(c.code for c in allocation.remaining),
            )
