"""
Plan Assembler.

Converts the allocator's offset-indexed rosters into calendar quarters and
finishes the explanation with load warnings and a summary.
"""

from ..config import HEAVY_THRESHOLD
from ..models import (
    CapacityConfig,
    PlanExplanation,
    PlanResult,
    QuarterPlan,
    QuarterTotals,
)
from .allocator import Allocation
from .calendar import CalendarAnchor


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


class PlanAssembler:
    """
    Builds the final PlanResult.

    Quarters with no courses are left out, so a plan can skip a term when
    nothing was ready or offered then. A quarter is flagged heavy when its
    units or difficulty reach HEAVY_THRESHOLD of the cap.
    """

    def __init__(self, anchor: CalendarAnchor, capacity: CapacityConfig):
        self.anchor = anchor
        self.capacity = capacity

    def is_heavy(self, units: float, difficulty: float) -> bool:
        return (units >= self.capacity.max_units * HEAVY_THRESHOLD
                or difficulty >= self.capacity.max_difficulty * HEAVY_THRESHOLD)

    def assemble(self, allocation: Allocation, explanation: PlanExplanation,
                 course_count: int) -> PlanResult:
        plan = []
        for offset in allocation.used_offsets:
            load = allocation.loads[offset]
            term, year = self.anchor.label(offset)
            totals = QuarterTotals(
                units=load.units,
                difficulty=load.difficulty,
                workload=load.workload,
                course_count=len(load.courses),
                is_heavy=self.is_heavy(load.units, load.difficulty),
            )
            if totals.is_heavy:
                explanation.warnings.append(
                    f"{term} {year} is a heavy quarter ({load.units} units, difficulty sum "
                    f"{load.difficulty}). Consider spreading courses if possible."
                )
            plan.append(QuarterPlan(term=term, year=year, courses=list(load.courses), totals=totals))

        if not allocation.remaining and not explanation.blockers:
            explanation.suggestions.append(
                f"All {_plural(course_count, 'course')} scheduled across "
                f"{_plural(len(plan), 'quarter')}."
            )

        return PlanResult(plan=plan, unscheduled=list(allocation.remaining), explanation=explanation)
