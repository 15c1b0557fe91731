"""
Tests for the greedy term allocator.

The converging_chains fixture is anchored so that offsets 0..3 fall in
Spring 2026, Fall 2027, Winter 2027, Spring 2027.
"""

import pytest

from roadmap.engines import CalendarAnchor, TermAllocator, analyze, build_graph
from roadmap.engines.allocator import TermLoad
from roadmap.models import CapacityConfig, PlanExplanation, ScoringWeights


def make_allocator(courses, course_edges, target_id, capacity=None, weights=None):
    graph = build_graph(courses, course_edges)
    path = analyze(graph, target_id)
    anchor = CalendarAnchor("Spring", 2027, path.target_offset)
    return TermAllocator(graph, path, capacity or CapacityConfig(), weights or ScoringWeights(), anchor)


# ============================================================================
# TermLoad
# ============================================================================

class TestTermLoad:
    def test_fits_checks_totals_after_adding(self, make_course):
        capacity = CapacityConfig(max_units=8, max_difficulty=24, max_courses=4)
        load = TermLoad()
        load.add(make_course(1, "A", units=4))
        assert load.fits(make_course(2, "B", units=4), capacity)
        assert not load.fits(make_course(3, "C", units=5), capacity)

    def test_difficulty_cap(self, make_course):
        capacity = CapacityConfig(max_units=16, max_difficulty=10, max_courses=4)
        load = TermLoad()
        load.add(make_course(1, "A", difficulty=6))
        assert not load.fits(make_course(2, "B", difficulty=5), capacity)
        assert load.fits(make_course(3, "C", difficulty=4), capacity)

    def test_course_count_cap(self, make_course):
        capacity = CapacityConfig(max_courses=1)
        load = TermLoad()
        load.add(make_course(1, "A", units=1, difficulty=1))
        assert not load.fits(make_course(2, "B", units=1, difficulty=1), capacity)

    def test_add_accumulates(self, make_course):
        load = TermLoad()
        load.add(make_course(1, "A", units=4, difficulty=5, workload=6))
        load.add(make_course(2, "B", units=2, difficulty=3, workload=1))
        assert (load.units, load.difficulty, load.workload) == (6, 8, 7)
        assert [c.id for c in load.courses] == [1, 2]


# ============================================================================
# Scoring
# ============================================================================

class TestScore:
    def test_urgent_deep_course_scores_highest(self, converging_chains):
        allocator = make_allocator(*converging_chains, target_id=6)
        load = TermLoad()
        # A1: downstream 3, slack 0
        assert allocator.score(1, 0, load) == pytest.approx(2.0 * (3 + 10.0) + 3.0 * (1 - 5 / 24))
        # B1: downstream 1, slack 2
        assert allocator.score(4, 0, load) == pytest.approx(2.0 * (1 + 10.0 / 3) + 3.0 * (1 - 5 / 24))

    def test_running_difficulty_lowers_balance(self, converging_chains, make_course):
        allocator = make_allocator(*converging_chains, target_id=6)
        empty = TermLoad()
        busy = TermLoad()
        busy.add(make_course(99, "Z", difficulty=10))
        assert allocator.score(4, 0, busy) < allocator.score(4, 0, empty)

    def test_unbounded_course_uses_target_offset_for_slack(self, converging_chains, make_course):
        courses, course_edges = converging_chains
        allocator = make_allocator(courses + [make_course(7, "X")], course_edges, target_id=6)
        expected = 2.0 * (0 + 10.0 / (3 + 1)) + 3.0 * (1 - 5 / 24)
        assert allocator.score(7, 0, TermLoad()) == pytest.approx(expected)

    def test_custom_weights(self, converging_chains):
        weights = ScoringWeights(criticality=1.0, load_balance=0.0, slack_numerator=0.0)
        allocator = make_allocator(*converging_chains, target_id=6, weights=weights)
        assert allocator.score(1, 0, TermLoad()) == pytest.approx(3.0)


# ============================================================================
# Allocation
# ============================================================================

class TestAllocate:
    def test_spreads_courses_under_unit_cap(self, converging_chains):
        allocator = make_allocator(*converging_chains, target_id=6,
                                   capacity=CapacityConfig(max_units=8))
        allocation = allocator.allocate()

        assert allocation.remaining == []
        assert allocation.assignments == {1: 0, 4: 0, 2: 1, 5: 1, 3: 2, 6: 3}
        assert [c.code for c in allocation.loads[0].courses] == ["MATH A1", "MATH B1"]
        assert allocation.used_offsets == [0, 1, 2, 3]

    def test_defers_course_to_an_offering_term(self, converging_chains, make_course):
        courses, course_edges = converging_chains
        courses = list(courses)
        courses[4] = make_course(5, "C1", terms={"WI"})
        allocator = make_allocator(courses, course_edges, target_id=6)
        allocation = allocator.allocate()

        assert allocation.assignments[5] == 2
        assert allocator.anchor.term_code(2) == "WI"

    def test_ceiling_is_target_plus_margin(self, converging_chains):
        allocator = make_allocator(*converging_chains, target_id=6)
        assert allocator.ceiling == 3 + 5

    def test_course_never_offered_is_left_over(self, converging_chains, make_course):
        courses, course_edges = converging_chains
        courses = list(courses)
        courses[4] = make_course(5, "C1", terms={"SU"})
        allocator = make_allocator(courses, course_edges, target_id=6)
        allocation = allocator.allocate()

        assert [c.id for c in allocation.remaining] == [5, 6]
        assert 6 not in allocation.assignments


# ============================================================================
# Diagnosis
# ============================================================================

class TestDiagnose:
    def test_blockers_for_each_leftover(self, converging_chains, make_course):
        courses, course_edges = converging_chains
        courses = list(courses)
        courses[4] = make_course(5, "C1", terms={"SU"})
        allocator = make_allocator(courses, course_edges, target_id=6)
        explanation = PlanExplanation()

        allocator.diagnose(allocator.allocate(), explanation)

        assert explanation.blockers == [
            "MATH C1 could not fit within the quarter constraints before Spring 2027.",
            "MATH T could not be scheduled because its prerequisites are also "
            "unscheduled: MATH C1.",
        ]
        assert explanation.suggestions == [
            "Try increasing the per-quarter course, unit, or difficulty limits to fit MATH C1.",
        ]

    def test_nothing_to_explain(self, converging_chains):
        allocator = make_allocator(*converging_chains, target_id=6)
        explanation = PlanExplanation()
        allocator.diagnose(allocator.allocate(), explanation)
        assert explanation.blockers == []
        assert explanation.suggestions == []
